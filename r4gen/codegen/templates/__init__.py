"""
Template Rendering System.

This module renders synthetic class definitions to C# source text using
Jinja2 templates shipped in ``csharp/``:
- class.j2: a single class declaration
- file.j2: the generated file with header, usings and namespace blocks
"""

from .renderer import (
    JinjaTemplateRenderer,
    CSharpPrinter,
    create_printer,
)

__all__ = [
    "JinjaTemplateRenderer",
    "CSharpPrinter",
    "create_printer",
]
