"""
Template Rendering Engine.

This module renders generation results to C# source text using Jinja2
templates. Rendering is a pure function of the result and its settings,
so the same metadata always produces byte-identical files.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ...utils.config import Settings
from ...utils.constants import GENERATED_CODE_TOOL, SUPPRESSED_WARNINGS, Modifier
from ...utils.exceptions import TemplateRenderError
from ..types import ClassDefinition, ConstructorMember, GenerationResult, Parameter, PropertyMember

CLASS_TEMPLATE = "class.j2"
FILE_TEMPLATE = "file.j2"


class JinjaTemplateRenderer:
    """Jinja2-based template renderer."""

    def __init__(self, template_dir: Optional[str] = None, indent_size: int = 4):
        """Initialize the template renderer."""
        if template_dir is None:
            template_dir = os.path.join(os.path.dirname(__file__), "csharp")

        self._template_dir = Path(template_dir)
        self._indent = " " * indent_size
        self._env = Environment(
            loader=FileSystemLoader(str(self._template_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            autoescape=False,
        )

        self._setup_custom_filters()

    def _setup_custom_filters(self) -> None:
        """Set up custom Jinja2 filters and tests for C# output."""

        def indent_block(text: str, levels: int = 1) -> str:
            """Indent every non-blank line."""
            prefix = self._indent * levels
            return "\n".join(prefix + line if line.strip() else "" for line in text.splitlines())

        def modifiers_filter(modifiers: Iterable[Modifier]) -> str:
            return " ".join(m.value for m in modifiers)

        def parameter_filter(parameter: Parameter) -> str:
            text = f"{parameter.type} {parameter.name}"
            if parameter.default is not None:
                text += f" = {parameter.default}"
            return text

        self._env.filters["indent_block"] = indent_block
        self._env.filters["modifiers"] = modifiers_filter
        self._env.filters["parameter"] = parameter_filter

        self._env.tests["constructor"] = lambda member: isinstance(member, ConstructorMember)
        self._env.tests["property"] = lambda member: isinstance(member, PropertyMember)

        self._env.globals["pad"] = self._indent

    def render(self, template: str, context: Dict[str, Any]) -> str:
        """Render a template string with the given context."""
        try:
            return self._env.from_string(template).render(**context)
        except TemplateError as e:
            raise TemplateRenderError(f"Template rendering failed: {e}") from e

    def render_file(self, template_path: str, context: Dict[str, Any]) -> str:
        """Render a template file with the given context."""
        try:
            template = self._env.get_template(template_path)
            return template.render(**context)
        except TemplateError as e:
            raise TemplateRenderError(f"Template file rendering failed: {e}", template_path) from e

    def list_templates(self) -> List[str]:
        """List available template files."""
        return self._env.list_templates()


class CSharpPrinter:
    """Renders generated classes to a single C# source file."""

    def __init__(self, settings: Optional[Settings] = None, renderer: Optional[JinjaTemplateRenderer] = None):
        self._settings = settings or Settings()
        self._renderer = renderer or JinjaTemplateRenderer(indent_size=self._settings.indent_size)

    def render_class(self, class_def: ClassDefinition) -> str:
        """Render one class declaration, without trailing newline."""
        return self._renderer.render_file(CLASS_TEMPLATE, {"cls": class_def}).rstrip("\n")

    def render(self, result: GenerationResult) -> str:
        """Render a whole generation result, one block per namespace."""
        namespaces = [
            (namespace, [self.render_class(class_def) for class_def in classes])
            for namespace, classes in result.by_namespace().items()
        ]
        return self._renderer.render_file(FILE_TEMPLATE, {
            "tool": GENERATED_CODE_TOOL,
            "usings": self._settings.referenced_namespaces,
            "suppressed_warnings": SUPPRESSED_WARNINGS,
            "namespaces": namespaces,
        })


def create_printer(settings: Optional[Settings] = None, template_dir: Optional[str] = None) -> CSharpPrinter:
    """Create a C# printer, optionally with a custom template directory."""
    settings = settings or Settings()
    renderer = JinjaTemplateRenderer(template_dir, indent_size=settings.indent_size)
    return CSharpPrinter(settings, renderer)
