"""
r4gen: Strongly-Typed MVC Helper Generation

Generates the auxiliary classes that let application code refer to
controllers, actions and views through typed members instead of string
literals. Discovery of controllers and persistence of the generated
file are left to collaborators; this package decides which classes must
exist and how they are named, shaped and ordered.

Usage:
    from r4gen import ControllerDefinition, GeneratorService

    service = GeneratorService()
    result = service.generate([ControllerDefinition(name="Shared")])
    source = service.render(result)
"""

__version__ = "0.1.0"
__author__ = "r4gen Team"
__email__ = "r4gen@example.com"

# Public API exports
from .codegen import (
    ControllerDefinition,
    ClassDefinition,
    GenerationResult,
    GeneratorService,
    CSharpPrinter,
    load_controllers,
)

from .utils import (
    Settings,
    load_settings,
    R4GenError,
)

__all__ = [
    "ControllerDefinition",
    "ClassDefinition",
    "GenerationResult",
    "GeneratorService",
    "CSharpPrinter",
    "load_controllers",
    "Settings",
    "load_settings",
    "R4GenError",
]
