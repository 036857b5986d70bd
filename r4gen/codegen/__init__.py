"""
Helper Class Generation.

This package turns discovered controller metadata into the synthetic
classes that give calling code strongly-typed access to controllers,
actions and views.

Architecture Overview:
- types.py: Input metadata model and immutable output values
- naming.py: Identifier rules, ordering and grouping
- generators/: One synthesizer per kind of generated class
- service.py: Orchestrator sequencing the synthesizers
- templates/: Jinja2 printer rendering classes to C#
- metadata.py: Loading controller metadata files
"""

from .types import (
    ControllerDefinition,
    TypeRef,
    Parameter,
    FieldMember,
    PropertyMember,
    ConstructorMember,
    ClassDefinition,
    GenerationResult,
    # Protocols
    ClassPrinter,
    FilePersistService,
)

from .naming import (
    controller_class_name,
    area_class_name,
    view_only_class_name,
    resolve_generated_namespace,
    resolve_generated_name,
    group_by_area,
)

from .service import GeneratorService, check_unique_identifiers

from .templates import CSharpPrinter, JinjaTemplateRenderer, create_printer

from .metadata import controller_from_dict, controllers_from_dicts, load_controllers

__all__ = [
    # Core types
    "ControllerDefinition",
    "TypeRef",
    "Parameter",
    "FieldMember",
    "PropertyMember",
    "ConstructorMember",
    "ClassDefinition",
    "GenerationResult",
    # Protocols
    "ClassPrinter",
    "FilePersistService",
    # Naming
    "controller_class_name",
    "area_class_name",
    "view_only_class_name",
    "resolve_generated_namespace",
    "resolve_generated_name",
    "group_by_area",
    # Orchestration
    "GeneratorService",
    "check_unique_identifiers",
    # Printing
    "CSharpPrinter",
    "JinjaTemplateRenderer",
    "create_printer",
    # Metadata
    "controller_from_dict",
    "controllers_from_dicts",
    "load_controllers",
]
