"""
Constants and Enumerations for r4gen.

This module consolidates the fixed names used by the generator: default
settings values, suffixes of generated identifiers, the well-known
action-result wrapper classes, and the C# modifiers the printer knows.
"""

from __future__ import annotations

from enum import Enum


# =============================================================================
# Settings Defaults
# =============================================================================

DEFAULT_GENERATED_NAMESPACE = "R4Mvc"
DEFAULT_HELPERS_PREFIX = "MVC"
DEFAULT_INDENT_SIZE = 4
DEFAULT_SETTINGS_FILE = "r4mvc.json"

DEFAULT_REFERENCED_NAMESPACES = (
    "System.CodeDom.Compiler",
    "System.Diagnostics",
    "Microsoft.AspNetCore.Mvc",
    "Microsoft.AspNetCore.Routing",
)

# Environment overrides
ENV_LOG_LEVEL = "R4GEN_LOG_LEVEL"
ENV_GENERATED_NAMESPACE = "R4GEN_NAMESPACE"


# =============================================================================
# Identifier Patterns
# =============================================================================

CONTROLLER_SUFFIX = "Controller"
AREA_PREFIX_SUFFIX = "Area_"
AREA_CLASS_SUFFIX = "AreaClass"
NAMESPACE_SEPARATOR = "."

IDENTIFIER_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"
NAMESPACE_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$"


# =============================================================================
# Action-Result Wrappers
# =============================================================================

ACTION_RESULT_CLASS = "R4Mvc_Microsoft_AspNetCore_Mvc_ActionResult"
JSON_RESULT_CLASS = "R4Mvc_Microsoft_AspNetCore_Mvc_JsonResult"
ACTION_RESULT_BASE = "ActionResult"
JSON_RESULT_BASE = "JsonResult"
ACTION_RESULT_INTERFACE = "IR4MvcActionResult"
ACTION_RESULT_INIT_METHOD = "InitMVCT4Result"

# Constructor parameters shared by both wrappers, in declaration order
ACTION_RESULT_PARAMETERS = ("area", "controller", "action", "protocol")

# Uniform metadata exposed through IR4MvcActionResult
ACTION_RESULT_PROPERTIES = (
    ("string", "Controller"),
    ("string", "Action"),
    ("string", "Protocol"),
    ("RouteValueDictionary", "RouteValueDictionary"),
)


# =============================================================================
# Generated Code Markers
# =============================================================================

GENERATED_CODE_TOOL = "R4Mvc"
GENERATED_CODE_VERSION = "1.0"
GENERATED_CODE_ATTRIBUTES = (
    f'GeneratedCode("{GENERATED_CODE_TOOL}", "{GENERATED_CODE_VERSION}")',
    "DebuggerNonUserCode",
)
SUPPRESSED_WARNINGS = ("1591", "3008", "3009", "0108")


class Modifier(Enum):
    """C# modifiers, in the order the printer emits them."""

    PUBLIC = "public"
    INTERNAL = "internal"
    STATIC = "static"
    READONLY = "readonly"
    PARTIAL = "partial"


MODIFIER_ORDER = tuple(Modifier)
