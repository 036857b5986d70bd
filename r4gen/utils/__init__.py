"""
Utils package for r4gen.

This module provides logging, settings, constants and the exception
hierarchy shared by the generation engine and its front-ends.
"""

from .exceptions import (
    R4GenError,
    InvalidMetadataError,
    ConfigurationError,
    DuplicateClassError,
    DuplicateMemberError,
    TemplateRenderError,
)
from .constants import *

from .config import (
    Settings,
    validate_settings,
    settings_from_dict,
    settings_to_dict,
    apply_environment_overrides,
    load_settings,
    save_settings,
)

from .logging import setup_logging, get_logger, GeneratorLogger

__all__ = [
    # Core exceptions
    "R4GenError",
    "InvalidMetadataError",
    "ConfigurationError",
    "DuplicateClassError",
    "DuplicateMemberError",
    "TemplateRenderError",

    # Constants (exported via *)

    # Configuration
    "Settings",
    "validate_settings",
    "settings_from_dict",
    "settings_to_dict",
    "apply_environment_overrides",
    "load_settings",
    "save_settings",

    # Logging
    "setup_logging",
    "get_logger",
    "GeneratorLogger",
]
