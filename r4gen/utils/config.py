"""
Generator Settings.

This module provides the immutable settings object handed to the
generator service, together with helpers to build it from a JSON or
YAML settings file, a plain dictionary, or the environment.
"""

import json
import os
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from .constants import (
    DEFAULT_GENERATED_NAMESPACE,
    DEFAULT_HELPERS_PREFIX,
    DEFAULT_INDENT_SIZE,
    DEFAULT_REFERENCED_NAMESPACES,
    DEFAULT_SETTINGS_FILE,
    ENV_GENERATED_NAMESPACE,
    IDENTIFIER_PATTERN,
    NAMESPACE_PATTERN,
)
from .exceptions import ConfigurationError
from .logging import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


@dataclass(frozen=True)
class Settings:
    """Configuration for a generation run."""

    generated_namespace: str = DEFAULT_GENERATED_NAMESPACE
    helpers_prefix: str = DEFAULT_HELPERS_PREFIX
    referenced_namespaces: Tuple[str, ...] = field(default=DEFAULT_REFERENCED_NAMESPACES)
    indent_size: int = DEFAULT_INDENT_SIZE

    def __post_init__(self):
        # Lists coming from JSON/YAML are frozen into tuples
        if not isinstance(self.referenced_namespaces, tuple):
            object.__setattr__(self, 'referenced_namespaces', tuple(self.referenced_namespaces))


def validate_settings(settings: Settings) -> None:
    """
    Validate generator settings.

    Raises:
        ConfigurationError: If any value cannot produce valid generated code
    """
    if not settings.generated_namespace or not re.match(NAMESPACE_PATTERN, settings.generated_namespace):
        raise ConfigurationError(
            f"Invalid generated namespace: '{settings.generated_namespace}'",
            setting="generated_namespace",
        )

    if not re.match(IDENTIFIER_PATTERN, settings.helpers_prefix or ""):
        raise ConfigurationError(
            f"Invalid helpers prefix: '{settings.helpers_prefix}'",
            setting="helpers_prefix",
        )

    for namespace in settings.referenced_namespaces:
        if not re.match(NAMESPACE_PATTERN, namespace):
            raise ConfigurationError(
                f"Invalid referenced namespace: '{namespace}'",
                setting="referenced_namespaces",
            )

    if settings.indent_size < 0:
        raise ConfigurationError("Indent size must be non-negative", setting="indent_size")


def settings_from_dict(config_dict: Dict[str, Any]) -> Settings:
    """Create settings from a dictionary, starting from the defaults."""
    kwargs = {}

    if "generated_namespace" in config_dict:
        kwargs["generated_namespace"] = str(config_dict["generated_namespace"])

    if "helpers_prefix" in config_dict:
        kwargs["helpers_prefix"] = str(config_dict["helpers_prefix"])

    if "referenced_namespaces" in config_dict:
        namespaces = config_dict["referenced_namespaces"] or ()
        if isinstance(namespaces, str):
            namespaces = [namespaces]
        kwargs["referenced_namespaces"] = tuple(str(ns) for ns in namespaces)

    if "indent_size" in config_dict:
        try:
            kwargs["indent_size"] = int(config_dict["indent_size"])
        except (TypeError, ValueError):
            raise ConfigurationError(
                f"Indent size must be an integer, got {config_dict['indent_size']!r}",
                setting="indent_size",
            )

    settings = Settings(**kwargs)
    validate_settings(settings)
    return settings


def settings_to_dict(settings: Settings) -> Dict[str, Any]:
    """Convert settings to a dictionary."""
    return {
        "generated_namespace": settings.generated_namespace,
        "helpers_prefix": settings.helpers_prefix,
        "referenced_namespaces": list(settings.referenced_namespaces),
        "indent_size": settings.indent_size,
    }


def apply_environment_overrides(settings: Settings) -> Settings:
    """Apply environment variable overrides on top of loaded settings."""
    namespace = os.getenv(ENV_GENERATED_NAMESPACE, "").strip()
    if namespace:
        settings = replace(settings, generated_namespace=namespace)
        validate_settings(settings)
    return settings


def load_settings(config_file: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from a JSON or YAML file.

    Args:
        config_file: Path to the settings file. If None, ``r4mvc.json`` in
            the current directory is used.

    Returns:
        Validated settings, with environment overrides applied

    Raises:
        ConfigurationError: If the file exists but cannot be parsed or holds
            invalid values
    """
    path = Path(config_file) if config_file else Path.cwd() / DEFAULT_SETTINGS_FILE

    if not path.exists():
        logger.warning(f"Settings file {path} not found, using defaults")
        return apply_environment_overrides(Settings())

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                config_data = yaml.safe_load(f)
            else:
                config_data = json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to load settings from {path}: {e}")
        raise ConfigurationError(f"Failed to load settings: {e}", source=str(path)) from e

    if config_data is None:
        config_data = {}
    if not isinstance(config_data, dict):
        raise ConfigurationError("Settings file must contain a mapping", source=str(path))

    try:
        settings = settings_from_dict(config_data)
    except ConfigurationError as e:
        e.source = str(path)
        e.details['source'] = str(path)
        raise

    logger.info(f"Loaded settings from {path}")
    return apply_environment_overrides(settings)


def save_settings(settings: Settings, config_file: Union[str, Path]) -> None:
    """Save settings to a JSON or YAML file, chosen by suffix."""
    path = Path(config_file)
    data = settings_to_dict(settings)

    with open(path, "w", encoding="utf-8") as f:
        if path.suffix.lower() in YAML_SUFFIXES:
            yaml.safe_dump(data, f, sort_keys=False)
        else:
            json.dump(data, f, indent=2)
    logger.info(f"Settings saved to {path}")
