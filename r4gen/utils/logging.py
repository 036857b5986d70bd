"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
r4gen package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional

from .constants import ENV_LOG_LEVEL


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the r4gen package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL, "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("r4gen")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Keep generator chatter out of the host application's root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "r4gen" or name.startswith("r4gen."):
        return logging.getLogger(name)
    return logging.getLogger(f"r4gen.{name}")


class GeneratorLogger:
    """
    Stage-level logging for a generation run.

    Each synthesizer reports what it emitted or skipped so that a
    surprising diff in checked-in generated code can be traced back
    to the metadata that caused it.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_generation_start(self, namespace: str, controller_count: int) -> None:
        """
        Log beginning of a generation run.

        Args:
            namespace: Root namespace for generated classes
            controller_count: Number of controllers handed in by discovery
        """
        self.logger.info(f"Starting generation into '{namespace}' ({controller_count} controllers)")

    def log_view_only_controller(self, identifier: str, generated_name: str) -> None:
        """
        Log a synthesized view-only controller.

        Args:
            identifier: Class identifier that was emitted
            generated_name: Fully-qualified generated name written back to the controller
        """
        self.logger.debug(f"View-only controller {identifier} -> {generated_name}")

    def log_duplicate_skipped(self, area: str, name: str) -> None:
        """
        Log a view-only candidate collapsed into an earlier one.

        Args:
            area: Area of the duplicate candidate
            name: Controller name of the duplicate candidate
        """
        location = f"area '{area}'" if area else "root area"
        self.logger.debug(f"Skipped duplicate view-only controller '{name}' in {location}")

    def log_area_class(self, identifier: str, controller_count: int) -> None:
        """
        Log a synthesized area grouping class.

        Args:
            identifier: Class identifier that was emitted
            controller_count: Number of controllers exposed by the class
        """
        self.logger.debug(f"Area class {identifier} ({controller_count} controllers)")

    def log_generation_complete(self, class_count: int) -> None:
        """
        Log the end of a generation run.

        Args:
            class_count: Total number of synthetic classes produced
        """
        self.logger.info(f"Generation complete: {class_count} classes")


# Initialize logging on module import
setup_logging()
