"""
Custom exception definitions.

This module defines the exception hierarchy for r4gen-specific errors.
The generation engine itself has no recoverable error paths; everything
raised here signals either a broken contract with a collaborator
(discovery, settings file, templates) or an output invariant violation.
"""

from typing import Optional


class R4GenError(Exception):
    """
    Base exception for all r4gen-related errors.

    This is the root exception class for all r4gen-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize r4gen error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class InvalidMetadataError(R4GenError, ValueError):
    """
    Raised when controller metadata violates the discovery contract.

    A controller without a name cannot be given a stable identifier,
    and silently skipping it would corrupt generated, checked-in code.
    """

    def __init__(self, message: str, field: str = "", area: Optional[str] = None,
                 namespace: Optional[str] = None, source: Optional[str] = None):
        """
        Initialize metadata error.

        Args:
            message: Error description
            field: Name of the offending field
            area: Area of the offending controller, if known
            namespace: Namespace of the offending controller, if known
            source: Metadata file the record came from, if any
        """
        details = {}
        if field:
            details['field'] = field
        if area:
            details['area'] = area
        if namespace:
            details['namespace'] = namespace
        if source:
            details['source'] = source

        super().__init__(message, details)
        self.field = field
        self.source = source


class ConfigurationError(R4GenError):
    """
    Raised when generator settings are invalid or cannot be loaded.
    """

    def __init__(self, message: str, setting: Optional[str] = None, source: Optional[str] = None):
        """
        Initialize configuration error.

        Args:
            message: Error description
            setting: Optional name of the invalid setting
            source: Optional path of the settings file
        """
        details = {}
        if setting is not None:
            details['setting'] = setting
        if source is not None:
            details['source'] = source

        super().__init__(message, details)
        self.setting = setting
        self.source = source


class DuplicateClassError(R4GenError):
    """
    Raised when two synthetic classes share an identifier in one namespace.
    """

    def __init__(self, identifier: str, namespace: str):
        """
        Initialize duplicate class error.

        Args:
            identifier: Colliding class identifier
            namespace: Namespace the collision occurred in
        """
        super().__init__(
            f"Duplicate generated class '{identifier}'",
            {'namespace': namespace or '<global>'},
        )
        self.identifier = identifier
        self.namespace = namespace


class TemplateRenderError(R4GenError):
    """
    Raised when a printer template fails to load or render.
    """

    def __init__(self, message: str, template_name: str = ""):
        """
        Initialize template render error.

        Args:
            message: Error description
            template_name: Template that failed
        """
        details = {'template': template_name} if template_name else {}
        super().__init__(message, details)
        self.template_name = template_name


class DuplicateMemberError(R4GenError):
    """
    Raised when two members of one synthetic class share a name.
    """

    def __init__(self, member: str, identifier: str, namespace: str):
        """
        Initialize duplicate member error.

        Args:
            member: Colliding member name
            identifier: Class the members belong to
            namespace: Namespace of that class
        """
        super().__init__(
            f"Duplicate member '{member}' in generated class '{identifier}'",
            {'namespace': namespace or '<global>'},
        )
        self.member = member
        self.identifier = identifier
        self.namespace = namespace
