"""
Base Classes for Class Generators.

This module provides the base class shared by the synthesizers: settings
injection, stage logging and small builders for the members that every
generated class carries.
"""

from __future__ import annotations

from abc import ABC
from typing import Iterable, Optional, Sequence

from ...utils.config import Settings
from ...utils.constants import GENERATED_CODE_ATTRIBUTES, Modifier
from ...utils.exceptions import DuplicateMemberError
from ...utils.logging import GeneratorLogger
from ..naming import resolve_generated_name
from ..types import (
    ClassDefinition,
    ControllerDefinition,
    FieldMember,
    Member,
    TypeRef,
)


class BaseClassGenerator(ABC):
    """Base class for all class generators."""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the generator with generator settings."""
        self._settings = settings or Settings()
        self._log = GeneratorLogger(self.__class__.__module__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def _create_class(
        self,
        identifier: str,
        members: Sequence[Member] = (),
        modifiers: Iterable[Modifier] = (Modifier.PUBLIC, Modifier.PARTIAL),
        base_types: Sequence[str] = (),
        namespace: Optional[str] = None,
    ) -> ClassDefinition:
        """Create a class in the generated namespace unless told otherwise."""
        namespace = self._settings.generated_namespace if namespace is None else namespace
        check_unique_members(identifier, namespace, members)
        return ClassDefinition(
            identifier=identifier,
            namespace=namespace,
            modifiers=tuple(modifiers),
            base_types=tuple(TypeRef(name) for name in base_types),
            attributes=GENERATED_CODE_ATTRIBUTES,
            members=tuple(members),
        )

    def _generated_name(self, controller: ControllerDefinition) -> str:
        """Generated type of a controller, resolving it if no stage has yet."""
        if controller.fully_qualified_generated_name:
            return controller.fully_qualified_generated_name
        return resolve_generated_name(controller, self._settings)


def string_literal(value: str) -> str:
    """Quote a value as a C# string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def readonly_string_field(name: str, value: str) -> FieldMember:
    """``public readonly string <name> = "<value>";``"""
    return FieldMember(
        name=name,
        type=TypeRef("string"),
        modifiers=(Modifier.PUBLIC, Modifier.READONLY),
        initializer=string_literal(value),
    )


def instance_field(name: str, type_name: str, static: bool = False) -> FieldMember:
    """Read-only field initialised with a new instance of its own type."""
    modifiers = [Modifier.PUBLIC, Modifier.READONLY]
    if static:
        modifiers.append(Modifier.STATIC)
    return FieldMember(
        name=name,
        type=TypeRef(type_name),
        modifiers=tuple(modifiers),
        initializer=f"new {type_name}()",
    )


def check_unique_members(identifier: str, namespace: str, members: Iterable[Member]) -> None:
    """Raise if two named members of one class would share a name."""
    seen = set()
    for member in members:
        name = getattr(member, "name", None)
        if name is None:
            continue
        if name in seen:
            raise DuplicateMemberError(name, identifier, namespace)
        seen.add(name)
