"""
Core Data Structures and Protocols for Helper Class Generation.

This module defines the input metadata model handed in by discovery and
the closed set of immutable values the generator assembles as output.
Output values are never executed; a printer turns them into source text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Protocol, Tuple, Union

from ..utils.config import Settings
from ..utils.constants import CONTROLLER_SUFFIX, MODIFIER_ORDER, Modifier


# =============================================================================
# Input Metadata
# =============================================================================

@dataclass
class ControllerDefinition:
    """
    One controller as discovered in the target application.

    ``namespace`` is empty for controllers that exist only because views
    need a typed handle. ``fully_qualified_generated_name`` is written by
    the naming stage; controllers backed by a real type default to their
    own ``<namespace>.<Name>Controller``.
    """

    name: str
    namespace: Optional[str] = None
    area: Optional[str] = ""
    fully_qualified_generated_name: Optional[str] = None

    def __post_init__(self):
        if self.area is None:
            self.area = ""
        if self.namespace and self.fully_qualified_generated_name is None and self.name:
            self.fully_qualified_generated_name = f"{self.namespace}.{self.name}{CONTROLLER_SUFFIX}"

    @property
    def is_view_only(self) -> bool:
        """True when no real application controller backs this definition."""
        return not self.namespace

    @property
    def is_root_area(self) -> bool:
        return not self.area


# =============================================================================
# Output Syntax Values
# =============================================================================

def _ordered_modifiers(modifiers) -> Tuple[Modifier, ...]:
    wanted = set(modifiers)
    return tuple(m for m in MODIFIER_ORDER if m in wanted)


@dataclass(frozen=True)
class TypeRef:
    """Reference to a type by (possibly qualified) name."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Parameter:
    """Constructor parameter; ``default`` is emitted verbatim."""
    name: str
    type: TypeRef
    default: Optional[str] = None


@dataclass(frozen=True)
class FieldMember:
    """Field declaration with an optional verbatim initializer."""
    name: str
    type: TypeRef
    modifiers: Tuple[Modifier, ...] = (Modifier.PUBLIC,)
    initializer: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'modifiers', _ordered_modifiers(self.modifiers))


@dataclass(frozen=True)
class PropertyMember:
    """Auto-property with a getter and, unless read-only, a setter."""
    name: str
    type: TypeRef
    modifiers: Tuple[Modifier, ...] = (Modifier.PUBLIC,)
    read_only: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'modifiers', _ordered_modifiers(self.modifiers))


@dataclass(frozen=True)
class ConstructorMember:
    """Constructor with verbatim body statements."""
    parameters: Tuple[Parameter, ...] = ()
    modifiers: Tuple[Modifier, ...] = (Modifier.PUBLIC,)
    base_arguments: Optional[Tuple[str, ...]] = None
    body: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'modifiers', _ordered_modifiers(self.modifiers))

    @property
    def is_public(self) -> bool:
        return Modifier.PUBLIC in self.modifiers

    @property
    def arity(self) -> int:
        return len(self.parameters)


Member = Union[FieldMember, PropertyMember, ConstructorMember]


@dataclass(frozen=True)
class ClassDefinition:
    """A synthetic class: the generator's sole output type."""
    identifier: str
    namespace: str
    modifiers: Tuple[Modifier, ...] = (Modifier.PUBLIC,)
    base_types: Tuple[TypeRef, ...] = ()
    attributes: Tuple[str, ...] = ()
    members: Tuple[Member, ...] = ()

    def __post_init__(self):
        if not self.identifier:
            raise ValueError("Class identifier cannot be empty")
        object.__setattr__(self, 'modifiers', _ordered_modifiers(self.modifiers))

    @property
    def constructors(self) -> Tuple[ConstructorMember, ...]:
        return tuple(m for m in self.members if isinstance(m, ConstructorMember))

    @property
    def fields(self) -> Tuple[FieldMember, ...]:
        return tuple(m for m in self.members if isinstance(m, FieldMember))

    @property
    def properties(self) -> Tuple[PropertyMember, ...]:
        return tuple(m for m in self.members if isinstance(m, PropertyMember))

    def has_modifiers(self, *modifiers: Modifier) -> bool:
        return all(m in self.modifiers for m in modifiers)


@dataclass(frozen=True)
class GenerationResult:
    """Complete, ordered output of one generation run."""
    classes: Tuple[ClassDefinition, ...]
    settings: Settings = field(default_factory=Settings)

    def __iter__(self) -> Iterator[ClassDefinition]:
        return iter(self.classes)

    def __len__(self) -> int:
        return len(self.classes)

    @property
    def identifiers(self) -> List[str]:
        return [c.identifier for c in self.classes]

    def get(self, identifier: str, namespace: Optional[str] = None) -> Optional[ClassDefinition]:
        """Find a class by identifier, optionally restricted to one namespace."""
        for class_def in self.classes:
            if class_def.identifier == identifier and (namespace is None or class_def.namespace == namespace):
                return class_def
        return None

    def by_namespace(self) -> Dict[str, List[ClassDefinition]]:
        """Group classes by namespace, in order of first appearance."""
        grouped: Dict[str, List[ClassDefinition]] = {}
        for class_def in self.classes:
            grouped.setdefault(class_def.namespace, []).append(class_def)
        return grouped


# =============================================================================
# Collaborator Protocols
# =============================================================================

class ClassPrinter(Protocol):
    """Protocol for rendering generated classes to source text."""

    def render(self, result: GenerationResult) -> str:
        """Render a complete generation result."""
        ...

    def render_class(self, class_def: ClassDefinition) -> str:
        """Render a single class declaration."""
        ...


class FilePersistService(Protocol):
    """Protocol for the external writer that stores generated text."""

    def write(self, path: str, content: str) -> None:
        """Persist content at the given path."""
        ...
