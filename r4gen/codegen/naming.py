"""
Naming Engine.

Pure functions computing the canonical identifiers of generated classes
and the ordering keys that keep generated output stable across runs.
The only side effect in this module is ``resolve_generated_name`` writing
its result back onto the controller it was given.

All comparisons are ordinal and case-sensitive: Python string ordering
compares code points, which is what keeps the output independent of the
locale of the machine running the generator.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from ..utils.config import Settings
from ..utils.constants import (
    AREA_CLASS_SUFFIX,
    AREA_PREFIX_SUFFIX,
    CONTROLLER_SUFFIX,
    NAMESPACE_SEPARATOR,
)
from ..utils.exceptions import InvalidMetadataError
from .types import ControllerDefinition


def require_name(controller: ControllerDefinition) -> str:
    """Return the controller name, failing fast when discovery left it empty."""
    if not controller.name:
        raise InvalidMetadataError(
            "Controller definition has no name",
            field="name",
            area=controller.area,
            namespace=controller.namespace,
        )
    return controller.name


def controller_class_name(name: str) -> str:
    """``Home`` -> ``HomeController``."""
    return f"{name}{CONTROLLER_SUFFIX}"


def area_class_name(area: str) -> str:
    """``Admin`` -> ``AdminAreaClass``."""
    return f"{area}{AREA_CLASS_SUFFIX}"


def view_only_class_name(controller: ControllerDefinition) -> str:
    """
    Identifier of the placeholder class for a view-only controller.

    Root-area controllers get ``<Name>Controller``; area controllers are
    prefixed with ``<Area>Area_`` so that equally named controllers from
    different areas can live side by side in the generated namespace.
    """
    class_name = controller_class_name(require_name(controller))
    if controller.area:
        return f"{controller.area}{AREA_PREFIX_SUFFIX}{class_name}"
    return class_name


def generated_class_name(controller: ControllerDefinition) -> str:
    """Identifier of the generated class for any controller."""
    if controller.is_view_only:
        return view_only_class_name(controller)
    return controller_class_name(require_name(controller))


def resolve_generated_namespace(controller: ControllerDefinition, settings: Settings) -> str:
    """Root generated namespace, extended by the controller's own namespace when present."""
    if controller.namespace:
        return NAMESPACE_SEPARATOR.join((settings.generated_namespace, controller.namespace))
    return settings.generated_namespace


def resolve_generated_name(controller: ControllerDefinition, settings: Settings) -> str:
    """
    Resolve and record the fully-qualified generated name of a controller.

    The result is written to ``controller.fully_qualified_generated_name``
    so later stages can read it without resolving again. Resolving twice
    yields the same string.

    Args:
        controller: Controller to resolve; mutated in place
        settings: Generator settings supplying the root namespace

    Returns:
        The fully-qualified generated name
    """
    namespace = resolve_generated_namespace(controller, settings)
    generated_name = f"{namespace}{NAMESPACE_SEPARATOR}{generated_class_name(controller)}"
    controller.fully_qualified_generated_name = generated_name
    return generated_name


# =============================================================================
# Ordering and Grouping
# =============================================================================

def controller_sort_key(controller: ControllerDefinition) -> Tuple[str, str]:
    """Order by area, then by name."""
    return (controller.area or "", require_name(controller))


def group_by_area(controllers: Iterable[ControllerDefinition]) -> Dict[str, List[ControllerDefinition]]:
    """
    Group controllers by area, keyed in order of first appearance.

    The root area is keyed by the empty string.
    """
    groups: Dict[str, List[ControllerDefinition]] = {}
    for controller in controllers:
        groups.setdefault(controller.area or "", []).append(controller)
    return groups


def sorted_areas(controllers_by_area: Mapping[str, Sequence[ControllerDefinition]]) -> List[str]:
    """Non-empty area names in ordinal ascending order."""
    return sorted(area for area in controllers_by_area if area)


def unique_by_name(controllers: Iterable[ControllerDefinition]) -> List[ControllerDefinition]:
    """Controllers ordered by name, keeping the first definition of each name."""
    seen: Dict[str, ControllerDefinition] = {}
    for controller in controllers:
        seen.setdefault(require_name(controller), controller)
    return [seen[name] for name in sorted(seen)]
