"""
View-Only Controller Generator.

Views that live in a controller folder without a matching controller
type still need a typed handle. This generator creates a placeholder
class for each such controller.
"""

from __future__ import annotations

from typing import Iterable, List, Set, Tuple

from ..naming import controller_sort_key, resolve_generated_name, view_only_class_name
from ..types import ClassDefinition, ConstructorMember, ControllerDefinition
from .base import BaseClassGenerator, readonly_string_field


class ViewOnlyControllerGenerator(BaseClassGenerator):
    """Generator for placeholder classes of view-only controllers."""

    def generate(self, controllers: Iterable[ControllerDefinition]) -> List[ClassDefinition]:
        """
        Create one class per distinct (area, name) among view-only controllers.

        Output is ordered by area then name. Every candidate, duplicates
        included, has its generated name resolved; controllers backed by a
        real type are left untouched.
        """
        candidates = [c for c in controllers if c.is_view_only]

        classes = []
        seen: Set[Tuple[str, str]] = set()
        # sorted() is stable, so the first-seen duplicate stays first
        for controller in sorted(candidates, key=controller_sort_key):
            generated_name = resolve_generated_name(controller, self._settings)

            key = (controller.area, controller.name)
            if key in seen:
                self._log.log_duplicate_skipped(controller.area, controller.name)
                continue
            seen.add(key)

            identifier = view_only_class_name(controller)
            classes.append(self._build_class(identifier, controller))
            self._log.log_view_only_controller(identifier, generated_name)

        return classes

    def _build_class(self, identifier: str, controller: ControllerDefinition) -> ClassDefinition:
        members = [
            ConstructorMember(),
            readonly_string_field("Name", controller.name),
        ]
        if controller.area:
            members.append(readonly_string_field("Area", controller.area))
        return self._create_class(identifier, members)
