"""
Area Class Generator.

Emits one grouping class per named area, exposing a field for each
controller in that area. The root area has no grouping class; its
controllers hang directly off the helpers class.
"""

from __future__ import annotations

from typing import List, Mapping, Sequence

from ..naming import area_class_name, sorted_areas, unique_by_name
from ..types import ClassDefinition, ControllerDefinition
from .base import BaseClassGenerator, instance_field, readonly_string_field


class AreaClassGenerator(BaseClassGenerator):
    """Generator for ``<Area>AreaClass`` grouping classes."""

    def generate(
        self, controllers_by_area: Mapping[str, Sequence[ControllerDefinition]]
    ) -> List[ClassDefinition]:
        """Create area classes in ordinal order of area name, skipping the root area."""
        classes = []
        for area in sorted_areas(controllers_by_area):
            controllers = unique_by_name(controllers_by_area[area])

            members = [readonly_string_field("Name", area)]
            for controller in controllers:
                members.append(instance_field(controller.name, self._generated_name(controller)))

            identifier = area_class_name(area)
            classes.append(self._create_class(identifier, members))
            self._log.log_area_class(identifier, len(controllers))

        return classes
