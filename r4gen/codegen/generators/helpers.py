"""
Helpers Class Generator.

The helpers class (``MVC`` by default) is the entry point calling code
starts from: ``MVC.Home`` for root-area controllers and
``MVC.Admin.Users`` through the area grouping classes.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from ...utils.constants import NAMESPACE_SEPARATOR, Modifier
from ..naming import area_class_name, sorted_areas, unique_by_name
from ..types import ClassDefinition, ControllerDefinition
from .base import BaseClassGenerator, instance_field


class HelperClassGenerator(BaseClassGenerator):
    """Generator for the static helpers class in the global namespace."""

    def generate(self, controllers_by_area: Mapping[str, Sequence[ControllerDefinition]]) -> ClassDefinition:
        members = []

        for area in sorted_areas(controllers_by_area):
            area_type = NAMESPACE_SEPARATOR.join((self._settings.generated_namespace, area_class_name(area)))
            members.append(instance_field(area, area_type, static=True))

        for controller in unique_by_name(controllers_by_area.get("", ())):
            members.append(instance_field(controller.name, self._generated_name(controller), static=True))

        return self._create_class(
            self._settings.helpers_prefix,
            members,
            modifiers=(Modifier.PUBLIC, Modifier.STATIC, Modifier.PARTIAL),
            namespace="",
        )
