"""
Generator Service.

Orchestrates one generation run: view-only controllers, area classes,
the helpers class and the action-result wrappers, in that order. The
service keeps no state between runs; the only side effect of a run is
the generated name written back onto each view-only controller.

Calls sharing one controller collection must not overlap, because
naming mutates the controllers in place.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set

from ..utils.config import Settings, validate_settings
from ..utils.exceptions import DuplicateClassError
from ..utils.logging import GeneratorLogger
from .generators import (
    ActionResultClassGenerator,
    AreaClassGenerator,
    HelperClassGenerator,
    ViewOnlyControllerGenerator,
)
from .naming import group_by_area
from .templates import CSharpPrinter
from .types import ClassDefinition, ClassPrinter, ControllerDefinition, GenerationResult


class GeneratorService:
    """Entry point turning controller metadata into synthetic classes."""

    def __init__(self, settings: Optional[Settings] = None, printer: Optional[ClassPrinter] = None):
        self._settings = settings or Settings()
        validate_settings(self._settings)

        self._view_only = ViewOnlyControllerGenerator(self._settings)
        self._areas = AreaClassGenerator(self._settings)
        self._helpers = HelperClassGenerator(self._settings)
        self._action_results = ActionResultClassGenerator(self._settings)
        self._printer = printer
        self._log = GeneratorLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def create_view_only_controller_classes(
        self, controllers: Iterable[ControllerDefinition]
    ) -> List[ClassDefinition]:
        """Placeholder classes for controllers without a real backing type."""
        return self._view_only.generate(controllers)

    def create_area_classes(
        self, controllers_by_area: Mapping[str, Sequence[ControllerDefinition]]
    ) -> List[ClassDefinition]:
        """One grouping class per named area."""
        return self._areas.generate(controllers_by_area)

    def create_helper_class(
        self, controllers_by_area: Mapping[str, Sequence[ControllerDefinition]]
    ) -> ClassDefinition:
        """The static helpers entry-point class."""
        return self._helpers.generate(controllers_by_area)

    def action_result_class(self) -> ClassDefinition:
        return self._action_results.action_result_class()

    def json_result_class(self) -> ClassDefinition:
        return self._action_results.json_result_class()

    def generate(self, controllers: Iterable[ControllerDefinition]) -> GenerationResult:
        """
        Run every synthesizer over the given controllers.

        Args:
            controllers: Controller metadata from discovery; view-only
                controllers get their generated name written back

        Returns:
            All synthetic classes, in deterministic order

        Raises:
            InvalidMetadataError: If a controller has no name
            DuplicateClassError: If two classes collide in one namespace
        """
        controllers = list(controllers)
        self._log.log_generation_start(self._settings.generated_namespace, len(controllers))

        # View-only names must be resolved before anything refers to them
        view_only_classes = self.create_view_only_controller_classes(controllers)

        controllers_by_area = group_by_area(controllers)
        classes = [
            *view_only_classes,
            *self.create_area_classes(controllers_by_area),
            self.create_helper_class(controllers_by_area),
            self.action_result_class(),
            self.json_result_class(),
        ]
        check_unique_identifiers(classes)

        self._log.log_generation_complete(len(classes))
        return GenerationResult(classes=tuple(classes), settings=self._settings)

    def render(self, result: GenerationResult) -> str:
        """Render a result with the configured printer."""
        if self._printer is None:
            self._printer = CSharpPrinter(self._settings)
        return self._printer.render(result)

    def generate_source(self, controllers: Iterable[ControllerDefinition]) -> str:
        """Generate and render in one step."""
        return self.render(self.generate(controllers))


def check_unique_identifiers(classes: Iterable[ClassDefinition]) -> None:
    """Raise DuplicateClassError when an identifier repeats within a namespace."""
    seen: Dict[str, Set[str]] = {}
    for class_def in classes:
        identifiers = seen.setdefault(class_def.namespace, set())
        if class_def.identifier in identifiers:
            raise DuplicateClassError(class_def.identifier, class_def.namespace)
        identifiers.add(class_def.identifier)
