"""
Action-Result Wrapper Generator.

Generated action proxies return one of two fixed wrapper classes. Both
implement ``IR4MvcActionResult`` so callers can read the area,
controller, action and protocol of any proxied result without caring
which concrete result type the action produces.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ...utils.constants import (
    ACTION_RESULT_BASE,
    ACTION_RESULT_CLASS,
    ACTION_RESULT_INIT_METHOD,
    ACTION_RESULT_INTERFACE,
    ACTION_RESULT_PARAMETERS,
    ACTION_RESULT_PROPERTIES,
    JSON_RESULT_BASE,
    JSON_RESULT_CLASS,
    Modifier,
)
from ..types import ClassDefinition, ConstructorMember, Parameter, PropertyMember, TypeRef
from .base import BaseClassGenerator


class ActionResultClassGenerator(BaseClassGenerator):
    """Generator for the two action-result wrapper classes."""

    def action_result_class(self) -> ClassDefinition:
        return self._wrapper_class(ACTION_RESULT_CLASS, ACTION_RESULT_BASE)

    def json_result_class(self) -> ClassDefinition:
        # JsonResult has no parameterless constructor
        return self._wrapper_class(JSON_RESULT_CLASS, JSON_RESULT_BASE, base_arguments=("null",))

    def _wrapper_class(
        self, identifier: str, base_type: str, base_arguments: Optional[Tuple[str, ...]] = None
    ) -> ClassDefinition:
        constructor = ConstructorMember(
            parameters=_constructor_parameters(),
            modifiers=(Modifier.PUBLIC,),
            base_arguments=base_arguments,
            body=(f"this.{ACTION_RESULT_INIT_METHOD}({', '.join(ACTION_RESULT_PARAMETERS)});",),
        )
        properties = [
            PropertyMember(name=name, type=TypeRef(type_name))
            for type_name, name in ACTION_RESULT_PROPERTIES
        ]
        return self._create_class(
            identifier,
            members=[constructor, *properties],
            modifiers=(Modifier.INTERNAL, Modifier.PARTIAL),
            base_types=(base_type, ACTION_RESULT_INTERFACE),
        )


def _constructor_parameters() -> Tuple[Parameter, ...]:
    *required, optional = ACTION_RESULT_PARAMETERS
    parameters = [Parameter(name, TypeRef("string")) for name in required]
    parameters.append(Parameter(optional, TypeRef("string"), default="null"))
    return tuple(parameters)
