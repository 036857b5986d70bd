"""
Specialized Class Generators.

This module contains one generator per kind of synthetic class:
- ViewOnlyControllerGenerator: placeholders for controllers backed only by views
- AreaClassGenerator: one grouping class per named area
- ActionResultClassGenerator: the two fixed action-result wrappers
- HelperClassGenerator: the static helpers entry-point class
"""

from .base import BaseClassGenerator
from .view_only import ViewOnlyControllerGenerator
from .areas import AreaClassGenerator
from .action_results import ActionResultClassGenerator
from .helpers import HelperClassGenerator

__all__ = [
    "BaseClassGenerator",
    "ViewOnlyControllerGenerator",
    "AreaClassGenerator",
    "ActionResultClassGenerator",
    "HelperClassGenerator",
]
