"""Function registries consulted by the composition engine."""

from doodlecss.functions.base import FunctionRegistry, FunctionSpec
from doodlecss.functions.custom import custom_functions
from doodlecss.functions.math import math_functions
from doodlecss.functions.selectors import nth_matches, selector_functions

__all__ = [
    "FunctionRegistry",
    "FunctionSpec",
    "custom_functions",
    "math_functions",
    "selector_functions",
    "nth_matches",
]
