"""Compilation engine: rule composition, selector naming and the grid driver."""

from doodlecss.engine.generator import generate, iter_coordinates, resolve_grid
from doodlecss.engine.rules import ComposedArgument, Rules
from doodlecss.engine.selector import (
    compose_selector,
    is_host_selector,
    is_parent_selector,
    is_special_selector,
)

__all__ = [
    "generate",
    "iter_coordinates",
    "resolve_grid",
    "Rules",
    "ComposedArgument",
    "compose_selector",
    "is_host_selector",
    "is_parent_selector",
    "is_special_selector",
]
