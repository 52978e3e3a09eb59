"""Selector composition and classification."""

from __future__ import annotations

import re

from doodlecss.model.grid import Coordinate

__all__ = [
    "CELL_PREFIX",
    "HOST_SELECTOR",
    "cell_id",
    "compose_selector",
    "is_cell_selector",
    "is_host_selector",
    "is_parent_selector",
    "is_special_selector",
    "normalize_host_alias",
]

CELL_PREFIX = "#cell"
HOST_SELECTOR = ":host"

_HOST_RE = re.compile(r"^:(host|doodle)")
_PARENT_RE = re.compile(r"^:(container|parent)")
_HOST_ALIAS_RE = re.compile(r"^:+doodle")


def cell_id(x: int, y: int, z: int) -> str:
    return f"cell-{x}-{y}-{z}"


def compose_selector(coord: Coordinate, pseudo: str = "") -> str:
    """Selector addressing one cell, e.g. ``#cell-2-1-1:hover``."""
    return f"#{cell_id(coord.x, coord.y, coord.z)}{pseudo}"


def is_host_selector(selector: str) -> bool:
    return bool(_HOST_RE.match(selector))


def is_parent_selector(selector: str) -> bool:
    return bool(_PARENT_RE.match(selector))


def is_special_selector(selector: str) -> bool:
    """Host and container selectors address the component once, never per cell."""
    return is_host_selector(selector) or is_parent_selector(selector)


def is_cell_selector(selector: str) -> bool:
    return selector.startswith(CELL_PREFIX)


def normalize_host_alias(selector: str) -> str:
    """``:doodle`` is an alias of ``:host``."""
    return _HOST_ALIAS_RE.sub(HOST_SELECTOR, selector)
