"""Directive transforms: ``@grid``, ``@size``, ``@place-cell`` and friends.

Each transform receives the composed value and TransformOptions and returns
the declaration text to emit. ``@grid`` returns a GridDirective instead, and
``@use`` receives the raw value-groups of its declaration.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from doodlecss.model.grid import GridSize
from doodlecss.model.tokens import TextNode, ValueGroup
from doodlecss.properties.prefixer import prefixer
from doodlecss.shapes import get_shape
from doodlecss.utils import to_number

__all__ = [
    "TRANSFORMS",
    "GridDirective",
    "TransformOptions",
    "parse_grid",
    "parse_size",
]

MAX_GRID = 64

_GRID_SPLIT = re.compile(r"[xX*,\s]+")
_SIZE_SPLIT = re.compile(r"[\s,]+")

_PLACE_KEYWORDS = {
    "left": "0%",
    "top": "0%",
    "center": "50%",
    "right": "100%",
    "bottom": "100%",
}


@dataclass(frozen=True)
class TransformOptions:
    is_special_selector: bool = False
    max_grid: int = MAX_GRID


@dataclass(frozen=True)
class GridDirective:
    """Result of ``@grid``: the grid dimensions plus optional host sizing text."""

    grid: GridSize
    size: str = ""


def parse_grid(value: str, max_grid: int = MAX_GRID) -> GridSize:
    """Parse ``5``, ``5x8`` or ``1x1x10`` into a GridSize clamped to ``1..max_grid``."""
    parts = [p for p in _GRID_SPLIT.split(str(value).strip()) if p]
    numbers = [int(to_number(p, 1)) for p in parts[:3]]
    if not numbers:
        return GridSize()
    if len(numbers) == 1:
        numbers = [numbers[0], numbers[0]]

    def clamp(n: int) -> int:
        return max(1, min(max_grid, n))

    x, y = clamp(numbers[0]), clamp(numbers[1])
    z = clamp(numbers[2]) if len(numbers) > 2 else 1
    return GridSize(x=x, y=y, z=z)


def parse_size(value: str) -> tuple[str, str]:
    parts = [p for p in _SIZE_SPLIT.split(str(value).strip()) if p]
    if not parts:
        return "", ""
    width = parts[0]
    height = parts[1] if len(parts) > 1 else width
    return width, height


def _sized(prefix: str, value: str, options: TransformOptions) -> str:
    width, height = parse_size(value)
    if not width:
        return ""
    rule = f"{prefix}width: {width}; {prefix}height: {height};"
    if not prefix and not options.is_special_selector:
        rule += f" --internal-cell-width: {width}; --internal-cell-height: {height};"
    return rule


def size(value: str, options: TransformOptions) -> str:
    return _sized("", value, options)


def min_size(value: str, options: TransformOptions) -> str:
    return _sized("min-", value, options)


def max_size(value: str, options: TransformOptions) -> str:
    return _sized("max-", value, options)


def grid(value: str, options: TransformOptions) -> GridDirective:
    """``@grid: 5x5 / 8em`` -> grid 5x5, host sized 8em square."""
    grid_part, _, size_part = str(value).partition("/")
    return GridDirective(
        grid=parse_grid(grid_part, options.max_grid),
        size=size(size_part, options) if size_part.strip() else "",
    )


def place_cell(value: str, options: TransformOptions) -> str:
    parts = [p for p in str(value).split() if p]
    if not parts:
        return ""
    if len(parts) == 1:
        if parts[0] in ("top", "bottom"):
            parts = ["center", parts[0]]
        else:
            parts = [parts[0], "center"]
    elif parts[0] in ("top", "bottom") or parts[1] in ("left", "right"):
        parts = [parts[1], parts[0]]
    left, top = (_PLACE_KEYWORDS.get(p, p) for p in parts[:2])
    return (
        "position: absolute; "
        f"left: {left}; "
        f"top: {top}; "
        "transform: translate(-50%, -50%);"
    )


def shape(value: str, options: TransformOptions) -> str:
    name, *args = [p for p in _SIZE_SPLIT.split(str(value).strip()) if p] or [""]
    clip = get_shape(name, *args)
    if clip is None:
        return ""
    return prefixer("clip-path", f"clip-path: {clip};") + " overflow: hidden;"


def use(value: tuple[ValueGroup, ...], options: TransformOptions) -> str:
    """Emit the literal declarations carried by an ``@use`` value."""
    declarations = []
    for group in value:
        text = "".join(node.value for node in group if isinstance(node, TextNode)).strip()
        if text:
            declarations.append(text if text.endswith(";") else text + ";")
    return " ".join(declarations)


TRANSFORMS: dict[str, Callable[[Any, TransformOptions], Any]] = {
    "@grid": grid,
    "@size": size,
    "@min-size": min_size,
    "@max-size": max_size,
    "@place-cell": place_cell,
    "@shape": shape,
    "@use": use,
}
