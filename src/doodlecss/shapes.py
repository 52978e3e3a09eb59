"""Clip-path shape generators used by ``@shape`` and the ``@shape()`` function."""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Any, Callable

from doodlecss.utils import format_number, to_number

__all__ = ["SHAPES", "get_shape", "polygon"]

DEG = math.pi / 180


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _point(x: float, y: float) -> str:
    return f"{format_number(x, 4)}% {format_number(y, 4)}%"


def polygon(sides: int, start: float = 0, deg: float | None = None) -> str:
    """Regular polygon inscribed in the cell, starting at angle *start*."""
    deg = deg or (math.pi / (sides / 2))
    points = []
    for i in range(sides):
        theta = start + deg * i
        points.append(_point(math.cos(theta) * 50 + 50, math.sin(theta) * 50 + 50))
    return f"polygon({', '.join(points)})"


def circle() -> str:
    return "circle(50%)"


def siogon(sides: Any = 3) -> str:
    return polygon(int(_clamp(to_number(sides, 3), 3, 12)))


def triangle() -> str:
    return polygon(3, DEG * -90)


def rhombus() -> str:
    return siogon(4)


def pentagon() -> str:
    return polygon(5, DEG * 54)


def hexagon() -> str:
    return polygon(6, DEG * 30)


def star() -> str:
    return polygon(5, DEG * 54, DEG * 144)


def diamond() -> str:
    return "polygon(50% 5%, 80% 50%, 50% 95%, 20% 50%)"


def cross() -> str:
    return (
        "polygon(5% 35%, 35% 35%, 35% 5%, 65% 5%, 65% 35%, 95% 35%, "
        "95% 65%, 65% 65%, 65% 95%, 35% 95%, 35% 65%, 5% 65%)"
    )


@lru_cache(maxsize=None)
def _hypocycloid(k: int) -> str:
    split = 120
    deg = math.pi / (split / 2)
    big_r = 50
    r = big_r / k
    points = []
    for i in range(split):
        theta = deg * i + math.pi
        x = r * (1 - k) * math.cos(theta) + r * math.cos((1 - k) * (theta - math.pi))
        y = r * (1 - k) * math.sin(theta) + r * math.sin((1 - k) * (theta - math.pi))
        points.append(_point(x + 50, y + 50))
    return f"polygon({', '.join(points)})"


def hypocycloid(k: Any = 3) -> str:
    return _hypocycloid(int(_clamp(to_number(k, 3), 3, 6)))


def astroid() -> str:
    return hypocycloid(4)


@lru_cache(maxsize=None)
def _clover(k: int) -> str:
    split = 240
    deg = math.pi / (split / 2)
    points = []
    for i in range(split):
        theta = deg * i
        x = math.cos(k * theta) * math.cos(theta)
        y = math.cos(k * theta) * math.sin(theta)
        points.append(_point(x * 50 + 50, y * 50 + 50))
    return f"polygon({', '.join(points)})"


def clover(k: Any = 3) -> str:
    petals = int(to_number(k, 3))
    if petals == 4:
        petals = 2
    elif petals != 5:
        petals = int(_clamp(petals, 3, 5))
    return _clover(petals)


SHAPES: dict[str, Callable[..., str]] = {
    "circle": circle,
    "siogon": siogon,
    "triangle": triangle,
    "rhombus": rhombus,
    "pentagon": pentagon,
    "hexagon": hexagon,
    "star": star,
    "diamond": diamond,
    "cross": cross,
    "hypocycloid": hypocycloid,
    "astroid": astroid,
    "clover": clover,
}


def get_shape(name: str, *args: Any) -> str | None:
    """Return the clip-path value for *name*, or None for unknown shapes."""
    shape = SHAPES.get(str(name).strip())
    if shape is None:
        return None
    if shape in (siogon, hypocycloid, clover):
        return shape(*args[:1])
    return shape()
