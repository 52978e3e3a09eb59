"""Selector predicates used by ``cond`` blocks, e.g. ``@nth(2n+1) { ... }``."""

from __future__ import annotations

import re
from typing import Any, Callable

from doodlecss.functions.base import FunctionRegistry
from doodlecss.model.grid import Coordinate
from doodlecss.utils import to_number

__all__ = ["selector_functions", "nth_matches"]

selector_functions = FunctionRegistry("selectors")

_NTH_RE = re.compile(r"^([+-]?\d*)n\s*(?:([+-])\s*(\d+))?$")


def nth_matches(formula: Any, index: int) -> bool:
    """Match *index* (1-based) against an ``an+b`` formula, ``odd``, ``even`` or a number."""
    formula = str(formula).strip().replace(" ", "")
    if formula == "odd":
        formula = "2n+1"
    elif formula == "even":
        formula = "2n"

    match = _NTH_RE.match(formula)
    if not match:
        return index == int(to_number(formula, -1))

    a_raw, sign, b_raw = match.groups()
    if a_raw in ("", "+"):
        a = 1
    elif a_raw == "-":
        a = -1
    else:
        a = int(a_raw)
    b = int(b_raw or 0) * (-1 if sign == "-" else 1)

    if a == 0:
        return index == b
    step, rest = divmod(index - b, a)
    return rest == 0 and step >= 0


def _nth_of(axis: Callable[[Coordinate], int]) -> Callable[[Coordinate], Callable[..., bool]]:
    def factory(coord: Coordinate) -> Callable[..., bool]:
        return lambda *formulas: any(nth_matches(f, axis(coord)) for f in formulas)

    return factory


selector_functions.register("nth", _nth_of(lambda c: c.count))
selector_functions.register("row", _nth_of(lambda c: c.x))
selector_functions.register("col", _nth_of(lambda c: c.y))
selector_functions.register("depth", _nth_of(lambda c: c.z))


@selector_functions.function("at")
def _at(coord: Coordinate) -> Callable[..., bool]:
    def at(x: Any = None, y: Any = None, *args: Any) -> bool:
        if x is None:
            return False
        if y is None:
            y = x
        return coord.x == int(to_number(x)) and coord.y == int(to_number(y))

    return at


@selector_functions.function("even")
def _even(coord: Coordinate) -> Callable[..., bool]:
    return lambda *args: coord.count % 2 == 0


@selector_functions.function("odd")
def _odd(coord: Coordinate) -> Callable[..., bool]:
    return lambda *args: coord.count % 2 == 1


@selector_functions.function("random")
def _random(coord: Coordinate) -> Callable[..., bool]:
    def random(ratio: Any = 0.5, *args: Any) -> bool:
        return coord.context.random.random() < to_number(ratio, 0.5)

    return random
