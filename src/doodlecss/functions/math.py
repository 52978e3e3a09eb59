"""Math function registry: thin wrappers over Python's ``math`` module."""

from __future__ import annotations

import math
from typing import Any, Callable

from doodlecss.functions.base import FunctionRegistry
from doodlecss.model.grid import Coordinate
from doodlecss.utils import format_number, to_number

__all__ = ["math_functions", "MATH_TABLE", "CONSTANTS"]


def _sign(n: float) -> float:
    return (n > 0) - (n < 0)


def _round(n: float, digits: float = 0) -> float:
    # half-up like JavaScript's Math.round, not banker's rounding
    scale = 10 ** int(digits)
    return math.floor(n * scale + 0.5) / scale


MATH_TABLE: dict[str, Callable[..., float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "atan2": math.atan2,
    "abs": abs,
    "sqrt": math.sqrt,
    "cbrt": lambda n: math.copysign(abs(n) ** (1 / 3), n),
    "pow": math.pow,
    "exp": math.exp,
    "log": math.log,
    "floor": math.floor,
    "ceil": math.ceil,
    "round": _round,
    "trunc": math.trunc,
    "sign": _sign,
    "min": min,
    "max": max,
    "hypot": math.hypot,
}

CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "PI": math.pi,
    "e": math.e,
    "E": math.e,
}

math_functions = FunctionRegistry("math")


def _wrap(fn: Callable[..., float]) -> Callable[[Coordinate], Callable[..., Any]]:
    def factory(coord: Coordinate) -> Callable[..., Any]:
        def call(*args: Any) -> str | None:
            if not args:
                return None
            try:
                return format_number(fn(*(to_number(a) for a in args)))
            except (ValueError, OverflowError):
                # out of the function's domain
                return None

        return call

    return factory


def _constant(value: float) -> Callable[[Coordinate], Callable[..., Any]]:
    return lambda coord: lambda *args: format_number(value)


for _name, _fn in MATH_TABLE.items():
    math_functions.register(_name, _wrap(_fn))

for _name, _value in CONSTANTS.items():
    math_functions.register(_name, _constant(_value))
