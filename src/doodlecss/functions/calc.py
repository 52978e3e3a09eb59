"""Arithmetic evaluation for ``@calc()``, parsed with a small lark grammar."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer

from doodlecss.functions.math import CONSTANTS, MATH_TABLE

GRAMMAR_PATH = Path(__file__).parent / "calc.lark"


class CalcError(ValueError):
    """Raised when an expression cannot be evaluated to a plain number."""


class CalcTransformer(Transformer):  # type: ignore[type-arg]
    def number(self, items: list[Token]) -> float:
        return float(items[0])

    def constant(self, items: list[Token]) -> float:
        name = str(items[0])
        if name not in CONSTANTS:
            raise CalcError(f"Unknown constant: {name}")
        return CONSTANTS[name]

    def call(self, items: list[object]) -> float:
        name = str(items[0])
        fn = MATH_TABLE.get(name)
        if fn is None:
            raise CalcError(f"Unknown function: {name}")
        args = [a for a in items[1:] if a is not None]
        return float(fn(*args))

    def add(self, items: list[float]) -> float:
        return items[0] + items[1]

    def sub(self, items: list[float]) -> float:
        return items[0] - items[1]

    def mul(self, items: list[float]) -> float:
        return items[0] * items[1]

    def div(self, items: list[float]) -> float:
        return items[0] / items[1]

    def mod(self, items: list[float]) -> float:
        return items[0] % items[1]

    def pow(self, items: list[float]) -> float:
        return items[0] ** items[1]

    def neg(self, items: list[float]) -> float:
        return -items[0]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def evaluate(expression: str) -> float:
    """Evaluate *expression*; raise CalcError when it is not pure arithmetic."""
    try:
        tree = _parser().parse(expression)
        return float(CalcTransformer().transform(tree))
    except CalcError:
        raise
    except Exception as exc:
        raise CalcError(str(exc)) from exc
