"""Custom function registry: grid-aware value functions such as ``@index`` and ``@pick``.

Every entry is curried: the factory receives the cell's Coordinate and
returns the callable that is applied to the argument values. Functions that
need to remember something from one cell to the next keep it in
``coord.context``; the random ones draw from ``coord.context.random``.
"""

from __future__ import annotations

from typing import Any, Callable

from doodlecss.functions.base import FunctionRegistry
from doodlecss.functions.calc import CalcError, evaluate
from doodlecss.model.grid import Coordinate
from doodlecss.shapes import get_shape
from doodlecss.utils import format_number, split_unit, to_number

__all__ = ["custom_functions"]

custom_functions = FunctionRegistry("custom")

_LAST_PICK = "last_pick"
_LAST_RAND = "last_rand"


# ---------------------------------------------------------------------------
# Position
# ---------------------------------------------------------------------------


@custom_functions.function("index", "i")
def _index(coord: Coordinate) -> Callable[..., Any]:
    return lambda *args: coord.count


@custom_functions.function("row", "x")
def _row(coord: Coordinate) -> Callable[..., Any]:
    return lambda *args: coord.x


@custom_functions.function("col", "y")
def _col(coord: Coordinate) -> Callable[..., Any]:
    return lambda *args: coord.y


@custom_functions.function("depth", "z")
def _depth(coord: Coordinate) -> Callable[..., Any]:
    return lambda *args: coord.z


@custom_functions.function("size", "I")
def _size(coord: Coordinate) -> Callable[..., Any]:
    return lambda *args: coord.grid.count


@custom_functions.function("size-row", "X")
def _size_row(coord: Coordinate) -> Callable[..., Any]:
    return lambda *args: coord.grid.x


@custom_functions.function("size-col", "Y")
def _size_col(coord: Coordinate) -> Callable[..., Any]:
    return lambda *args: coord.grid.y


@custom_functions.function("size-depth", "Z")
def _size_depth(coord: Coordinate) -> Callable[..., Any]:
    return lambda *args: coord.grid.z


@custom_functions.function("n")
def _n(coord: Coordinate) -> Callable[..., Any]:
    """Current iteration inside ``@repeat`` / ``@multiple``."""
    return lambda *args: coord.extra[0] if coord.extra else None


@custom_functions.function("N")
def _total(coord: Coordinate) -> Callable[..., Any]:
    return lambda *args: coord.extra[1] if len(coord.extra) > 1 else None


# ---------------------------------------------------------------------------
# Picking
# ---------------------------------------------------------------------------


@custom_functions.function("pick", "p")
def _pick(coord: Coordinate) -> Callable[..., Any]:
    def pick(*args: Any) -> Any:
        if not args:
            return None
        value = coord.context.random.choice(args)
        coord.context.set(_LAST_PICK, value)
        return value

    return pick


@custom_functions.function("pick-n", "pn")
def _pick_n(coord: Coordinate) -> Callable[..., Any]:
    """Cycle through the arguments, one step per evaluation."""

    def pick_n(*args: Any) -> Any:
        if not args:
            return None
        key = f"pick-n:{coord.position}"
        counter = coord.context.get(key, 0)
        coord.context.set(key, counter + 1)
        value = args[counter % len(args)]
        coord.context.set(_LAST_PICK, value)
        return value

    return pick_n


@custom_functions.function("pick-d", "pd")
def _pick_d(coord: Coordinate) -> Callable[..., Any]:
    """Pick without repetition until every argument has been used."""

    def pick_d(*args: Any) -> Any:
        if not args:
            return None
        key = f"pick-d:{coord.position}"
        pool = coord.context.get(key)
        if not pool:
            pool = list(args)
            coord.context.random.shuffle(pool)
        value = pool.pop()
        coord.context.set(key, pool)
        coord.context.set(_LAST_PICK, value)
        return value

    return pick_d


@custom_functions.function("last-pick", "lp")
def _last_pick(coord: Coordinate) -> Callable[..., Any]:
    return lambda *args: coord.context.get(_LAST_PICK)


# ---------------------------------------------------------------------------
# Randomness
# ---------------------------------------------------------------------------


def _bounds(args: tuple[Any, ...]) -> tuple[float, float, str]:
    start, stop = (0, args[0]) if len(args) == 1 else args[:2]
    low, low_unit = split_unit(start)
    high, high_unit = split_unit(stop)
    return low, high, low_unit or high_unit


@custom_functions.function("rand", "r")
def _rand(coord: Coordinate) -> Callable[..., Any]:
    def rand(*args: Any) -> str:
        low, high, unit = _bounds(args or (1,))
        value = format_number(coord.context.random.uniform(low, high), 4) + unit
        coord.context.set(_LAST_RAND, value)
        return value

    return rand


@custom_functions.function("rand-int", "ri")
def _rand_int(coord: Coordinate) -> Callable[..., Any]:
    def rand_int(*args: Any) -> str:
        low, high, unit = _bounds(args or (1,))
        low, high = sorted((int(low), int(high)))
        value = f"{coord.context.random.randint(low, high)}{unit}"
        coord.context.set(_LAST_RAND, value)
        return value

    return rand_int


@custom_functions.function("last-rand", "lr")
def _last_rand(coord: Coordinate) -> Callable[..., Any]:
    return lambda *args: coord.context.get(_LAST_RAND)


# ---------------------------------------------------------------------------
# Computation
# ---------------------------------------------------------------------------


@custom_functions.function("calc")
def _calc(coord: Coordinate) -> Callable[..., Any]:
    """Evaluate plain arithmetic; anything else is left to the browser's calc()."""

    def calc(*args: Any) -> str | None:
        expression = ", ".join(str(a) for a in args)
        if not expression:
            return None
        try:
            return format_number(evaluate(expression))
        except CalcError:
            return f"calc({expression})"

    return calc


@custom_functions.function("hex")
def _hex(coord: Coordinate) -> Callable[..., Any]:
    return lambda value=0, *args: format(int(to_number(value)), "x")


@custom_functions.function("shape")
def _shape(coord: Coordinate) -> Callable[..., Any]:
    return lambda name="", *args: get_shape(name, *args)


# ---------------------------------------------------------------------------
# Repetition (lazy: arguments arrive as thunks)
# ---------------------------------------------------------------------------


def _repeat_with(separator: str) -> Callable[[Coordinate], Callable[..., Any]]:
    def factory(coord: Coordinate) -> Callable[..., Any]:
        def repeat(times: Callable[..., Any] | None = None, action: Callable[..., Any] | None = None) -> str | None:
            if times is None or action is None:
                return None
            total = max(0, int(to_number(times())))
            results = []
            for i in range(1, total + 1):
                value = action(i, total)
                if value is not None and value != "":
                    results.append(str(value))
            return separator.join(results)

        return repeat

    return factory


custom_functions.register("repeat", _repeat_with(""), lazy=True)
custom_functions.register("multiple", _repeat_with(","), lazy=True, aliases=("m",))
