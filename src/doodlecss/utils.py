"""Number helpers shared by the function library, shapes and property transforms."""

from __future__ import annotations

import math
import re
from typing import Any

__all__ = ["format_number", "split_unit", "to_number"]

_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)(.*?)\s*$")


def split_unit(value: Any) -> tuple[float, str]:
    """Split ``"10px"`` into ``(10.0, "px")``; non-numeric input gives ``(0.0, "")``."""
    if isinstance(value, (int, float)):
        return float(value), ""
    match = _NUMBER_RE.match(str(value))
    if not match:
        return 0.0, ""
    return float(match.group(1)), match.group(2)


def to_number(value: Any, default: float = 0.0) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMBER_RE.match(str(value))
    if not match:
        return default
    return float(match.group(1))


def format_number(value: float, precision: int = 6) -> str:
    """Render a number the way CSS expects: no trailing ``.0``, bounded decimals."""
    if not math.isfinite(value):
        return str(value)
    rounded = round(float(value), precision)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{precision}f}".rstrip("0").rstrip(".")
