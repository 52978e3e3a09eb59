"""Key-value context shared across the cells of one expansion."""

from __future__ import annotations

import random
from typing import Any


class Context:
    """Key-value store carrying state from cell to cell during one expansion.

    Stateful functions (``@pick-n``, ``@last-rand`` ...) persist their
    cross-cell state here. The context also owns the run's random number
    generator so a fixed seed reproduces the same output.
    """

    def __init__(self, initial: dict[str, Any] | None = None, *, seed: int | None = None) -> None:
        self._data: dict[str, Any] = dict(initial) if initial else {}
        self.random = random.Random(seed)

    def set(self, key: str, value: Any) -> None:
        """Set a single key to the given value."""
        self._data[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieve a value by key, returning *default* if absent."""
        return self._data.get(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"Context(keys={list(self._data.keys())})"
