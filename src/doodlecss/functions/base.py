"""Function registry: named, coordinate-aware callables with a declared calling convention."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator

from doodlecss.model.grid import Coordinate

# fn(coord) -> callable over the resolved argument list
Factory = Callable[[Coordinate], Callable[..., Any]]


@dataclass(frozen=True)
class FunctionSpec:
    """A registry entry.

    Eager functions receive already-composed argument values. Lazy functions
    receive one thunk per argument; calling ``thunk(*extra)`` composes that
    argument on demand with ``extra`` exposed to nested calls.
    """

    name: str
    factory: Factory
    lazy: bool = False

    def bind(self, coord: Coordinate) -> Callable[..., Any]:
        return self.factory(coord)


class FunctionRegistry:
    """Maps function names (without the ``@`` marker) to FunctionSpecs."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._functions: dict[str, FunctionSpec] = {}

    def register(
        self,
        name: str,
        factory: Factory,
        *,
        lazy: bool = False,
        aliases: tuple[str, ...] = (),
    ) -> FunctionSpec:
        """Register *factory* under *name* and any *aliases*."""
        spec = FunctionSpec(name=name, factory=factory, lazy=lazy)
        for key in (name, *aliases):
            self._functions[key] = spec
        return spec

    def function(self, name: str, *aliases: str, lazy: bool = False) -> Callable[[Factory], Factory]:
        """Decorator form of :meth:`register`."""

        def decorator(factory: Factory) -> Factory:
            self.register(name, factory, lazy=lazy, aliases=aliases)
            return factory

        return decorator

    def resolve(self, name: str) -> FunctionSpec | None:
        """Look up a function by name; a leading ``@`` is ignored."""
        if name.startswith("@"):
            name = name[1:]
        return self._functions.get(name)

    def names(self) -> list[str]:
        return sorted(self._functions)

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)
