"""Grid model: grid dimensions and the per-cell coordinate context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from doodlecss.model.context import Context


@dataclass(frozen=True)
class GridSize:
    """Dimensions of the generated grid.

    A grid with ``z > 1`` runs in layer mode: cells are visited along ``z``
    only, with ``x`` and ``y`` fixed at 1.
    """

    x: int = 1
    y: int = 1
    z: int = 1

    def __post_init__(self) -> None:
        if self.x < 1 or self.y < 1 or self.z < 1:
            raise ValueError(f"Grid dimensions must be positive: {self.x}x{self.y}x{self.z}")

    @property
    def count(self) -> int:
        """Number of cells visited during expansion."""
        if self.z == 1:
            return self.x * self.y
        return self.z

    @property
    def layered(self) -> bool:
        return self.z > 1

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "z": self.z, "count": self.count}

    def __str__(self) -> str:
        if self.layered:
            return f"{self.x}x{self.y}x{self.z}"
        return f"{self.x}x{self.y}"


@dataclass
class Coordinate:
    """Evaluation environment for one grid cell.

    ``context`` is shared by every coordinate of one expansion pass.
    ``extra`` and ``position`` are set transiently while a function call is
    being evaluated.
    """

    x: int
    y: int
    z: int
    count: int
    grid: GridSize
    context: Context = field(default_factory=Context)
    extra: tuple[Any, ...] = ()
    position: int = 0
