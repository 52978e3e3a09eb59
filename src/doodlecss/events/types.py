"""Event types emitted while a token tree is compiled."""

from dataclasses import dataclass

from doodlecss.model.grid import GridSize


@dataclass(frozen=True)
class CompileStarted:
    grid: GridSize
    token_count: int


@dataclass(frozen=True)
class GridDiscovered:
    grid: GridSize


@dataclass(frozen=True)
class CellComposed:
    x: int
    y: int
    z: int
    count: int


@dataclass(frozen=True)
class CompileCompleted:
    grid: GridSize
    cells: int
    has_animation: bool
    has_transition: bool
