"""Compiler configuration."""

from __future__ import annotations

from dataclasses import dataclass

from doodlecss.properties.transforms import MAX_GRID


@dataclass(frozen=True)
class CompilerConfig:
    default_grid: str = "1x1"  # used when neither caller nor tokens give a grid
    max_grid: int = MAX_GRID
    seed: int | None = None  # None draws a fresh random sequence per run
