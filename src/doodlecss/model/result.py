"""Compilation result: grouped CSS text plus side-channel metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from doodlecss.model.grid import GridSize


@dataclass
class Styles:
    """The four independently concatenable CSS text buffers."""

    host: str = ""
    container: str = ""
    cells: str = ""
    keyframes: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "host": self.host,
            "container": self.container,
            "cells": self.cells,
            "keyframes": self.keyframes,
        }

    def __str__(self) -> str:
        return "".join((self.host, self.container, self.cells, self.keyframes))


@dataclass
class CompileResult:
    """Output of one ``generate`` run."""

    styles: Styles
    grid: GridSize
    props: dict[str, bool] = field(default_factory=dict)

    @property
    def has_animation(self) -> bool:
        return self.props.get("has_animation", False)

    @property
    def has_transition(self) -> bool:
        return self.props.get("has_transition", False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "props": dict(self.props),
            "styles": self.styles.to_dict(),
            "grid": self.grid.to_dict(),
        }
