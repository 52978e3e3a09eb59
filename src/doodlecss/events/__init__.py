"""Event system: bus and event types for the compilation lifecycle."""

from doodlecss.events.bus import EventBus
from doodlecss.events.types import (
    CellComposed,
    CompileCompleted,
    CompileStarted,
    GridDiscovered,
)

__all__ = [
    "EventBus",
    "CellComposed",
    "CompileCompleted",
    "CompileStarted",
    "GridDiscovered",
]
