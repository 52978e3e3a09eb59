"""Two-pass grid driver: discover the grid size, then compose every cell."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from doodlecss.config import CompilerConfig
from doodlecss.engine.rules import Rules
from doodlecss.events import types as events
from doodlecss.events.bus import EventBus
from doodlecss.model.context import Context
from doodlecss.model.grid import Coordinate, GridSize
from doodlecss.model.result import CompileResult
from doodlecss.model.tokens import Token
from doodlecss.properties import parse_grid

logger = logging.getLogger(__name__)


def resolve_grid(grid_size: GridSize | str | None, config: CompilerConfig) -> GridSize:
    """Accept a GridSize, a grid string such as ``"5x5"``, or None for the default."""
    if isinstance(grid_size, GridSize):
        return grid_size
    if grid_size is None:
        grid_size = config.default_grid
    return parse_grid(grid_size, config.max_grid)


def iter_coordinates(grid: GridSize, context: Context) -> Iterator[Coordinate]:
    """Visit cells row-major (x, then y), or along z alone in layer mode."""
    count = 0
    if not grid.layered:
        for x in range(1, grid.x + 1):
            for y in range(1, grid.y + 1):
                count += 1
                yield Coordinate(x=x, y=y, z=1, count=count, grid=grid, context=context)
    else:
        for z in range(1, grid.z + 1):
            count += 1
            yield Coordinate(x=1, y=1, z=z, count=count, grid=grid, context=context)


def generate(
    tokens: Iterable[Token],
    grid_size: GridSize | str | None = None,
    *,
    config: CompilerConfig | None = None,
    event_bus: EventBus | None = None,
    rules: Rules | None = None,
) -> CompileResult:
    """Compile a token tree into grouped CSS for every cell of the grid.

    A grid directive found in the tokens overrides *grid_size*; when neither
    is given ``config.default_grid`` applies. A prepared *rules* instance
    must have been built from the same *tokens*.
    """
    tokens = tuple(tokens)
    config = config or CompilerConfig()
    event_bus = event_bus or EventBus()
    if rules is None:
        rules = Rules(tokens, config=config)
    elif rules.tokens != tokens:
        raise ValueError("rules were built from a different token tree")

    grid = resolve_grid(grid_size, config)
    event_bus.emit(events.CompileStarted(grid=grid, token_count=len(rules.tokens)))

    discovery = Coordinate(
        x=1, y=1, z=1, count=1, grid=GridSize(), context=Context(seed=config.seed)
    )
    rules.compose(discovery, initial=True)
    if rules.grid is not None:
        grid = rules.grid
        logger.debug("Discovered grid %s from tokens", grid)
        event_bus.emit(events.GridDiscovered(grid=grid))

    rules.reset()

    context = Context(seed=config.seed)
    cells = 0
    for coord in iter_coordinates(grid, context):
        rules.compose(coord)
        cells += 1
        event_bus.emit(events.CellComposed(x=coord.x, y=coord.y, z=coord.z, count=coord.count))
    logger.debug("Composed %d cells for grid %s", cells, grid)

    result = rules.output(grid)
    event_bus.emit(
        events.CompileCompleted(
            grid=grid,
            cells=cells,
            has_animation=result.has_animation,
            has_transition=result.has_transition,
        )
    )
    return result
