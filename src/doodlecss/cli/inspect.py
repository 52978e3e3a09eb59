"""CLI command: doodlecss inspect -- summarize a token tree."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

import click

from doodlecss.cli.compile import read_tokens
from doodlecss.engine import Rules
from doodlecss.model.context import Context
from doodlecss.model.grid import Coordinate, GridSize
from doodlecss.model.tokens import CondToken, KeyframesToken, PseudoToken, RuleToken, Token


def _walk(tokens: Iterable[Token]) -> Iterable[Token]:
    for token in tokens:
        yield token
        if isinstance(token, (RuleToken, PseudoToken, CondToken)):
            yield from _walk(token.styles)


@click.command()
@click.argument("tokens_file", type=click.Path(exists=True, dir_okay=False))
def inspect(tokens_file: str) -> None:
    """Show the token tree's structure and the grid it declares."""
    tokens = read_tokens(tokens_file)

    rules = Rules(tokens)
    rules.compose(Coordinate(x=1, y=1, z=1, count=1, grid=GridSize(), context=Context()), initial=True)

    kinds = Counter(token.type for token in _walk(tokens))
    click.echo(f"Tokens: {len(tokens)} top-level, {sum(kinds.values())} total")
    for kind in ("rule", "pseudo", "cond", "keyframes"):
        if kinds[kind]:
            click.echo(f"  {kind}: {kinds[kind]}")
    click.echo(f"Grid:  {rules.grid if rules.grid is not None else '(default)'}")
    click.echo()

    click.echo("Top-level tokens:")
    for token in tokens:
        if isinstance(token, RuleToken):
            click.echo(f"  rule {token.property}")
        elif isinstance(token, PseudoToken):
            click.echo(f"  pseudo {token.selector} ({len(token.styles)} rules)")
        elif isinstance(token, CondToken):
            click.echo(f"  cond {token.name} ({len(token.styles)} tokens)")
        elif isinstance(token, KeyframesToken):
            steps = ", ".join(step.name for step in token.steps)
            click.echo(f"  keyframes {token.name} [{steps}]")
