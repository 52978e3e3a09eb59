"""CLI command: doodlecss compile -- turn a JSON token file into CSS."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from doodlecss.config import CompilerConfig
from doodlecss.engine import generate
from doodlecss.model.result import CompileResult
from doodlecss.model.tokens import Token
from doodlecss.parser import ParseError, load_tokens


def read_tokens(path: str) -> tuple[Token, ...]:
    """Load a token tree from a JSON file, exiting with status 1 on bad input."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON: {exc}", err=True)
        sys.exit(1)

    # a bare list, or an object carrying the list under "tokens"
    if isinstance(data, dict) and "tokens" in data:
        data = data["tokens"]

    try:
        return load_tokens(data)
    except ParseError as exc:
        click.echo(f"Token error: {exc}", err=True)
        sys.exit(1)


def format_css(result: CompileResult) -> str:
    sections = [
        ("host", result.styles.host),
        ("container", result.styles.container),
        ("cells", result.styles.cells),
        ("keyframes", result.styles.keyframes),
    ]
    return "\n".join(f"/* {name} */\n{css}" for name, css in sections if css)


@click.command("compile")
@click.argument("tokens_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--grid", "grid_size", default=None, help="Grid size, e.g. 5x5 or 1x1x10.")
@click.option("--seed", type=int, default=None, help="Seed for random functions.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["css", "json"]),
    default="css",
    show_default=True,
    help="Output format.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write output to a file instead of stdout.",
)
def compile_tokens(
    tokens_file: str,
    grid_size: str | None,
    seed: int | None,
    output_format: str,
    output: str | None,
) -> None:
    """Compile a JSON token tree into grouped CSS."""
    tokens = read_tokens(tokens_file)
    config = CompilerConfig(seed=seed)

    result = generate(tokens, grid_size, config=config)

    if output_format == "json":
        text = json.dumps(result.to_dict(), indent=2)
    else:
        text = format_css(result)

    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        click.echo(f"Wrote {output} ({result.grid}, {result.grid.count} cells)", err=True)
    else:
        click.echo(text)
