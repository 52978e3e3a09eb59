"""doodlecss CLI entry point: Click group with subcommands."""

import logging

import click

from doodlecss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="doodlecss")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """doodlecss - compile doodle token trees into grid CSS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from doodlecss.cli.compile import compile_tokens  # noqa: E402
from doodlecss.cli.inspect import inspect  # noqa: E402

cli.add_command(compile_tokens)
cli.add_command(inspect)
