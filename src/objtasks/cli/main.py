"""objtasks CLI entry point: Click group with subcommands."""

import logging

import click

from objtasks import __version__
from objtasks.config import ObjTasksConfig


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """objtasks - build CSS selectors and other small objects."""
    config = ObjTasksConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from objtasks.cli.selector import selector  # noqa: E402
from objtasks.cli.rectangle import rectangle  # noqa: E402

cli.add_command(selector)
cli.add_command(rectangle)
