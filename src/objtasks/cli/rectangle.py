"""CLI command: objtasks rectangle -- compute a rectangle's area."""

from __future__ import annotations

from dataclasses import asdict

import click

from objtasks.rectangle import Rectangle
from objtasks.serialization import get_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "json_output", is_flag=True, help="Print the rectangle as JSON")
def rectangle(width: float, height: float, json_output: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width, height)
    if json_output:
        click.echo(get_json({**asdict(rect), "area": rect.area}))
    else:
        click.echo(f"{rect.area:g}")
