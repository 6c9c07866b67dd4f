"""CLI command: objtasks selector -- build a selector from part tokens."""

from __future__ import annotations

import sys
from dataclasses import replace

import click

from objtasks.config import ObjTasksConfig
from objtasks.selector import COMBINATORS, SelectorError, SelectorFragment, css_selector_builder
from objtasks.serialization import get_json

# CLI kind name -> SelectorFragment method name
_MUTATORS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


def build_selector(tokens: list[str], descendant_token: str = "descendant") -> SelectorFragment:
    """Build a fragment from ``kind=value`` tokens and combinator tokens.

    Compound selectors separated by combinators are combined left to right.
    Raises click.BadParameter for malformed tokens and SelectorError for
    duplicate or misordered parts.
    """
    builder = css_selector_builder
    segments: list[SelectorFragment] = []
    combinators: list[str] = []
    current = builder.empty()

    for token in tokens:
        combinator = " " if token == descendant_token else token
        if combinator in COMBINATORS:
            if current == builder.empty():
                raise click.BadParameter(f"Combinator {token!r} must follow a selector")
            segments.append(current)
            combinators.append(combinator)
            current = builder.empty()
            continue

        kind, sep, value = token.partition("=")
        if not sep or kind not in _MUTATORS:
            raise click.BadParameter(
                f"Expected KIND=VALUE with KIND one of {', '.join(_MUTATORS)}, got {token!r}"
            )
        current = getattr(current, _MUTATORS[kind])(value)

    if combinators and current == builder.empty():
        raise click.BadParameter(f"Combinator {combinators[-1]!r} must be followed by a selector")
    segments.append(current)

    result = segments[0]
    for combinator, segment in zip(combinators, segments[1:]):
        result = builder.combine(result, combinator, segment)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("--json", "json_output", is_flag=True, help="Print the selector parts as JSON")
@click.pass_context
def selector(ctx: click.Context, tokens: tuple[str, ...], json_output: bool) -> None:
    """Build a CSS selector from TOKENS.

    Each token is KIND=VALUE (element, id, class, attr, pseudo-class,
    pseudo-element) or a combinator: +, ~, > or "descendant".

    \b
    Example:
        objtasks selector element=a attr='href$=".png"' pseudo-class=focus
    """
    config = replace(ctx.obj or ObjTasksConfig(), json_output=json_output)

    try:
        fragment = build_selector(list(tokens), descendant_token=config.descendant_token)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if config.json_output:
        click.echo(get_json(fragment.to_dict()))
    else:
        click.echo(fragment.stringify())
