"""Stateless facade for starting and combining selector chains."""

from __future__ import annotations

import logging

from objtasks.selector.model import SelectorFragment

log = logging.getLogger("objtasks.selector")

# Descendant, next-sibling, subsequent-sibling and child.
COMBINATORS = (" ", "+", "~", ">")

_EMPTY = SelectorFragment()


class SelectorBuilder:
    """Entry point for building CSS compound and combined selectors.

    Each method starts a fresh chain, so one builder can be shared freely::

        builder.id("main").class_("container").class_("editable").stringify()
        # => '#main.container.editable'

        builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        ).stringify()
        # => 'div#main + table#data'
    """

    def empty(self) -> SelectorFragment:
        return _EMPTY

    def element(self, value: str) -> SelectorFragment:
        return _EMPTY.element(value)

    def id(self, value: str) -> SelectorFragment:
        return _EMPTY.id(value)

    def class_(self, value: str) -> SelectorFragment:
        return _EMPTY.class_(value)

    def attr(self, value: str) -> SelectorFragment:
        return _EMPTY.attr(value)

    def pseudo_class(self, value: str) -> SelectorFragment:
        return _EMPTY.pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorFragment:
        return _EMPTY.pseudo_element(value)

    def combine(
        self, left: SelectorFragment, combinator: str, right: SelectorFragment
    ) -> SelectorFragment:
        """Join two fragments with *combinator*.

        The result holds only the rendered text of both operands. Parts
        added to it afterwards are rendered after that text and checked
        only against each other.
        """
        expression = f"{left.stringify()} {combinator} {right.stringify()}"
        log.debug("Combined selector %r", expression)
        return SelectorFragment(combined_expression=expression)


css_selector_builder = SelectorBuilder()
