"""Selector model: PartKind and the immutable SelectorFragment record."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any

from objtasks.selector.errors import DuplicatePartError, OrderError

log = logging.getLogger("objtasks.selector")


class PartKind(Enum):
    """The six kinds of compound selector parts, in required order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def precedence(self) -> int:
        """Position in the order element, id, class, attribute, pseudo-class, pseudo-element."""
        return _PRECEDENCE[self]

    @property
    def repeatable(self) -> bool:
        return self in _REPEATABLE

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_PRECEDENCE = {kind: index for index, kind in enumerate(PartKind)}

_REPEATABLE = frozenset({PartKind.CLASS, PartKind.ATTRIBUTE, PartKind.PSEUDO_CLASS})

_AFFIXES = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}

# Dataclass field holding each kind's value(s).
_FIELDS = {
    PartKind.ELEMENT: "element_part",
    PartKind.ID: "id_part",
    PartKind.CLASS: "class_parts",
    PartKind.ATTRIBUTE: "attr_parts",
    PartKind.PSEUDO_CLASS: "pseudo_class_parts",
    PartKind.PSEUDO_ELEMENT: "pseudo_element_part",
}


@dataclass(frozen=True)
class SelectorFragment:
    """One link of a selector chain.

    Every mutator returns a new fragment carrying all parts of the receiver
    plus the new value; the receiver itself is never modified, so any
    fragment can be reused as the base of several chains.

    Attributes:
        element_part: Element (type) name, at most one.
        id_part: Id without the leading ``#``, at most one.
        class_parts: Class names in call order.
        attr_parts: Attribute expressions without brackets, in call order.
        pseudo_class_parts: Pseudo-classes without the leading ``:``.
        pseudo_element_part: Pseudo-element without the leading ``::``.
        combined_expression: Rendered text of two fragments joined by a
            combinator. Rendered before every other part.
    """

    element_part: str | None = None
    id_part: str | None = None
    class_parts: tuple[str, ...] = ()
    attr_parts: tuple[str, ...] = ()
    pseudo_class_parts: tuple[str, ...] = ()
    pseudo_element_part: str | None = None
    combined_expression: str | None = None

    # --- mutators -------------------------------------------------------------

    def element(self, value: str) -> SelectorFragment:
        return self._add(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorFragment:
        return self._add(PartKind.ID, value)

    def class_(self, value: str) -> SelectorFragment:
        return self._add(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorFragment:
        return self._add(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorFragment:
        return self._add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorFragment:
        return self._add(PartKind.PSEUDO_ELEMENT, value)

    # --- inspection -----------------------------------------------------------

    def values(self, kind: PartKind) -> tuple[str, ...]:
        """Return the raw values stored for *kind*, in call order."""
        value = getattr(self, _FIELDS[kind])
        if kind.repeatable:
            return value
        return () if value is None else (value,)

    def kinds(self) -> list[PartKind]:
        """Return the part kinds set on this fragment, in precedence order."""
        return [kind for kind in PartKind if self.values(kind)]

    def stringify(self) -> str:
        rendered = [self.combined_expression or ""]
        for kind in PartKind:
            rendered.extend(kind.render(value) for value in self.values(kind))
        return "".join(rendered)

    def to_dict(self) -> dict[str, Any]:
        return {"selector": self.stringify(), **asdict(self)}

    def __str__(self) -> str:
        return self.stringify()

    # --- internals ------------------------------------------------------------

    def _add(self, kind: PartKind, value: str) -> SelectorFragment:
        field_name = _FIELDS[kind]
        if not kind.repeatable and self.values(kind):
            log.debug("Rejected duplicate %s part %r on %r", kind.value, value, self.stringify())
            raise DuplicatePartError(kind)

        for present in self.kinds():
            if present.precedence > kind.precedence:
                log.debug(
                    "Rejected %s part %r after %s on %r",
                    kind.value,
                    value,
                    present.value,
                    self.stringify(),
                )
                raise OrderError(kind, present)

        if kind.repeatable:
            return replace(self, **{field_name: getattr(self, field_name) + (value,)})
        return replace(self, **{field_name: value})
