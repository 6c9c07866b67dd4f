"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objtasks.selector.model import PartKind


class SelectorError(Exception):
    """Base error for all selector builder failures."""


class DuplicatePartError(SelectorError):
    """Raised when element, id or pseudo-element is set a second time."""

    def __init__(self, kind: PartKind) -> None:
        self.kind = kind
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            "time inside the selector"
        )


class OrderError(SelectorError):
    """Raised when a part is added after a part that must follow it."""

    def __init__(self, kind: PartKind, conflicting: PartKind) -> None:
        self.kind = kind
        self.conflicting = conflicting
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
