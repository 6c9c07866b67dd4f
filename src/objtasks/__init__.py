"""objtasks: a CSS selector builder plus small object helpers."""

from objtasks.rectangle import Rectangle
from objtasks.selector import (
    COMBINATORS,
    DuplicatePartError,
    OrderError,
    PartKind,
    SelectorBuilder,
    SelectorError,
    SelectorFragment,
    css_selector_builder,
)
from objtasks.serialization import SerializationError, from_json, get_json

__version__ = "0.1.0"

__all__ = [
    "COMBINATORS",
    "DuplicatePartError",
    "OrderError",
    "PartKind",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "SelectorFragment",
    "SerializationError",
    "css_selector_builder",
    "from_json",
    "get_json",
]
