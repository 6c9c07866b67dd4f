from objtasks.selector.builder import COMBINATORS, SelectorBuilder, css_selector_builder
from objtasks.selector.errors import DuplicatePartError, OrderError, SelectorError
from objtasks.selector.model import PartKind, SelectorFragment

__all__ = [
    "COMBINATORS",
    "DuplicatePartError",
    "OrderError",
    "PartKind",
    "SelectorBuilder",
    "SelectorError",
    "SelectorFragment",
    "css_selector_builder",
]
