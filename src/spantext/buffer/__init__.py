"""Text buffer and range resolution used by the span builder."""

from .document import TextBuffer
from .ranges import SpanRange
from .validation import (
    Bound,
    ensure_range,
    resolve_bound,
    resolve_literal,
    resolve_range,
)

__all__ = [
    "TextBuffer",
    "SpanRange",
    "Bound",
    "ensure_range",
    "resolve_bound",
    "resolve_literal",
    "resolve_range",
]
