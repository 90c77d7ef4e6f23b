"""Range resolution and validation against the current buffer content."""

from __future__ import annotations

from typing import Union

from spantext.errors import InvalidRangeError, UnresolvedLiteralError

from .document import TextBuffer
from .ranges import SpanRange

Bound = Union[int, str]


def ensure_range(buffer: TextBuffer, start: int, end: int) -> SpanRange:
    length = len(buffer)
    if start < 0 or end < 0:
        raise InvalidRangeError("Negative offset", start=start, end=end, length=length)
    if start > end:
        raise InvalidRangeError("Start after end", start=start, end=end, length=length)
    if end > length:
        raise InvalidRangeError(
            "Offset past end of buffer", start=start, end=end, length=length
        )
    return SpanRange(start, end)


def resolve_literal(buffer: TextBuffer, literal: str) -> int:
    """Offset of the first occurrence of ``literal`` in the buffer right now.

    The result is a plain integer: text appended later does not move it.
    """

    offset = buffer.find(literal)
    if offset < 0:
        raise UnresolvedLiteralError(literal, text_length=len(buffer))
    return offset


def resolve_bound(buffer: TextBuffer, bound: Bound) -> int:
    # bool is an int subclass; reject it so ``True`` is not read as offset 1
    if isinstance(bound, bool):
        raise TypeError("range bound must be int or str, not bool")
    if isinstance(bound, int):
        return bound
    if isinstance(bound, str):
        return resolve_literal(buffer, bound)
    raise TypeError(f"range bound must be int or str, not {type(bound).__name__}")


def resolve_range(buffer: TextBuffer, start: Bound, end: Bound) -> SpanRange:
    return ensure_range(buffer, resolve_bound(buffer, start), resolve_bound(buffer, end))
