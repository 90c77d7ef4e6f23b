"""Exception hierarchy shared by the builder, buffer, and image layers."""

from __future__ import annotations

from typing import Optional


class SpanTextError(RuntimeError):
    """Base class for every error raised by spantext."""


class InvalidRangeError(SpanTextError):
    """Raised when a span range falls outside ``0 <= start <= end <= length``."""

    def __init__(self, message: str, *, start: int, end: int, length: int) -> None:
        super().__init__(f"{message} (start={start}, end={end}, length={length})")
        self.start = start
        self.end = end
        self.length = length


class UnresolvedLiteralError(SpanTextError):
    """Raised when a literal range bound does not occur in the buffer."""

    def __init__(self, literal: str, *, text_length: int) -> None:
        super().__init__(f"Literal {literal!r} not found in buffer")
        self.literal = literal
        self.text_length = text_length


class ImageResolutionError(SpanTextError):
    """Raised by image backends; callers log it and render nothing."""

    def __init__(self, message: str, *, source: object | None = None) -> None:
        super().__init__(message)
        self.source = source


class DirectiveError(SpanTextError, ValueError):
    """Raised when a directive is constructed with invalid parameters."""

    def __init__(self, message: str, *, kind: Optional[str] = None) -> None:
        super().__init__(message)
        self.kind = kind


class BufferFrozenError(SpanTextError):
    """Raised when text is appended to a buffer that was handed off."""


class BuilderClosedError(SpanTextError):
    """Raised when a builder is mutated after ``build()``."""


__all__ = [
    "SpanTextError",
    "InvalidRangeError",
    "UnresolvedLiteralError",
    "ImageResolutionError",
    "DirectiveError",
    "BufferFrozenError",
    "BuilderClosedError",
]
