"""Fluent builder for styled text: ranges, directives, and render hooks."""

from spantext.builder import Attachment, RenderingSurface, SpanBuilder, StyledText
from spantext.buffer import SpanRange
from spantext.config import BuilderDefaults
from spantext.errors import (
    BufferFrozenError,
    BuilderClosedError,
    DirectiveError,
    ImageResolutionError,
    InvalidRangeError,
    SpanTextError,
    UnresolvedLiteralError,
)

__all__ = [
    "Attachment",
    "BufferFrozenError",
    "BuilderClosedError",
    "BuilderDefaults",
    "DirectiveError",
    "ImageResolutionError",
    "InvalidRangeError",
    "RenderingSurface",
    "SpanBuilder",
    "SpanRange",
    "SpanTextError",
    "StyledText",
    "UnresolvedLiteralError",
]

__version__ = "0.1.0"
