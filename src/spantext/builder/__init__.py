"""Span builder façade and the styled text it produces."""

from .span_builder import ImageLike, SpanBuilder, as_image_source
from .styled import Attachment, StyledText
from .surface import RenderingSurface

__all__ = [
    "Attachment",
    "ImageLike",
    "RenderingSurface",
    "SpanBuilder",
    "StyledText",
    "as_image_source",
]
