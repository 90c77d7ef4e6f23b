"""Render-time geometry hooks for directives that affect layout."""

from .canvas import Canvas, DrawOp, RecordingCanvas
from .line_height import LineHeightCoordinator, LineHeightState
from .margins import draw_bullet, draw_quote, leading_margin
from .metrics import FontMetrics
from .render import RenderPass
from .replacement import (
    draw_image,
    draw_space,
    draw_vertically_aligned,
    image_offset,
    image_size,
    space_size,
    vertical_align_baseline,
)

__all__ = [
    "Canvas",
    "DrawOp",
    "RecordingCanvas",
    "LineHeightCoordinator",
    "LineHeightState",
    "FontMetrics",
    "RenderPass",
    "draw_bullet",
    "draw_quote",
    "leading_margin",
    "draw_image",
    "draw_space",
    "draw_vertically_aligned",
    "image_offset",
    "image_size",
    "space_size",
    "vertical_align_baseline",
]
