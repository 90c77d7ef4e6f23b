"""Geometry for directives that replace their text with something drawn."""

from __future__ import annotations

from typing import Optional

from spantext.directives import Align, InlineSpace
from spantext.images.sources import Drawable

from .canvas import Canvas
from .metrics import FontMetrics, half


def image_size(
    drawable: Optional[Drawable], fm: Optional[FontMetrics], align: Align
) -> int:
    """Width of an inline image, growing ``fm`` if the image is taller than the line.

    An unresolved image takes no room.
    """

    if drawable is None:
        return 0
    height = drawable.height
    if fm is not None:
        line_height = fm.bottom - fm.top
        if line_height < height:
            if align == Align.TOP:
                fm.bottom = height + fm.top
            elif align == Align.CENTER:
                fm.top = -half(height) - line_height // 4
                fm.bottom = half(height) - line_height // 4
            else:
                fm.top = -height + fm.bottom
            fm.ascent = fm.top
            fm.descent = fm.bottom
    return drawable.width


def image_offset(height: int, top: int, baseline: int, bottom: int, align: Align) -> float:
    """Y translation for an image of ``height`` drawn in the line ``[top, bottom]``."""

    line_height = bottom - top
    if height >= line_height:
        return top
    if align == Align.TOP:
        return top
    if align == Align.CENTER:
        return half(bottom + top - height)
    if align == Align.BASELINE:
        return baseline - height
    return bottom - height


def draw_image(
    canvas: Canvas,
    drawable: Optional[Drawable],
    align: Align,
    *,
    x: float,
    top: int,
    baseline: int,
    bottom: int,
) -> None:
    if drawable is None:
        return
    canvas.draw_drawable(
        drawable, x, image_offset(drawable.height, top, baseline, bottom, align)
    )


def space_size(space: InlineSpace) -> int:
    return space.width


def draw_space(
    canvas: Canvas, space: InlineSpace, *, x: float, top: int, bottom: int
) -> None:
    canvas.draw_rect(x, top, x + space.width, bottom, color=space.color)


def vertical_align_baseline(fm: FontMetrics, *, top: int, baseline: int, bottom: int) -> int:
    """Baseline that centers text with metrics ``fm`` inside ``[top, bottom]``."""

    text_center = half(baseline + fm.descent + baseline + fm.ascent)
    return baseline - (text_center - half(bottom + top))


def draw_vertically_aligned(
    canvas: Canvas,
    text: str,
    fm: FontMetrics,
    *,
    x: float,
    top: int,
    baseline: int,
    bottom: int,
) -> None:
    canvas.draw_text(
        text, x, vertical_align_baseline(fm, top=top, baseline=baseline, bottom=bottom)
    )


__all__ = [
    "image_size",
    "image_offset",
    "draw_image",
    "space_size",
    "draw_space",
    "vertical_align_baseline",
    "draw_vertically_aligned",
]
