"""Per-render-pass state handed to every layout hook."""

from __future__ import annotations

from typing import Optional

from spantext.builder.styled import Attachment
from spantext.directives import (
    Bullet,
    InlineImage,
    InlineSpace,
    LeadingMargin,
    LineHeight,
    QuoteStripe,
)
from spantext.images import Drawable, DrawableCache, ImageBackend, resolve_drawable

from .canvas import Canvas
from .line_height import LineHeightCoordinator
from .margins import draw_bullet, draw_quote, leading_margin
from .metrics import FontMetrics
from .replacement import draw_image, draw_space, image_size, space_size


class RenderPass:
    """Everything a single layout/draw pass over one styled text shares.

    A host creates one per pass. The drawable cache may be shared between
    passes; the line-height coordinator never is.
    """

    def __init__(
        self,
        *,
        backend: Optional[ImageBackend] = None,
        cache: Optional[DrawableCache] = None,
    ) -> None:
        self.backend = backend
        self.cache = cache if cache is not None else DrawableCache()
        self.line_heights = LineHeightCoordinator()

    def drawable_for(self, attachment: Attachment) -> Optional[Drawable]:
        directive = attachment.directive
        if not isinstance(directive, InlineImage):
            raise TypeError(f"{attachment.kind} attachments carry no drawable")
        return self.cache.get_or_resolve(
            attachment.key, lambda: resolve_drawable(directive.source, self.backend)
        )

    def choose_height(
        self,
        attachment: Attachment,
        fm: FontMetrics,
        *,
        line_end: int,
        span_start_v: int = 0,
        v: int = 0,
    ) -> FontMetrics:
        directive = attachment.directive
        if not isinstance(directive, LineHeight):
            raise TypeError(f"{attachment.kind} attachments do not choose line height")
        return self.line_heights.choose_height(
            directive,
            fm,
            line_end=line_end,
            span_end=attachment.end,
            span_start_v=span_start_v,
            v=v,
        )

    def measure(self, attachment: Attachment, fm: Optional[FontMetrics] = None) -> int:
        """Width of a replacement attachment (inline image or space)."""

        directive = attachment.directive
        if isinstance(directive, InlineImage):
            return image_size(self.drawable_for(attachment), fm, directive.align)
        if isinstance(directive, InlineSpace):
            return space_size(directive)
        raise TypeError(f"{attachment.kind} attachments are not replacements")

    def draw(
        self,
        canvas: Canvas,
        attachment: Attachment,
        *,
        x: float,
        top: int,
        baseline: int,
        bottom: int,
    ) -> None:
        directive = attachment.directive
        if isinstance(directive, InlineImage):
            draw_image(
                canvas,
                self.drawable_for(attachment),
                directive.align,
                x=x,
                top=top,
                baseline=baseline,
                bottom=bottom,
            )
        elif isinstance(directive, InlineSpace):
            draw_space(canvas, directive, x=x, top=top, bottom=bottom)
        else:
            raise TypeError(f"{attachment.kind} attachments are not replacements")

    def leading_margin(self, attachment: Attachment, *, first: bool) -> int:
        directive = attachment.directive
        if not isinstance(directive, (QuoteStripe, Bullet, LeadingMargin)):
            raise TypeError(f"{attachment.kind} attachments have no leading margin")
        return leading_margin(directive, first=first)

    def draw_leading_margin(
        self,
        canvas: Canvas,
        attachment: Attachment,
        *,
        x: int,
        direction: int,
        top: int,
        bottom: int,
        line_start: int,
    ) -> None:
        directive = attachment.directive
        if isinstance(directive, QuoteStripe):
            draw_quote(canvas, directive, x=x, direction=direction, top=top, bottom=bottom)
        elif isinstance(directive, Bullet):
            draw_bullet(
                canvas,
                directive,
                x=x,
                direction=direction,
                top=top,
                bottom=bottom,
                line_start=line_start,
                span_start=attachment.start,
            )
        elif not isinstance(directive, LeadingMargin):
            raise TypeError(f"{attachment.kind} attachments have no leading margin")


__all__ = ["RenderPass"]
