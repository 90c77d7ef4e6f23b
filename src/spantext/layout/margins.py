"""Leading-margin geometry for quote stripes, bullets, and plain indents."""

from __future__ import annotations

from typing import Union

from spantext.directives import Bullet, LeadingMargin, QuoteStripe

from .canvas import Canvas

MarginDirective = Union[QuoteStripe, Bullet, LeadingMargin]


def leading_margin(directive: MarginDirective, *, first: bool) -> int:
    if isinstance(directive, QuoteStripe):
        return directive.stripe_width + directive.gap_width
    if isinstance(directive, Bullet):
        return 2 * directive.radius + directive.gap_width
    return directive.first if first else directive.rest


def draw_quote(
    canvas: Canvas,
    quote: QuoteStripe,
    *,
    x: int,
    direction: int,
    top: int,
    bottom: int,
) -> None:
    canvas.draw_rect(x, top, x + direction * quote.stripe_width, bottom, color=quote.color)


def draw_bullet(
    canvas: Canvas,
    bullet: Bullet,
    *,
    x: int,
    direction: int,
    top: int,
    bottom: int,
    line_start: int,
    span_start: int,
) -> None:
    """Draw the bullet, but only on the line where the bullet's range begins."""

    if line_start != span_start:
        return
    canvas.draw_circle(
        x + direction * bullet.radius, (top + bottom) / 2.0, bullet.radius, color=bullet.color
    )


__all__ = ["MarginDirective", "leading_margin", "draw_quote", "draw_bullet"]
