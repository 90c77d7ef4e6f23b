"""Conversion of ``StyledText`` into ``rich.text.Text`` for terminal hosts."""

from __future__ import annotations

from typing import Dict, List, Optional

from rich.color import Color
from rich.style import Style as RichStyle
from rich.text import Text

from spantext.builder import Attachment, StyledText
from spantext.config import IMAGE_MARKER
from spantext.directives import (
    BackgroundColor,
    Blur,
    ClickAction,
    ForegroundColor,
    InlineImage,
    InlineSpace,
    Strikethrough,
    Style,
    Underline,
    Url,
    argb_components,
)
from spantext.images import DrawableCache, ImageBackend
from spantext.layout import RenderPass
from spantext.runtime import telemetry

ZERO_WIDTH_SPACE = "\u200b"
CLICK_ACTION = "span_click"


def to_rich_color(color: int) -> Optional[Color]:
    """RGB part of a packed ARGB color; fully transparent maps to ``None``."""

    alpha, red, green, blue = argb_components(color)
    if alpha == 0:
        return None
    return Color.from_rgb(red, green, blue)


def _style_for(
    attachment: Attachment, *, interactive: bool, click_action: str
) -> Optional[RichStyle]:
    directive = attachment.directive
    if isinstance(directive, ForegroundColor):
        return RichStyle(color=to_rich_color(directive.color))
    if isinstance(directive, BackgroundColor):
        return RichStyle(bgcolor=to_rich_color(directive.color))
    if isinstance(directive, Style):
        return RichStyle(bold=directive.bold or None, italic=directive.italic or None)
    if isinstance(directive, Underline):
        return RichStyle(underline=True)
    if isinstance(directive, Strikethrough):
        return RichStyle(strike=True)
    if isinstance(directive, Blur):
        return RichStyle(dim=True)
    if isinstance(directive, Url):
        return RichStyle(link=directive.url) if interactive else None
    if isinstance(directive, ClickAction):
        if not interactive:
            return None
        return RichStyle(meta={"@click": f"{click_action}({attachment.key})"})
    if isinstance(directive, InlineSpace):
        return RichStyle(bgcolor=to_rich_color(directive.color))
    return None


def to_rich_text(
    styled: StyledText,
    *,
    backend: Optional[ImageBackend] = None,
    cache: Optional[DrawableCache] = None,
    interactive: bool = True,
    click_action: str = CLICK_ACTION,
    image_marker: str = IMAGE_MARKER,
) -> Text:
    """Build a ``Text`` whose spans follow the attachment order of ``styled``.

    Offsets are preserved one-to-one: placeholders are rewritten in place
    with text of the same length. Directives a terminal cannot express
    (sizes, fonts, margins, shadows, ...) are skipped.
    """

    render_pass = RenderPass(backend=backend, cache=cache)
    chars: List[str] = list(styled.text)
    images = styled.attachments_of(InlineImage.kind)
    if (
        chars
        and chars[0] == image_marker
        and any(attachment.start == 1 for attachment in images)
    ):
        chars[0] = ZERO_WIDTH_SPACE

    image_styles: Dict[int, RichStyle] = {}
    for attachment in images:
        start, end = attachment.start, attachment.end
        if render_pass.drawable_for(attachment) is None:
            chars[start:end] = [" "] * (end - start)
        else:
            image_styles[attachment.key] = RichStyle(reverse=True)
    for attachment in styled.attachments_of(InlineSpace.kind):
        start, end = attachment.start, attachment.end
        chars[start:end] = [" "] * (end - start)

    text = Text("".join(chars), end="")
    skipped: List[str] = []
    for attachment in styled.attachments:
        if attachment.range.is_empty:
            continue
        style = image_styles.get(attachment.key) or _style_for(
            attachment, interactive=interactive, click_action=click_action
        )
        if style is None:
            if attachment.kind != InlineImage.kind:
                skipped.append(attachment.kind)
            continue
        text.stylize(style, attachment.start, attachment.end)

    if skipped:
        telemetry.record_event(
            "rich.skipped_directives",
            level="debug",
            data={"kinds": sorted(set(skipped))},
        )
    return text


__all__ = ["CLICK_ACTION", "ZERO_WIDTH_SPACE", "to_rich_color", "to_rich_text"]
