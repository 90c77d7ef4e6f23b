"""Fluent builder that attaches formatting directives to ranges of text."""

from __future__ import annotations

import os
from typing import Callable, List, Optional, Tuple, Union

from PIL import Image

from spantext.buffer import Bound, SpanRange, TextBuffer, resolve_range
from spantext.config import BuilderDefaults
from spantext.directives import (
    TRANSPARENT,
    Align,
    BackgroundColor,
    Blur,
    BlurStyle,
    Bullet,
    ClickAction,
    Directive,
    FontFamily,
    FontProportion,
    FontSize,
    FontXProportion,
    ForegroundColor,
    HorizontalAlign,
    HorizontalAlignment,
    InlineImage,
    InlineSpace,
    LeadingMargin,
    LineHeight,
    QuoteStripe,
    Shader,
    Shadow,
    SizeUnit,
    SpanFlag,
    Strikethrough,
    Style,
    Subscript,
    Superscript,
    TextStyle,
    Typeface,
    Underline,
    Url,
    VerticalAlignment,
)
from spantext.errors import BuilderClosedError
from spantext.images import (
    BitmapSource,
    Drawable,
    DrawableSource,
    ImageSource,
    ResourceSource,
    UriSource,
)
from spantext.runtime.telemetry import span

from .styled import Attachment, StyledText
from .surface import RenderingSurface

ImageLike = Union[ImageSource, Image.Image, Drawable, int, str, os.PathLike]


def as_image_source(value: ImageLike) -> ImageSource:
    """Coerce the shorthand forms accepted by ``append_image``."""

    if isinstance(value, (BitmapSource, DrawableSource, UriSource, ResourceSource)):
        return value
    if isinstance(value, Image.Image):
        return BitmapSource(value)
    if isinstance(value, Drawable):
        return DrawableSource(value)
    if isinstance(value, bool):
        raise TypeError("bool is not a valid image source")
    if isinstance(value, int):
        return ResourceSource(value)
    if isinstance(value, (str, os.PathLike)):
        return UriSource(os.fspath(value))
    raise TypeError(f"Unsupported image source {type(value).__name__}")


class SpanBuilder:
    """Accumulates text and ``(range, directive, flag)`` attachments.

    Every ``set_*`` call targets the pending range: the text added by the
    last ``append*`` call, or whatever ``sub_span`` selected. Calls return
    the builder so they can be chained::

        styled = (
            SpanBuilder()
            .append("Hello ")
            .set_bold()
            .append("world")
            .set_foreground_color(0xFFFF0000)
            .build()
        )
    """

    def __init__(
        self,
        surface: Optional[RenderingSurface] = None,
        *,
        defaults: Optional[BuilderDefaults] = None,
        logger_name: Optional[str] = None,
    ) -> None:
        self.defaults = defaults or BuilderDefaults()
        self._surface = surface
        self._logger_name = logger_name
        self._buffer = TextBuffer()
        self._pending = SpanRange(0, 0)
        self._flag = self.defaults.flag
        self._attachments: List[Attachment] = []
        self._result: Optional[StyledText] = None

    @classmethod
    def with_surface(
        cls, surface: RenderingSurface, *, defaults: Optional[BuilderDefaults] = None
    ) -> "SpanBuilder":
        return cls(surface, defaults=defaults)

    # -- state -----------------------------------------------------------

    @property
    def text(self) -> str:
        return self._buffer.text

    @property
    def pending_range(self) -> SpanRange:
        return self._pending

    @property
    def flag(self) -> SpanFlag:
        return self._flag

    @property
    def attachments(self) -> Tuple[Attachment, ...]:
        return tuple(self._attachments)

    @property
    def closed(self) -> bool:
        return self._result is not None

    def __len__(self) -> int:
        return len(self._buffer)

    def _ensure_open(self) -> None:
        if self._result is not None:
            raise BuilderClosedError("SpanBuilder.build() was already called")

    def _attach(self, directive: Directive) -> "SpanBuilder":
        self._ensure_open()
        self._attachments.append(
            Attachment(
                range=self._pending,
                directive=directive,
                flag=self._flag,
                order=len(self._attachments),
            )
        )
        return self

    def _enable_links(self) -> None:
        if self._surface is not None and not self._surface.links_enabled:
            self._surface.enable_links()

    # -- ranges and text ---------------------------------------------------

    def set_flag(self, flag: SpanFlag) -> "SpanBuilder":
        self._ensure_open()
        self._flag = SpanFlag(flag)
        return self

    def sub_span(self, start: Bound, end: Bound) -> "SpanBuilder":
        """Select the pending range by offsets or by first-occurrence literals.

        Literals are looked up in the text as it is now; the resulting
        offsets do not follow later appends.
        """

        self._ensure_open()
        with span(
            "builder::sub_span",
            logger_name=self._logger_name,
            component="builder",
            metadata={"start": start, "end": end},
        ):
            self._pending = resolve_range(self._buffer, start, end)
        return self

    def append(self, text: str) -> "SpanBuilder":
        self._ensure_open()
        self._pending = self._buffer.append(str(text))
        return self

    def append_line(self, text: str = "") -> "SpanBuilder":
        return self.append(f"{text}{self.defaults.line_separator}")

    def append_image(
        self, source: ImageLike, align: Optional[Align] = None
    ) -> "SpanBuilder":
        """Append a placeholder that renders as ``source``.

        An empty buffer first receives a single marker character so the
        image never sits at offset zero.
        """

        self._ensure_open()
        directive = InlineImage(
            source=as_image_source(source),
            align=Align(align if align is not None else self.defaults.image_align),
        )
        with span(
            "builder::append_image",
            logger_name=self._logger_name,
            component="builder",
            metadata={"source": type(directive.source).__name__},
        ):
            if len(self._buffer) == 0:
                self._buffer.append(self.defaults.image_marker)
            self._pending = self._buffer.append(self.defaults.image_placeholder)
        return self._attach(directive)

    def append_space(self, size: int, color: int = TRANSPARENT) -> "SpanBuilder":
        self._ensure_open()
        directive = InlineSpace(width=size, color=color)
        self._pending = self._buffer.append(self.defaults.space_placeholder)
        return self._attach(directive)

    # -- colors and paragraph directives -----------------------------------

    def set_foreground_color(self, color: int) -> "SpanBuilder":
        return self._attach(ForegroundColor(color))

    def set_background_color(self, color: int) -> "SpanBuilder":
        return self._attach(BackgroundColor(color))

    def set_line_height(
        self, height: int, align: Optional[Align] = None
    ) -> "SpanBuilder":
        align = align if align is not None else self.defaults.line_height_align
        return self._attach(LineHeight(height, Align(align)))

    def set_quote_color(
        self,
        color: int,
        stripe_width: Optional[int] = None,
        gap_width: Optional[int] = None,
    ) -> "SpanBuilder":
        return self._attach(
            QuoteStripe(
                color,
                self.defaults.quote_stripe_width if stripe_width is None else stripe_width,
                self.defaults.quote_gap_width if gap_width is None else gap_width,
            )
        )

    def set_leading_margin(self, first: int, rest: int) -> "SpanBuilder":
        return self._attach(LeadingMargin(first, rest))

    def set_bullet(
        self,
        gap_width: int,
        *,
        color: Optional[int] = None,
        radius: Optional[int] = None,
    ) -> "SpanBuilder":
        return self._attach(
            Bullet(
                gap_width,
                self.defaults.bullet_color if color is None else color,
                self.defaults.bullet_radius if radius is None else radius,
            )
        )

    def set_horizontal_align(self, alignment: HorizontalAlign) -> "SpanBuilder":
        return self._attach(HorizontalAlignment(HorizontalAlign(alignment)))

    def set_vertical_align(self, align: Align) -> "SpanBuilder":
        return self._attach(VerticalAlignment(Align(align)))

    # -- fonts -------------------------------------------------------------

    def set_font_size(self, size: int, unit: SizeUnit = SizeUnit.PX) -> "SpanBuilder":
        return self._attach(FontSize(size, SizeUnit(unit)))

    def set_font_proportion(self, proportion: float) -> "SpanBuilder":
        return self._attach(FontProportion(proportion))

    def set_font_x_proportion(self, proportion: float) -> "SpanBuilder":
        return self._attach(FontXProportion(proportion))

    def set_strikethrough(self) -> "SpanBuilder":
        return self._attach(Strikethrough())

    def set_underline(self) -> "SpanBuilder":
        return self._attach(Underline())

    def set_superscript(self) -> "SpanBuilder":
        return self._attach(Superscript())

    def set_subscript(self) -> "SpanBuilder":
        return self._attach(Subscript())

    def set_bold(self) -> "SpanBuilder":
        return self._attach(Style(TextStyle.BOLD))

    def set_italic(self) -> "SpanBuilder":
        return self._attach(Style(TextStyle.ITALIC))

    def set_bold_italic(self) -> "SpanBuilder":
        return self._attach(Style(TextStyle.BOLD_ITALIC))

    def set_font_family(self, family: str) -> "SpanBuilder":
        return self._attach(FontFamily(family))

    def set_typeface(self, typeface: object) -> "SpanBuilder":
        return self._attach(Typeface(typeface))

    # -- interaction and effects -------------------------------------------

    def set_click(
        self, handler: Callable[[], object], *, name: Optional[str] = None
    ) -> "SpanBuilder":
        self._attach(ClickAction(handler, name))
        self._enable_links()
        return self

    def set_url(self, url: str) -> "SpanBuilder":
        self._attach(Url(url))
        self._enable_links()
        return self

    def set_blur(
        self, radius: float, style: BlurStyle = BlurStyle.NORMAL
    ) -> "SpanBuilder":
        return self._attach(Blur(radius, BlurStyle(style)))

    def set_shader(self, shader: object) -> "SpanBuilder":
        return self._attach(Shader(shader))

    def set_shadow(
        self, radius: float, dx: float, dy: float, color: int
    ) -> "SpanBuilder":
        return self._attach(Shadow(radius, dx, dy, color))

    # -- finish --------------------------------------------------------------

    def build(self) -> StyledText:
        """Freeze the buffer and return the styled text.

        A bound surface receives the value as well. Calling ``build`` again
        returns the same value.
        """

        if self._result is not None:
            return self._result
        with span(
            "builder::build",
            logger_name=self._logger_name,
            component="builder",
            metadata={
                "length": len(self._buffer),
                "attachments": len(self._attachments),
            },
        ):
            self._result = StyledText(
                text=self._buffer.freeze(), attachments=tuple(self._attachments)
            )
            if self._surface is not None:
                self._surface.set_styled_text(self._result)
        return self._result


__all__ = ["SpanBuilder", "ImageLike", "as_image_source"]
