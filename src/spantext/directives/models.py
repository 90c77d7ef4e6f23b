"""Dataclasses describing every formatting directive a span can carry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Callable, ClassVar, Optional, Union

from spantext.errors import DirectiveError

if TYPE_CHECKING:
    from spantext.images.sources import ImageSource

TRANSPARENT = 0x00000000
BLACK = 0xFF000000
WHITE = 0xFFFFFFFF


def argb(alpha: int, red: int, green: int, blue: int) -> int:
    """Pack four 0-255 channels into a single ARGB integer."""

    for channel in (alpha, red, green, blue):
        if not 0 <= channel <= 255:
            raise DirectiveError(f"Color channel {channel} out of range")
    return (alpha << 24) | (red << 16) | (green << 8) | blue


def argb_components(color: int) -> tuple[int, int, int, int]:
    color &= 0xFFFFFFFF
    return (color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


class Align(IntEnum):
    """Vertical alignment for inline images, line heights and text."""

    BOTTOM = 0
    BASELINE = 1
    CENTER = 2
    TOP = 3


class HorizontalAlign(str, Enum):
    NORMAL = "normal"
    OPPOSITE = "opposite"
    CENTER = "center"


class SizeUnit(str, Enum):
    PX = "px"
    SP = "sp"  # scaled pixels, resolved by the host


class BlurStyle(str, Enum):
    NORMAL = "normal"
    SOLID = "solid"
    OUTER = "outer"
    INNER = "inner"


class TextStyle(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"


class SpanFlag(str, Enum):
    """Whether an attachment grows when text is inserted at its boundaries."""

    INCLUSIVE_EXCLUSIVE = "inclusive_exclusive"
    INCLUSIVE_INCLUSIVE = "inclusive_inclusive"
    EXCLUSIVE_EXCLUSIVE = "exclusive_exclusive"
    EXCLUSIVE_INCLUSIVE = "exclusive_inclusive"

    @property
    def extends_start(self) -> bool:
        return self.value.startswith("inclusive")

    @property
    def extends_end(self) -> bool:
        return self.value.endswith("_inclusive")


def _require(condition: bool, message: str, kind: str) -> None:
    if not condition:
        raise DirectiveError(message, kind=kind)


@dataclass(frozen=True, slots=True)
class ForegroundColor:
    kind: ClassVar[str] = "foreground_color"

    color: int


@dataclass(frozen=True, slots=True)
class BackgroundColor:
    kind: ClassVar[str] = "background_color"

    color: int


@dataclass(frozen=True, slots=True)
class LineHeight:
    """Forces every line in the range to at least ``height`` pixels."""

    kind: ClassVar[str] = "line_height"

    height: int
    align: Align = Align.CENTER

    def __post_init__(self) -> None:
        _require(self.height >= 0, "line height must be >= 0", self.kind)


@dataclass(frozen=True, slots=True)
class QuoteStripe:
    kind: ClassVar[str] = "quote_stripe"

    color: int
    stripe_width: int = 2
    gap_width: int = 2

    def __post_init__(self) -> None:
        _require(self.stripe_width >= 1, "stripe width must be >= 1", self.kind)
        _require(self.gap_width >= 0, "gap width must be >= 0", self.kind)


@dataclass(frozen=True, slots=True)
class LeadingMargin:
    kind: ClassVar[str] = "leading_margin"

    first: int
    rest: int

    def __post_init__(self) -> None:
        _require(self.first >= 0 and self.rest >= 0, "margins must be >= 0", self.kind)


@dataclass(frozen=True, slots=True)
class Bullet:
    kind: ClassVar[str] = "bullet"

    gap_width: int
    color: int = 0
    radius: int = 3

    def __post_init__(self) -> None:
        _require(self.gap_width >= 0, "gap width must be >= 0", self.kind)
        _require(self.radius >= 0, "radius must be >= 0", self.kind)


@dataclass(frozen=True, slots=True)
class FontSize:
    kind: ClassVar[str] = "font_size"

    size: int
    unit: SizeUnit = SizeUnit.PX

    def __post_init__(self) -> None:
        _require(self.size >= 0, "font size must be >= 0", self.kind)


@dataclass(frozen=True, slots=True)
class FontProportion:
    kind: ClassVar[str] = "font_proportion"

    proportion: float


@dataclass(frozen=True, slots=True)
class FontXProportion:
    kind: ClassVar[str] = "font_x_proportion"

    proportion: float


@dataclass(frozen=True, slots=True)
class Strikethrough:
    kind: ClassVar[str] = "strikethrough"


@dataclass(frozen=True, slots=True)
class Underline:
    kind: ClassVar[str] = "underline"


@dataclass(frozen=True, slots=True)
class Superscript:
    kind: ClassVar[str] = "superscript"


@dataclass(frozen=True, slots=True)
class Subscript:
    kind: ClassVar[str] = "subscript"


@dataclass(frozen=True, slots=True)
class Style:
    kind: ClassVar[str] = "style"

    style: TextStyle

    @property
    def bold(self) -> bool:
        return self.style in (TextStyle.BOLD, TextStyle.BOLD_ITALIC)

    @property
    def italic(self) -> bool:
        return self.style in (TextStyle.ITALIC, TextStyle.BOLD_ITALIC)


@dataclass(frozen=True, slots=True)
class FontFamily:
    kind: ClassVar[str] = "font_family"

    family: str

    def __post_init__(self) -> None:
        _require(bool(self.family), "font family cannot be empty", self.kind)


@dataclass(frozen=True, slots=True)
class Typeface:
    """Host-specific typeface handle, passed through untouched."""

    kind: ClassVar[str] = "typeface"

    typeface: object


@dataclass(frozen=True, slots=True)
class HorizontalAlignment:
    kind: ClassVar[str] = "horizontal_align"

    alignment: HorizontalAlign


@dataclass(frozen=True, slots=True)
class VerticalAlignment:
    kind: ClassVar[str] = "vertical_align"

    align: Align


@dataclass(frozen=True, slots=True)
class ClickAction:
    kind: ClassVar[str] = "click"

    handler: Callable[[], object]
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not callable(self.handler):
            raise DirectiveError("click handler must be callable", kind=self.kind)


@dataclass(frozen=True, slots=True)
class Url:
    kind: ClassVar[str] = "url"

    url: str

    def __post_init__(self) -> None:
        _require(bool(self.url), "url cannot be empty", self.kind)


@dataclass(frozen=True, slots=True)
class Blur:
    kind: ClassVar[str] = "blur"

    radius: float
    style: BlurStyle = BlurStyle.NORMAL

    def __post_init__(self) -> None:
        _require(self.radius > 0, "blur radius must be > 0", self.kind)


@dataclass(frozen=True, slots=True)
class Shader:
    """Host-specific shader handle, passed through untouched."""

    kind: ClassVar[str] = "shader"

    shader: object


@dataclass(frozen=True, slots=True)
class Shadow:
    kind: ClassVar[str] = "shadow"

    radius: float
    dx: float
    dy: float
    color: int

    def __post_init__(self) -> None:
        _require(self.radius > 0, "shadow radius must be > 0", self.kind)


@dataclass(frozen=True, slots=True)
class InlineImage:
    """Replaces its placeholder range with an image drawn at render time."""

    kind: ClassVar[str] = "inline_image"

    source: "ImageSource"
    align: Align = Align.BOTTOM


@dataclass(frozen=True, slots=True)
class InlineSpace:
    """Replaces its placeholder range with a ``width`` wide filled box."""

    kind: ClassVar[str] = "inline_space"

    width: int
    color: int = TRANSPARENT

    def __post_init__(self) -> None:
        _require(self.width >= 0, "space width must be >= 0", self.kind)


Directive = Union[
    ForegroundColor,
    BackgroundColor,
    LineHeight,
    QuoteStripe,
    LeadingMargin,
    Bullet,
    FontSize,
    FontProportion,
    FontXProportion,
    Strikethrough,
    Underline,
    Superscript,
    Subscript,
    Style,
    FontFamily,
    Typeface,
    HorizontalAlignment,
    VerticalAlignment,
    ClickAction,
    Url,
    Blur,
    Shader,
    Shadow,
    InlineImage,
    InlineSpace,
]

LINK_KINDS = frozenset({ClickAction.kind, Url.kind})

__all__ = [
    "TRANSPARENT",
    "BLACK",
    "WHITE",
    "argb",
    "argb_components",
    "Align",
    "HorizontalAlign",
    "SizeUnit",
    "BlurStyle",
    "TextStyle",
    "SpanFlag",
    "ForegroundColor",
    "BackgroundColor",
    "LineHeight",
    "QuoteStripe",
    "LeadingMargin",
    "Bullet",
    "FontSize",
    "FontProportion",
    "FontXProportion",
    "Strikethrough",
    "Underline",
    "Superscript",
    "Subscript",
    "Style",
    "FontFamily",
    "Typeface",
    "HorizontalAlignment",
    "VerticalAlignment",
    "ClickAction",
    "Url",
    "Blur",
    "Shader",
    "Shadow",
    "InlineImage",
    "InlineSpace",
    "Directive",
    "LINK_KINDS",
]
