"""Formatting directives that can be attached to span ranges."""

from .models import (
    BLACK,
    LINK_KINDS,
    TRANSPARENT,
    WHITE,
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
    argb,
    argb_components,
)

__all__ = [
    "BLACK",
    "LINK_KINDS",
    "TRANSPARENT",
    "WHITE",
    "Align",
    "BackgroundColor",
    "Blur",
    "BlurStyle",
    "Bullet",
    "ClickAction",
    "Directive",
    "FontFamily",
    "FontProportion",
    "FontSize",
    "FontXProportion",
    "ForegroundColor",
    "HorizontalAlign",
    "HorizontalAlignment",
    "InlineImage",
    "InlineSpace",
    "LeadingMargin",
    "LineHeight",
    "QuoteStripe",
    "Shader",
    "Shadow",
    "SizeUnit",
    "SpanFlag",
    "Strikethrough",
    "Style",
    "Subscript",
    "Superscript",
    "TextStyle",
    "Typeface",
    "Underline",
    "Url",
    "VerticalAlignment",
    "argb",
    "argb_components",
]
