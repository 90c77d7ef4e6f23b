"""Textual/Rich rendering surface for styled text."""

from .rich_text import CLICK_ACTION, to_rich_color, to_rich_text
from .widget import SpanTextView

__all__ = ["CLICK_ACTION", "SpanTextView", "to_rich_color", "to_rich_text"]
