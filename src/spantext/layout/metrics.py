"""Font metrics exchanged with the host during layout."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class FontMetrics:
    """Integer line metrics; ``ascent`` and ``top`` are negative above the baseline.

    Layout hooks mutate the instance the host passes in, the same way the
    host's own line breaker would.
    """

    top: int = 0
    ascent: int = 0
    descent: int = 0
    bottom: int = 0
    leading: int = 0

    @property
    def text_height(self) -> int:
        return self.descent - self.ascent

    @property
    def line_height(self) -> int:
        return self.bottom - self.top

    def copy(self) -> "FontMetrics":
        return FontMetrics(self.top, self.ascent, self.descent, self.bottom, self.leading)

    def assign(self, other: "FontMetrics") -> None:
        self.top = other.top
        self.ascent = other.ascent
        self.descent = other.descent
        self.bottom = other.bottom
        self.leading = other.leading


def half(value: int) -> int:
    """Integer halving that truncates toward zero."""

    return int(value / 2)
