"""Boundary protocol between the builder and a host rendering surface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .styled import StyledText


class RenderingSurface(Protocol):
    """A widget that can display a finished ``StyledText``."""

    @property
    def links_enabled(self) -> bool:
        """Whether clicks on link/click ranges are currently handled."""
        ...

    def enable_links(self) -> None:
        """Turn on click and link handling."""
        ...

    def set_styled_text(self, styled: "StyledText") -> None:
        """Replace the displayed content."""
        ...
