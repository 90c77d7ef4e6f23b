"""Textual widget that acts as a rendering surface for styled text."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from textual.widgets import Static

from spantext.builder import StyledText
from spantext.directives import ClickAction
from spantext.images import DrawableCache, ImageBackend
from spantext.runtime import telemetry

from .rich_text import CLICK_ACTION, to_rich_text


class SpanTextView(Static):
    """Displays a ``StyledText`` and runs its click handlers.

    Link handling starts disabled, mirroring a plain text view; a builder
    bound to the view turns it on when it attaches a click or url range.
    """

    DEFAULT_CSS = """
    SpanTextView {
        height: auto;
    }
    """

    def __init__(
        self,
        styled: Optional[StyledText] = None,
        *,
        backend: Optional[ImageBackend] = None,
        cache: Optional[DrawableCache] = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__("", name=name, id=id, classes=classes)
        self.backend = backend
        self.cache = cache if cache is not None else DrawableCache()
        self.styled: Optional[StyledText] = None
        self._links_enabled = False
        self._handlers: Dict[int, Callable[[], object]] = {}
        if styled is not None:
            self.set_styled_text(styled)

    @property
    def links_enabled(self) -> bool:
        return self._links_enabled

    def enable_links(self) -> None:
        self._links_enabled = True
        if self.styled is not None:
            self._render_styled()

    def set_styled_text(self, styled: StyledText) -> None:
        self.styled = styled
        self._handlers = {
            attachment.key: attachment.directive.handler
            for attachment in styled.attachments
            if isinstance(attachment.directive, ClickAction)
        }
        self._render_styled()

    def _render_styled(self) -> None:
        assert self.styled is not None
        self.update(
            to_rich_text(
                self.styled,
                backend=self.backend,
                cache=self.cache,
                interactive=self._links_enabled,
                click_action=CLICK_ACTION,
            )
        )

    def action_span_click(self, key: int) -> None:
        if not self._links_enabled:
            return
        handler = self._handlers.get(key)
        if handler is None:
            telemetry.record_event(
                "view.unknown_click", level="warning", data={"key": key}
            )
            return
        handler()


__all__ = ["SpanTextView"]
