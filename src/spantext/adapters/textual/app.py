"""Executable Textual app that showcases the span builder."""

from __future__ import annotations

import argparse
import os
from typing import Callable, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use spantext.adapters.textual.app"
    ) from exc

from spantext.builder import SpanBuilder
from spantext.directives import Align, BlurStyle, SizeUnit
from spantext.images import LocalImageBackend

from .widget import SpanTextView

RED = 0xFFE06C75
GREEN = 0xFF98C379
BLUE = 0xFF61AFEF
YELLOW = 0xFFE5C07B


def populate_demo(
    builder: SpanBuilder,
    *,
    image: Optional[str] = None,
    on_click: Callable[[], object] = lambda: None,
) -> SpanBuilder:
    """Fill ``builder`` with a sample covering the common directives."""

    builder.append_line("spantext demo").set_bold().set_font_size(24, SizeUnit.SP)
    builder.append("Colors: ")
    builder.append("red").set_foreground_color(RED)
    builder.append(" / ")
    builder.append("on green").set_background_color(GREEN)
    builder.append_line()
    builder.append("Styles: ")
    builder.append("bold").set_bold()
    builder.append(" ")
    builder.append("italic").set_italic()
    builder.append(" ")
    builder.append("both").set_bold_italic().set_underline()
    builder.append(" ")
    builder.append("struck").set_strikethrough()
    builder.append(" ")
    builder.append_line("blurred").set_blur(3.0, BlurStyle.NORMAL)
    builder.append("Links: ")
    builder.append("textual.textualize.io").set_url("https://textual.textualize.io")
    builder.append(" ")
    builder.append_line("click me").set_click(on_click, name="demo")
    builder.append("Space:")
    builder.append_space(4, YELLOW)
    builder.append_line("end")
    if image:
        builder.append("Image: ")
        builder.append_image(image, Align.CENTER)
        builder.append_line()
    builder.append("Quoted paragraph").set_quote_color(BLUE).sub_span(
        "Quoted", "paragraph"
    ).set_foreground_color(BLUE)
    return builder


class SpanTextDemoApp(App[None]):
    """Minimal Textual UI that renders one styled text."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#span-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, image: Optional[str] = None, links: bool = True) -> None:
        super().__init__()
        self._image = image
        self._links = links
        self._view: SpanTextView | None = None
        self._status: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="span-area"):
            self._view = SpanTextView(backend=LocalImageBackend(), id="span-view")
            yield self._view
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        assert self._view is not None
        builder = (
            SpanBuilder.with_surface(self._view) if self._links else SpanBuilder()
        )
        styled = populate_demo(
            builder, image=self._image, on_click=self._on_demo_click
        ).build()
        if not self._links:
            self._view.set_styled_text(styled)
        self._show_status(
            f"{len(styled)} chars, {len(styled.attachments)} attachments"
        )

    def _on_demo_click(self) -> None:
        self._show_status("clicked")

    def _show_status(self, message: str) -> None:
        if self._status:
            self._status.update(message)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the spantext Textual demo.")
    parser.add_argument(
        "--image",
        default=os.environ.get("SPANTEXT_DEMO_IMAGE"),
        help="Path of an image to embed inline (default: $SPANTEXT_DEMO_IMAGE)",
    )
    parser.add_argument(
        "--no-links",
        action="store_true",
        help="Leave click and url ranges inert",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    app = SpanTextDemoApp(image=args.image, links=not args.no_links)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
