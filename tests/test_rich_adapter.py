from __future__ import annotations

import asyncio
from typing import List

from rich.color import Color
from textual.app import App, ComposeResult

from spantext import SpanBuilder
from spantext.adapters.textual import SpanTextView, to_rich_color, to_rich_text
from spantext.directives import SizeUnit
from spantext.images import Drawable, LocalImageBackend, UriSource

RED = 0xFFFF0000
GREEN = 0xFF00FF00


def test_to_rich_color_drops_alpha() -> None:
    assert to_rich_color(RED) == Color.from_rgb(255, 0, 0)
    assert to_rich_color(0x00FF0000) is None


def test_colors_become_styles_on_the_same_offsets() -> None:
    styled = (
        SpanBuilder()
        .append("AB")
        .sub_span(0, 1)
        .set_foreground_color(RED)
        .sub_span(1, 2)
        .set_background_color(GREEN)
        .build()
    )

    text = to_rich_text(styled)

    assert text.plain == "AB"
    first, second = text.spans
    assert (first.start, first.end) == (0, 1)
    assert first.style.color == Color.from_rgb(255, 0, 0)
    assert (second.start, second.end) == (1, 2)
    assert second.style.bgcolor == Color.from_rgb(0, 255, 0)


def test_spans_follow_attachment_order() -> None:
    styled = (
        SpanBuilder().append("both").set_bold().set_italic().set_underline().build()
    )

    spans = to_rich_text(styled).spans

    assert [bool(s.style.bold) for s in spans] == [True, False, False]
    assert [bool(s.style.italic) for s in spans] == [False, True, False]
    assert bool(spans[2].style.underline)


def test_effects_without_terminal_equivalent_are_skipped() -> None:
    styled = (
        SpanBuilder()
        .append("big")
        .set_font_size(30, SizeUnit.SP)
        .set_shadow(1.0, 1.0, 1.0, RED)
        .set_blur(2.0)
        .build()
    )

    spans = to_rich_text(styled).spans

    assert len(spans) == 1
    assert spans[0].style.dim


def test_links_and_clicks_only_when_interactive() -> None:
    styled = (
        SpanBuilder()
        .append("docs")
        .set_url("https://example.com")
        .append(" go")
        .set_click(lambda: None)
        .build()
    )
    click = styled.attachments[1]

    interactive = to_rich_text(styled).spans
    inert = to_rich_text(styled, interactive=False).spans

    assert interactive[0].style.link == "https://example.com"
    assert interactive[1].style.meta == {"@click": f"span_click({click.key})"}
    assert inert == []


def test_resolved_image_keeps_placeholder_reversed() -> None:
    drawable = Drawable(width=2, height=1)
    styled = SpanBuilder().append("a").append_image(drawable).build()

    text = to_rich_text(styled)

    assert text.plain == "a<img>"
    assert text.spans[0].style.reverse


def test_unresolved_image_renders_blank() -> None:
    styled = SpanBuilder().append("a").append_image(UriSource("missing.png")).build()

    text = to_rich_text(styled, backend=LocalImageBackend())

    assert text.plain == "a     "
    assert text.spans == []


def test_leading_image_marker_becomes_zero_width() -> None:
    styled = SpanBuilder().append_image(Drawable(width=1, height=1)).build()

    text = to_rich_text(styled)

    assert text.plain == "\u200b<img>"
    assert len(text) == len(styled)


def test_leading_marker_without_image_is_kept() -> None:
    styled = SpanBuilder().append("\x02a").build()

    assert to_rich_text(styled).plain == "\x02a"


def test_space_becomes_colored_blanks() -> None:
    styled = SpanBuilder().append("a").append_space(3, GREEN).append("b").build()

    text = to_rich_text(styled)

    assert text.plain == "a   b"
    assert text.spans[0].style.bgcolor == Color.from_rgb(0, 255, 0)


class ViewApp(App[None]):
    def compose(self) -> ComposeResult:
        yield SpanTextView(id="view")


def test_view_surface_enables_links_and_runs_handlers() -> None:
    clicks: List[str] = []

    async def scenario() -> None:
        app = ViewApp()
        async with app.run_test():
            view = app.query_one(SpanTextView)
            assert not view.links_enabled

            styled = (
                SpanBuilder.with_surface(view)
                .append("press")
                .set_click(lambda: clicks.append("press"))
                .build()
            )

            assert view.links_enabled
            assert view.styled is styled
            view.action_span_click(styled.attachments[0].key)
            view.action_span_click(-1)

    asyncio.run(scenario())

    assert clicks == ["press"]


def test_view_ignores_clicks_while_links_disabled() -> None:
    clicks: List[str] = []

    async def scenario() -> None:
        app = ViewApp()
        async with app.run_test():
            view = app.query_one(SpanTextView)
            styled = (
                SpanBuilder()
                .append("press")
                .set_click(lambda: clicks.append("press"))
                .build()
            )
            view.set_styled_text(styled)
            view.action_span_click(styled.attachments[0].key)

    asyncio.run(scenario())

    assert clicks == []
