from __future__ import annotations

import gc
from pathlib import Path
from typing import Any, Dict, List

import pytest
from PIL import Image

from spantext.errors import ImageResolutionError
from spantext.images import (
    BitmapSource,
    Drawable,
    DrawableCache,
    DrawableSource,
    LocalImageBackend,
    ResourceSource,
    UriSource,
    resolve_drawable,
)
from spantext.images import sources
from spantext.layout import RenderPass
from spantext import SpanBuilder


def make_png(path: Path, size: tuple[int, int] = (4, 3)) -> Path:
    Image.new("RGBA", size, (255, 0, 0, 255)).save(path, format="PNG")
    return path


@pytest.fixture
def events(monkeypatch: pytest.MonkeyPatch) -> List[Dict[str, Any]]:
    recorded: List[Dict[str, Any]] = []

    def fake_record(name: str, **kwargs: Any) -> None:
        recorded.append({"name": name, **kwargs})

    monkeypatch.setattr(sources.telemetry, "record_event", fake_record)
    return recorded


class CountingBackend:
    def __init__(self, drawable: Drawable) -> None:
        self.drawable = drawable
        self.lookups = 0

    def open_stream(self, uri: str) -> bytes:
        raise ImageResolutionError("no streams here", source=uri)

    def lookup_resource(self, resource_id: int) -> Drawable:
        self.lookups += 1
        return self.drawable


def test_bitmap_source_uses_image_size() -> None:
    image = Image.new("RGB", (7, 5))

    drawable = resolve_drawable(BitmapSource(image))

    assert drawable is not None
    assert (drawable.width, drawable.height) == (7, 5)
    assert drawable.bounds == (0, 0, 7, 5)
    assert drawable.payload is image


def test_drawable_source_is_returned_as_is() -> None:
    drawable = Drawable(width=1, height=1)

    assert resolve_drawable(DrawableSource(drawable)) is drawable


def test_uri_source_reads_and_decodes_file(tmp_path: Path) -> None:
    path = make_png(tmp_path / "dot.png")
    backend = LocalImageBackend()

    plain = resolve_drawable(UriSource(str(path)), backend)
    as_uri = resolve_drawable(UriSource(path.as_uri()), backend)

    assert plain is not None and as_uri is not None
    assert (plain.width, plain.height) == (4, 3)
    assert (as_uri.width, as_uri.height) == (4, 3)


def test_relative_uri_is_resolved_against_root(tmp_path: Path) -> None:
    make_png(tmp_path / "rel.png", (2, 2))
    backend = LocalImageBackend(root=tmp_path)

    drawable = resolve_drawable(UriSource("rel.png"), backend)

    assert drawable is not None and drawable.width == 2


def test_resources_accept_drawables_images_and_paths(tmp_path: Path) -> None:
    drawable = Drawable(width=3, height=3)
    backend = LocalImageBackend({1: drawable})
    backend.register_resource(2, Image.new("L", (9, 8)))
    backend.register_resource(3, make_png(tmp_path / "res.png", (5, 6)))

    assert resolve_drawable(ResourceSource(1), backend) is drawable
    from_image = resolve_drawable(ResourceSource(2), backend)
    from_path = resolve_drawable(ResourceSource(3), backend)

    assert from_image is not None and (from_image.width, from_image.height) == (9, 8)
    assert from_path is not None and (from_path.width, from_path.height) == (5, 6)


def test_missing_file_is_logged_and_returns_none(
    tmp_path: Path, events: List[Dict[str, Any]]
) -> None:
    backend = LocalImageBackend()

    drawable = resolve_drawable(UriSource(str(tmp_path / "missing.png")), backend)

    assert drawable is None
    assert events[-1]["name"] == "image.resolve_failed"
    assert events[-1]["level"] == "error"


def test_missing_resource_is_logged_and_returns_none(
    events: List[Dict[str, Any]]
) -> None:
    assert resolve_drawable(ResourceSource(404), LocalImageBackend()) is None
    assert "Unable to find resource: 404" in events[-1]["data"]["error"]


def test_unsupported_scheme_is_logged(events: List[Dict[str, Any]]) -> None:
    source = UriSource("https://example.com/pic.png")

    assert resolve_drawable(source, LocalImageBackend()) is None
    assert events[-1]["data"]["source"] == source


def test_undecodable_bytes_are_logged(
    tmp_path: Path, events: List[Dict[str, Any]]
) -> None:
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image")

    assert resolve_drawable(UriSource(str(path)), LocalImageBackend()) is None
    assert len(events) == 1


def test_backend_required_for_uri_and_resource(events: List[Dict[str, Any]]) -> None:
    assert resolve_drawable(UriSource("a.png")) is None
    assert resolve_drawable(ResourceSource(1)) is None
    assert len(events) == 2


class ExplodingBackend:
    def open_stream(self, uri: str) -> bytes:
        raise RuntimeError("backend went away")

    def lookup_resource(self, resource_id: int) -> Drawable:
        raise KeyError(resource_id)


def test_any_backend_failure_is_logged(events: List[Dict[str, Any]]) -> None:
    backend = ExplodingBackend()

    assert resolve_drawable(UriSource("a.png"), backend) is None
    assert resolve_drawable(ResourceSource(3), backend) is None
    assert [event["level"] for event in events] == ["error", "error"]
    assert "backend went away" in events[0]["data"]["error"]


def test_decompression_bomb_is_logged(
    tmp_path: Path, events: List[Dict[str, Any]], monkeypatch: pytest.MonkeyPatch
) -> None:
    path = make_png(tmp_path / "huge.png", size=(8, 8))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 4)

    assert resolve_drawable(UriSource(str(path)), LocalImageBackend()) is None
    assert events[-1]["name"] == "image.resolve_failed"


def test_backend_open_stream_raises_resolution_error(tmp_path: Path) -> None:
    with pytest.raises(ImageResolutionError):
        LocalImageBackend().open_stream(str(tmp_path / "nope.png"))


def test_cache_reuses_live_drawables() -> None:
    cache = DrawableCache()
    drawable = Drawable(width=1, height=1)
    calls: List[int] = []

    def loader() -> Drawable:
        calls.append(1)
        return drawable

    assert cache.get_or_resolve("k", loader) is drawable
    assert cache.get_or_resolve("k", loader) is drawable

    assert len(calls) == 1
    assert (cache.stats.hits, cache.stats.misses) == (1, 1)
    assert "k" in cache and len(cache) == 1


def test_cache_does_not_keep_drawables_alive() -> None:
    cache = DrawableCache()
    calls: List[int] = []

    def loader() -> Drawable:
        calls.append(1)
        return Drawable(width=2, height=2)

    cache.get_or_resolve("k", loader)
    gc.collect()
    cache.get_or_resolve("k", loader)

    assert len(calls) == 2


def test_cache_can_be_bypassed_and_cleared() -> None:
    drawable = Drawable(width=1, height=1)
    disabled = DrawableCache(enabled=False)
    calls: List[int] = []

    def loader() -> Drawable:
        calls.append(1)
        return drawable

    disabled.get_or_resolve("k", loader)
    disabled.get_or_resolve("k", loader)
    assert len(calls) == 2
    assert "k" not in disabled

    enabled = DrawableCache()
    enabled.get_or_resolve("k", loader)
    enabled.clear()
    enabled.get_or_resolve("k", loader)
    assert len(calls) == 4


def test_failed_resolution_is_not_cached(events: List[Dict[str, Any]]) -> None:
    cache = DrawableCache()

    assert cache.get_or_resolve("k", lambda: None) is None
    assert "k" not in cache


def test_render_pass_caches_by_attachment() -> None:
    backend = CountingBackend(Drawable(width=3, height=3))
    styled = SpanBuilder().append("a").append_image(5).append_image(5).build()
    cache = DrawableCache()
    first, second = styled.attachments

    for _ in range(2):
        render_pass = RenderPass(backend=backend, cache=cache)
        render_pass.drawable_for(first)
        render_pass.drawable_for(second)

    assert backend.lookups == 2


def test_drawable_for_rejects_other_directives() -> None:
    styled = SpanBuilder().append("a").set_bold().build()

    with pytest.raises(TypeError):
        RenderPass().drawable_for(styled.attachments[0])
