"""Inline image sources and their resolution to drawables."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple, Union

from PIL import Image

from spantext.errors import ImageResolutionError
from spantext.runtime import telemetry

if TYPE_CHECKING:
    from .backend import ImageBackend


@dataclass(eq=False)
class Drawable:
    """Something a host canvas can draw inside a ``width`` x ``height`` box.

    Not slotted so the drawable cache can hold weak references to it.
    """

    width: int
    height: int
    payload: object = None
    label: str = "img"

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        return (0, 0, self.width, self.height)

    @classmethod
    def from_image(cls, image: Image.Image, *, label: str = "img") -> "Drawable":
        return cls(width=image.width, height=image.height, payload=image, label=label)


@dataclass(frozen=True, slots=True)
class BitmapSource:
    image: Image.Image


@dataclass(frozen=True, slots=True)
class DrawableSource:
    drawable: Drawable


@dataclass(frozen=True, slots=True)
class UriSource:
    uri: str


@dataclass(frozen=True, slots=True)
class ResourceSource:
    resource_id: int


ImageSource = Union[BitmapSource, DrawableSource, UriSource, ResourceSource]


def decode_bitmap(data: bytes, *, label: str = "img") -> Drawable:
    """Decode encoded image bytes with Pillow."""

    with Image.open(io.BytesIO(data)) as image:
        image.load()
        return Drawable.from_image(image.copy(), label=label)


def _load(source: ImageSource, backend: Optional["ImageBackend"]) -> Drawable:
    if isinstance(source, DrawableSource):
        return source.drawable
    if isinstance(source, BitmapSource):
        return Drawable.from_image(source.image)
    if backend is None:
        raise ImageResolutionError("No image backend configured", source=source)
    if isinstance(source, UriSource):
        return decode_bitmap(backend.open_stream(source.uri), label=source.uri)
    if isinstance(source, ResourceSource):
        return backend.lookup_resource(source.resource_id)
    raise TypeError(f"Unsupported image source {type(source).__name__}")


def resolve_drawable(
    source: ImageSource, backend: Optional["ImageBackend"] = None
) -> Optional[Drawable]:
    """Resolve ``source`` to a drawable, or ``None`` if that fails.

    Failures are logged and swallowed so one broken image never aborts the
    rest of the text.
    """

    try:
        return _load(source, backend)
    except Exception as exc:  # noqa: BLE001 - any backend or decoder failure
        telemetry.record_event(
            "image.resolve_failed",
            level="error",
            data={"source": source, "error": str(exc)},
        )
        return None


__all__ = [
    "Drawable",
    "BitmapSource",
    "DrawableSource",
    "UriSource",
    "ResourceSource",
    "ImageSource",
    "decode_bitmap",
    "resolve_drawable",
]
