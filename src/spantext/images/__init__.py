"""Inline image sources, backends, and the drawable cache."""

from .backend import ImageBackend, LocalImageBackend
from .cache import CacheStats, DrawableCache
from .sources import (
    BitmapSource,
    Drawable,
    DrawableSource,
    ImageSource,
    ResourceSource,
    UriSource,
    decode_bitmap,
    resolve_drawable,
)

__all__ = [
    "ImageBackend",
    "LocalImageBackend",
    "CacheStats",
    "DrawableCache",
    "BitmapSource",
    "Drawable",
    "DrawableSource",
    "ImageSource",
    "ResourceSource",
    "UriSource",
    "decode_bitmap",
    "resolve_drawable",
]
