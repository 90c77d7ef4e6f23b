"""Image backends used to fetch URI content and look up resources."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Protocol, Union
from urllib.parse import unquote, urlparse

from PIL import Image

from spantext.errors import ImageResolutionError

from .sources import Drawable, decode_bitmap

ResourceValue = Union[Drawable, Image.Image, str, os.PathLike]


class ImageBackend(Protocol):
    """Blocking lookups performed while a styled text is being drawn."""

    def open_stream(self, uri: str) -> bytes:
        """Return the raw bytes behind ``uri`` or raise ``ImageResolutionError``."""
        ...

    def lookup_resource(self, resource_id: int) -> Drawable:
        """Return the drawable registered as ``resource_id``."""
        ...


class LocalImageBackend:
    """Serves ``file://`` URIs and bare paths, plus an in-memory resource table."""

    def __init__(
        self,
        resources: Dict[int, ResourceValue] | None = None,
        *,
        root: str | os.PathLike | None = None,
    ) -> None:
        self._resources: Dict[int, ResourceValue] = dict(resources or {})
        self._root = Path(root) if root is not None else None

    def register_resource(self, resource_id: int, value: ResourceValue) -> None:
        self._resources[resource_id] = value

    def _path_for(self, uri: str) -> Path:
        parsed = urlparse(uri)
        if parsed.scheme == "file":
            path = Path(unquote(parsed.path))
        elif not parsed.scheme or len(parsed.scheme) == 1:
            # a one-letter scheme is a Windows drive letter
            path = Path(uri)
        else:
            raise ImageResolutionError(
                f"Unsupported URI scheme '{parsed.scheme}'", source=uri
            )
        if self._root is not None and not path.is_absolute():
            path = self._root / path
        return path

    def open_stream(self, uri: str) -> bytes:
        path = self._path_for(uri)
        try:
            with open(path, "rb") as handle:
                return handle.read()
        except OSError as exc:
            raise ImageResolutionError(
                f"Failed to load content {uri}: {exc}", source=uri
            ) from exc

    def lookup_resource(self, resource_id: int) -> Drawable:
        try:
            value = self._resources[resource_id]
        except KeyError as exc:
            raise ImageResolutionError(
                f"Unable to find resource: {resource_id}", source=resource_id
            ) from exc
        if isinstance(value, Drawable):
            return value
        if isinstance(value, Image.Image):
            return Drawable.from_image(value, label=f"res:{resource_id}")
        path = self._path_for(os.fspath(value))
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise ImageResolutionError(
                f"Unable to read resource {resource_id}: {exc}", source=resource_id
            ) from exc
        return decode_bitmap(data, label=f"res:{resource_id}")


__all__ = ["ImageBackend", "LocalImageBackend", "ResourceValue"]
