"""Non-owning drawable cache keyed by attachment identity."""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Optional

from .sources import Drawable


@dataclass(slots=True)
class CacheStats:
    hits: int = 0
    misses: int = 0


class DrawableCache:
    """Remembers resolved drawables without keeping them alive.

    Entries are weak references, so a drawable nobody else holds may be
    collected and resolved again on the next draw. The cache is only a
    performance hint: ``enabled=False`` bypasses it entirely.
    """

    def __init__(self, *, enabled: bool = True) -> None:
        self.enabled = enabled
        self.stats = CacheStats()
        self._refs: Dict[Hashable, "weakref.ref[Drawable]"] = {}

    def get(self, key: Hashable) -> Optional[Drawable]:
        ref = self._refs.get(key)
        if ref is None:
            return None
        drawable = ref()
        if drawable is None:
            del self._refs[key]
        return drawable

    def put(self, key: Hashable, drawable: Drawable) -> None:
        if self.enabled:
            self._refs[key] = weakref.ref(drawable)

    def get_or_resolve(
        self, key: Hashable, loader: Callable[[], Optional[Drawable]]
    ) -> Optional[Drawable]:
        if not self.enabled:
            return loader()
        drawable = self.get(key)
        if drawable is not None:
            self.stats.hits += 1
            return drawable
        self.stats.misses += 1
        drawable = loader()
        if drawable is not None:
            self.put(key, drawable)
        return drawable

    def discard(self, key: Hashable) -> None:
        self._refs.pop(key, None)

    def clear(self) -> None:
        self._refs.clear()

    def __len__(self) -> int:
        return sum(1 for ref in self._refs.values() if ref() is not None)

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key) is not None


__all__ = ["CacheStats", "DrawableCache"]
