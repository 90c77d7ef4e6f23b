"""Drawing surface protocol implemented by hosts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Tuple

from spantext.images.sources import Drawable


class Canvas(Protocol):
    def draw_rect(
        self, left: float, top: float, right: float, bottom: float, *, color: int
    ) -> None: ...

    def draw_circle(self, cx: float, cy: float, radius: float, *, color: int) -> None: ...

    def draw_text(self, text: str, x: float, y: float) -> None: ...

    def draw_drawable(self, drawable: Drawable, x: float, y: float) -> None: ...


@dataclass(slots=True)
class DrawOp:
    name: str
    args: Tuple[object, ...]
    color: int | None = None


@dataclass(slots=True)
class RecordingCanvas:
    """Canvas that records calls instead of painting; handy for previews."""

    operations: List[DrawOp] = field(default_factory=list)

    def draw_rect(
        self, left: float, top: float, right: float, bottom: float, *, color: int
    ) -> None:
        self.operations.append(DrawOp("rect", (left, top, right, bottom), color))

    def draw_circle(self, cx: float, cy: float, radius: float, *, color: int) -> None:
        self.operations.append(DrawOp("circle", (cx, cy, radius), color))

    def draw_text(self, text: str, x: float, y: float) -> None:
        self.operations.append(DrawOp("text", (text, x, y)))

    def draw_drawable(self, drawable: Drawable, x: float, y: float) -> None:
        self.operations.append(DrawOp("drawable", (drawable, x, y)))

    def names(self) -> List[str]:
        return [op.name for op in self.operations]
