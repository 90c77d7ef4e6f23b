"""Line-height harmonisation across consecutive line-height directives."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from spantext.directives import Align, LineHeight

from .metrics import FontMetrics, half


class LineHeightState(str, Enum):
    UNINITIALIZED = "uninitialized"
    CAPTURING = "capturing"
    PROPAGATING = "propagating"


def _grow(
    need: int, align: Align, upper: int, lower: int
) -> tuple[int, int]:
    """Return ``(upper, lower)`` after distributing ``need`` pixels."""

    if need <= 0:
        return upper, lower
    if align == Align.TOP:
        return upper, lower + need
    if align == Align.CENTER:
        return upper - half(need), lower + half(need)
    return upper - need, lower


class LineHeightCoordinator:
    """Keeps every line-height directive in a pass on one metrics snapshot.

    The first directive seen captures the host's metrics; every later one
    starts from that snapshot instead of the (possibly already adjusted)
    metrics it was handed. The snapshot is dropped once a directive reports
    the end of its own range. One coordinator belongs to one ``RenderPass``.
    """

    def __init__(self) -> None:
        self.state = LineHeightState.UNINITIALIZED
        self._snapshot: Optional[FontMetrics] = None

    @property
    def snapshot(self) -> Optional[FontMetrics]:
        return self._snapshot.copy() if self._snapshot is not None else None

    def choose_height(
        self,
        directive: LineHeight,
        fm: FontMetrics,
        *,
        line_end: int,
        span_end: int,
        span_start_v: int = 0,
        v: int = 0,
    ) -> FontMetrics:
        """Adjust ``fm`` in place for the line ending at ``line_end``.

        ``v`` is the top of the current line and ``span_start_v`` the top of
        the line where the directive's range starts.
        """

        if self._snapshot is None:
            self._snapshot = fm.copy()
            self.state = LineHeightState.CAPTURING
        else:
            fm.assign(self._snapshot)
            self.state = LineHeightState.PROPAGATING

        height = directive.height
        offset = v - span_start_v
        fm.ascent, fm.descent = _grow(
            height - (offset + fm.text_height), directive.align, fm.ascent, fm.descent
        )
        fm.top, fm.bottom = _grow(
            height - (offset + fm.line_height), directive.align, fm.top, fm.bottom
        )

        if line_end == span_end:
            self.reset()
        return fm

    def reset(self) -> None:
        self._snapshot = None
        self.state = LineHeightState.UNINITIALIZED


__all__ = ["LineHeightCoordinator", "LineHeightState"]
