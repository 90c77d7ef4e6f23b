"""Immutable result of a span builder run."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterator, Tuple

from spantext.buffer import SpanRange
from spantext.directives import LINK_KINDS, Directive, SpanFlag

_ATTACHMENT_KEYS = itertools.count()


def _next_key() -> int:
    return next(_ATTACHMENT_KEYS)


@dataclass(frozen=True, slots=True)
class Attachment:
    """A directive bound to a range with an extension flag.

    ``order`` is the position in the builder's attach sequence. ``key`` is
    unique within the process and identifies the attachment in caches.
    """

    range: SpanRange
    directive: Directive
    flag: SpanFlag
    order: int
    key: int = field(default_factory=_next_key, compare=False)

    @property
    def kind(self) -> str:
        return self.directive.kind

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end


@dataclass(frozen=True, slots=True)
class StyledText:
    """Finished text plus its attachments in paint order."""

    text: str
    attachments: Tuple[Attachment, ...] = ()

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def __iter__(self) -> Iterator[Attachment]:
        return iter(self.attachments)

    def attachments_at(self, offset: int) -> Tuple[Attachment, ...]:
        """Attachments covering ``offset``, in the order they were attached."""

        return tuple(a for a in self.attachments if a.range.contains(offset))

    def attachments_of(self, kind: str) -> Tuple[Attachment, ...]:
        return tuple(a for a in self.attachments if a.kind == kind)

    def span_start(self, attachment: Attachment) -> int:
        return attachment.range.start

    def span_end(self, attachment: Attachment) -> int:
        return attachment.range.end

    def text_of(self, attachment: Attachment) -> str:
        return attachment.range.slice(self.text)

    @property
    def has_links(self) -> bool:
        return any(a.kind in LINK_KINDS for a in self.attachments)


__all__ = ["Attachment", "StyledText"]
