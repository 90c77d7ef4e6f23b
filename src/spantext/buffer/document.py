"""Append-only text storage backing a span builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from spantext.errors import BufferFrozenError

from .ranges import SpanRange


@dataclass(slots=True)
class TextBuffer:
    """Growing character buffer.

    Chunks are kept in a list and joined lazily; ``text`` caches the joined
    value until the next append. Once ``freeze`` has been called the buffer
    is owned by a finished ``StyledText`` and refuses further appends.
    """

    _chunks: List[str] = field(default_factory=list)
    _length: int = 0
    _joined: str | None = ""
    frozen: bool = False

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        buffer = cls()
        if text:
            buffer.append(text)
        return buffer

    def append(self, text: str) -> SpanRange:
        """Append ``text`` and return the ``[old_len, new_len)`` range it occupies."""

        if self.frozen:
            raise BufferFrozenError("Cannot append to a frozen buffer")
        start = self._length
        if text:
            self._chunks.append(text)
            self._length += len(text)
            self._joined = None
        return SpanRange(start, self._length)

    @property
    def text(self) -> str:
        if self._joined is None:
            self._joined = "".join(self._chunks)
            self._chunks = [self._joined] if self._joined else []
        return self._joined

    def find(self, literal: str) -> int:
        """First-occurrence offset of ``literal``, or -1."""

        return self.text.find(literal)

    def freeze(self) -> str:
        self.frozen = True
        return self.text

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.text
