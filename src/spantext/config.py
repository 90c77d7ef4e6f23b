"""Builder defaults, overridable from ``SPANTEXT_*`` environment variables."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from spantext.directives import Align, SpanFlag

ENV_PREFIX = "SPANTEXT_"

IMAGE_MARKER = "\x02"
IMAGE_PLACEHOLDER = "<img>"
SPACE_PLACEHOLDER = "< >"


@dataclass(frozen=True, slots=True)
class BuilderDefaults:
    """Constants a ``SpanBuilder`` falls back to when a call omits them."""

    line_separator: str = "\n"
    image_marker: str = IMAGE_MARKER
    image_placeholder: str = IMAGE_PLACEHOLDER
    space_placeholder: str = SPACE_PLACEHOLDER
    flag: SpanFlag = SpanFlag.EXCLUSIVE_EXCLUSIVE
    image_align: Align = Align.BOTTOM
    line_height_align: Align = Align.CENTER
    quote_stripe_width: int = 2
    quote_gap_width: int = 2
    bullet_color: int = 0
    bullet_radius: int = 3

    def __post_init__(self) -> None:
        if len(self.image_marker) != 1:
            raise ValueError("image_marker must be a single character")
        if not self.image_placeholder or not self.space_placeholder:
            raise ValueError("placeholders cannot be empty")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BuilderDefaults":
        env = os.environ if environ is None else environ
        defaults = cls()
        separator = env.get(f"{ENV_PREFIX}LINE_SEPARATOR")
        if separator is not None:
            if "\\" in separator:
                # escaped values such as "\r\n" from shells
                separator = codecs.decode(separator, "unicode_escape")
            defaults = replace(defaults, line_separator=separator)
        flag = env.get(f"{ENV_PREFIX}DEFAULT_FLAG")
        if flag:
            try:
                defaults = replace(defaults, flag=SpanFlag(flag.strip().lower()))
            except ValueError as exc:
                raise ValueError(f"Unknown span flag '{flag}'") from exc
        return defaults


__all__ = [
    "BuilderDefaults",
    "ENV_PREFIX",
    "IMAGE_MARKER",
    "IMAGE_PLACEHOLDER",
    "SPACE_PLACEHOLDER",
]
