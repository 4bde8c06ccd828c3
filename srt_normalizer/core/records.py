"""Caption record dataclass shared by the parser, normalizer and serializer.

WHY: Every stage of the pipeline passes the same unit around: one SRT
block with its index, timecodes and text. A single dataclass keeps the
parser, the normalizer, the serializer and the export formatters agreeing
on field names.

HOW: CaptionRecord holds the four values the parser extracts from a block
plus an optional normalized_text that the normalizer fills in. Records are
never edited in place; normalization produces new records via
dataclasses.replace().

RULES:
- index is the number declared in the file (may repeat, may be out of order)
- start_time / end_time are opaque "HH:MM:SS,mmm" strings, never parsed
- raw_text keeps the block's internal newlines exactly as found
- normalized_text is None until normalize_all() has run
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class CaptionRecord:
    """One parsed SRT caption block.

    Attributes:
        index: Sequence number as declared in the source file.
        start_time: Start timecode, e.g. ``"00:00:01,000"``.
        end_time: End timecode, e.g. ``"00:00:02,500"``.
        raw_text: Caption text as it appeared in the block, newline-joined.
        normalized_text: Rewritten text, or None before normalization.
    """

    index: int
    start_time: str
    end_time: str
    raw_text: str
    normalized_text: Optional[str] = None

    @property
    def timecode(self) -> str:
        """The block's timecode line, ``"start --> end"``."""
        return "{} --> {}".format(self.start_time, self.end_time)
