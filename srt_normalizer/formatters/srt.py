"""Normalized SRT formatter.

WHY: The main deliverable is the same subtitle file with its text
rewritten: indices and timecodes untouched, text normalized.

HOW: Delegates to serialize_srt() with use_normalized=True.

RULES:
- Output suffix: "-formatted.srt"
- Media type: "application/x-subrip"
- Empty captions are written as-is; filter records first to drop them
"""

from __future__ import annotations

from typing import List, Sequence

from srt_normalizer.core.records import CaptionRecord
from srt_normalizer.core.serializer import serialize_srt
from srt_normalizer.formatters.base import BaseFormatter, FormatterOutput


class SRTFormatter(BaseFormatter):
    """Formatter that writes normalized captions back out as SRT."""

    @property
    def name(self) -> str:
        return "Normalized SRT"

    @property
    def suffix(self) -> str:
        return "-formatted.srt"

    def format(self, records: Sequence[CaptionRecord]) -> List[FormatterOutput]:
        content = serialize_srt(records, use_normalized=True)
        return [
            FormatterOutput(
                suffix=self.suffix,
                content=content,
                media_type="application/x-subrip",
            )
        ]
