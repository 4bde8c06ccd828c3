"""Plain text transcript formatter.

WHY: Editors want the dialogue alone for review and archival: no
indices, no timecodes, just the normalized text.

HOW: Writes each caption's normalized text as its own paragraph.
Captions that normalize to an empty string (pure sound annotations) are
skipped.

RULES:
- One paragraph per non-empty caption, in record order
- Double newline between paragraphs, single trailing newline
- Output suffix: "-transcript.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List, Sequence

from srt_normalizer.core.records import CaptionRecord
from srt_normalizer.core.serializer import caption_text
from srt_normalizer.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):
    """Formatter that produces one paragraph per caption."""

    @property
    def name(self) -> str:
        return "Plain Text"

    @property
    def suffix(self) -> str:
        return "-transcript.txt"

    def format(self, records: Sequence[CaptionRecord]) -> List[FormatterOutput]:
        paragraphs = [text for text in (caption_text(r) for r in records) if text]

        content = "\n\n".join(paragraphs)
        if content:
            content += "\n"

        return [
            FormatterOutput(
                suffix=self.suffix,
                content=content,
                media_type="text/plain",
            )
        ]
