"""JSON caption records formatter.

WHY: Downstream tools (review dashboards, search indexers) want the
structured records rather than SRT text, with both the original and the
normalized text side by side.

HOW: Serializes each record to a dict and dumps the list under a
"captions" key with 2-space indentation. The layout is described by
caption_records_schema.json next to this module.

RULES:
- Top-level object: {"caption_count": int, "captions": [...]}
- Each caption: index, start_time, end_time, raw_text, normalized_text
- normalized_text is always a string in the output (filled on the fly)
- ensure_ascii=False so non-Latin text stays readable
- The payload is validated against the schema before it is returned
- Output suffix: "-captions.json"
- Media type: "application/json"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import jsonschema

from srt_normalizer.core.records import CaptionRecord
from srt_normalizer.core.serializer import caption_text
from srt_normalizer.formatters.base import BaseFormatter, FormatterOutput

SCHEMA_PATH = Path(__file__).resolve().parent / "caption_records_schema.json"

_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    """Load caption_records_schema.json once and reuse it."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def record_to_dict(record: CaptionRecord) -> Dict[str, Any]:
    return {
        "index": record.index,
        "start_time": record.start_time,
        "end_time": record.end_time,
        "raw_text": record.raw_text,
        "normalized_text": caption_text(record),
    }


class JSONRecordsFormatter(BaseFormatter):
    """Formatter that exports caption records as JSON."""

    @property
    def name(self) -> str:
        return "JSON Records"

    @property
    def suffix(self) -> str:
        return "-captions.json"

    def format(self, records: Sequence[CaptionRecord]) -> List[FormatterOutput]:
        """Serialize records to the caption records JSON layout.

        Raises:
            jsonschema.ValidationError: If a record does not fit the schema,
                e.g. a timecode that is not "HH:MM:SS,mmm".
        """
        payload = {
            "caption_count": len(records),
            "captions": [record_to_dict(r) for r in records],
        }
        jsonschema.validate(instance=payload, schema=_get_schema())

        return [
            FormatterOutput(
                suffix=self.suffix,
                content=json.dumps(payload, indent=2, ensure_ascii=False) + "\n",
                media_type="application/json",
            )
        ]
