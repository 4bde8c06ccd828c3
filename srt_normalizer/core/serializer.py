"""Serialize caption records back to SRT text."""

from __future__ import annotations

from typing import Iterable, List

from srt_normalizer.core.normalizer import normalize_text
from srt_normalizer.core.records import CaptionRecord


def caption_text(record: CaptionRecord, use_normalized: bool = True) -> str:
    """Return the text a record should be written with.

    A record that was never normalized is normalized on the fly with the
    default lexicon, which gives the same text normalize_all() would.
    """
    if not use_normalized:
        return record.raw_text
    if record.normalized_text is None:
        return normalize_text(record.raw_text)
    return record.normalized_text


def serialize_srt(
    records: Iterable[CaptionRecord],
    use_normalized: bool = True,
    skip_empty: bool = False,
) -> str:
    """Write records as SRT blocks.

    Each block is the index line, the timecode line, the text and a blank
    separator line. Indices and timecodes are written exactly as parsed.

    Args:
        records: Records in output order.
        use_normalized: Write normalized text (True) or raw text (False).
        skip_empty: Omit records whose chosen text is empty. Without this,
            an empty caption is still written but will not parse back.

    Returns:
        SRT file content, or "" for no records.
    """
    blocks: List[str] = []
    for record in records:
        text = caption_text(record, use_normalized)
        if skip_empty and not text.strip():
            continue
        blocks.append("{}\n{}\n{}\n\n".format(record.index, record.timecode, text))
    return "".join(blocks)
