"""SRT block parser: raw file text to ordered CaptionRecords.

WHY: Subtitle files in the wild are messy: mixed line endings, stray
blank lines, metadata headers, byte order marks, position coordinates
after the timecode. A strict parser would reject most real files, so this
one is best-effort: it keeps every block that looks like a caption and
quietly skips everything else.

HOW: Line endings are normalized to "\\n", the text is split on blank
lines, and each candidate block is checked for an integer index line, a
timecode line and at least one text line. Valid blocks become
CaptionRecords in source order.

RULES:
- Blocks with fewer than 3 lines are dropped (trailing blank blocks too)
- The timecode line must contain "HH:MM:SS,mmm --> HH:MM:SS,mmm"
- The index line must be ASCII digits only after trimming (no sign,
  underscores or full-width digits)
- Dropped blocks are logged at DEBUG level, never raised
- Order is preserved; duplicate or out-of-order indices pass through
- Pure function of the input string
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from srt_normalizer.core.records import CaptionRecord

logger = logging.getLogger(__name__)

TIMECODE_RE = re.compile(r"(\d{2}:\d{2}:\d{2},\d{3}) --> (\d{2}:\d{2}:\d{2},\d{3})")

# A blank separator line may still carry stray spaces or tabs.
_BLOCK_SPLIT_RE = re.compile(r"\n[ \t]*\n")

_BOM = "\ufeff"

_INDEX_RE = re.compile(r"[0-9]+")


def _normalize_line_endings(content: str) -> str:
    return content.replace("\r\n", "\n").replace("\r", "\n")


def _parse_block(block: str) -> Optional[CaptionRecord]:
    """Turn one candidate block into a record, or None if it is malformed."""
    lines = block.strip().split("\n")
    if len(lines) < 3:
        return None

    match = TIMECODE_RE.search(lines[1])
    if match is None:
        logger.debug("Skipping block without a timecode line: %r", lines[1])
        return None

    index_line = lines[0].strip()
    if not _INDEX_RE.fullmatch(index_line):
        logger.debug("Skipping block with non-integer index: %r", lines[0])
        return None

    return CaptionRecord(
        index=int(index_line),
        start_time=match.group(1),
        end_time=match.group(2),
        raw_text="\n".join(lines[2:]),
    )


def parse_srt(content: str) -> List[CaptionRecord]:
    """Parse SRT text into caption records.

    Args:
        content: Full SRT file content as a string.

    Returns:
        Records for every well-formed block, in source order. Empty if
        nothing in the input looks like a caption.
    """
    if not content:
        return []

    if content.startswith(_BOM):
        content = content[len(_BOM):]

    records: List[CaptionRecord] = []
    for block in _BLOCK_SPLIT_RE.split(_normalize_line_endings(content)):
        record = _parse_block(block)
        if record is not None:
            records.append(record)

    logger.debug("Parsed %d caption(s)", len(records))
    return records


def decode_srt_bytes(data: bytes) -> str:
    """Decode uploaded SRT bytes to text.

    WHY: Subtitle files arrive as UTF-8 (with or without a BOM) or in
    legacy Chinese encodings from older authoring tools. The caller should
    always get text back, even if a few characters are lost.

    HOW: Try utf-8-sig, then gb18030. If both fail, decode as UTF-8 with
    replacement characters and log a warning.
    """
    for encoding in ("utf-8-sig", "gb18030"):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    logger.warning("Could not decode SRT input cleanly; replacing invalid bytes")
    return data.decode("utf-8", errors="replace")
