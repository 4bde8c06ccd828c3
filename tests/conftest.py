"""Shared test fixtures for the srt_normalizer test suite.

WHY: Parser, normalizer, formatter, CLI and API tests all need the same
realistic SRT samples. Centralizing them here keeps the expected values
in one place.

HOW: Module-level constants hold the sample file contents; pytest
fixtures hand out the text, parsed records and files on disk.

RULES:
- SAMPLE_SRT has 4 well-formed captions covering annotations, soft
  breaks, hard breaks and lexicon words
- MESSY_SRT mixes CRLF endings, a BOM, a header block and malformed
  blocks between valid ones
"""

from typing import List

import pytest

from srt_normalizer.core.parser import parse_srt
from srt_normalizer.core.records import CaptionRecord


SAMPLE_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:03,500\n"
    "[MUSIC PLAYING]\n"
    "i went to new york\n"
    "on monday\n"
    "\n"
    "2\n"
    "00:00:04,000 --> 00:00:06,000\n"
    "HELLO THERE.\n"
    "MY FRIEND.\n"
    "\n"
    "3\n"
    "00:00:06,500 --> 00:00:08,000\n"
    "[background noise]\n"
    "\n"
    "4\n"
    "00:00:09,000 --> 00:00:11,250\n"
    "<i>the nasa guy</i> said\n"
    "{\\an8}it's fine\n"
    "\n"
)

MESSY_SRT = (
    "\ufeffWEBVTT-ish header\r\n"
    "not a caption\r\n"
    "\r\n"
    "1\r\n"
    "00:00:01,000 --> 00:00:02,000\r\n"
    "first line\r\n"
    "\r\n"
    "2\r\n"
    "not a timecode\r\n"
    "dropped text\r\n"
    "\r\n"
    "x\r\n"
    "00:00:03,000 --> 00:00:04,000\r\n"
    "dropped too\r\n"
    "\r\n"
    "7\r\n"
    "00:00:05,000 --> 00:00:06,000 X1:40 X2:600 Y1:20 Y2:50\r\n"
    "out of order\r\n"
    "\r\n"
    "\r\n"
    "\r\n"
)


@pytest.fixture
def sample_srt() -> str:
    """Four-caption SRT sample with annotations and lexicon words."""
    return SAMPLE_SRT


@pytest.fixture
def messy_srt() -> str:
    """SRT sample with CRLF endings, a BOM and malformed blocks."""
    return MESSY_SRT


@pytest.fixture
def sample_records() -> List[CaptionRecord]:
    """SAMPLE_SRT parsed into records (not normalized)."""
    return parse_srt(SAMPLE_SRT)


@pytest.fixture
def sample_srt_file(tmp_path):
    """SAMPLE_SRT written to episode1.srt in a temp directory."""
    path = tmp_path / "episode1.srt"
    path.write_text(SAMPLE_SRT, encoding="utf-8")
    return path
