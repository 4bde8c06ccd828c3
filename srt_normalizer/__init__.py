"""SRT sentence-case normalizer.

WHY: Subtitle text is written for the screen: wrapped to fit the display,
sprinkled with sound annotations and styling tags, often in all caps.
This package turns SRT files into clean, sentence-cased text while keeping
every index and timecode intact.

HOW: Two-stage core (parse SRT blocks, normalize each caption's text)
with a serializer to write SRT back out. Export formatters, a CLI and a
FastAPI service are thin layers on top.

RULES:
- The core never raises on text input; malformed blocks are skipped
- Normalization is a pure function of (raw text, lexicon)
- Records are never mutated; normalize_all() returns new ones
"""

from srt_normalizer.core import (
    DEFAULT_LEXICON,
    CaptionRecord,
    Lexicon,
    build_lexicon,
    decode_srt_bytes,
    load_lexicon,
    normalize_all,
    normalize_text,
    parse_srt,
    serialize_srt,
)

__version__ = "0.1.0"

__all__ = [
    "CaptionRecord",
    "DEFAULT_LEXICON",
    "Lexicon",
    "build_lexicon",
    "decode_srt_bytes",
    "load_lexicon",
    "normalize_all",
    "normalize_text",
    "parse_srt",
    "serialize_srt",
]
