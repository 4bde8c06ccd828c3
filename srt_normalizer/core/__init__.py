"""Core parse-and-rewrite pipeline: parser, lexicon, normalizer, serializer."""

from srt_normalizer.core.lexicon import DEFAULT_LEXICON, Lexicon, build_lexicon, load_lexicon
from srt_normalizer.core.normalizer import normalize_all, normalize_text
from srt_normalizer.core.parser import decode_srt_bytes, parse_srt
from srt_normalizer.core.records import CaptionRecord
from srt_normalizer.core.serializer import serialize_srt

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
