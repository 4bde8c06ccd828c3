"""Caption text normalizer: annotation stripping, line merging, sentence case.

WHY: Raw caption text is written for the screen, not for reading. It
carries sound annotations ("[door slams]"), styling tags ("<i>"), lines
wrapped purely to fit the display width, and often ALL-CAPS or erratic
casing. Publishing it as a transcript or as clean subtitles needs one
consistent rewrite.

HOW: normalize_text() runs three stages in a fixed order, each feeding
the next:
  1. strip_annotations()  drop [...], {...} and <...> spans
  2. merge_soft_breaks()  join lines that do not end a sentence
  3. apply_sentence_case() lower-case, capitalize sentence starts, then
     restore lexicon tokens and phrases
normalize_all() applies normalize_text() to every record and returns new
records, leaving the input untouched.

RULES:
- Pure and deterministic: the output depends only on the text and lexicon
- Never raises on text input; empty or annotation-only text gives ""
- Annotation spans are non-greedy and never cross a line break
- Sentence-terminal marks: . ? ! and the full-width 。 ？ ！
- Token substitution runs before phrase substitution, so a phrase always
  ends up in its full canonical form
- The lexicon is passed in explicitly; DEFAULT_LEXICON is only a default
"""

from __future__ import annotations

import dataclasses
import logging
import re
from typing import Iterable, List

from srt_normalizer.core.lexicon import DEFAULT_LEXICON, Lexicon
from srt_normalizer.core.records import CaptionRecord

logger = logging.getLogger(__name__)

ANNOTATION_RE = re.compile(r"\[.*?\]|\{.*?\}|<.*?>")

SENTENCE_TERMINALS = (".", "?", "!", "。", "？", "！")

# Line start, or a terminal mark plus whitespace, then any opening
# punctuation (quotes, brackets, dialogue dashes, music notes) before the
# first letter.
_SENTENCE_START_RE = re.compile(
    r"(^|[.?!。？！]\s+)"
    r"([\s\"'“‘«(\-–—¿¡♪]*)"
    r"([^\W\d_])",
    re.MULTILINE,
)


def strip_annotations(text: str) -> str:
    """Remove bracketed, braced and angle-bracketed spans."""
    return ANNOTATION_RE.sub("", text)


def ends_sentence(line: str) -> bool:
    """True if the trimmed line ends with a sentence-terminal mark."""
    return line.strip().endswith(SENTENCE_TERMINALS)


def merge_soft_breaks(text: str) -> str:
    """Join display-width line wraps back into sentences.

    HOW: Lines are trimmed and their internal whitespace collapsed; lines
    left empty are dropped. Each remaining line starts a new output line
    only if the previous line ended a sentence, otherwise it is appended
    with a single space.
    """
    lines = [" ".join(line.split()) for line in text.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        return ""

    parts = [lines[0]]
    for previous, current in zip(lines, lines[1:]):
        parts.append("\n" if ends_sentence(previous) else " ")
        parts.append(current)
    return "".join(parts)


def _capitalize_sentence_start(match: "re.Match") -> str:
    return match.group(1) + match.group(2) + match.group(3).upper()


def apply_sentence_case(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Rewrite text into sentence case, then restore lexicon casing.

    Steps, each on the whole string:
      a. lower-case, then upper-case the first letter of every sentence
         and every line
      b. replace each lexicon token (case-insensitive, whole word) with
         its canonical form
      c. replace each lexicon phrase, longest first, with its canonical
         form
    """
    result = _SENTENCE_START_RE.sub(_capitalize_sentence_start, text.lower())

    if lexicon.token_pattern is not None:
        result = lexicon.token_pattern.sub(
            lambda m: lexicon.canonical_token(m.group(0)), result
        )

    for phrase, pattern in lexicon.phrases:
        result = pattern.sub(lambda _m, canonical=phrase: canonical, result)

    return result


def normalize_text(raw_text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """Normalize one caption's raw text.

    Args:
        raw_text: Caption text, possibly multi-line.
        lexicon: Casing exceptions to apply. Defaults to DEFAULT_LEXICON.

    Returns:
        The rewritten text, or "" if nothing is left after stripping
        annotations.
    """
    if not raw_text:
        return ""

    cleaned = strip_annotations(raw_text).strip()
    if not cleaned:
        return ""

    merged = merge_soft_breaks(cleaned)
    if not merged:
        return ""

    return apply_sentence_case(merged, lexicon)


def normalize_all(
    records: Iterable[CaptionRecord],
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> List[CaptionRecord]:
    """Return copies of records with normalized_text filled in.

    The input records are not modified. Each record is normalized on its
    own, so the result does not depend on neighbouring captions.
    """
    normalized = [
        dataclasses.replace(record, normalized_text=normalize_text(record.raw_text, lexicon))
        for record in records
    ]
    logger.debug("Normalized %d caption(s)", len(normalized))
    return normalized
