"""Casing lexicon: tokens and phrases that override plain sentence case.

WHY: Sentence case lower-cases everything that does not start a sentence,
which mangles acronyms ("nasa"), the pronoun "I", names, days, months and
multi-word place names. The lexicon lists the fixed target casing for each
of these so the normalizer can put them back.

HOW: The curated word lists are plain tuples, easy to edit. build_lexicon()
turns them into a frozen Lexicon with two derived indexes:
  tokens        lower-cased single token -> canonical form, plus one
                compiled alternation (token_pattern) that matches any key
  phrases       (canonical phrase, compiled pattern) pairs for multi-word
                entries, matched as whole units
DEFAULT_LEXICON is built once at import and shared read-only. Extra terms
can be loaded from a text file (one term per line) and merged in as proper
nouns via load_lexicon().

RULES:
- Token keys are built in list order: uppercase, capitalized, proper
  nouns. A later entry with the same lower-cased key wins.
- Any entry containing whitespace is a phrase, never a token.
- Phrases are ordered longest-first (token count, then length) so a
  shorter phrase that is a prefix of a longer one cannot shadow it.
  Declaration order is the tie-break.
- Boundaries are lookarounds on word characters, not \\b, so keys that
  end in punctuation ("a.m.", "etc.") still match before a space.
- A Lexicon is immutable; build a new one to change it.
- Terms files: UTF-8, blank lines and lines starting with '#' ignored.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Pattern, Tuple

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Curated word lists
# ---------------------------------------------------------------------------

ALWAYS_UPPERCASE: Tuple[str, ...] = ("BBQ", "NASA", "FBI")

ALWAYS_CAPITALIZED: Tuple[str, ...] = ("I", "I'm", "I've", "I'd", "I'll", "Node.js")

PROPER_NOUNS: Tuple[str, ...] = (
    # Days and months
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday",
    "Saturday", "Sunday",
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
    # People
    "John", "Mary", "Grace", "Ambrosius", "Emily",
    "Kevin", "Toby", "Cory", "Josh", "Chrissy",
    "Jack", "Steven", "Danya", "Van", "Vanessa", "Amber",
    "Kev", "Adam",
    "Ambrosius Vallin", "Kevin Archer",
    # Places
    "New York", "Dante's Cove", "Dante's", "Hotel Dante",
    # Abbreviations
    "Dr", "Mr", "Mrs", "Ms", "Prof", "Ave", "St", "Rd",
    "a.m.", "p.m.", "etc.", "e.g.",
    # Other
    "Voodoo Cults",
)

_WORD_BEFORE = r"(?<!\w)"
_WORD_AFTER = r"(?!\w)"


# ---------------------------------------------------------------------------
# Lexicon
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Lexicon:
    """Immutable casing table with its derived lookup structures.

    Attributes:
        always_uppercase: Tokens rendered fully upper-case (acronyms).
        always_capitalized: Tokens with a fixed capitalization ("I'm").
        proper_nouns: Tokens and phrases with a fixed casing.
        tokens: Lower-cased single token -> canonical form.
        token_pattern: Case-insensitive alternation of every token key,
            or None when there are no tokens.
        phrases: (canonical phrase, pattern) pairs, longest first.
    """

    always_uppercase: Tuple[str, ...]
    always_capitalized: Tuple[str, ...]
    proper_nouns: Tuple[str, ...]
    tokens: Dict[str, str] = field(repr=False, compare=False)
    token_pattern: Optional[Pattern] = field(repr=False, compare=False)
    phrases: Tuple[Tuple[str, Pattern], ...] = field(repr=False, compare=False)

    def canonical_token(self, word: str) -> str:
        """Return the canonical form of a single token, or the token unchanged."""
        return self.tokens.get(word.lower(), word)


def _is_phrase(entry: str) -> bool:
    return len(entry.split()) > 1


def _build_token_map(entries: Iterable[str]) -> Dict[str, str]:
    tokens: Dict[str, str] = {}
    for entry in entries:
        if entry and not _is_phrase(entry):
            tokens[entry.lower()] = entry
    return tokens


def _build_token_pattern(tokens: Dict[str, str]) -> Optional[Pattern]:
    if not tokens:
        return None
    # Longest key first so "i'm" is tried before "i".
    keys = sorted(tokens, key=len, reverse=True)
    alternation = "|".join(re.escape(key) for key in keys)
    return re.compile(
        "{}({}){}".format(_WORD_BEFORE, alternation, _WORD_AFTER),
        re.IGNORECASE,
    )


def _phrase_pattern(phrase: str) -> Pattern:
    words = [re.escape(word) for word in phrase.lower().split()]
    return re.compile(
        _WORD_BEFORE + r"\s+".join(words) + _WORD_AFTER,
        re.IGNORECASE,
    )


def _build_phrases(entries: Iterable[str]) -> Tuple[Tuple[str, Pattern], ...]:
    seen = set()
    ordered: List[str] = []
    for entry in entries:
        if _is_phrase(entry) and entry not in seen:
            seen.add(entry)
            ordered.append(entry)
    # sorted() is stable, so declaration order breaks ties.
    ordered = sorted(ordered, key=lambda p: (len(p.split()), len(p)), reverse=True)
    return tuple((phrase, _phrase_pattern(phrase)) for phrase in ordered)


def build_lexicon(
    always_uppercase: Iterable[str] = ALWAYS_UPPERCASE,
    always_capitalized: Iterable[str] = ALWAYS_CAPITALIZED,
    proper_nouns: Iterable[str] = PROPER_NOUNS,
    extra_terms: Optional[Iterable[str]] = None,
) -> Lexicon:
    """Build a Lexicon and its lookup indexes from word lists.

    Args:
        always_uppercase: Acronyms and other all-caps tokens.
        always_capitalized: Tokens with a fixed capitalization pattern.
        proper_nouns: Names, places, abbreviations and multi-word phrases.
        extra_terms: Additional proper nouns, e.g. from a terms file. They
            come last, so they override a default with the same key.

    Returns:
        A frozen Lexicon ready to hand to the normalizer.
    """
    upper = tuple(always_uppercase)
    capitalized = tuple(always_capitalized)
    nouns = tuple(proper_nouns)
    if extra_terms:
        nouns = nouns + tuple(" ".join(term.split()) for term in extra_terms if term.strip())

    tokens = _build_token_map(upper + capitalized + nouns)
    return Lexicon(
        always_uppercase=upper,
        always_capitalized=capitalized,
        proper_nouns=nouns,
        tokens=tokens,
        token_pattern=_build_token_pattern(tokens),
        phrases=_build_phrases(nouns),
    )


DEFAULT_LEXICON = build_lexicon()


# ---------------------------------------------------------------------------
# Terms files
# ---------------------------------------------------------------------------


def load_lexicon_terms(path: str | Path) -> List[str]:
    """Load extra lexicon terms from a text file.

    HOW: One term per line, written in its target casing ("SVT",
    "Melodifestivalen", "Hotel California"). Whitespace is stripped; blank
    lines and '#' comments are skipped.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    text = Path(path).read_text(encoding="utf-8")
    terms: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            terms.append(line)
    return terms


def load_lexicon(path: Optional[str | Path] = None) -> Lexicon:
    """Return the default lexicon, extended with terms from path if given."""
    if path is None:
        return DEFAULT_LEXICON
    terms = load_lexicon_terms(path)
    logger.info("Loaded %d extra lexicon term(s) from %s", len(terms), path)
    return build_lexicon(extra_terms=terms)
