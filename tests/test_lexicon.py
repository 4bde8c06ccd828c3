"""Tests for the casing lexicon and terms-file loading.

WHY: The lexicon's derived indexes (token map, token alternation, phrase
order) decide which casing wins when entries overlap. These rules are
easy to break by editing the word lists.

HOW: Build small lexicons with build_lexicon() and inspect the derived
fields; load terms files from tmp_path.

RULES:
- Phrases come out longest first, declaration order breaking ties
- A later token with the same lower-cased key wins
"""

import dataclasses

import pytest

from srt_normalizer.core.lexicon import (
    DEFAULT_LEXICON,
    build_lexicon,
    load_lexicon,
    load_lexicon_terms,
)


class TestBuildLexicon:
    """Derived indexes built by build_lexicon()."""

    def test_default_tokens_present(self):
        assert DEFAULT_LEXICON.tokens["nasa"] == "NASA"
        assert DEFAULT_LEXICON.tokens["i'm"] == "I'm"
        assert DEFAULT_LEXICON.tokens["monday"] == "Monday"
        assert DEFAULT_LEXICON.tokens["a.m."] == "a.m."

    def test_phrases_are_not_tokens(self):
        assert "new york" not in DEFAULT_LEXICON.tokens
        assert "New York" in [phrase for phrase, _ in DEFAULT_LEXICON.phrases]

    def test_phrases_longest_first(self):
        lexicon = build_lexicon(proper_nouns=("New York", "New York City"))
        assert [phrase for phrase, _ in lexicon.phrases] == ["New York City", "New York"]

    def test_phrase_ties_keep_declaration_order(self):
        lexicon = build_lexicon(proper_nouns=("Aa Bb", "Cc Dd"))
        assert [phrase for phrase, _ in lexicon.phrases] == ["Aa Bb", "Cc Dd"]

    def test_duplicate_phrases_collapsed(self):
        lexicon = build_lexicon(proper_nouns=("Hotel Dante", "Hotel Dante"))
        assert len(lexicon.phrases) == 1

    def test_later_token_wins(self):
        lexicon = build_lexicon(always_uppercase=("DR",), proper_nouns=("Dr",))
        assert lexicon.canonical_token("dr") == "Dr"

    def test_extra_terms_override_defaults(self):
        lexicon = build_lexicon(extra_terms=["NODE.JS"])
        assert lexicon.canonical_token("node.js") == "NODE.JS"

    def test_extra_terms_whitespace_collapsed(self):
        lexicon = build_lexicon(proper_nouns=(), extra_terms=["  Hotel   California ", "   "])
        assert lexicon.proper_nouns == ("Hotel California",)

    def test_canonical_token_unknown_word_unchanged(self):
        assert DEFAULT_LEXICON.canonical_token("Table") == "Table"

    def test_no_tokens_means_no_pattern(self):
        lexicon = build_lexicon(always_uppercase=(), always_capitalized=(), proper_nouns=())
        assert lexicon.token_pattern is None
        assert lexicon.phrases == ()

    def test_lexicon_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_LEXICON.proper_nouns = ()

    def test_token_pattern_whole_words(self):
        assert DEFAULT_LEXICON.token_pattern.search("caravan") is None
        assert DEFAULT_LEXICON.token_pattern.search("a van") is not None


class TestTermsFile:
    """load_lexicon_terms() and load_lexicon()."""

    def test_comments_and_blank_lines_skipped(self, tmp_path):
        path = tmp_path / "terms.txt"
        path.write_text("# broadcasters\nSVT\n\n  Melodifestivalen  \n#\n", encoding="utf-8")
        assert load_lexicon_terms(path) == ["SVT", "Melodifestivalen"]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_lexicon_terms(tmp_path / "missing.txt")

    def test_load_lexicon_without_path_is_default(self):
        assert load_lexicon() is DEFAULT_LEXICON

    def test_load_lexicon_extends_default(self, tmp_path):
        path = tmp_path / "terms.txt"
        path.write_text("SVT\nHotel California\n", encoding="utf-8")
        lexicon = load_lexicon(path)
        assert lexicon.canonical_token("svt") == "SVT"
        assert lexicon.canonical_token("nasa") == "NASA"
        assert "Hotel California" in [phrase for phrase, _ in lexicon.phrases]
