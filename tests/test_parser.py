"""Unit tests for the SRT block parser.

WHY: The parser is the only entry point for file content. It must keep
every well-formed caption and quietly drop everything else, without ever
raising on odd input.

HOW: Tests feed small SRT strings to parse_srt() and check the records,
plus decode_srt_bytes() with a few encodings.

RULES:
- Malformed blocks disappear from the output; they never raise
- Indices and timecodes come through exactly as written
"""

import pytest

from srt_normalizer.core.parser import decode_srt_bytes, parse_srt
from srt_normalizer.core.records import CaptionRecord


class TestParseWellFormed:
    """parse_srt() on valid input."""

    def test_sample_yields_all_captions(self, sample_srt):
        records = parse_srt(sample_srt)
        assert [r.index for r in records] == [1, 2, 3, 4]

    def test_fields_extracted(self, sample_srt):
        first = parse_srt(sample_srt)[0]
        assert first == CaptionRecord(
            index=1,
            start_time="00:00:01,000",
            end_time="00:00:03,500",
            raw_text="[MUSIC PLAYING]\ni went to new york\non monday",
        )

    def test_normalized_text_absent_after_parse(self, sample_records):
        assert all(r.normalized_text is None for r in sample_records)

    def test_multiline_text_keeps_line_breaks(self, sample_records):
        assert sample_records[1].raw_text == "HELLO THERE.\nMY FRIEND."

    def test_timecode_property(self, sample_records):
        assert sample_records[0].timecode == "00:00:01,000 --> 00:00:03,500"

    def test_duplicate_and_out_of_order_indices_preserved(self):
        content = (
            "5\n00:00:01,000 --> 00:00:02,000\nfive\n\n"
            "2\n00:00:03,000 --> 00:00:04,000\ntwo\n\n"
            "2\n00:00:05,000 --> 00:00:06,000\ntwo again\n"
        )
        records = parse_srt(content)
        assert [r.index for r in records] == [5, 2, 2]
        assert [r.raw_text for r in records] == ["five", "two", "two again"]

    def test_no_trailing_newline(self):
        records = parse_srt("1\n00:00:01,000 --> 00:00:02,000\nlast")
        assert len(records) == 1
        assert records[0].raw_text == "last"


class TestParseLineEndings:
    """Line ending variants and stray whitespace."""

    def test_crlf(self, messy_srt):
        records = parse_srt(messy_srt)
        assert all("\r" not in r.raw_text for r in records)

    def test_bare_cr(self):
        content = "1\r00:00:01,000 --> 00:00:02,000\rhello\r\r2\r00:00:03,000 --> 00:00:04,000\rworld\r"
        records = parse_srt(content)
        assert [r.raw_text for r in records] == ["hello", "world"]

    def test_bom_before_first_index(self):
        records = parse_srt("\ufeff1\n00:00:01,000 --> 00:00:02,000\nhello\n")
        assert len(records) == 1
        assert records[0].index == 1

    def test_whitespace_only_separator_line(self):
        content = (
            "1\n00:00:01,000 --> 00:00:02,000\nhello\n \t\n"
            "2\n00:00:03,000 --> 00:00:04,000\nworld\n"
        )
        assert [r.index for r in parse_srt(content)] == [1, 2]

    def test_trailing_blank_lines_ignored(self):
        content = "1\n00:00:01,000 --> 00:00:02,000\nhello\n\n\n\n\n"
        assert len(parse_srt(content)) == 1


class TestParseMalformed:
    """Blocks that must be dropped silently."""

    def test_messy_file_keeps_only_valid_blocks(self, messy_srt):
        records = parse_srt(messy_srt)
        assert [(r.index, r.raw_text) for r in records] == [
            (1, "first line"),
            (7, "out of order"),
        ]

    def test_positional_coordinates_dropped_from_timecode(self, messy_srt):
        record = parse_srt(messy_srt)[1]
        assert record.start_time == "00:00:05,000"
        assert record.end_time == "00:00:06,000"

    def test_two_line_block_rejected(self):
        content = (
            "1\n00:00:01,000 --> 00:00:02,000\n\n"
            "2\n00:00:03,000 --> 00:00:04,000\nkept\n"
        )
        records = parse_srt(content)
        assert [r.index for r in records] == [2]

    def test_not_a_timecode_rejected(self):
        assert parse_srt("1\nnot a timecode\nsome text\n") == []

    def test_dotted_milliseconds_rejected(self):
        assert parse_srt("1\n00:00:01.000 --> 00:00:02.000\ntext\n") == []

    def test_non_integer_index_rejected(self):
        assert parse_srt("one\n00:00:01,000 --> 00:00:02,000\ntext\n") == []

    @pytest.mark.parametrize("index_line", ["1_0", "-3", "+4", "１２", "12abc"])
    def test_only_plain_digits_accepted_as_index(self, index_line):
        content = "{}\n00:00:01,000 --> 00:00:02,000\ntext\n".format(index_line)
        assert parse_srt(content) == []

    def test_index_with_surrounding_spaces(self):
        records = parse_srt("  12 \n00:00:01,000 --> 00:00:02,000\ntext\n")
        assert [r.index for r in records] == [12]

    def test_empty_input(self):
        assert parse_srt("") == []

    def test_whitespace_input(self):
        assert parse_srt("\n\n   \n") == []


class TestDecodeSrtBytes:
    """decode_srt_bytes() encoding fallbacks."""

    def test_utf8(self):
        assert decode_srt_bytes("café".encode("utf-8")) == "café"

    def test_utf8_bom_stripped(self):
        assert decode_srt_bytes(b"\xef\xbb\xbf1\n") == "1\n"

    def test_gb18030_fallback(self):
        assert decode_srt_bytes("你好".encode("gb18030")) == "你好"

    def test_undecodable_never_raises(self):
        assert isinstance(decode_srt_bytes(b"\x80\xff\xfe"), str)
