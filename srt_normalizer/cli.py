"""Command-line interface for the SRT normalizer.

WHY: Users need a simple way to normalize subtitle files from the
terminal or from scripts. The CLI wires together the whole pipeline:
file reading and decoding, lexicon loading, parsing, normalization,
export formatting and file saving.

HOW: Uses argparse to accept an input file (or "-" for stdin), export
format selection, an output directory and an optional lexicon file.
Status messages go to stderr; output files are saved next to the source
(or to --output-dir). With --stdout the SRT result is written to stdout
instead, which makes the CLI usable in pipes.

RULES:
- Positional argument: input .srt file path, or "-" for stdin
- Validates the extension against SUPPORTED_EXTENSIONS before reading
- --formats: comma-separated formatter keys (default: srt)
- Output naming: {stem}{suffix}, numeric suffix for conflicts
  (-formatted-2.srt)
- --raw is only valid together with --stdout
- "No valid captions found" is an error (exit 1); an empty normalized
  caption is not
- Status output goes to stderr (not stdout)
- Exit codes: 0 = success, 1 = error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from srt_normalizer.config import LOG_LEVEL, SUPPORTED_EXTENSIONS, resolve_lexicon_path
from srt_normalizer.core.lexicon import Lexicon, build_lexicon, load_lexicon, load_lexicon_terms
from srt_normalizer.core.normalizer import normalize_all
from srt_normalizer.core.parser import decode_srt_bytes, parse_srt
from srt_normalizer.core.records import CaptionRecord
from srt_normalizer.core.serializer import caption_text, serialize_srt
from srt_normalizer.formatters import FORMATTERS
from srt_normalizer.formatters.base import FormatterOutput

DEFAULT_FORMATS = "srt"


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may run the normalizer several times on the same file.
    Overwriting previous output would lose manual edits made since.

    HOW: Check if {stem}{suffix} exists. If so, increment a counter and
    insert it before the file extension until a free name is found.

    RULES:
    - First attempt: {stem}{suffix} (e.g. episode1-formatted.srt)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. episode1-formatted-2.srt)
    - Counter starts at 2 and increments

    Args:
        stem: Source filename stem (without extension).
        suffix: Formatter's suffix (e.g. "-formatted.srt").
        output_dir: Directory to save the output file.

    Returns:
        A Path that does not yet exist.
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output to disk as UTF-8 and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _read_input(input_file: str) -> str:
    """Read and decode the input file, or stdin for "-"."""
    if input_file == "-":
        return sys.stdin.read()

    input_path = Path(input_file)
    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    ext = input_path.suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        _fail(
            "Unsupported file type '{}'. Supported formats: {}".format(
                ext, ", ".join(sorted(SUPPORTED_EXTENSIONS))
            )
        )

    return decode_srt_bytes(input_path.read_bytes())


def _parse_format_keys(formats: Optional[str]) -> List[str]:
    format_keys = [f.strip() for f in (formats or DEFAULT_FORMATS).split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return format_keys


def _load_lexicon(explicit: Optional[str]) -> Lexicon:
    path = resolve_lexicon_path(explicit)
    if path is None:
        return load_lexicon()
    try:
        terms = load_lexicon_terms(path)
    except (OSError, UnicodeDecodeError) as e:
        _fail("Could not read lexicon file {}: {}".format(path, e))
    _status("  Lexicon: {} ({} extra term(s))".format(path, len(terms)))
    return build_lexicon(extra_terms=terms)


def _drop_empty(records: List[CaptionRecord]) -> List[CaptionRecord]:
    return [r for r in records if caption_text(r).strip()]


def _run_pipeline(args: argparse.Namespace) -> None:
    """Read, parse, normalize and export one subtitle file.

    RULES:
    - Validate everything (input, formats, flags) before writing anything
    - Exit 1 with an "Error: ..." message on stderr for any failure
    """
    if args.raw and not args.stdout:
        _fail("--raw can only be used together with --stdout")

    format_keys = _parse_format_keys(args.formats)
    content = _read_input(args.input_file)
    lexicon = _load_lexicon(args.lexicon)

    records = parse_srt(content)
    if not records:
        _fail("No valid captions found in {}".format(args.input_file))
    _status("Parsed {} caption(s)".format(len(records)))

    if args.stdout:
        if args.raw:
            sys.stdout.write(serialize_srt(records, use_normalized=False, skip_empty=args.skip_empty))
        else:
            normalized = normalize_all(records, lexicon)
            sys.stdout.write(serialize_srt(normalized, use_normalized=True, skip_empty=args.skip_empty))
        return

    normalized = normalize_all(records, lexicon)
    if args.skip_empty:
        kept = _drop_empty(normalized)
        if len(kept) != len(normalized):
            _status("  Dropped {} empty caption(s)".format(len(normalized) - len(kept)))
        normalized = kept

    if args.input_file == "-":
        stem = "stdin"
        default_dir = Path.cwd()
    else:
        input_path = Path(args.input_file).resolve()
        stem = input_path.stem
        default_dir = input_path.parent

    output_dir = Path(args.output_dir).resolve() if args.output_dir else default_dir
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        _status("  Running {} formatter...".format(formatter.name))
        for output in formatter.format(normalized):
            saved_path = _save_output(output, stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="srt_normalizer",
        description="Normalize SRT subtitle text: strip annotations, merge "
                    "soft line breaks and apply sentence case.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the .srt file to normalize, or '-' to read from stdin.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of export formats. "
             "Available: {}. Default: {}.".format(
                 ", ".join(sorted(FORMATTERS.keys())), DEFAULT_FORMATS
             ),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Write the normalized SRT to stdout instead of saving files.",
    )

    parser.add_argument(
        "--raw",
        action="store_true",
        help="With --stdout, write the parsed captions without normalizing them.",
    )

    parser.add_argument(
        "--lexicon",
        default=None,
        help="Path to an extra lexicon terms file (one term per line). "
             "Defaults to $SRT_NORMALIZER_LEXICON, then 'default-lexicon.txt' in CWD.",
    )

    parser.add_argument(
        "--skip-empty",
        action="store_true",
        help="Drop captions whose text is empty after normalization.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    _run_pipeline(args)


if __name__ == "__main__":
    main()
