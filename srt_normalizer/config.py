"""Configuration constants and .env loading.

WHY: Centralizes the few configurable values (lexicon location, upload
limit, server address, log level) so they are easy to find and override
without touching code.

HOW: python-dotenv loads the .env file on import. Constants are plain
module-level values read from environment variables with defaults.
resolve_lexicon_path() decides which extra lexicon file, if any, applies.

RULES:
- SUPPORTED_EXTENSIONS lists accepted input file extensions (.srt only)
- Lexicon file precedence: explicit path > SRT_NORMALIZER_LEXICON >
  default-lexicon.txt in the working directory > none
- All defaults can be overridden via environment variables
- An unknown SRT_NORMALIZER_LOG_LEVEL falls back to INFO
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

SUPPORTED_EXTENSIONS: set[str] = {".srt"}
"""Input file extensions accepted by the CLI and the API (lowercase, with dot)."""

DEFAULT_LEXICON_FILENAME = "default-lexicon.txt"

LEXICON_PATH = os.getenv("SRT_NORMALIZER_LEXICON", "").strip() or None
MAX_UPLOAD_BYTES = int(os.getenv("SRT_NORMALIZER_MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))
API_HOST = os.getenv("SRT_NORMALIZER_HOST", "127.0.0.1")
API_PORT = int(os.getenv("SRT_NORMALIZER_PORT", "8000"))

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def read_log_level() -> str:
    """Return SRT_NORMALIZER_LOG_LEVEL upper-cased, or INFO if it is not a level name."""
    level = os.getenv("SRT_NORMALIZER_LOG_LEVEL", "INFO").strip().upper()
    return level if level in LOG_LEVELS else "INFO"


LOG_LEVEL = read_log_level()


def resolve_lexicon_path(
    explicit: Optional[str] = None,
    cwd: Optional[Path] = None,
) -> Optional[Path]:
    """Pick the extra lexicon terms file to load, if any.

    RULES:
    - An explicit path always wins (it need not exist yet; loading fails later)
    - Otherwise SRT_NORMALIZER_LEXICON, read at import time
    - Otherwise default-lexicon.txt in cwd, only if it exists
    - Returns None when there is nothing to load
    """
    if explicit:
        return Path(explicit)
    if LEXICON_PATH:
        return Path(LEXICON_PATH)
    candidate = (cwd or Path.cwd()) / DEFAULT_LEXICON_FILENAME
    if candidate.is_file():
        return candidate
    return None
