"""Export formatter registry.

WHY: The CLI and the HTTP API need a single lookup to find an export
format by name. Adding a format means writing the formatter class,
importing it here and adding one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["srt"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API fields)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from srt_normalizer.formatters.json_records import JSONRecordsFormatter
from srt_normalizer.formatters.plain_text import PlainTextFormatter
from srt_normalizer.formatters.srt import SRTFormatter

if TYPE_CHECKING:
    from srt_normalizer.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "srt": SRTFormatter,
    "plain_text": PlainTextFormatter,
    "json": JSONRecordsFormatter,
}
