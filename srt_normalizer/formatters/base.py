"""Abstract base formatter and output container.

WHY: The CLI and the HTTP API both export the same normalized caption
records in several file formats. A shared base class gives them one
interface to call, whatever the format.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; every current formatter returns one item
- ``suffix`` starts with a hyphen, e.g. ``"-formatted.srt"``
- The caller is responsible for prepending the source filename stem
- Records are expected to be normalized already; a missing
  normalized_text is filled in on the fly (see serializer.caption_text)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence

from srt_normalizer.core.records import CaptionRecord


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-formatted.srt"`` → ``"episode1-formatted.srt"``.
        content: The file content as a string.
        media_type: MIME type for the content, e.g. ``"application/x-subrip"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all export formatters.

    To add a new export format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Plain Text'."""

    @property
    @abstractmethod
    def suffix(self) -> str:
        """Suffix of the (first) file this formatter produces."""

    @abstractmethod
    def format(self, records: Sequence[CaptionRecord]) -> List[FormatterOutput]:
        """Convert normalized caption records into one or more output files.

        Args:
            records: Caption records in output order.

        Returns:
            List of FormatterOutput objects.
        """
