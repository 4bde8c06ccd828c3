"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: CaptionModel mirrors the CaptionRecord dataclass field for field,
with converters in both directions. Each endpoint has its own request
and/or response model. All fields carry descriptions for the docs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- CaptionModel <-> CaptionRecord conversion is lossless
- Timecodes are validated against the SRT "HH:MM:SS,mmm" pattern
- Response models never expose internal implementation details
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from srt_normalizer.core.records import CaptionRecord

TIMECODE_PATTERN = r"^\d{2}:\d{2}:\d{2},\d{3}$"


# ---------------------------------------------------------------------------
# Captions
# ---------------------------------------------------------------------------


class CaptionModel(BaseModel):
    """One caption record as exchanged over HTTP."""

    index: int = Field(description="Caption sequence number as declared in the source file.")
    start_time: str = Field(
        pattern=TIMECODE_PATTERN,
        description="Start timecode, 'HH:MM:SS,mmm'.",
    )
    end_time: str = Field(
        pattern=TIMECODE_PATTERN,
        description="End timecode, 'HH:MM:SS,mmm'.",
    )
    raw_text: str = Field(description="Caption text as found in the file, newline-joined.")
    normalized_text: Optional[str] = Field(
        default=None,
        description="Normalized text; null until the captions have been normalized.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "index": 1,
                "start_time": "00:00:01,000",
                "end_time": "00:00:03,200",
                "raw_text": "[MUSIC]\ni went to new york\non monday",
                "normalized_text": "I went to New York on Monday",
            }
        ]
    }}

    @classmethod
    def from_record(cls, record: CaptionRecord) -> "CaptionModel":
        return cls(
            index=record.index,
            start_time=record.start_time,
            end_time=record.end_time,
            raw_text=record.raw_text,
            normalized_text=record.normalized_text,
        )

    def to_record(self) -> CaptionRecord:
        return CaptionRecord(
            index=self.index,
            start_time=self.start_time,
            end_time=self.end_time,
            raw_text=self.raw_text,
            normalized_text=self.normalized_text,
        )


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class CaptionsRequest(BaseModel):
    """A list of caption records to normalize."""

    captions: List[CaptionModel] = Field(description="Caption records in file order.")


class ExportRequest(BaseModel):
    """Caption records to write back out as an SRT file.

    RULES:
    - use_normalized=True writes normalized text (computed if missing)
    - filename is only used to name the download
    """

    captions: List[CaptionModel] = Field(description="Caption records in file order.")
    use_normalized: bool = Field(
        default=True,
        description="Write normalized text (true) or the original text (false).",
    )
    filename: str = Field(
        default="captions.srt",
        description="Name of the source file; the download is named after it.",
    )
    skip_empty: bool = Field(
        default=False,
        description="Omit captions whose chosen text is empty.",
    )


class TextRequest(BaseModel):
    """A single piece of caption text to normalize."""

    text: str = Field(description="Raw caption text, may contain newlines.")


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class ParseResponse(BaseModel):
    """Result of parsing an uploaded SRT file.

    RULES:
    - count == len(captions); zero means no valid captions were found
    """

    filename: str = Field(description="Uploaded filename.")
    count: int = Field(description="Number of captions parsed.")
    captions: List[CaptionModel] = Field(description="Parsed caption records in file order.")


class CaptionsResponse(BaseModel):
    """Caption records with normalized_text populated."""

    count: int = Field(description="Number of captions.")
    captions: List[CaptionModel] = Field(description="Normalized caption records in file order.")


class TextResponse(BaseModel):
    """Original and normalized text for one caption."""

    text: str = Field(description="The text as submitted.")
    normalized_text: str = Field(description="The normalized text; may be empty.")


class FormatInfo(BaseModel):
    """Description of an available export format."""

    key: str = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix produced (e.g. '-formatted.srt').")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
