"""FastAPI application exposing the SRT normalizer over HTTP.

WHY: The subtitle editing front end (and curl, n8n, other tools) needs
the same three actions the desktop workflow has: import a file, format
its captions, and export the result. An HTTP API lets any client drive
the core without bundling Python.

HOW: A single FastAPI app exposes the core operations as endpoints:
  POST /captions/parse      upload .srt → caption records
  POST /captions/normalize  records → records with normalized_text
  POST /captions/export     records → SRT download
  POST /captions/convert    upload .srt + format → export download
  POST /text/normalize      one text → normalized text
  GET  /formats             registered export formats
  GET  /health              liveness check
All work is synchronous and pure; there is no job store or background
processing because every call finishes in time proportional to its input.

RULES:
- All endpoints have OpenAPI descriptions on every parameter and response
- Error responses use a consistent ErrorResponse schema
- The lexicon is built once at import and shared read-only by requests
- Uploads are checked for extension and size before parsing
- Zero parsed captions is not an error; clients decide what it means
- Normalized exports are named "formatted_{filename}"
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Annotated, List, Tuple
from urllib.parse import quote

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from srt_normalizer import __version__
from srt_normalizer.config import (
    API_HOST,
    API_PORT,
    LOG_LEVEL,
    MAX_UPLOAD_BYTES,
    SUPPORTED_EXTENSIONS,
    resolve_lexicon_path,
)
from srt_normalizer.core.lexicon import load_lexicon
from srt_normalizer.core.normalizer import normalize_all, normalize_text
from srt_normalizer.core.parser import decode_srt_bytes, parse_srt
from srt_normalizer.core.records import CaptionRecord
from srt_normalizer.core.serializer import serialize_srt
from srt_normalizer.formatters import FORMATTERS
from srt_normalizer.server.models import (
    CaptionModel,
    CaptionsRequest,
    CaptionsResponse,
    ErrorResponse,
    ExportRequest,
    FormatInfo,
    HealthResponse,
    ParseResponse,
    TextRequest,
    TextResponse,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App and lexicon setup
# ---------------------------------------------------------------------------

lexicon = load_lexicon(resolve_lexicon_path())

app = FastAPI(
    title="SRT Normalizer API",
    description=(
        "REST API for cleaning up SubRip (SRT) subtitles: strips bracketed "
        "annotations, merges soft line breaks and rewrites caption text into "
        "sentence case with a curated lexicon of acronyms and proper nouns. "
        "Upload a file, normalize its captions, and download the result."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _validate_file_extension(filename: str) -> None:
    """Raise HTTPException if the file extension is not supported."""
    ext = Path(filename).suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail="Unsupported file type '{}'. Supported formats: {}".format(
                ext, ", ".join(sorted(SUPPORTED_EXTENSIONS))
            ),
        )


async def _read_upload(file: UploadFile) -> Tuple[str, str]:
    """Validate an uploaded SRT file and return (filename, decoded text)."""
    # Sanitize filename to prevent path traversal
    filename = Path(file.filename or "upload.srt").name
    _validate_file_extension(filename)

    content = await file.read()
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail="File too large ({} bytes, max {}).".format(len(content), MAX_UPLOAD_BYTES),
        )
    return filename, decode_srt_bytes(content)


def _to_records(captions: List[CaptionModel]) -> List[CaptionRecord]:
    return [caption.to_record() for caption in captions]


def _content_disposition(filename: str) -> str:
    """Build an attachment header that survives non-ASCII filenames.

    HTTP headers are latin-1 on the wire, so the plain filename parameter
    carries an ASCII stand-in and filename* (RFC 5987) carries the real
    UTF-8 name.
    """
    cleaned = filename.replace("\r", " ").replace("\n", " ").strip()
    ascii_fallback = "".join(
        char if 32 <= ord(char) < 127 and char not in {'"', "\\"} else "_"
        for char in cleaned
    )
    return "attachment; filename=\"{}\"; filename*=UTF-8''{}".format(
        ascii_fallback, quote(cleaned, safe="")
    )


def _attachment(content: str, filename: str, media_type: str) -> Response:
    return Response(
        content=content.encode("utf-8"),
        media_type="{}; charset=utf-8".format(media_type),
        headers={"Content-Disposition": _content_disposition(filename)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Captions
# ---------------------------------------------------------------------------


@app.post(
    "/captions/parse",
    response_model=ParseResponse,
    tags=["captions"],
    summary="Parse an SRT file",
    description=(
        "Upload a SubRip file and get back its caption records in file order. "
        "Malformed blocks are skipped silently; a file with no valid captions "
        "returns count 0."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Unsupported file type"},
        413: {"model": ErrorResponse, "description": "File too large"},
    },
)
async def parse_captions(
    file: Annotated[
        UploadFile,
        File(description="SubRip (.srt) subtitle file."),
    ],
) -> ParseResponse:
    filename, text = await _read_upload(file)
    records = parse_srt(text)
    logger.info("Parsed %d caption(s) from %s", len(records), filename)
    return ParseResponse(
        filename=filename,
        count=len(records),
        captions=[CaptionModel.from_record(r) for r in records],
    )


@app.post(
    "/captions/normalize",
    response_model=CaptionsResponse,
    tags=["captions"],
    summary="Normalize caption records",
    description=(
        "Compute normalized_text for every caption. Existing normalized_text "
        "values are replaced. Order and all other fields are preserved."
    ),
)
async def normalize_captions(request: CaptionsRequest) -> CaptionsResponse:
    normalized = normalize_all(_to_records(request.captions), lexicon)
    return CaptionsResponse(
        count=len(normalized),
        captions=[CaptionModel.from_record(r) for r in normalized],
    )


@app.post(
    "/captions/export",
    tags=["captions"],
    summary="Export caption records as SRT",
    description=(
        "Serialize caption records back to SRT and return them as a file "
        "download. With use_normalized the download is named "
        "'formatted_{filename}'."
    ),
    responses={
        200: {"content": {"application/x-subrip": {}}, "description": "SRT file"},
    },
)
async def export_captions(request: ExportRequest) -> Response:
    records = _to_records(request.captions)
    if request.use_normalized:
        records = [
            r if r.normalized_text is not None
            else dataclasses.replace(r, normalized_text=normalize_text(r.raw_text, lexicon))
            for r in records
        ]
    content = serialize_srt(
        records,
        use_normalized=request.use_normalized,
        skip_empty=request.skip_empty,
    )

    filename = Path(request.filename).name or "captions.srt"
    if request.use_normalized:
        filename = "formatted_{}".format(filename)
    return _attachment(content, filename, "application/x-subrip")


@app.post(
    "/captions/convert",
    tags=["captions"],
    summary="Parse, normalize and export in one call",
    description=(
        "Upload a SubRip file and download it in the chosen export format "
        "with every caption normalized."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Unsupported file type or format"},
        413: {"model": ErrorResponse, "description": "File too large"},
    },
)
async def convert_captions(
    file: Annotated[
        UploadFile,
        File(description="SubRip (.srt) subtitle file."),
    ],
    output_format: Annotated[
        str,
        Form(
            description="Export format key. Available: {}.".format(
                ", ".join(sorted(FORMATTERS.keys()))
            )
        ),
    ] = "srt",
) -> Response:
    if output_format not in FORMATTERS:
        raise HTTPException(
            status_code=400,
            detail="Unknown output format '{}'. Available: {}".format(
                output_format, ", ".join(sorted(FORMATTERS.keys()))
            ),
        )

    filename, text = await _read_upload(file)
    records = normalize_all(parse_srt(text), lexicon)

    output = FORMATTERS[output_format]().format(records)[0]
    out_filename = "{}{}".format(Path(filename).stem, output.suffix)
    return _attachment(output.content, out_filename, output.media_type)


# ---------------------------------------------------------------------------
# Endpoints: Text
# ---------------------------------------------------------------------------


@app.post(
    "/text/normalize",
    response_model=TextResponse,
    tags=["text"],
    summary="Normalize a single caption text",
    description="Run the normalization pipeline on one piece of caption text.",
)
async def normalize_single_text(request: TextRequest) -> TextResponse:
    return TextResponse(
        text=request.text,
        normalized_text=normalize_text(request.text, lexicon),
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available export formats",
    description=(
        "Returns all supported export formats with their identifiers, "
        "human-readable names, and file suffixes."
    ),
)
async def list_formats() -> List[FormatInfo]:
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        result.append(FormatInfo(key=key, name=formatter.name, suffix=formatter.suffix))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the srt-normalizer-api console script."""
    import uvicorn

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    uvicorn.run(app, host=API_HOST, port=API_PORT)
