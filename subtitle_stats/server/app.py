"""FastAPI application with statistics API routes and OpenAPI docs.

WHY: External clients (web tools, CI checks, curl) need an HTTP API to
submit a subtitle file and get its statistics back, either as JSON or as
the downloadable text report. FastAPI provides automatic OpenAPI
documentation and request validation.

HOW: A single FastAPI app exposes four endpoints. POST /statistics
accepts a multipart subtitle upload, parses it with the format chosen by
the ``format`` field or the file extension, runs report.analyze()
in FastAPI's threadpool, and returns a StatisticsResponse.
POST /statistics/export returns the combined report as a text attachment.

RULES:
- All endpoints have OpenAPI descriptions on parameters and responses
- Error responses use a consistent ErrorResponse schema
- Uploads larger than MAX_UPLOAD_SIZE are rejected with 413
- Unparseable or unknown files are rejected with 400
- Parsing and analysis never run on the event loop thread
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Annotated, List, Optional, Tuple

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from subtitle_stats import __version__
from subtitle_stats.config import DEFAULT_FORMAT, MAX_UPLOAD_SIZE, TIME_BASE_UNIT
from subtitle_stats.core.general import GeneralStatistics
from subtitle_stats.core.report import StatisticsReport, analyze
from subtitle_stats.formats import FORMATS, format_for_filename, get_format
from subtitle_stats.formats.base import SubtitleFormat
from subtitle_stats.server.models import (
    ErrorResponse,
    ExportFormat,
    FormatInfo,
    FrequencyEntryModel,
    GeneralStatisticsModel,
    HealthResponse,
    StatisticsResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Subtitle Statistics API",
    description=(
        "REST API for computing subtitle statistics: timing and length "
        "figures, characters per second, and the most used words and lines. "
        "Upload a SubRip or WebVTT file and get JSON or a text report back."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _finite(value: float) -> Optional[float]:
    """Map NaN/Infinity to None so the JSON body stays valid."""
    return value if math.isfinite(value) else None


def _general_to_model(stats: GeneralStatistics) -> GeneralStatisticsModel:
    """Convert the core GeneralStatistics dataclass to its response model."""
    return GeneralStatisticsModel(
        segment_count=stats.segment_count,
        format_name=stats.format_name,
        rendered_length=stats.rendered_length,
        text_char_count=stats.text_char_count,
        total_duration=stats.total_duration_ms / TIME_BASE_UNIT,
        total_chars_per_second=_finite(stats.total_chars_per_second),
        total_words=stats.total_words,
        italic_tags=stats.italic_tags,
        bold_tags=stats.bold_tags,
        underline_tags=stats.underline_tags,
        font_tags=stats.font_tags,
        alignment_tags=stats.alignment_tags,
        segment_length_min=stats.segment_length_min,
        segment_length_max=stats.segment_length_max,
        segment_length_avg=_finite(stats.segment_length_avg),
        lines_per_segment_avg=_finite(stats.lines_per_segment_avg),
        single_line_length_min=stats.single_line_length_min,
        single_line_length_max=stats.single_line_length_max,
        single_line_length_avg=_finite(stats.single_line_length_avg),
        duration_min=stats.duration_min_ms / TIME_BASE_UNIT,
        duration_max=stats.duration_max_ms / TIME_BASE_UNIT,
        duration_avg=_finite(stats.duration_avg_ms / TIME_BASE_UNIT),
        chars_per_second_min=_finite(stats.chars_per_second_min),
        chars_per_second_max=_finite(stats.chars_per_second_max),
        chars_per_second_avg=_finite(stats.chars_per_second_avg),
    )


def _parse_and_analyze(
    content: bytes,
    filename: str,
    format_key: Optional[str],
) -> Tuple[SubtitleFormat, StatisticsReport]:
    """Decode, parse and analyze upload bytes. Runs in a worker thread.

    Raises:
        ValueError: For unknown formats, undecodable or unparseable content.
    """
    if format_key:
        subtitle_format = get_format(format_key)
    else:
        subtitle_format = format_for_filename(filename)
    corpus = subtitle_format.parse(content.decode("utf-8-sig"))

    logger.info("Analyzing %s: %d subtitles (%s)", filename, len(corpus), subtitle_format.name)
    return subtitle_format, analyze(corpus, subtitle_format)


def _format_key(subtitle_format: SubtitleFormat) -> str:
    for key, format_cls in FORMATS.items():
        if isinstance(subtitle_format, format_cls):
            return key
    return DEFAULT_FORMAT


async def _analyze_upload(
    file: UploadFile,
    format_key: Optional[str],
) -> Tuple[SubtitleFormat, StatisticsReport]:
    """Read, parse and analyze an uploaded subtitle file.

    Raises:
        HTTPException: 413 for oversized uploads, 400 for unknown formats,
                       undecodable or unparseable content.
    """
    filename = file.filename or "upload"
    content = await file.read()
    if len(content) > MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=413,
            detail="File too large ({} bytes). Maximum is {} bytes.".format(
                len(content), MAX_UPLOAD_SIZE
            ),
        )

    try:
        return await run_in_threadpool(_parse_and_analyze, content, filename, format_key)
    except ValueError as exc:
        # UnicodeDecodeError is a ValueError too
        logger.info("Rejected upload %s: %s", filename, exc)
        raise HTTPException(status_code=400, detail=str(exc))


# ---------------------------------------------------------------------------
# Endpoints: Statistics
# ---------------------------------------------------------------------------


@app.post(
    "/statistics",
    response_model=StatisticsResponse,
    tags=["statistics"],
    summary="Compute statistics for a subtitle file",
    description=(
        "Upload a subtitle file. The format is taken from the 'format' field "
        "or detected from the file extension. Returns the general figures, "
        "the most used words and lines, and the combined text report."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Unknown format or unparseable file"},
        413: {"model": ErrorResponse, "description": "File too large"},
    },
)
async def create_statistics(
    file: Annotated[
        UploadFile,
        File(description="Subtitle file to analyze (.srt, .vtt)."),
    ],
    format: Annotated[
        Optional[str],
        Form(description="Format key (subrip, webvtt). Defaults to detection by extension."),
    ] = None,
) -> StatisticsResponse:
    subtitle_format, report = await _analyze_upload(file, format)

    return StatisticsResponse(
        filename=file.filename or "upload",
        format=_format_key(subtitle_format),
        total_words=report.total_words,
        general=_general_to_model(report.statistics) if report.statistics is not None else None,
        most_used_words=[
            FrequencyEntryModel(token=e.token, count=e.count) for e in report.word_entries
        ],
        most_used_lines=[
            FrequencyEntryModel(token=e.token, count=e.count) for e in report.line_entries
        ],
        report=report.to_text(),
    )


@app.post(
    "/statistics/export",
    tags=["statistics"],
    summary="Download the statistics report as a text file",
    description=(
        "Upload a subtitle file and receive the combined statistics report "
        "as a UTF-8 attachment named after the upload (.txt or .nfo)."
    ),
    responses={
        200: {"content": {"text/plain": {}}, "description": "The report file"},
        400: {"model": ErrorResponse, "description": "Unknown format or unparseable file"},
        413: {"model": ErrorResponse, "description": "File too large"},
    },
)
async def export_statistics(
    file: Annotated[
        UploadFile,
        File(description="Subtitle file to analyze (.srt, .vtt)."),
    ],
    format: Annotated[
        Optional[str],
        Form(description="Format key (subrip, webvtt). Defaults to detection by extension."),
    ] = None,
    report_format: Annotated[
        ExportFormat,
        Form(description="Report file type: txt or nfo."),
    ] = ExportFormat.txt,
) -> Response:
    _, report = await _analyze_upload(file, format)

    stem = Path(file.filename or "subtitle").stem
    download_name = "{}-statistics.{}".format(stem, report_format.value)
    return Response(
        content=report.to_text(),
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="{}"'.format(download_name)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List supported subtitle formats",
    description="Returns every registered subtitle format with its key and extensions.",
)
async def list_formats() -> List[FormatInfo]:
    formats: List[FormatInfo] = []
    for key, format_cls in FORMATS.items():
        subtitle_format = format_cls()
        formats.append(FormatInfo(
            key=key,
            name=subtitle_format.name,
            extensions=list(subtitle_format.extensions),
        ))
    return formats


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Returns service status and version.",
)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def main() -> None:
    """Run the API with uvicorn using the configured host and port."""
    import uvicorn

    from subtitle_stats.config import SERVER_HOST, SERVER_PORT

    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
