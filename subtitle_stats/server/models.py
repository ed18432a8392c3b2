"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: The statistics response mirrors core.report.StatisticsReport: the
structured general figures, the ranked word and line entries, and the
combined report text. Enums represent closed sets like export types.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Figures that can be undefined (0/0 averages, zero total duration) are
  Optional and serialized as null instead of NaN/Infinity
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ExportFormat(str, Enum):
    """File types offered for report download.

    RULES:
    - Values match config.EXPORT_EXTENSIONS without the leading dot
    """

    txt = "txt"
    nfo = "nfo"


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class FrequencyEntryModel(BaseModel):
    """One repeated word or line with its occurrence count."""

    token: str = Field(description="The word or line, exactly as counted (case-sensitive).")
    count: int = Field(description="Occurrences across the whole subtitle file (always >= 2).")


class GeneralStatisticsModel(BaseModel):
    """Figures of the "General" report section.

    Durations are in seconds. Undefined ratios are null.
    """

    segment_count: int = Field(description="Number of subtitles.")
    format_name: str = Field(description="Name of the subtitle format used for the rendered length.")
    rendered_length: int = Field(description="Characters in the file rendered in that format.")
    text_char_count: int = Field(description="Characters in the text only (markup removed).")
    total_duration: float = Field(description="Sum of all subtitle durations in seconds.")
    total_chars_per_second: Optional[float] = Field(
        default=None,
        description="Text-only characters divided by total duration.",
    )
    total_words: int = Field(description="Whitespace-delimited words in all subtitles.")
    italic_tags: int = Field(description="Number of <i> tags.")
    bold_tags: int = Field(description="Number of <b> tags.")
    underline_tags: int = Field(description="Number of <u> tags.")
    font_tags: int = Field(description="Number of <font> tags.")
    alignment_tags: int = Field(description="Number of {\\a..} alignment tags.")
    segment_length_min: int = Field(description="Shortest subtitle, line breaks excluded.")
    segment_length_max: int = Field(description="Longest subtitle, line breaks excluded.")
    segment_length_avg: Optional[float] = Field(default=None, description="Average subtitle length.")
    lines_per_segment_avg: Optional[float] = Field(default=None, description="Average lines per subtitle.")
    single_line_length_min: int = Field(description="Shortest single line.")
    single_line_length_max: int = Field(description="Longest single line.")
    single_line_length_avg: Optional[float] = Field(default=None, description="Average single line length.")
    duration_min: float = Field(description="Shortest duration in seconds.")
    duration_max: float = Field(description="Longest duration in seconds.")
    duration_avg: Optional[float] = Field(default=None, description="Average duration in seconds.")
    chars_per_second_min: Optional[float] = Field(default=None, description="Lowest per-subtitle chars/sec.")
    chars_per_second_max: Optional[float] = Field(default=None, description="Highest per-subtitle chars/sec.")
    chars_per_second_avg: Optional[float] = Field(
        default=None,
        description="Average of the per-subtitle chars/sec values.",
    )


class StatisticsResponse(BaseModel):
    """Statistics computed for one uploaded subtitle file.

    RULES:
    - general is null when the file contains no subtitles
    - most_used_words / most_used_lines are ordered most frequent first
    - report is the combined text, identical to the CLI output and export
    """

    filename: str = Field(description="Original uploaded filename.")
    format: str = Field(description="Format key used to parse the file.")
    total_words: int = Field(description="Whitespace-delimited words in all subtitles.")
    general: Optional[GeneralStatisticsModel] = Field(
        default=None,
        description="General figures; null when the file has no subtitles.",
    )
    most_used_words: List[FrequencyEntryModel] = Field(
        default_factory=list,
        description="Words occurring at least twice, most frequent first.",
    )
    most_used_lines: List[FrequencyEntryModel] = Field(
        default_factory=list,
        description="Lines occurring at least twice, most frequent first.",
    )
    report: str = Field(description="The combined plain text report.")


class FormatInfo(BaseModel):
    """Description of a supported subtitle format."""

    key: str = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")
    extensions: List[str] = Field(description="File extensions detected as this format.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
