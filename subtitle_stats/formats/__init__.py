"""Subtitle format registry — pluggable format hub.

WHY: The CLI and HTTP API need a single lookup to find the right format,
either by name (``--format webvtt``) or from an uploaded file's
extension. A central dict makes it trivial to add new formats: create
the format class, import it here, add one line.

HOW: FORMATS maps string keys to format *classes* (not instances).
get_format() and format_for_filename() return ready-to-use instances.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API fields)
- Values are SubtitleFormat subclasses (not instances)
- Every format listed here must be importable without side effects
- Unknown names raise ValueError listing the available keys
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from subtitle_stats.formats.subrip import SubRipFormat
from subtitle_stats.formats.webvtt import WebVTTFormat

if TYPE_CHECKING:
    from subtitle_stats.formats.base import SubtitleFormat

FORMATS: dict[str, type[SubtitleFormat]] = {
    "subrip": SubRipFormat,
    "webvtt": WebVTTFormat,
}


def get_format(key: str) -> SubtitleFormat:
    """Instantiate the format registered under ``key``.

    Raises:
        ValueError: If ``key`` is not registered.
    """
    if key not in FORMATS:
        raise ValueError(
            "Unknown format '{}'. Available formats: {}".format(
                key, ", ".join(sorted(FORMATS.keys()))
            )
        )
    return FORMATS[key]()


def format_for_filename(filename: str, default: Optional[str] = None) -> SubtitleFormat:
    """Pick a format by file extension, falling back to ``default``.

    Raises:
        ValueError: If no format matches and no default is given.
    """
    for format_cls in FORMATS.values():
        subtitle_format = format_cls()
        if subtitle_format.matches(filename):
            return subtitle_format
    if default is not None:
        return get_format(default)
    raise ValueError("Unsupported subtitle file: '{}'".format(filename))
