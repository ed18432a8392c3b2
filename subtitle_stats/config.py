"""Configuration constants, report defaults, and .env loading.

WHY: Centralizes the configurable values so they are easy to find,
update, and override. Report attribution, export extensions, and server
defaults are plain data, not buried in logic, so both humans and
tools can modify them confidently.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level strings, sets, and numbers. Environment variables
override the defaults where it makes sense.

RULES:
- TIME_BASE_UNIT is the number of canonical time units per second (ms)
- EXPORT_EXTENSIONS lists the accepted report file suffixes (lowercase)
- NOTHING_FOUND is the placeholder for every empty report section
- All server/logging defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Report layout
# ---------------------------------------------------------------------------

REPORT_ATTRIBUTION = (
    "Subtitle Statistics\n"
    "https://pypi.org/project/subtitle-stats/"
)
"""Lines printed after ``File generated by:`` at the top of every report."""

NOTHING_FOUND = "Nothing found"

EXPORT_EXTENSIONS: set[str] = {".txt", ".nfo"}
"""File extensions accepted for report export (lowercase, with dot)."""

TIME_BASE_UNIT = 1000.0
"""Milliseconds per second; segment times are stored in milliseconds."""

# ---------------------------------------------------------------------------
# Analysis defaults
# ---------------------------------------------------------------------------

DEFAULT_FORMAT = os.getenv("SUBTITLE_STATS_DEFAULT_FORMAT", "subrip")
CPS_IGNORE_WHITESPACE = (
    os.getenv("SUBTITLE_STATS_CPS_IGNORE_WHITESPACE", "false").lower() == "true"
)

# ---------------------------------------------------------------------------
# Service defaults
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("SUBTITLE_STATS_LOG_LEVEL", "WARNING").upper()
SERVER_HOST = os.getenv("SUBTITLE_STATS_HOST", "127.0.0.1")
SERVER_PORT = int(os.getenv("SUBTITLE_STATS_PORT", "8000"))
MAX_UPLOAD_SIZE = int(os.getenv("SUBTITLE_STATS_MAX_UPLOAD_SIZE", str(10 * 1024 * 1024)))
"""Largest subtitle upload accepted by the HTTP API, in bytes."""


def is_export_path(filename: str) -> bool:
    """True if ``filename`` ends with one of the EXPORT_EXTENSIONS."""
    return os.path.splitext(filename)[1].lower() in EXPORT_EXTENSIONS
