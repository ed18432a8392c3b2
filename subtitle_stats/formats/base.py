"""Abstract base for subtitle format descriptors.

WHY: The statistics report needs the format's human-readable name and
the length of the track rendered in that format; the CLI and HTTP API
need to parse uploaded files. This base class gives every format the
same small interface so callers can work with any of them generically.

HOW: SubtitleFormat is an ABC with a ``name`` property, an
``extensions`` tuple, and ``to_text()`` / ``parse()`` methods.

RULES:
- Subclasses MUST implement ``name``, ``to_text()`` and ``parse()``
- ``parse()`` returns an empty Corpus for input without cues and raises
  ValueError for malformed timing lines
- ``to_text()`` uses "\\n" line endings
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import List, Tuple

from subtitle_stats.core.ir import Corpus
from subtitle_stats.core.timecode import timecode_to_ms


class SubtitleFormat(ABC):
    """Abstract base for all subtitle formats.

    To add a new format:
    1. Create a new file in formats/
    2. Subclass SubtitleFormat
    3. Implement name, to_text() and parse()
    4. Register in FORMATS dict in formats/__init__.py
    """

    extensions: Tuple[str, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'SubRip'."""

    @abstractmethod
    def to_text(self, corpus: Corpus) -> str:
        """Render the corpus as a file in this format."""

    @abstractmethod
    def parse(self, text: str) -> Corpus:
        """Parse file content into a Corpus.

        Raises:
            ValueError: If a cue timing line cannot be parsed.
        """

    def matches(self, filename: str) -> bool:
        """True if ``filename`` has one of this format's extensions."""
        return filename.lower().endswith(self.extensions)


# ---------------------------------------------------------------------------
# Shared parsing helpers
# ---------------------------------------------------------------------------

_BLANK_LINE_RE = re.compile(r"\n[ \t]*\n")

TIMING_ARROW = "-->"


def split_blocks(text: str) -> List[List[str]]:
    """Split file content into blank-line separated blocks of lines.

    Line endings are normalized, a UTF-8 BOM is dropped, and empty
    blocks are skipped.
    """
    text = text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")
    blocks: List[List[str]] = []
    for chunk in _BLANK_LINE_RE.split(text.strip("\n")):
        lines = chunk.strip("\n").split("\n")
        if any(line.strip() for line in lines):
            blocks.append(lines)
    return blocks


def parse_timing_line(line: str) -> Tuple[float, float]:
    """Parse ``start --> end [settings]`` into (start_ms, end_ms).

    Raises:
        ValueError: If either side is not a valid time code.
    """
    start, _, rest = line.partition(TIMING_ARROW)
    end_parts = rest.split()
    if not end_parts:
        raise ValueError("Invalid timing line: '{}'".format(line.strip()))
    return timecode_to_ms(start), timecode_to_ms(end_parts[0])
