"""SubRip (.srt) subtitle format.

WHY: SubRip is the most common subtitle exchange format and the default
input for the statistics tools. The report's "Number of characters as
SubRip" figure is the length of the track rendered by to_text().

HOW: Parsing splits the file into blank-line separated blocks; each
block is an optional sequence number, a ``start --> end`` timing line,
and one or more text lines. Rendering writes the blocks back with
1-based numbering.

RULES:
- Timestamps: HH:MM:SS,mmm (a "." separator is accepted on input)
- Blocks without a timing line are skipped
- Cue text keeps its markup and line breaks
- Output uses "\\n" line endings and one blank line between cues
"""

from __future__ import annotations

import logging
from typing import List

from subtitle_stats.core.ir import Corpus, Segment
from subtitle_stats.core.timecode import ms_to_timecode
from subtitle_stats.formats.base import (
    TIMING_ARROW,
    SubtitleFormat,
    parse_timing_line,
    split_blocks,
)

logger = logging.getLogger(__name__)


class SubRipFormat(SubtitleFormat):
    """SubRip reader and writer."""

    extensions = (".srt",)

    @property
    def name(self) -> str:
        return "SubRip"

    def to_text(self, corpus: Corpus) -> str:
        blocks: List[str] = []
        for number, segment in enumerate(corpus, 1):
            blocks.append("{}\n{} --> {}\n{}\n".format(
                number,
                ms_to_timecode(segment.start_ms),
                ms_to_timecode(segment.end_ms),
                segment.text.replace("\r\n", "\n"),
            ))
        return "\n".join(blocks)

    def parse(self, text: str) -> Corpus:
        segments: List[Segment] = []
        for lines in split_blocks(text):
            timing_idx = next(
                (i for i, line in enumerate(lines[:2]) if TIMING_ARROW in line),
                None,
            )
            if timing_idx is None:
                logger.debug("Skipping SubRip block without timing line: %r", lines[0])
                continue

            start_ms, end_ms = parse_timing_line(lines[timing_idx])
            number = len(segments) + 1
            if timing_idx == 1 and lines[0].strip().isdigit():
                number = int(lines[0].strip())

            segments.append(Segment(
                text="\n".join(lines[timing_idx + 1:]),
                start_ms=start_ms,
                end_ms=end_ms,
                number=number,
            ))
        return Corpus(segments=segments)
