"""WebVTT (.vtt) subtitle format.

WHY: Web players and most streaming pipelines deliver WebVTT. Supporting
it lets the statistics run on web deliverables without a conversion step.

HOW: The file must start with a ``WEBVTT`` line. Blocks after the header
are cues (optional identifier line, timing line with optional cue
settings, text lines); ``NOTE``, ``STYLE`` and ``REGION`` blocks are
skipped.

RULES:
- Timestamps: HH:MM:SS.mmm or MM:SS.mmm
- Cue settings after the end time are ignored
- Empty input is an empty corpus; non-empty input without the WEBVTT
  header raises ValueError
- Output: "WEBVTT" header, blank line, cues with HH:MM:SS.mmm times
"""

from __future__ import annotations

from typing import List

from subtitle_stats.core.ir import Corpus, Segment
from subtitle_stats.core.timecode import ms_to_timecode
from subtitle_stats.formats.base import (
    TIMING_ARROW,
    SubtitleFormat,
    parse_timing_line,
    split_blocks,
)

HEADER = "WEBVTT"

_SKIPPED_BLOCKS = ("NOTE", "STYLE", "REGION")


class WebVTTFormat(SubtitleFormat):
    """WebVTT reader and writer."""

    extensions = (".vtt",)

    @property
    def name(self) -> str:
        return "WebVTT"

    def to_text(self, corpus: Corpus) -> str:
        blocks: List[str] = [HEADER + "\n"]
        for segment in corpus:
            blocks.append("{} --> {}\n{}\n".format(
                ms_to_timecode(segment.start_ms, separator="."),
                ms_to_timecode(segment.end_ms, separator="."),
                segment.text.replace("\r\n", "\n"),
            ))
        return "\n".join(blocks)

    def parse(self, text: str) -> Corpus:
        blocks = split_blocks(text)
        if not blocks:
            return Corpus()

        header = blocks[0][0].strip()
        if not header.startswith(HEADER):
            raise ValueError("Not a WebVTT file: missing '{}' header".format(HEADER))

        segments: List[Segment] = []
        for lines in blocks[1:]:
            if lines[0].strip().startswith(_SKIPPED_BLOCKS):
                continue

            timing_idx = next(
                (i for i, line in enumerate(lines[:2]) if TIMING_ARROW in line),
                None,
            )
            if timing_idx is None:
                continue

            start_ms, end_ms = parse_timing_line(lines[timing_idx])
            segments.append(Segment(
                text="\n".join(lines[timing_idx + 1:]),
                start_ms=start_ms,
                end_ms=end_ms,
                number=len(segments) + 1,
            ))
        return Corpus(segments=segments)
