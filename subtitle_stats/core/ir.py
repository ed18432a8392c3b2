"""Intermediate representation dataclasses for subtitle corpora.

WHY: Subtitle files come in many formats (SubRip, WebVTT, ...), but the
statistics only need text and timing. The IR gives every format parser a
single target and every analysis step a single input, decoupling parsing
from analysis.

HOW: Two dataclasses form a hierarchy:
  Segment — one timed subtitle entry (text plus start/end time)
  Corpus  — the ordered sequence of segments being analyzed

RULES:
- All times are float milliseconds (the canonical time unit)
- Segment is frozen; the analysis core only reads it
- Segment.text keeps markup and line breaks exactly as parsed
- A Corpus may be empty; analysis then reports "nothing found"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass(frozen=True)
class Segment:
    """A single timed subtitle entry.

    RULES:
    - text: raw cue text, may contain "\\n" line breaks and inline markup
    - start_ms / end_ms: float milliseconds from the start of the media
    - number: 1-based display index (informational, not used in statistics)
    """

    text: str
    start_ms: float
    end_ms: float
    number: int = 0

    @property
    def duration_ms(self) -> float:
        """Display duration in milliseconds (end - start)."""
        return self.end_ms - self.start_ms


@dataclass
class Corpus:
    """The complete ordered set of segments in a subtitle track.

    WHY: This is the top-level container that the analysis core receives.
    Order is display order; it does not affect any aggregate, but format
    renderers rely on it.
    """

    segments: List[Segment] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def total_duration_ms(self) -> float:
        """Sum of all segment durations in milliseconds."""
        return sum(s.duration_ms for s in self.segments)
