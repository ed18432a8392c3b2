"""General statistics over a subtitle corpus.

WHY: Before delivery an editor wants to know whether a track is within
norms: how long cues and lines are, how long cues stay on screen, and
how fast they read (characters per second). These numbers are the
"General" section of the statistics report.

HOW: One pass over the corpus feeds a running min/max/total accumulator
per metric. Corpus-wide scalars (rendered length, text-only character
count, tag counts, overall chars/sec) are computed from the concatenated
text afterwards. GeneralStatistics.format() renders the fixed label
layout.

RULES:
- An empty corpus yields None; the caller shows a placeholder instead
- Segment length excludes line-break characters
- Chars/sec per segment comes from an injectable function; the default
  is default_chars_per_second()
- Two chars/sec figures are reported on purpose: the average of the
  per-segment values, and the corpus-wide ratio of text-only characters
  to total duration
- Division by zero yields nan/inf, never an exception
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional

from subtitle_stats.config import CPS_IGNORE_WHITESPACE, TIME_BASE_UNIT
from subtitle_stats.core.ir import Corpus, Segment
from subtitle_stats.core.markup import count_tag, remove_markup
from subtitle_stats.core.timecode import ms_to_timecode
from subtitle_stats.core.tokenizer import split_to_lines

if TYPE_CHECKING:
    from subtitle_stats.formats.base import SubtitleFormat

logger = logging.getLogger(__name__)

CharsPerSecondFunc = Callable[[Segment], float]

# Returned for cues shorter than one millisecond.
_ZERO_DURATION_CPS = 999.0

# ---------------------------------------------------------------------------
# Report labels
# ---------------------------------------------------------------------------

LABELS = {
    "number_of_lines": "Number of subtitle lines: {:,}",
    "length_in_format": "Number of characters as {}: {:,}",
    "characters_in_text_only": "Number of characters in text only: {:,}",
    "total_duration": "Total duration of all subtitles: {}",
    "total_chars_per_second": "Total characters/second: {:.1f}",
    "total_words": "Total words in subtitle: {}",
    "italic_tags": "Number of italic tags: {}",
    "bold_tags": "Number of bold tags: {}",
    "underline_tags": "Number of underline tags: {}",
    "font_tags": "Number of font tags: {}",
    "alignment_tags": "Number of alignment tags: {}",
    "segment_length_min": "Subtitle length - minimum: {}",
    "segment_length_max": "Subtitle length - maximum: {}",
    "segment_length_avg": "Subtitle length - average: {:.1f}",
    "lines_per_segment_avg": "Subtitle, number of lines - average: {:.1f}",
    "single_line_length_min": "Single line length - minimum: {}",
    "single_line_length_max": "Single line length - maximum: {}",
    "single_line_length_avg": "Single line length - average: {:.1f}",
    "duration_min": "Duration - minimum: {:.3f} seconds",
    "duration_max": "Duration - maximum: {:.3f} seconds",
    "duration_avg": "Duration - average: {:.3f} seconds",
    "chars_per_second_min": "Characters/sec - minimum: {:.3f}",
    "chars_per_second_max": "Characters/sec - maximum: {:.3f}",
    "chars_per_second_avg": "Characters/sec - average: {:.3f}",
}


def _ratio(numerator: float, denominator: float) -> float:
    """Float division that follows IEEE semantics instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _whole(value: float):
    """Whole-number form of a length extreme; non-finite values pass through."""
    return int(value) if math.isfinite(value) else value


def _strip_line_breaks(text: str) -> str:
    return text.replace("\r", "").replace("\n", "")


def default_chars_per_second(
    segment: Segment,
    ignore_whitespace: bool = CPS_IGNORE_WHITESPACE,
) -> float:
    """Reading speed of one segment in characters per second.

    RULES:
    - Markup and line breaks are not counted
    - Whitespace is counted unless ``ignore_whitespace`` is set
    - Segments shorter than 1 ms report 999.0
    """
    if segment.duration_ms < 1:
        return _ZERO_DURATION_CPS
    text = _strip_line_breaks(remove_markup(segment.text))
    if ignore_whitespace:
        text = "".join(text.split())
    return len(text) / (segment.duration_ms / TIME_BASE_UNIT)


class _RunningStat:
    """Running minimum, maximum and total for one metric."""

    __slots__ = ("minimum", "maximum", "total", "count")

    def __init__(self) -> None:
        self.minimum = math.inf
        self.maximum = -math.inf
        self.total = 0.0
        self.count = 0

    def add(self, value: float) -> None:
        self.minimum = min(self.minimum, value)
        self.maximum = max(self.maximum, value)
        self.total += value
        self.count += 1


@dataclass
class GeneralStatistics:
    """Computed figures for the "General" report section.

    Durations are stored in milliseconds; format() converts to seconds.
    Length minimums and maximums are whole character counts.
    """

    segment_count: int
    format_name: str
    rendered_length: int
    text_char_count: int
    total_duration_ms: float
    total_chars_per_second: float
    total_words: int
    italic_tags: int
    bold_tags: int
    underline_tags: int
    font_tags: int
    alignment_tags: int
    segment_length_min: int
    segment_length_max: int
    segment_length_avg: float
    lines_per_segment_avg: float
    single_line_length_min: int
    single_line_length_max: int
    single_line_length_avg: float
    duration_min_ms: float
    duration_max_ms: float
    duration_avg_ms: float
    chars_per_second_min: float
    chars_per_second_max: float
    chars_per_second_avg: float

    def format(self) -> str:
        """Render the block as labelled lines, metric groups separated by blank lines."""
        lines: List[str] = [
            LABELS["number_of_lines"].format(self.segment_count),
            LABELS["length_in_format"].format(self.format_name, self.rendered_length),
            LABELS["characters_in_text_only"].format(self.text_char_count),
            LABELS["total_duration"].format(ms_to_timecode(self.total_duration_ms)),
            LABELS["total_chars_per_second"].format(self.total_chars_per_second),
            LABELS["total_words"].format(self.total_words),
            LABELS["italic_tags"].format(self.italic_tags),
            LABELS["bold_tags"].format(self.bold_tags),
            LABELS["underline_tags"].format(self.underline_tags),
            LABELS["font_tags"].format(self.font_tags),
            LABELS["alignment_tags"].format(self.alignment_tags),
            "",
            LABELS["segment_length_min"].format(self.segment_length_min),
            LABELS["segment_length_max"].format(self.segment_length_max),
            LABELS["segment_length_avg"].format(self.segment_length_avg),
            LABELS["lines_per_segment_avg"].format(self.lines_per_segment_avg),
            "",
            LABELS["single_line_length_min"].format(self.single_line_length_min),
            LABELS["single_line_length_max"].format(self.single_line_length_max),
            LABELS["single_line_length_avg"].format(self.single_line_length_avg),
            "",
            LABELS["duration_min"].format(self.duration_min_ms / TIME_BASE_UNIT),
            LABELS["duration_max"].format(self.duration_max_ms / TIME_BASE_UNIT),
            LABELS["duration_avg"].format(self.duration_avg_ms / TIME_BASE_UNIT),
            "",
            LABELS["chars_per_second_min"].format(self.chars_per_second_min),
            LABELS["chars_per_second_max"].format(self.chars_per_second_max),
            LABELS["chars_per_second_avg"].format(self.chars_per_second_avg),
        ]
        return "\n".join(lines).strip()


def calculate_general_statistics(
    corpus: Corpus,
    subtitle_format: SubtitleFormat,
    total_words: int,
    chars_per_second: Optional[CharsPerSecondFunc] = None,
) -> Optional[GeneralStatistics]:
    """Compute the general statistics for ``corpus``.

    Args:
        corpus: The segments to analyze (read only).
        subtitle_format: Format descriptor with ``name`` and
                         ``to_text(corpus)``; only used for the rendered
                         length figure.
        total_words: Word count computed by the caller alongside the
                     frequency tables.
        chars_per_second: Per-segment reading speed function. Defaults to
                          default_chars_per_second().

    Returns:
        GeneralStatistics, or None when the corpus is empty.
    """
    if corpus.is_empty:
        return None

    cps_func = chars_per_second or default_chars_per_second

    segment_length = _RunningStat()
    single_line_length = _RunningStat()
    duration = _RunningStat()
    cps = _RunningStat()
    all_text: List[str] = []

    for segment in corpus:
        all_text.append(segment.text)
        segment_length.add(len(_strip_line_breaks(segment.text)))
        duration.add(segment.duration_ms)
        cps.add(cps_func(segment))
        for line in split_to_lines(segment.text):
            single_line_length.add(len(line))

    segment_count = len(corpus)
    text = "".join(all_text).replace("\r\n", "\n")
    text_lower = text.lower()
    text_char_count = len(remove_markup(text))
    total_duration_ms = corpus.total_duration_ms

    logger.debug(
        "General statistics: %d segments, %d single lines, %d text characters",
        segment_count, single_line_length.count, text_char_count,
    )

    return GeneralStatistics(
        segment_count=segment_count,
        format_name=subtitle_format.name,
        rendered_length=len(subtitle_format.to_text(corpus)),
        text_char_count=text_char_count,
        total_duration_ms=total_duration_ms,
        total_chars_per_second=_ratio(text_char_count, total_duration_ms / TIME_BASE_UNIT),
        total_words=total_words,
        italic_tags=count_tag(text_lower, "<i>"),
        bold_tags=count_tag(text_lower, "<b>"),
        underline_tags=count_tag(text_lower, "<u>"),
        font_tags=count_tag(text_lower, "<font "),
        alignment_tags=count_tag(text_lower, "{\\a"),
        segment_length_min=_whole(segment_length.minimum),
        segment_length_max=_whole(segment_length.maximum),
        segment_length_avg=_ratio(segment_length.total, segment_count),
        lines_per_segment_avg=_ratio(single_line_length.count, segment_count),
        single_line_length_min=_whole(single_line_length.minimum),
        single_line_length_max=_whole(single_line_length.maximum),
        single_line_length_avg=_ratio(single_line_length.total, single_line_length.count),
        duration_min_ms=duration.minimum,
        duration_max_ms=duration.maximum,
        duration_avg_ms=_ratio(total_duration_ms, segment_count),
        chars_per_second_min=cps.minimum,
        chars_per_second_max=cps.maximum,
        chars_per_second_avg=_ratio(cps.total, segment_count),
    )
