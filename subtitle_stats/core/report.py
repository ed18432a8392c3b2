"""Statistics report assembly and rendering.

WHY: Callers (CLI, HTTP API, anything embedding the library) want one
call that turns a corpus into the finished report: three text blocks,
the total word count, and the combined text used for display, clipboard
copy, and file export.

HOW: analyze() runs the tokenizer + frequency tables and the general
statistics over the same corpus, then bundles the rendered blocks and
the structured data into a StatisticsReport. to_text() fills the fixed
three-section layout.

RULES:
- analyze() is pure: no caching, no mutation of the corpus, same input
  gives a byte-identical report
- Empty corpus → all three blocks are the NOTHING_FOUND placeholder
- write_report() lets OS errors (permissions, disk full) propagate
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

from subtitle_stats.config import NOTHING_FOUND, REPORT_ATTRIBUTION
from subtitle_stats.core.frequency import FrequencyEntry, FrequencyTable
from subtitle_stats.core.general import (
    CharsPerSecondFunc,
    GeneralStatistics,
    calculate_general_statistics,
)
from subtitle_stats.core.ir import Corpus
from subtitle_stats.core.tokenizer import count_words, split_sentences, split_words

if TYPE_CHECKING:
    from subtitle_stats.formats.base import SubtitleFormat

logger = logging.getLogger(__name__)

REPORT_TEMPLATE = """File generated by: {attribution}
============================= General =============================
{general}
============================= Most Used Words =============================
{words}
============================= Most Used Lines =============================
{lines}"""


@dataclass
class StatisticsReport:
    """The finished statistics for one corpus.

    Attributes:
        general: Rendered "General" block (or the placeholder).
        most_used_words: Rendered word ranking (or the placeholder).
        most_used_lines: Rendered line ranking (or the placeholder).
        total_words: Sum of whitespace-delimited words over all segments.
        statistics: The figures behind ``general``; None for an empty corpus.
        word_entries: Ranked repeated words.
        line_entries: Ranked repeated lines.
    """

    general: str
    most_used_words: str
    most_used_lines: str
    total_words: int
    statistics: Optional[GeneralStatistics] = None
    word_entries: List[FrequencyEntry] = field(default_factory=list)
    line_entries: List[FrequencyEntry] = field(default_factory=list)

    def to_text(self, attribution: str = REPORT_ATTRIBUTION) -> str:
        """Combined report text for display, clipboard copy or export."""
        return REPORT_TEMPLATE.format(
            attribution=attribution,
            general=self.general,
            words=self.most_used_words,
            lines=self.most_used_lines,
        )


def analyze(
    corpus: Corpus,
    subtitle_format: SubtitleFormat,
    chars_per_second: Optional[CharsPerSecondFunc] = None,
) -> StatisticsReport:
    """Analyze a corpus into a StatisticsReport.

    Args:
        corpus: The subtitle segments to analyze (never modified).
        subtitle_format: Format descriptor with ``name`` and
                         ``to_text(corpus)``, see formats.base.SubtitleFormat.
        chars_per_second: Optional per-segment reading speed function.

    Returns:
        A fresh StatisticsReport.
    """
    words = FrequencyTable()
    lines = FrequencyTable()
    total_words = 0

    for segment in corpus:
        words.update(split_words(segment.text))
        lines.update(split_sentences(segment.text))
        total_words += count_words(segment.text)

    logger.debug(
        "Analyzed %d segments: %d distinct words, %d distinct lines, %d total words",
        len(corpus), len(words), len(lines), total_words,
    )

    statistics = calculate_general_statistics(
        corpus,
        subtitle_format,
        total_words,
        chars_per_second=chars_per_second,
    )
    general = statistics.format() if statistics is not None else NOTHING_FOUND

    return StatisticsReport(
        general=general,
        most_used_words=words.format_block(NOTHING_FOUND),
        most_used_lines=lines.format_block(NOTHING_FOUND),
        total_words=total_words,
        statistics=statistics,
        word_entries=words.most_used(),
        line_entries=lines.most_used(),
    )


def write_report(report: StatisticsReport, path: Union[str, Path]) -> Path:
    """Write the combined report text to ``path`` as UTF-8.

    Returns:
        The Path written.
    """
    path = Path(path)
    path.write_text(report.to_text(), encoding="utf-8")
    logger.info("Wrote statistics report to %s", path)
    return path
