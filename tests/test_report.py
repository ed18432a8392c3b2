"""Tests for report assembly, layout and export.

WHY: analyze() is the single entry point every caller uses. These tests
pin the documented behaviour end to end: word and line rankings, the
empty-corpus placeholders, idempotence, the fixed three-section layout,
and writing the report to disk.

HOW: Small corpora built with the corpus_factory fixture are analyzed
with the SubRip format descriptor.
"""

import pytest

from subtitle_stats.config import NOTHING_FOUND
from subtitle_stats.core.frequency import FrequencyEntry
from subtitle_stats.core.report import StatisticsReport, analyze, write_report
from subtitle_stats.core.tokenizer import count_words


class TestWordRanking:
    """Most used words across the corpus."""

    def test_repeated_words_reported_with_counts(self, corpus_factory, subrip):
        report = analyze(corpus_factory(["Hello world", "Hello there, world!"]), subrip)
        assert report.word_entries == [
            FrequencyEntry(token="world", count=2),
            FrequencyEntry(token="Hello", count=2),
        ]
        assert report.most_used_words == "2: world\n2: Hello\n"

    def test_singletons_absent(self, corpus_factory, subrip):
        report = analyze(corpus_factory(["Hello world", "Hello there, world!"]), subrip)
        assert "there" not in report.most_used_words

    def test_nothing_repeated(self, corpus_factory, subrip):
        report = analyze(corpus_factory(["One two", "three four"]), subrip)
        assert report.most_used_words == NOTHING_FOUND + "\n"
        assert report.word_entries == []


class TestLineRanking:
    """Most used lines across the corpus."""

    def test_repeated_line(self, corpus_factory, subrip):
        texts = ["<i>Whispering</i> to you.", "Whispering... to you!"]
        report = analyze(corpus_factory(texts), subrip)
        assert report.line_entries == [FrequencyEntry(token="to you", count=2)]
        assert report.most_used_lines == "2: to you\n"

    def test_lines_span_display_line_breaks(self, corpus_factory, subrip):
        texts = ["Good\nmorning, sir.", "Good morning, sir!"]
        report = analyze(corpus_factory(texts), subrip)
        assert report.line_entries == [FrequencyEntry(token="Good morning, sir", count=2)]


class TestEmptyCorpus:
    """Every section is the placeholder for an empty corpus."""

    def test_all_sections_placeholder(self, empty_corpus, subrip):
        report = analyze(empty_corpus, subrip)
        assert report.general.strip() == NOTHING_FOUND
        assert report.most_used_words.strip() == NOTHING_FOUND
        assert report.most_used_lines.strip() == NOTHING_FOUND
        assert report.total_words == 0
        assert report.statistics is None


class TestTotals:
    """Word total and idempotence."""

    def test_total_words_is_sum_of_segment_counts(self, corpus_factory, subrip):
        texts = ["<i>Hello</i> world", "Hello there,\nworld!", ""]
        report = analyze(corpus_factory(texts), subrip)
        assert report.total_words == sum(count_words(t) for t in texts) == 5
        assert report.statistics.total_words == 5

    def test_analysis_is_idempotent(self, sample_srt, subrip):
        corpus = subrip.parse(sample_srt)
        first = analyze(corpus, subrip).to_text()
        second = analyze(corpus, subrip).to_text()
        assert first == second

    def test_corpus_not_modified(self, sample_srt, subrip):
        corpus = subrip.parse(sample_srt)
        before = list(corpus.segments)
        analyze(corpus, subrip)
        assert corpus.segments == before


class TestLayout:
    """to_text() renders the fixed three-section layout."""

    def test_section_order(self, sample_srt, subrip):
        text = analyze(subrip.parse(sample_srt), subrip).to_text()
        assert text.startswith("File generated by: ")
        general = text.index("============================= General =============================")
        words = text.index("============================= Most Used Words =============================")
        lines = text.index("============================= Most Used Lines =============================")
        assert general < words < lines

    def test_sample_sections(self, sample_srt, subrip):
        report = analyze(subrip.parse(sample_srt), subrip)
        assert report.most_used_words.splitlines() == [
            "2: you",
            "2: world",
            "2: to",
            "2: Whispering",
            "2: Hello",
        ]
        assert report.most_used_lines == "2: to you\n"
        assert "Number of subtitle lines: 3" in report.general

    def test_single_blank_line_after_ranking(self, corpus_factory, subrip):
        text = analyze(corpus_factory(["Hello world", "Hello there, world!"]), subrip).to_text()
        assert (
            "2: Hello\n"
            "\n"
            "============================= Most Used Lines =============================\n"
        ) in text

    def test_custom_attribution(self):
        report = StatisticsReport(
            general="G",
            most_used_words="W\n",
            most_used_lines="L\n",
            total_words=0,
        )
        assert report.to_text(attribution="Tester") == (
            "File generated by: Tester\n"
            "============================= General =============================\n"
            "G\n"
            "============================= Most Used Words =============================\n"
            "W\n\n"
            "============================= Most Used Lines =============================\n"
            "L\n"
        )


class TestWriteReport:
    """write_report() writes the combined text as UTF-8."""

    def test_writes_combined_text(self, tmp_path, corpus_factory, subrip):
        report = analyze(corpus_factory(["Grüße aus Köln", "Grüße aus Köln"]), subrip)
        path = write_report(report, tmp_path / "stats.txt")
        assert path.read_text(encoding="utf-8") == report.to_text()

    def test_missing_directory_raises(self, tmp_path, empty_corpus, subrip):
        report = analyze(empty_corpus, subrip)
        with pytest.raises(OSError):
            write_report(report, tmp_path / "missing" / "stats.txt")
