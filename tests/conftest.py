"""Shared test fixtures for the subtitle_stats test suite.

WHY: Several test modules need the same small subtitle track, both as
SubRip file content and as a ready-made Corpus, so expected figures can
be computed once and reused.

HOW: Pytest fixtures provide the raw SubRip text, a WebVTT variant, a
two-segment corpus with hand-computed statistics, and an empty corpus.

RULES:
- SAMPLE_SRT figures quoted in tests are computed by hand from this file
- Fixtures return fresh objects so tests never share mutable state
"""

from typing import List

import pytest

from subtitle_stats.core.ir import Corpus, Segment
from subtitle_stats.formats.subrip import SubRipFormat


SAMPLE_SRT = """1
00:00:01,000 --> 00:00:03,000
<i>Whispering</i> to you.

2
00:00:04,000 --> 00:00:06,500
Hello world

3
00:00:07,000 --> 00:00:09,000
Hello there, world!
<i>Whispering</i> to you.
"""

SAMPLE_VTT = """WEBVTT
Kind: captions

NOTE This cue list is used by the parser tests

intro
00:01.000 --> 00:03.000 align:start position:10%
Hello world

00:00:04.000 --> 00:00:06.500
- Hello there.
- Hi.
"""


def make_corpus(texts: List[str], duration_ms: float = 2000.0, gap_ms: float = 500.0) -> Corpus:
    """Build a corpus with one segment per text and sequential timing."""
    segments = []  # type: List[Segment]
    t = 0.0
    for i, text in enumerate(texts, 1):
        segments.append(Segment(text=text, start_ms=t, end_ms=t + duration_ms, number=i))
        t += duration_ms + gap_ms
    return Corpus(segments=segments)


@pytest.fixture
def sample_srt():
    """Three-cue SubRip file with italics and a repeated line."""
    return SAMPLE_SRT


@pytest.fixture
def sample_vtt():
    """WebVTT file with a header setting, a NOTE block and cue settings."""
    return SAMPLE_VTT


@pytest.fixture
def subrip():
    return SubRipFormat()


@pytest.fixture
def two_segment_corpus():
    """Two segments with hand-computed statistics.

    Segment 1: "Hello world", 0-2000 ms (11 chars, 5.5 chars/sec)
    Segment 2: "<i>Hi there</i>\\nfriend", 3000-4000 ms
               (21 chars without the line break, 14 chars/sec text only)
    """
    return Corpus(segments=[
        Segment(text="Hello world", start_ms=0.0, end_ms=2000.0, number=1),
        Segment(text="<i>Hi there</i>\nfriend", start_ms=3000.0, end_ms=4000.0, number=2),
    ])


@pytest.fixture
def empty_corpus():
    return Corpus()


@pytest.fixture
def corpus_factory():
    """Factory fixture: ``corpus_factory(["text", ...])`` builds a Corpus."""
    return make_corpus
