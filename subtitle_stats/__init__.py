"""Subtitle Statistics — corpus analyzer for timed subtitle tracks.

WHY: Subtitle editors want a quick overview of a track before delivery:
how long the cues are, how fast they read, and which words and lines
repeat. This package computes those numbers from any parsed subtitle
track and renders them into a plain text report.

HOW: Three-stage pipeline: parse (format descriptors), analyze (core
statistics, tokenizer, frequency tables), report (fixed text layout).
Each stage is independently testable.

RULES:
- The core only reads the Corpus; it never mutates segments
- Adding a new subtitle format = one new module in formats/, no core changes
- The StatisticsReport is the only artifact handed back to callers
"""

__version__ = "0.1.0"
