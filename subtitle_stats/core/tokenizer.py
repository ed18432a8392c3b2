"""Word, sentence and line tokenization for subtitle text.

WHY: Word frequencies, repeated-line frequencies, line-length statistics
and the total word count each need a different notion of "token". They
live together so the splitting rules are defined in one place.

HOW: Word mode splits markup-normalized text on a fixed delimiter set.
Sentence mode folds ``!``/``?``/ellipses into periods and splits on ``.``.
Display lines come from the raw line breaks; the word count is a plain
whitespace split.

RULES:
- Word tokens shorter than 2 characters (after trimming) are noise
- Sentence tokens must be non-empty and contain an interior space
- split_to_lines("") returns [""]; every segment has at least one line
- count_words() does no markup handling or filtering
"""

from __future__ import annotations

import re
from typing import List

from subtitle_stats.core.markup import (
    fix_invalid_italic_tags,
    remove_font_tags,
    strip_html_tags,
)

WORD_DELIMITERS = (
    "\u266a",  # eighth note
    "\u266b",  # beamed eighth notes
    '"', "(", ")", "[", "]", " ", ",", "!", "?", ".", ":", ";", "-", "_",
    "@", "<", ">", "/",
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9",
    "\u060c",  # Arabic comma
    "\u061f",  # Arabic question mark
    "\u061b",  # Arabic semicolon
)

_WORD_SPLIT_RE = re.compile("[{}]".format("".join(re.escape(c) for c in WORD_DELIMITERS)))
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_WHITESPACE_RUN_RE = re.compile(r"\s+")


def split_words(text: str) -> List[str]:
    """Split segment text into countable word tokens.

    HOW: Repairs spaced style tags, strips style tags (closing tags become
    periods), removes font tags, then splits on WORD_DELIMITERS.

    RULES:
    - Fragments are trimmed; only those longer than one character are kept
    - Case is preserved ("The" and "the" are different tokens)
    """
    text = fix_invalid_italic_tags(text)
    text = strip_html_tags(text)
    text = remove_font_tags(text)

    words: List[str] = []
    for fragment in _WORD_SPLIT_RE.split(text):
        word = fragment.strip()
        if len(word) > 1:
            words.append(word)
    return words


def split_sentences(text: str) -> List[str]:
    """Split segment text into sentence-like "lines" for repetition counting.

    HOW: Display line breaks become spaces, style tags are stripped, ``!``
    and ``?`` become periods, ellipses collapse to one period, hyphens
    become spaces, and whitespace runs collapse. The result is split on
    ``.``.

    RULES:
    - Fragments are trimmed and kept only when non-empty and containing a
      space (single words are not "lines")
    """
    text = _LINE_BREAK_RE.sub(" ", text).replace("  ", " ")
    text = (
        strip_html_tags(text)
        .replace("!", ".")
        .replace("?", ".")
        .replace("...", ".")
        .replace("..", ".")
        .replace("-", " ")
    )
    text = _WHITESPACE_RUN_RE.sub(" ", text)

    sentences: List[str] = []
    for fragment in text.split("."):
        sentence = fragment.strip()
        if sentence and " " in sentence:
            sentences.append(sentence)
    return sentences


def split_to_lines(text: str) -> List[str]:
    """Split text on ``\\r\\n``, ``\\r`` or ``\\n`` into display lines."""
    return _LINE_BREAK_RE.split(text)


def count_words(text: str) -> int:
    """Number of whitespace-delimited words in ``text``."""
    return len(text.split())
