"""Markup normalization for subtitle text.

WHY: Subtitle text carries inline markup (``<i>``, ``<b>``, ``<u>``,
``<font color=...>``, ASSA ``{\\an8}`` overrides) that must not show up
as words or distort character counts. Closing style tags usually end a
thought, so they are turned into sentence boundaries rather than simply
dropped.

HOW: Plain string search-and-replace for the fixed style tags, a
position-based scan for ``<font ...>`` tags, and two compiled patterns
for the generic "remove every tag" case used by character counts.

RULES:
- Nothing in this module raises on malformed or unbalanced markup
- strip_html_tags() leaves texts shorter than 8 characters untouched
  (after quote removal)
- remove_font_tags() abandons further removal on the first ``<font``
  without a closing ``>``; ``</font>`` is then left as is
- Tag lookups for ``<font`` are case-insensitive; the style tags are
  matched in lower and upper case
"""

from __future__ import annotations

import re

_FONT_OPEN_RE = re.compile(r"<font", re.IGNORECASE)
_SPACED_STYLE_TAG_RE = re.compile(r"<\s*(/?)\s*([ibu])\s*>", re.IGNORECASE)
_HTML_TAG_RE = re.compile(r"</?[A-Za-z][^<>]*>")
_ASSA_TAG_RE = re.compile(r"\{\\[^{}]*\}")

# Opening tags are dropped, closing tags become a sentence boundary.
_STYLE_TAG_REPLACEMENTS = (
    ("<i>", ""),
    ("</i>", "."),
    ("<I>", ""),
    ("</I>", "."),
    ("<b>", ""),
    ("</b>", "."),
    ("<B>", ""),
    ("</B>", "."),
    ("<u>", ""),
    ("</u>", "."),
    ("<U>", ""),
    ("</U>", "."),
)

_SHORT_TEXT_LENGTH = 8


def strip_html_tags(text: str) -> str:
    """Remove quotes and style tags, turning closing tags into periods.

    WHY: Both word and line frequency counting treat markup as implicit
    punctuation: ``"<i>Whispering</i> to you."`` reads as two phrases,
    ``"Whispering"`` and ``"to you"``.

    RULES:
    - Leading/trailing single quotes are trimmed, all double quotes removed
    - Results shorter than 8 characters are returned without tag handling
    - Only ``<i>``, ``<b>``, ``<u>`` (lower/upper case) are handled here
    """
    text = text.strip("'").replace('"', "")
    if len(text) < _SHORT_TEXT_LENGTH:
        return text

    for tag, replacement in _STYLE_TAG_REPLACEMENTS:
        text = text.replace(tag, replacement)
    return text


def remove_font_tags(text: str) -> str:
    """Excise ``<font ...>`` opening tags and turn ``</font>`` into a period.

    HOW: Finds ``<font`` case-insensitively, cuts everything up to and
    including the next ``>``, then searches again from the same position.

    RULES:
    - A ``<font`` with no ``>`` after it stops the scan; text already
      processed stays processed, the remainder is returned untouched and
      ``</font>`` is not replaced
    - ``</font>`` replacement is case-sensitive
    """
    match = _FONT_OPEN_RE.search(text)
    while match:
        idx = match.start()
        end_idx = text.find(">", idx + 5)
        if end_idx < idx:
            return text
        text = text[:idx] + text[end_idx + 1:]
        match = _FONT_OPEN_RE.search(text, idx)
    return text.replace("</font>", ".")


def fix_invalid_italic_tags(text: str) -> str:
    """Repair style tags written with stray spaces, e.g. ``< i >`` or ``</ b>``.

    Only texts containing ``"< "`` are touched; everything else is
    returned unchanged.
    """
    if "< " not in text:
        return text
    return _SPACED_STYLE_TAG_RE.sub(lambda m: "<{}{}>".format(m.group(1), m.group(2)), text)


def remove_markup(text: str) -> str:
    """Remove every HTML-like tag and ASSA override block from ``text``."""
    text = _HTML_TAG_RE.sub("", text)
    return _ASSA_TAG_RE.sub("", text)


def count_tag(text: str, tag: str) -> int:
    """Count non-overlapping occurrences of ``tag`` in ``text``."""
    if not tag:
        return 0
    return text.count(tag)
