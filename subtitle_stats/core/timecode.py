"""Time code parsing and rendering in milliseconds.

WHY: Subtitle formats write timestamps as ``HH:MM:SS,mmm`` (SubRip) or
``HH:MM:SS.mmm`` / ``MM:SS.mmm`` (WebVTT), and the general statistics
display the total duration the same way. One module owns the conversion.

RULES:
- Internal unit is float milliseconds
- Rendering rounds to whole milliseconds and never emits negative values
- Parsing raises ValueError on anything that is not a time code
"""

from __future__ import annotations

import re

TIMECODE_RE = re.compile(
    r"^\s*(?:(\d+):)?(\d{1,2}):(\d{1,2})[,.](\d{1,3})\s*$"
)


def ms_to_timecode(ms: float, separator: str = ",") -> str:
    """Render milliseconds as ``HH:MM:SS<sep>mmm``."""
    total = max(0, int(round(ms)))
    hours, rest = divmod(total, 3600000)
    minutes, rest = divmod(rest, 60000)
    seconds, millis = divmod(rest, 1000)
    return "{:02d}:{:02d}:{:02d}{}{:03d}".format(hours, minutes, seconds, separator, millis)


def timecode_to_ms(value: str) -> float:
    """Parse ``[HH:]MM:SS[,.]mmm`` into float milliseconds.

    Fractions shorter than three digits are read as decimal fractions
    ("00:00:01,5" is 1500 ms).

    Raises:
        ValueError: If ``value`` is not a time code.
    """
    match = TIMECODE_RE.match(value)
    if not match:
        raise ValueError("Invalid time code: '{}'".format(value.strip()))
    hours, minutes, seconds, fraction = match.groups()
    millis = int(fraction.ljust(3, "0"))
    return float(
        int(hours or 0) * 3600000
        + int(minutes) * 60000
        + int(seconds) * 1000
        + millis
    )
