"""Frequency tables for the "most used words/lines" report sections.

WHY: The report lists every word and every line that occurs more than
once, most frequent first. The listing must be byte-for-byte reproducible
across runs and machines, so counting and ordering use exact ordinal
comparison and never locale-aware collation or case folding.

HOW: A Counter keyed by the token string counts occurrences (Python
string equality is exact code-point equality). Ranking sorts on the
composite key ``(count, UTF-16 code units of token)`` and reverses it.

RULES:
- Counting is case-sensitive ("The" and "the" are distinct)
- Tokens seen exactly once are never reported
- Order: highest count first; equal counts in descending UTF-16 code-unit
  order, so U+E000..U+FFFF sorts above astral characters (surrogates)
- An empty ranking renders as a single placeholder line
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class FrequencyEntry:
    """One reported token with its corpus-wide occurrence count."""

    token: str
    count: int

    def render(self) -> str:
        return "{}: {}".format(self.count, self.token)


def _rank_key(item: Tuple[str, int]) -> Tuple[int, bytes]:
    # Big-endian UTF-16 bytes compare in code-unit order
    token, count = item
    return count, token.encode("utf-16-be")


class FrequencyTable:
    """Occurrence counter for words or lines across a whole corpus.

    Built fresh for each analysis call and discarded after formatting.
    """

    def __init__(self) -> None:
        self._counts: Counter = Counter()

    def __len__(self) -> int:
        return len(self._counts)

    def __getitem__(self, token: str) -> int:
        return self._counts[token]

    def add(self, token: str) -> None:
        self._counts[token] += 1

    def update(self, tokens: Iterable[str]) -> None:
        self._counts.update(tokens)

    def most_used(self) -> List[FrequencyEntry]:
        """Tokens occurring at least twice, ranked for presentation."""
        ranked = sorted(
            ((token, count) for token, count in self._counts.items() if count > 1),
            key=_rank_key,
            reverse=True,
        )
        return [FrequencyEntry(token=token, count=count) for token, count in ranked]

    def format_block(self, nothing_found: str) -> str:
        """Render the ranking as ``"<count>: <token>"`` rows.

        Returns ``nothing_found`` as the only row when no token repeats.
        Every row, including the last, ends with a newline.
        """
        entries = self.most_used()
        if not entries:
            return nothing_found + "\n"
        return "".join(entry.render() + "\n" for entry in entries)
