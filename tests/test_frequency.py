"""Unit tests for frequency tables.

WHY: The "most used" sections must be reproducible byte for byte. The
ranking rule (count descending, ties in descending UTF-16 code-unit
order) and the singleton filter are easy to break with an
innocent-looking sort change.

HOW: Tests build tables from known token lists and check the ranked
entries and the rendered block.
"""

from subtitle_stats.core.frequency import FrequencyEntry, FrequencyTable


def _table(tokens):
    table = FrequencyTable()
    table.update(tokens)
    return table


class TestCounting:
    """FrequencyTable counts exact, case-sensitive tokens."""

    def test_counts_occurrences(self):
        table = _table(["a", "b", "a"])
        assert table["a"] == 2
        assert table["b"] == 1
        assert len(table) == 2

    def test_add_and_update_accumulate(self):
        table = FrequencyTable()
        table.add("hey")
        table.update(["hey", "you"])
        table.add("you")
        assert table["hey"] == 2
        assert table["you"] == 2

    def test_missing_token_counts_zero(self):
        assert _table([])["nope"] == 0

    def test_case_sensitive(self):
        table = _table(["The", "the", "The"])
        assert table["The"] == 2
        assert table["the"] == 1

    def test_no_unicode_normalization(self):
        # Precomposed vs combining accent are different tokens
        table = _table(["caf\u00e9", "cafe\u0301"])
        assert len(table) == 2


class TestMostUsed:
    """most_used() filters singletons and ranks by (count, token) descending."""

    def test_singletons_excluded(self):
        table = _table(["once", "twice", "twice"])
        assert table.most_used() == [FrequencyEntry(token="twice", count=2)]

    def test_higher_count_first(self):
        table = _table(["a", "a", "b", "b", "b"])
        assert [e.token for e in table.most_used()] == ["b", "a"]

    def test_ties_in_descending_ordinal_order(self):
        table = _table(["Zebra", "apple", "Zebra", "apple", "Mango", "Mango"])
        assert [e.token for e in table.most_used()] == ["apple", "Zebra", "Mango"]

    def test_non_ascii_ties(self):
        table = _table(["Ärger", "Zorn", "Ärger", "Zorn"])
        assert [e.token for e in table.most_used()] == ["Ärger", "Zorn"]

    def test_ties_compare_utf16_code_units(self):
        # U+FF21 (one code unit) outranks U+1F600 (surrogate pair D83D DE00)
        table = _table(["\U0001f600x", "\uff21x", "\U0001f600x", "\uff21x"])
        assert [e.token for e in table.most_used()] == ["\uff21x", "\U0001f600x"]

    def test_full_ordering(self):
        table = _table(["b"] * 3 + ["a"] * 2 + ["c"] * 2 + ["d"])
        assert table.most_used() == [
            FrequencyEntry(token="b", count=3),
            FrequencyEntry(token="c", count=2),
            FrequencyEntry(token="a", count=2),
        ]

    def test_ranking_is_independent_of_insertion_order(self):
        tokens = ["x", "y", "x", "y", "z", "z", "z"]
        assert _table(tokens).most_used() == _table(list(reversed(tokens))).most_used()


class TestFormatBlock:
    """format_block() renders one "<count>: <token>" row per entry."""

    def test_rows(self):
        table = _table(["b"] * 3 + ["a"] * 2 + ["c"] * 2 + ["d"])
        assert table.format_block("Nothing found") == "3: b\n2: c\n2: a\n"

    def test_placeholder_when_nothing_repeats(self):
        assert _table(["a", "b"]).format_block("Nothing found") == "Nothing found\n"

    def test_placeholder_for_empty_table(self):
        assert FrequencyTable().format_block("Nothing found") == "Nothing found\n"

    def test_entry_render(self):
        assert FrequencyEntry(token="to you", count=4).render() == "4: to you"
