from __future__ import annotations

"""
Unit tests for the Word Occurrence Domain Models.

Verifies:
1. Line deduplication versus unconditional counting in OccurrenceRecord.
2. Source bookkeeping and insertion order in WordEntry.
3. Key-only ordering and equality.
4. Rejection of malformed keys, sources and line numbers.
"""

import pytest

from wordtracker.domain.errors import InvalidArgumentError
from wordtracker.domain.word_models import OccurrenceRecord, WordEntry, compare_entries


def test_add_line_deduplicates_lines_but_counts_every_hit() -> None:
    record = OccurrenceRecord()

    record.add_line(4)
    record.add_line(4)
    record.add_line(4)

    assert record.lines == [4]
    assert record.count == 3


def test_add_line_keeps_first_appearance_order() -> None:
    record = OccurrenceRecord()
    for line in (7, 2, 7, 9, 2):
        record.add_line(line)

    assert record.lines == [7, 2, 9]
    assert record.count == 5


@pytest.mark.parametrize("bad_line", [0, -3, 1.5, "2", True, None])
def test_add_line_rejects_non_positive_integers(bad_line: object) -> None:
    record = OccurrenceRecord()

    with pytest.raises(InvalidArgumentError):
        record.add_line(bad_line)  # type: ignore[arg-type]
    assert record.count == 0


def test_add_occurrence_creates_records_in_source_order() -> None:
    entry = WordEntry("cat", "Cat")

    entry.add_occurrence("b.txt", 3)
    entry.add_occurrence("a.txt", 1)
    entry.add_occurrence("b.txt", 5)

    assert entry.sources() == ["b.txt", "a.txt"]
    assert entry.occurrences["b.txt"].lines == [3, 5]
    assert entry.occurrences["a.txt"].count == 1
    assert entry.total_count() == 3


def test_add_occurrence_same_location_increments_count_only() -> None:
    entry = WordEntry("sat")

    entry.add_occurrence("a.txt", 2)
    entry.add_occurrence("a.txt", 2)

    record = entry.occurrences["a.txt"]
    assert record.lines == [2]
    assert record.count == 2


def test_add_occurrence_rejects_empty_source() -> None:
    entry = WordEntry("sat")

    with pytest.raises(InvalidArgumentError):
        entry.add_occurrence("", 1)
    assert entry.occurrences == {}


def test_display_form_defaults_to_key() -> None:
    assert WordEntry("dog").display_form == "dog"
    assert WordEntry.probe("dog").occurrences == {}


def test_empty_key_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        WordEntry("")


def test_equality_and_ordering_use_key_only() -> None:
    upper = WordEntry("the", "The")
    lower = WordEntry("the", "the")
    upper.add_occurrence("a.txt", 1)

    assert upper == lower
    assert hash(upper) == hash(lower)
    assert WordEntry("apple") < WordEntry("banana")
    assert WordEntry("zebra") > WordEntry("yak")
    assert sorted([WordEntry("b"), WordEntry("a")])[0].key == "a"


def test_compare_entries_is_three_way() -> None:
    a, b = WordEntry("a"), WordEntry("b")

    assert compare_entries(a, b) < 0
    assert compare_entries(b, a) > 0
    assert compare_entries(a, WordEntry("a", "A")) == 0


def test_str_is_display_form() -> None:
    assert str(WordEntry("nasa", "NASA")) == "NASA"


@pytest.mark.parametrize("other", ["cat", 3, None])
def test_ordering_against_foreign_types_raises_type_error(other: object) -> None:
    entry = WordEntry("cat")

    with pytest.raises(TypeError):
        entry < other  # type: ignore[operator]
    with pytest.raises(TypeError):
        entry >= other  # type: ignore[operator]
    assert (entry == other) is False
