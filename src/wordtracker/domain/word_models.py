from __future__ import annotations

"""
Word Occurrence Domain Models.

Defines the entities stored in the ordered tree: one WordEntry per distinct
normalized word, holding an OccurrenceRecord per source where the word was
seen. Entries are ordered and compared by their key alone.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from wordtracker.domain.errors import InvalidArgumentError

# -----------------------------------------------------------------------------
# PER-SOURCE OCCURRENCES
# -----------------------------------------------------------------------------

@dataclass
class OccurrenceRecord:
    """
    Occurrence data of one word inside one source.

    Attributes:
        lines: Distinct line numbers in order of first appearance.
        count: Total hits, including repeats on the same line.
    """
    lines: List[int] = field(default_factory=list)
    count: int = 0

    def add_line(self, line: int) -> None:
        """
        Record one hit on the given line.

        The line is appended only the first time it is seen; the count is
        incremented on every call.

        Raises:
            InvalidArgumentError: If line is not a positive integer.
        """
        _require_line(line)
        if line not in self.lines:
            self.lines.append(line)
        self.count += 1

# -----------------------------------------------------------------------------
# WORD ENTRY
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class WordEntry:
    """
    One distinct word tracked across all sources.

    Attributes:
        key: Lowercase lookup key. Sole input to ordering and equality.
        display_form: First-seen casing, used only for output.
        occurrences: Source identifier to OccurrenceRecord, in insertion order.
    """
    key: str
    display_form: str = ""
    occurrences: Dict[str, OccurrenceRecord] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise InvalidArgumentError("Word key must be a non-empty string")
        if not self.display_form:
            self.display_form = self.key

    @classmethod
    def probe(cls, key: str) -> "WordEntry":
        """Build a lookup-only entry carrying nothing but the key."""
        return cls(key)

    def add_occurrence(self, source: str, line: int) -> None:
        """
        Record that this word appears in source at line.

        Args:
            source: Source identifier (usually the file name as given).
            line: 1-based line number.

        Raises:
            InvalidArgumentError: If source is empty or line is not positive.
        """
        if not isinstance(source, str) or not source:
            raise InvalidArgumentError("Source identifier must be a non-empty string")
        _require_line(line)

        record = self.occurrences.get(source)
        if record is None:
            record = OccurrenceRecord()
            self.occurrences[source] = record
        record.add_line(line)

    def sources(self) -> List[str]:
        return list(self.occurrences.keys())

    def total_count(self) -> int:
        return sum(record.count for record in self.occurrences.values())

    # Ordering and equality use the key only

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, WordEntry):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, WordEntry):
            return NotImplemented
        return self.key < other.key

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, WordEntry):
            return NotImplemented
        return self.key > other.key

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, WordEntry):
            return NotImplemented
        return self.key <= other.key

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, WordEntry):
            return NotImplemented
        return self.key >= other.key

    def __str__(self) -> str:
        return self.display_form


def compare_entries(a: WordEntry, b: WordEntry) -> int:
    """Three-way comparison of two entries by key."""
    if a.key < b.key:
        return -1
    if a.key > b.key:
        return 1
    return 0

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _require_line(line: Any) -> None:
    if isinstance(line, bool) or not isinstance(line, int) or line < 1:
        raise InvalidArgumentError(f"Line number must be a positive integer, got {line!r}")
