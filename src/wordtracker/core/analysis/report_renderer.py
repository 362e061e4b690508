from __future__ import annotations

"""
Report Renderer.

Turns the word tree into plain-text report lines. Walks the in-order
traversal, the only traversal that yields alphabetical output.

Formats:
- pf: word and the files it occurs in.
- pl: word, files and the line numbers in each file.
- po: word, total occurrence count, files with per-file counts and lines.
"""

from typing import List

from wordtracker.core.structures.ordered_tree import OrderedTree
from wordtracker.domain.constants import FORMAT_FILES, FORMAT_OCCURRENCES, REPORT_FORMATS
from wordtracker.domain.word_models import OccurrenceRecord, WordEntry

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_report(tree: OrderedTree[WordEntry], report_format: str) -> List[str]:
    """
    Render the whole tree in the requested format.

    Args:
        tree: Word tree to report on.
        report_format: One of 'pf', 'pl' or 'po'.

    Returns:
        List[str]: Header line followed by one line per word.

    Raises:
        ValueError: If the format is unknown.
    """
    if report_format not in REPORT_FORMATS:
        raise ValueError(
            f"Unknown report format '{report_format}'. Expected one of {list(REPORT_FORMATS)}."
        )

    lines = [f"Displaying -{report_format} format"]
    for entry in tree.inorder_iterator():
        lines.append(render_entry(entry, report_format))
    return lines


def render_entry(entry: WordEntry, report_format: str) -> str:
    """Render a single word line."""
    parts = [f"Key : ==={entry.display_form}==="]

    if report_format == FORMAT_OCCURRENCES:
        parts.append(f"number of entries: {entry.total_count()}")

    for source, record in entry.occurrences.items():
        parts.append(_render_source(source, record, report_format))

    return " ".join(parts)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_source(source: str, record: OccurrenceRecord, report_format: str) -> str:
    if report_format == FORMAT_FILES:
        return f"found in file: {source}"

    if report_format == FORMAT_OCCURRENCES:
        head = f"found in file: {source} ({record.count})"
    else:
        head = f"found in file: {source}"

    line_list = ", ".join(str(n) for n in record.lines)
    return f"{head} on lines: {line_list}"
