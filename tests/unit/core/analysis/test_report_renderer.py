from __future__ import annotations

"""
Unit tests for the Report Renderer.

Verifies:
1. Alphabetical output driven by the in-order traversal.
2. Layout of the three verbosity levels (pf, pl, po).
3. Rejection of unknown formats.
"""

import pytest

from wordtracker.core.analysis.report_renderer import render_entry, render_report
from wordtracker.core.services.indexer import Indexer
from wordtracker.core.structures.ordered_tree import OrderedTree
from wordtracker.domain.word_models import WordEntry


def test_report_is_alphabetical_with_header(indexed_tree: OrderedTree[WordEntry]) -> None:
    lines = render_report(indexed_tree, "pf")

    assert lines[0] == "Displaying -pf format"
    words = [line.split("===")[1] for line in lines[1:]]
    assert words == ["A", "at", "barked", "cat", "dog", "sat", "The"]


def test_pf_lists_files_only(indexed_tree: OrderedTree[WordEntry]) -> None:
    lines = render_report(indexed_tree, "pf")

    assert "Key : ===cat=== found in file: a.txt found in file: b.txt" in lines
    assert "Key : ===barked=== found in file: b.txt" in lines


def test_pl_adds_line_numbers(indexed_tree: OrderedTree[WordEntry]) -> None:
    lines = render_report(indexed_tree, "pl")

    assert lines[0] == "Displaying -pl format"
    assert "Key : ===sat=== found in file: a.txt on lines: 1, 2" in lines
    assert "Key : ===The=== found in file: a.txt on lines: 1, 2 found in file: b.txt on lines: 1" in lines


def test_po_adds_total_and_per_file_counts(indexed_tree: OrderedTree[WordEntry]) -> None:
    lines = render_report(indexed_tree, "po")

    assert (
        "Key : ===The=== number of entries: 3 "
        "found in file: a.txt (2) on lines: 1, 2 "
        "found in file: b.txt (1) on lines: 1"
    ) in lines


def test_repeated_hits_on_one_line_show_in_po_count() -> None:
    indexer = Indexer()
    indexer.index_line("no no no", "x.txt", 4)

    entry = indexer.tree.get_root().element

    assert render_entry(entry, "po") == "Key : ===no=== number of entries: 3 found in file: x.txt (3) on lines: 4"
    assert render_entry(entry, "pl") == "Key : ===no=== found in file: x.txt on lines: 4"


def test_empty_tree_renders_header_only() -> None:
    assert render_report(Indexer().tree, "po") == ["Displaying -po format"]


def test_unknown_format_raises(indexed_tree: OrderedTree[WordEntry]) -> None:
    with pytest.raises(ValueError, match="Unknown report format"):
        render_report(indexed_tree, "px")
