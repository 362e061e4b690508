from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries, sample sources and trees.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from wordtracker.core.services.indexer import Indexer  # noqa: E402
from wordtracker.core.structures.ordered_tree import OrderedTree  # noqa: E402
from wordtracker.domain.word_models import WordEntry  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Points the repository and output paths into the test's temporary
    directory so no test touches the working directory.
    """
    return {
        "input_paths": [],
        "repository_path": str(tmp_path / "repository.json"),
        "output_file": "",
        "tokenizer_mode": "alnum",
        "persist": True,
        "report_format": "pf",
        "log_level": "INFO",
        "log_file": "",
    }


@pytest.fixture
def sample_source(tmp_path: Path) -> Path:
    """Two-line text file used by the indexing scenarios."""
    path = tmp_path / "sample.txt"
    path.write_text("The cat sat.\nThe dog sat.\n", encoding="utf-8")
    return path


@pytest.fixture
def indexed_tree() -> OrderedTree[WordEntry]:
    """Word tree built from two small in-memory sources."""
    indexer = Indexer()
    indexer.index_text("The cat sat.\nThe dog sat.", "a.txt")
    indexer.index_text("A dog barked at the cat.", "b.txt")
    return indexer.tree
