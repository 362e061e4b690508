from __future__ import annotations

"""
Word Repository Persistence Service.

Serializes the word tree to a versioned JSON document and restores it
between runs. Entries are written in pre-order so that re-inserting them in
file order rebuilds the exact same tree shape.

Loading is fail-safe: a missing, unreadable or incompatible repository
yields a fresh empty tree and a log message, never an exception.
"""

import json
import logging
import os
from typing import Any, Dict, List

from wordtracker.core.services.indexer import new_word_tree
from wordtracker.core.structures.ordered_tree import OrderedTree
from wordtracker.domain.errors import InvalidArgumentError, RepositorySchemaError
from wordtracker.domain.word_models import OccurrenceRecord, WordEntry
from wordtracker.infra.fs import write_text_atomic

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SCHEMA CONSTANTS
# -----------------------------------------------------------------------------

REPOSITORY_FORMAT = "wordtracker-repository"
REPOSITORY_VERSION = 1
SUPPORTED_VERSIONS = (1,)

# -----------------------------------------------------------------------------
# IN-MEMORY CODEC
# -----------------------------------------------------------------------------

def serialize_tree(tree: OrderedTree[WordEntry]) -> Dict[str, Any]:
    """
    Convert a word tree into a JSON-compatible document.

    Args:
        tree: Tree to export.

    Returns:
        Dict[str, Any]: Versioned payload with one record per entry, pre-order.
    """
    entries: List[Dict[str, Any]] = []
    for entry in tree.preorder_iterator():
        entries.append({
            "key": entry.key,
            "display_form": entry.display_form,
            "occurrences": [
                {"source": source, "lines": list(record.lines), "count": record.count}
                for source, record in entry.occurrences.items()
            ],
        })

    return {
        "format": REPOSITORY_FORMAT,
        "version": REPOSITORY_VERSION,
        "entries": entries,
    }


def deserialize_tree(payload: Any) -> OrderedTree[WordEntry]:
    """
    Rebuild a word tree from a document produced by serialize_tree.

    Args:
        payload: Decoded JSON document.

    Returns:
        OrderedTree[WordEntry]: A tree equivalent to the serialized one.

    Raises:
        RepositorySchemaError: If the document is malformed or of an
            unsupported version.
    """
    if not isinstance(payload, dict):
        raise RepositorySchemaError(
            f"Repository root must be an object, got {type(payload).__name__}"
        )

    fmt = payload.get("format", REPOSITORY_FORMAT)
    if fmt != REPOSITORY_FORMAT:
        raise RepositorySchemaError(f"Unknown repository format '{fmt}'")

    version = payload.get("version", REPOSITORY_VERSION)
    if version not in SUPPORTED_VERSIONS:
        raise RepositorySchemaError(f"Unsupported repository version {version!r}")

    raw_entries = payload.get("entries", [])
    if not isinstance(raw_entries, list):
        raise RepositorySchemaError("'entries' must be a list")

    tree = new_word_tree()
    for i, raw in enumerate(raw_entries):
        entry = _decode_entry(raw, i)
        if not tree.add(entry):
            raise RepositorySchemaError(f"Duplicate key '{entry.key}' at entries[{i}]")

    return tree

# -----------------------------------------------------------------------------
# DISK API
# -----------------------------------------------------------------------------

def save_repository(tree: OrderedTree[WordEntry], path: str) -> None:
    """
    Persist the tree to path, replacing any previous repository atomically.

    Raises:
        OSError: If the file cannot be written.
    """
    document = json.dumps(serialize_tree(tree), ensure_ascii=False, indent=1)
    write_text_atomic(path, document)
    logger.debug(f"Repository saved to {path} ({tree.size()} entries)")


def load_repository(path: str) -> OrderedTree[WordEntry]:
    """
    Restore the tree stored at path, or start fresh when that is not possible.

    Args:
        path: Repository file location.

    Returns:
        OrderedTree[WordEntry]: The restored tree, or an empty one.
    """
    if not os.path.exists(path):
        logger.debug(f"Repository not found at {path}. Starting with an empty tree.")
        return new_word_tree()

    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        tree = deserialize_tree(payload)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError and RepositorySchemaError are both ValueError
        logger.warning(f"Failed to load repository {path}: {e}. Starting new tree.")
        return new_word_tree()

    logger.info(f"Loaded repository {path} ({tree.size()} words)")
    return tree

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _decode_entry(raw: Any, index: int) -> WordEntry:
    """Decode one entry record, upgrading records that predate 'count'."""
    where = f"entries[{index}]"
    if not isinstance(raw, dict):
        raise RepositorySchemaError(f"{where} must be an object")

    key = raw.get("key")
    display_form = raw.get("display_form") or key
    if not isinstance(key, str) or not key:
        raise RepositorySchemaError(f"{where}.key must be a non-empty string")
    if not isinstance(display_form, str):
        raise RepositorySchemaError(f"{where}.display_form must be a string")

    entry = WordEntry(key, display_form)

    occurrences = raw.get("occurrences", [])
    if not isinstance(occurrences, list):
        raise RepositorySchemaError(f"{where}.occurrences must be a list")

    for j, occ in enumerate(occurrences):
        occ_where = f"{where}.occurrences[{j}]"
        source = _source_of(occ, occ_where)
        if source in entry.occurrences:
            raise RepositorySchemaError(f"{occ_where}: duplicate source '{source}'")
        entry.occurrences[source] = _decode_record(occ, occ_where)

    return entry


def _source_of(occ: Any, where: str) -> str:
    if not isinstance(occ, dict):
        raise RepositorySchemaError(f"{where} must be an object")
    source = occ.get("source")
    if not isinstance(source, str) or not source:
        raise RepositorySchemaError(f"{where}.source must be a non-empty string")
    return source


def _decode_record(occ: Dict[str, Any], where: str) -> OccurrenceRecord:
    lines = occ.get("lines", [])
    if not isinstance(lines, list):
        raise RepositorySchemaError(f"{where}.lines must be a list")

    record = OccurrenceRecord()
    try:
        for line in lines:
            if line not in record.lines:
                record.add_line(line)
    except InvalidArgumentError as e:
        raise RepositorySchemaError(f"{where}.lines: {e}") from e

    count = occ.get("count", len(record.lines))
    if isinstance(count, bool) or not isinstance(count, int) or count < len(record.lines):
        raise RepositorySchemaError(
            f"{where}.count must be an integer no smaller than the number of lines"
        )
    record.count = count
    return record
