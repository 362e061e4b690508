from __future__ import annotations

"""
Tracking Run Data Models.

Defines the result object returned by the tracking engine to the CLI,
together with factory functions for successful and failed runs.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TrackingResult:
    """
    Outcome of one index-and-report run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_paths: Sources scanned during the run.
        repository_path: Repository file read and written.
        report_format: Verbosity level of the report.
        tokens_indexed: Tokens recorded during this run.
        distinct_words: Number of entries in the tree after the run.
        tree_height: Height of the tree after the run.
        report_lines: Rendered report.
        output_file: File the report was written to ("" for stdout).
        persisted: Whether the repository was saved.
        summary: Additional execution statistics.
    """
    ok: bool
    error: str

    input_paths: List[str]
    repository_path: str
    report_format: str

    tokens_indexed: int = 0
    distinct_words: int = 0
    tree_height: int = 0

    report_lines: List[str] = field(default_factory=list)
    output_file: str = ""
    persisted: bool = False

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        summary_extra: Optional[Dict[str, Any]] = None,
) -> TrackingResult:
    """
    Create a failed tracking result.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        summary_extra: Additional metadata for the summary payload.
    """
    return TrackingResult(
        ok=False,
        error=error,
        input_paths=list(cfg.get("input_paths", [])),
        repository_path=cfg.get("repository_path", ""),
        report_format=cfg.get("report_format", ""),
        output_file=cfg.get("output_file", ""),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        *,
        tokens_indexed: int,
        distinct_words: int,
        tree_height: int,
        report_lines: List[str],
        persisted: bool,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> TrackingResult:
    """
    Create a successful tracking result.

    Args:
        cfg: The validated configuration of the run.
        tokens_indexed: Tokens recorded during the run.
        distinct_words: Tree size after indexing.
        tree_height: Tree height after indexing.
        report_lines: Rendered report lines.
        persisted: Whether the repository was written back.
        summary_extra: Additional metadata for the summary payload.
    """
    return TrackingResult(
        ok=True,
        error="",
        input_paths=list(cfg.get("input_paths", [])),
        repository_path=cfg.get("repository_path", ""),
        report_format=cfg.get("report_format", ""),
        tokens_indexed=tokens_indexed,
        distinct_words=distinct_words,
        tree_height=tree_height,
        report_lines=list(report_lines),
        output_file=cfg.get("output_file", ""),
        persisted=persisted,
        summary=summary_extra or {},
    )
