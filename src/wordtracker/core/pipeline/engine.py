from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates a complete tracking run:
1. Validates configuration and input paths.
2. Restores the word repository (or starts a fresh tree).
3. Indexes every input source into the tree.
4. Persists the updated repository.
5. Renders the report and delivers it to a file when requested.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from wordtracker.core.analysis.report_renderer import render_report
from wordtracker.core.pipeline.validator import validate_config
from wordtracker.core.services.indexer import Indexer, new_word_tree
from wordtracker.core.services.repository import load_repository, save_repository
from wordtracker.domain.tracking_models import (
    TrackingResult,
    create_error_result,
    create_success_result,
)
from wordtracker.infra.fs import write_text_atomic

logger = logging.getLogger(__name__)


def run_tracking(
        config: Optional[Dict[str, Any]],
        *,
        reset: bool = False,
) -> TrackingResult:
    """
    Execute the full index-and-report workflow.

    Args:
        config: The configuration dictionary (raw or partial).
        reset: If True, ignore the stored repository and start from scratch.

    Returns:
        TrackingResult: Object containing status, statistics and the report.
    """
    logger.info("Tracking run started.")

    # -------------------------------------------------------------------------
    # 1) Config & Input Verification
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    input_paths: List[str] = cfg["input_paths"]
    missing = [p for p in input_paths if not os.path.isfile(p)]
    if missing:
        msg = f"Input file not found: {', '.join(missing)}"
        logger.error(msg)
        return create_error_result(msg, cfg, summary_extra={"missing_inputs": missing})

    repository_path = cfg["repository_path"]

    # -------------------------------------------------------------------------
    # 2) Repository Restore
    # -------------------------------------------------------------------------
    if reset:
        logger.info("Repository reset requested. Starting with an empty tree.")
        tree = new_word_tree()
    else:
        tree = load_repository(repository_path)
    words_before = tree.size()

    # -------------------------------------------------------------------------
    # 3) Indexing
    # -------------------------------------------------------------------------
    indexer = Indexer(tree, tokenizer_mode=cfg["tokenizer_mode"])
    per_source: Dict[str, int] = {}

    for path in input_paths:
        try:
            per_source[path] = indexer.index_file(path)
        except OSError as e:
            msg = f"Failed to read {path}: {e}"
            logger.error(msg)
            return create_error_result(msg, cfg, summary_extra={"indexed": per_source})

    tree.verify()

    # -------------------------------------------------------------------------
    # 4) Persistence
    # -------------------------------------------------------------------------
    persisted = False
    summary: Dict[str, Any] = {
        "words_before": words_before,
        "new_words": tree.size() - words_before,
        "indexed": per_source,
    }

    if cfg["persist"]:
        try:
            save_repository(tree, repository_path)
            persisted = True
        except OSError as e:
            logger.error(f"Failed to save repository {repository_path}: {e}")
            summary["save_error"] = str(e)
    else:
        logger.debug("Persistence disabled. Repository left untouched.")

    # -------------------------------------------------------------------------
    # 5) Reporting
    # -------------------------------------------------------------------------
    report_lines = render_report(tree, cfg["report_format"])

    output_file = cfg["output_file"]
    if output_file:
        try:
            write_text_atomic(output_file, "\n".join(report_lines) + "\n")
        except OSError as e:
            msg = f"Error writing to file: {output_file} ({e})"
            logger.error(msg)
            return create_error_result(msg, cfg, summary_extra=summary)
        logger.info(f"Report written to {output_file}")

    logger.info(
        f"Tracking run finished: {indexer.tokens_recorded} tokens, "
        f"{tree.size()} distinct words."
    )

    return create_success_result(
        cfg,
        tokens_indexed=indexer.tokens_recorded,
        distinct_words=tree.size(),
        tree_height=tree.height(),
        report_lines=report_lines,
        persisted=persisted,
        summary_extra=summary,
    )
