from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, resolution of the
configuration hierarchy (defaults, stored preferences, CLI overrides),
execution of the tracking engine and rendering of the outcome.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from wordtracker.core.pipeline.engine import run_tracking
from wordtracker.core.pipeline.validator import validate_config
from wordtracker.domain.config import get_default_config, load_config, save_config
from wordtracker.domain.tracking_models import TrackingResult
from wordtracker.infra.logging import LoggingConfig, configure_logging, get_logger
from wordtracker.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 bad input, 130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, so stdout carries only the report)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration (Default vs Persistent state)
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_path)

    # 4. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    _apply_logging_preferences(clean_conf, args)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        save_config(clean_conf, args.config_path)

    if not clean_conf["input_paths"]:
        logger.info("No input files given. Reporting the stored repository.")

    # 5. Engine execution phase
    try:
        result = run_tracking(clean_conf, reset=bool(args.reset))
    except KeyboardInterrupt:
        logger.warning("Operation interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        msg = f"Tracking run failed: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_report(result)

    if not result.ok:
        return 2 if result.summary.get("missing_inputs") else 1
    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only keys known to the base configuration are merged.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out


def _apply_logging_preferences(conf: Dict[str, Any], args: Any) -> None:
    """Reconfigure logging when stored preferences ask for more than the CLI did."""
    wants_file = bool(conf.get("log_file")) and not args.log_file
    wants_level = conf.get("log_level", "INFO").upper() != "INFO" and not args.debug
    if not (wants_file or wants_level):
        return

    configure_logging(
        LoggingConfig(
            level=conf.get("log_level", "INFO"),
            console=True,
            log_file=conf.get("log_file") or None,
        ),
        force=True,
    )

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_report(result: TrackingResult) -> None:
    """
    Print the report to stdout, or a one-line confirmation when it went to a file.

    Args:
        result: The tracking result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.output_file:
        print(f"Report written to {result.output_file}")
        return

    for line in result.report_lines:
        print(line)
    logger.info("Not exporting file.")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
