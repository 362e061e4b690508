from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides. Keeps the historical short flags: -pf/-pl/-po for
the report level and -f<file> for the report destination.
"""

import argparse
from typing import Any, Dict

from wordtracker.domain.constants import (
    FORMAT_FILES,
    FORMAT_LINES,
    FORMAT_OCCURRENCES,
    TOKENIZER_MODES,
)
from wordtracker.infra.logging import get_default_log_path

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the WordTracker CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="wordtracker",
        description="Index the words of text files and report where each one occurs.",
    )

    # --- Inputs ---
    p.add_argument(
        "inputs",
        nargs="*",
        metavar="INPUT",
        help="Text files to index. Without inputs the stored repository is reported as is.",
    )

    # --- Report Level ---
    level = p.add_mutually_exclusive_group()
    level.add_argument(
        "-pf",
        dest="report_format",
        action="store_const",
        const=FORMAT_FILES,
        help="Print each word with the files it occurs in.",
    )
    level.add_argument(
        "-pl",
        dest="report_format",
        action="store_const",
        const=FORMAT_LINES,
        help="Print each word with its files and line numbers.",
    )
    level.add_argument(
        "-po",
        dest="report_format",
        action="store_const",
        const=FORMAT_OCCURRENCES,
        help="Print each word with its files, line numbers and occurrence counts.",
    )

    # --- Output and Storage ---
    p.add_argument(
        "-f", "--output",
        dest="output_file",
        default=None,
        metavar="OUTPUT",
        help="Write the report to this file instead of stdout (also accepted as -f<file>).",
    )
    p.add_argument(
        "--repository",
        dest="repository_path",
        default=None,
        help="Repository file kept between runs (default: ./repository.json).",
    )
    p.add_argument(
        "--reset",
        action="store_true",
        help="Ignore the stored repository and start from an empty index.",
    )
    p.add_argument(
        "--no-save",
        action="store_true",
        help="Do not write the updated repository back to disk.",
    )

    # --- Indexing ---
    p.add_argument(
        "--tokenizer",
        dest="tokenizer_mode",
        choices=list(TOKENIZER_MODES),
        default=None,
        help="Word splitting rules: 'alnum' keeps digits and apostrophes, 'alpha' keeps letters only.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Read preferences from this JSON file instead of the user data directory.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore stored preferences.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Store the effective settings as the new preferences.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const=get_default_log_path(),
        default=None,
        metavar="PATH",
        help="Also write diagnostics to this rotating log file (default path when given without one).",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON instead of the plain report.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary subset.

    Only options the user actually passed produce overrides, so stored
    preferences survive for everything else.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.inputs:
        overrides["input_paths"] = list(args.inputs)
    if args.report_format:
        overrides["report_format"] = args.report_format
    if args.output_file:
        overrides["output_file"] = args.output_file
    if args.repository_path:
        overrides["repository_path"] = args.repository_path
    if args.tokenizer_mode:
        overrides["tokenizer_mode"] = args.tokenizer_mode
    if args.no_save:
        overrides["persist"] = False
    if args.log_file:
        overrides["log_file"] = args.log_file
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
