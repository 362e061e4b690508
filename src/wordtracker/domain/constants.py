from __future__ import annotations

"""
Domain Constants.

Centralizes the identifiers shared by configuration, the tokenizer, the
report renderer and the CLI.
"""

from typing import Tuple

CURRENT_CONFIG_VERSION = "1.0.0"
DEFAULT_REPOSITORY_FILENAME = "repository.json"
CONFIG_FILENAME = "config.json"

# Report verbosity levels
FORMAT_FILES = "pf"
FORMAT_LINES = "pl"
FORMAT_OCCURRENCES = "po"
REPORT_FORMATS: Tuple[str, ...] = (FORMAT_FILES, FORMAT_LINES, FORMAT_OCCURRENCES)
DEFAULT_REPORT_FORMAT = FORMAT_FILES

# Tokenizer rule sets
TOKENIZER_ALNUM = "alnum"
TOKENIZER_ALPHA = "alpha"
TOKENIZER_MODES: Tuple[str, ...] = (TOKENIZER_ALNUM, TOKENIZER_ALPHA)
DEFAULT_TOKENIZER = TOKENIZER_ALNUM
