from __future__ import annotations

"""
Configuration Domain Management.

Provides the default run configuration and JSON persistence of user
preferences. A missing or corrupted configuration file silently falls back
to defaults so the tracker can always run.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from wordtracker.domain.constants import (
    CONFIG_FILENAME,
    CURRENT_CONFIG_VERSION,
    DEFAULT_REPORT_FORMAT,
    DEFAULT_REPOSITORY_FILENAME,
    DEFAULT_TOKENIZER,
)
from wordtracker.infra.fs import get_user_data_dir, write_text_atomic

logger = logging.getLogger(__name__)


def get_config_path() -> str:
    """Location of the persistent user configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILENAME)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default run configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_paths": [],
        "repository_path": os.path.join(os.getcwd(), DEFAULT_REPOSITORY_FILENAME),
        "output_file": "",

        # Indexing
        "tokenizer_mode": DEFAULT_TOKENIZER,
        "persist": True,

        # Reporting
        "report_format": DEFAULT_REPORT_FORMAT,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load user preferences from disk, merged over the defaults.

    Args:
        path: Configuration file. Defaults to the user data directory file.

    Returns:
        Dict[str, Any]: The merged configuration, or defaults on failure.
    """
    config_path = path or get_config_path()
    config = get_default_config()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    settings = data.get("settings", data)
    if isinstance(settings, dict):
        config.update({k: v for k, v in settings.items() if k in config})
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist preferences to disk. I/O failures are logged, not raised.

    Args:
        config: The configuration dictionary to save.
        path: Target file. Defaults to the user data directory file.
    """
    config_path = path or get_config_path()
    document = {
        "version": CURRENT_CONFIG_VERSION,
        "settings": {k: v for k, v in config.items() if k != "input_paths"},
    }
    try:
        write_text_atomic(config_path, json.dumps(document, ensure_ascii=False, indent=4))
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
