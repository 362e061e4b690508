from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution, line-oriented reading of input
sources and atomic writes for the repository and report files.
"""

import io
import os
import tempfile
from typing import Iterable, Iterator, Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "WordTracker"
UNIX_APP_DIR_NAME = ".wordtracker"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/WordTracker
    - Linux/Mac: ~/.wordtracker

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def ensure_parent_dir(path: str) -> None:
    """Create the parent directory hierarchy of a target file."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)

# -----------------------------------------------------------------------------
# READ / WRITE API
# -----------------------------------------------------------------------------

def iter_text_lines(path: str) -> Iterator[str]:
    """
    Stream the lines of a text file without their line terminators.

    Undecodable bytes are replaced rather than aborting the scan.

    Raises:
        OSError: If the file cannot be opened.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        yield from _strip_terminators(f)


def iter_string_lines(text: str) -> Iterator[str]:
    """
    Split in-memory text with the same rule as iter_text_lines.

    Only \\n, \\r and \\r\\n end a line; form feeds and Unicode separators
    stay inside it.
    """
    yield from _strip_terminators(io.StringIO(text, newline=None))


def write_text_atomic(path: str, content: str) -> None:
    """
    Replace the file at path with content in a single rename.

    Writes to a sibling temporary file first so a crash never leaves a
    half-written target behind.

    Raises:
        OSError: If the directory is not writable.
    """
    ensure_parent_dir(path)
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix=".tmp_", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _strip_terminators(lines: Iterable[str]) -> Iterator[str]:
    for raw in lines:
        yield raw.rstrip("\r\n")
