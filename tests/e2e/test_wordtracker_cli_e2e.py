from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and checks argument
parsing, exit codes, stdout/stderr content and the repository and report
files left on disk.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "wordtracker" / "main.py"


def run_cli(args: List[str], cwd: Path, home: Optional[Path] = None) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects 'src' into PYTHONPATH and points HOME at a scratch directory so
    stored user preferences never leak into the run.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home or cwd)

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Scratch directory holding two small text sources."""
    (tmp_path / "a.txt").write_text("The cat sat.\nThe dog sat.\n", encoding="utf-8")
    (tmp_path / "b.txt").write_text("A dog barked.\n", encoding="utf-8")
    return tmp_path


# -----------------------------------------------------------------------------
# Reporting
# -----------------------------------------------------------------------------

def test_help_exits_cleanly(workspace: Path) -> None:
    result = run_cli(["--help"], cwd=workspace)

    assert result.returncode == 0
    assert "-pf" in result.stdout
    assert "--repository" in result.stdout


def test_pf_report_on_stdout(workspace: Path) -> None:
    result = run_cli(["a.txt", "-pf", "--use-defaults"], cwd=workspace)

    lines = result.stdout.splitlines()
    assert result.returncode == 0, result.stderr
    assert lines[0] == "Displaying -pf format"
    assert lines[1:] == [
        "Key : ===cat=== found in file: a.txt",
        "Key : ===dog=== found in file: a.txt",
        "Key : ===sat=== found in file: a.txt",
        "Key : ===The=== found in file: a.txt",
    ]
    assert (workspace / "repository.json").exists()


def test_po_report_accumulates_across_runs(workspace: Path) -> None:
    run_cli(["a.txt", "-pf", "--use-defaults"], cwd=workspace)

    result = run_cli(["a.txt", "b.txt", "-po", "--use-defaults"], cwd=workspace)

    assert result.returncode == 0, result.stderr
    assert "Key : ===dog=== number of entries: 3 found in file: a.txt (2) on lines: 2 found in file: b.txt (1) on lines: 1" \
        in result.stdout.splitlines()


def test_attached_output_flag_writes_report_file(workspace: Path) -> None:
    result = run_cli(["a.txt", "-pl", "-freport.txt", "--use-defaults"], cwd=workspace)

    report = (workspace / "report.txt").read_text(encoding="utf-8").splitlines()
    assert result.returncode == 0, result.stderr
    assert "Report written to report.txt" in result.stdout
    assert report[0] == "Displaying -pl format"
    assert "Key : ===sat=== found in file: a.txt on lines: 1, 2" in report


def test_custom_repository_and_no_save(workspace: Path) -> None:
    repo = workspace / "store" / "words.json"

    run_cli(["a.txt", "--repository", str(repo), "--use-defaults"], cwd=workspace)
    result = run_cli(["b.txt", "--repository", str(repo), "--no-save", "--use-defaults"], cwd=workspace)

    stored = json.loads(repo.read_text(encoding="utf-8"))
    assert result.returncode == 0, result.stderr
    assert "barked" in result.stdout
    assert "barked" not in [e["key"] for e in stored["entries"]]


def test_json_output_mode(workspace: Path) -> None:
    result = run_cli(["a.txt", "--json", "--use-defaults"], cwd=workspace)

    payload = json.loads(result.stdout)
    assert result.returncode == 0, result.stderr
    assert payload["ok"] is True
    assert payload["tokens_indexed"] == 6
    assert payload["distinct_words"] == 4


# -----------------------------------------------------------------------------
# Failure Modes
# -----------------------------------------------------------------------------

def test_missing_input_exits_with_code_2(workspace: Path) -> None:
    result = run_cli(["ghost.txt", "--use-defaults"], cwd=workspace)

    assert result.returncode == 2
    assert "ghost.txt" in result.stderr
    assert not (workspace / "repository.json").exists()


def test_conflicting_report_flags_rejected(workspace: Path) -> None:
    result = run_cli(["a.txt", "-pf", "-po"], cwd=workspace)

    assert result.returncode == 2
    assert "not allowed with argument" in result.stderr


def test_dump_config_reflects_overrides(workspace: Path) -> None:
    result = run_cli(["-po", "--tokenizer", "alpha", "--dump-config", "--use-defaults"], cwd=workspace)

    conf = json.loads(result.stdout)
    assert result.returncode == 0
    assert conf["report_format"] == "po"
    assert conf["tokenizer_mode"] == "alpha"
