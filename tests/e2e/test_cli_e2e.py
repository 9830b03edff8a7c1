from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script in a subprocess and checks exit codes,
stdout/stderr separation and written artifacts.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "treemanifest" / "main.py"


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with an isolated HOME.

    Args:
        args: Command line arguments (excluding interpreter and script).
        home: Directory used as HOME so no real user config is read.

    Returns:
        subprocess.CompletedProcess: returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    cmd = [sys.executable, str(ENTRY_POINT)] + args
    return subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8")


def test_cli_lists_reference_tree(tmp_path: Path, sample_tree: Path) -> None:
    result = run_cli([str(sample_tree)], tmp_path)

    assert result.returncode == 0, result.stderr
    assert set(result.stdout.splitlines()) == {
        "testfile1.test", "testfile2.test", "zzz", "zzz/testfile3.test",
        ".testfile.test", "testfile.link",
    }


def test_cli_python_output_file(tmp_path: Path, sample_tree: Path) -> None:
    target = tmp_path / "generated" / "manifest.py"

    result = run_cli(
        ["--no-dotfiles", "--format", "python", "--output", str(target), str(sample_tree)],
        tmp_path,
    )

    assert result.returncode == 0, result.stderr
    text = target.read_text(encoding="utf-8")
    assert "'zzz/testfile3.test'" in text
    assert ".testfile.test" not in text


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    result = run_cli([str(tmp_path / "missing")], tmp_path)

    assert result.returncode == 2
    assert "does not exist" in result.stderr
    assert result.stdout == ""


def test_cli_json_output_structure(tmp_path: Path, sample_tree: Path) -> None:
    result = run_cli(["--json", "--separator", "::", str(sample_tree)], tmp_path)

    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    for key in ("ok", "error", "root", "policy", "entries", "rendered", "summary"):
        assert key in data
    assert "zzz::testfile3.test" in data["entries"]


def test_cli_help_message(tmp_path: Path) -> None:
    result = run_cli(["--help"], tmp_path)

    assert result.returncode == 0
    assert "usage: treemanifest" in result.stdout
    assert "--separator" in result.stdout
