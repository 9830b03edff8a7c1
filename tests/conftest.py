from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared filesystem fixtures used across unit and integration tests.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def make_symlink(link: Path, target: str, target_is_directory: bool = False) -> None:
    """Create a symlink or skip the calling test where the OS refuses."""
    try:
        os.symlink(target, link, target_is_directory=target_is_directory)
    except (OSError, NotImplementedError) as e:
        pytest.skip(f"Symlinks unavailable on this platform: {e}")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create the reference tree.

    Structure:
    /test
      testfile1.test
      testfile2.test
      .testfile.test
      testfile.link -> testfile1.test
      /zzz
        testfile3.test
    """
    root = tmp_path / "test"
    root.mkdir()

    (root / "testfile1.test").write_text("one", encoding="utf-8")
    (root / "testfile2.test").write_text("two", encoding="utf-8")
    (root / ".testfile.test").write_text("hidden", encoding="utf-8")

    zzz = root / "zzz"
    zzz.mkdir()
    (zzz / "testfile3.test").write_text("three", encoding="utf-8")

    make_symlink(root / "testfile.link", "testfile1.test")
    return root


@pytest.fixture
def mock_config_dict(sample_tree: Path) -> Dict[str, Any]:
    """
    Return a complete, valid configuration dictionary pointing at sample_tree.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        "root_path": str(sample_tree),
        "recursive": True,
        "include_dotfiles": True,
        "include_directories": True,
        "include_symlinks": True,
        "include_files": True,
        "separator": "/",
        "hidden_rule": "global_veto",
        "output_format": "lines",
        "output_file": "",
    }
