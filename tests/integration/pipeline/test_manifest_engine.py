from __future__ import annotations

"""
Integration tests for the Manifest Pipeline.

Runs validation, enumeration, rendering and persistence end to end against
a real temporary filesystem.
"""

import json
from pathlib import Path

from treemanifest.core.pipeline.engine import run_manifest


def test_run_manifest_success(mock_config_dict):
    result = run_manifest(mock_config_dict)

    assert result.ok is True
    assert result.error == ""
    assert "zzz/testfile3.test" in result.entries
    assert result.rendered.splitlines() == result.entries
    assert result.summary["entries"] == 6
    assert result.output_path == ""


def test_run_manifest_writes_output(mock_config_dict, tmp_path: Path):
    target = tmp_path / "manifest.json"
    mock_config_dict.update({"output_format": "json", "output_file": str(target)})

    result = run_manifest(mock_config_dict)

    assert result.ok is True
    assert result.output_path == str(target)
    assert json.loads(target.read_text(encoding="utf-8")) == result.entries


def test_run_manifest_refuses_to_overwrite(mock_config_dict, tmp_path: Path):
    target = tmp_path / "manifest.txt"
    target.write_text("keep me", encoding="utf-8")

    result = run_manifest(mock_config_dict, output_path=str(target))

    assert result.ok is False
    assert result.summary["error_kind"] == "OutputExists"
    assert target.read_text(encoding="utf-8") == "keep me"

    result = run_manifest(mock_config_dict, output_path=str(target), overwrite=True)
    assert result.ok is True
    assert target.read_text(encoding="utf-8") == result.rendered


def test_dry_run_writes_nothing(mock_config_dict, tmp_path: Path):
    target = tmp_path / "never" / "manifest.txt"

    result = run_manifest(mock_config_dict, output_path=str(target), dry_run=True)

    assert result.ok is True
    assert result.summary["dry_run"] is True
    assert result.summary["planned_output"] == str(target)
    assert not target.parent.exists()


def test_scan_error_becomes_error_result(mock_config_dict, sample_tree: Path):
    mock_config_dict["root_path"] = str(sample_tree / "testfile2.test")

    result = run_manifest(mock_config_dict)

    assert result.ok is False
    assert result.entries == []
    assert result.summary["error_kind"] == "NotADirectory"
    assert "not a directory" in result.error


def test_invalid_values_are_coerced(mock_config_dict):
    mock_config_dict.update({"include_files": "no", "hidden_rule": "bogus"})

    result = run_manifest(mock_config_dict)

    assert result.ok is True
    assert result.policy["include_files"] is False
    assert result.policy["hidden_rule"] == "global_veto"
    assert set(result.entries) == {"zzz", "testfile.link"}
