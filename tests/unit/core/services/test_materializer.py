from __future__ import annotations

"""
Unit tests for the Manifest Materialization Service.
"""

import ast
import json
from pathlib import Path

import pytest

from treemanifest.core.services.materializer import render_entries, write_manifest

ENTRIES = ["zzz", "zzz/testfile3.test", ".testfile.test", "ünïcode 'quoted'.txt", "zzz"]


def test_lines_format_preserves_order_and_duplicates():
    text = render_entries(ENTRIES, "lines")

    assert text.splitlines() == ENTRIES
    assert text.endswith("\n")


def test_empty_lines_render_is_empty():
    assert render_entries([], "lines") == ""


def test_json_format_is_a_utf8_array():
    text = render_entries(ENTRIES, "json")

    assert json.loads(text) == ENTRIES
    assert "ünïcode" in text


def test_python_format_is_a_list_literal():
    text = render_entries(ENTRIES, "python")

    assert ast.literal_eval(text) == ENTRIES
    assert render_entries([], "python").strip() == "[]"


def test_unknown_format_raises():
    with pytest.raises(ValueError):
        render_entries(ENTRIES, "yaml")


def test_write_manifest_creates_parents(tmp_path: Path):
    target = tmp_path / "nested" / "out" / "manifest.txt"

    written = write_manifest("a\nb\n", str(target))

    assert written == str(target)
    assert target.read_text(encoding="utf-8") == "a\nb\n"
