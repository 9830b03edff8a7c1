from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Positional and optional root handling.
3. Absent flags map to None so they never override saved config.
"""

import pytest

from treemanifest.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_cli_negative_flags_mapping():
    args = parse_args([
        "--no-recursive",
        "--no-dotfiles",
        "--no-directories",
        "--no-symlinks",
        "--no-files",
    ])

    overrides = args_to_overrides(args)

    assert overrides["recursive"] is False
    assert overrides["include_dotfiles"] is False
    assert overrides["include_directories"] is False
    assert overrides["include_symlinks"] is False
    assert overrides["include_files"] is False


def test_cli_value_options():
    args = parse_args(["-s", "::", "--hidden-rule", "per_kind", "-f", "python", "-o", "out.py"])

    overrides = args_to_overrides(args)

    assert overrides["separator"] == "::"
    assert overrides["hidden_rule"] == "per_kind"
    assert overrides["output_format"] == "python"
    assert overrides["output_file"] == "out.py"


def test_cli_root_sources():
    assert args_to_overrides(parse_args(["some/dir"]))["root_path"] == "some/dir"
    assert args_to_overrides(parse_args(["-i", "other"]))["root_path"] == "other"
    assert args_to_overrides(parse_args(["-i", "other", "ignored"]))["root_path"] == "other"


def test_cli_defaults_do_not_override():
    overrides = args_to_overrides(parse_args([]))

    assert overrides["root_path"] is None
    assert overrides["separator"] is None
    assert "recursive" not in overrides


def test_cli_rejects_unknown_format():
    with pytest.raises(SystemExit):
        parse_args(["--format", "xml"])
