from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from treemanifest.domain.config import HIDDEN_RULES, OUTPUT_FORMATS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treemanifest CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treemanifest",
        description="List the contents of a directory tree as relative paths.",
    )

    # --- Input ---
    p.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Directory to scan (default: configured root or current directory).",
    )
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Directory to scan; alternative to the positional ROOT.",
    )
    p.add_argument(
        "--literal",
        dest="literal",
        default=None,
        help='Compact argument literal, e.g. \'true, true, true, true, true, "/", "./src"\'.',
    )

    # --- Scan Policy ---
    p.add_argument("--no-recursive", action="store_true", help="Do not descend into subdirectories.")
    p.add_argument("--no-dotfiles", action="store_true", help="Skip entries whose name starts with '.'.")
    p.add_argument("--no-directories", action="store_true", help="Omit directory entries themselves.")
    p.add_argument("--no-symlinks", action="store_true", help="Omit symbolic links.")
    p.add_argument("--no-files", action="store_true", help="Omit files.")
    p.add_argument(
        "-s", "--separator",
        dest="separator",
        default=None,
        help="Token joining nested path segments (default '/').",
    )
    p.add_argument(
        "--hidden-rule",
        dest="hidden_rule",
        choices=HIDDEN_RULES,
        default=None,
        help="How hidden entries interact with the kind filters.",
    )

    # --- Output ---
    p.add_argument(
        "-f", "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Manifest format.",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        default=None,
        help="Write the manifest to this file instead of stdout.",
    )
    p.add_argument("--overwrite", action="store_true", help="Replace an existing output file.")
    p.add_argument("--dry-run", action="store_true", help="Scan and render, but write nothing.")
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the full run result as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help="JSON config file (default: ~/.treemanifest/config.json).",
    )
    p.add_argument("--use-defaults", action="store_true", help="Ignore any saved configuration.")
    p.add_argument("--dump-config", action="store_true", help="Print the resolved configuration and exit.")
    p.add_argument("--log-file", dest="log_file", default=None, help="Also write logs to this file.")
    p.add_argument("--debug", action="store_true", help="Elevate logging verbosity to DEBUG.")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate parsed arguments into configuration overrides.

    Only flags that were actually given appear as concrete values; the
    rest map to None and are ignored by the merge.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides.
    """
    overrides: Dict[str, Any] = {}

    overrides["root_path"] = args.input_path or args.root
    overrides["separator"] = args.separator
    overrides["hidden_rule"] = args.hidden_rule
    overrides["output_format"] = args.output_format
    overrides["output_file"] = args.output_file

    if args.no_recursive:
        overrides["recursive"] = False
    if args.no_dotfiles:
        overrides["include_dotfiles"] = False
    if args.no_directories:
        overrides["include_directories"] = False
    if args.no_symlinks:
        overrides["include_symlinks"] = False
    if args.no_files:
        overrides["include_files"] = False

    return overrides
