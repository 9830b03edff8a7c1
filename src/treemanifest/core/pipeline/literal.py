from __future__ import annotations

"""
Argument Literal Parser.

Parses the compact positional form used to embed a manifest at build time:

    recursive, include_dotfiles, include_directories, include_symlinks,
    include_files, "separator", "path"

for example ``true, true, true, true, true, "/", "./test"``. The text is
parsed with the 'ast' module and never evaluated.
"""

import ast
import logging
from typing import Any, Dict, List, Tuple

from treemanifest.domain.config import POLICY_FLAGS
from treemanifest.domain.errors import LiteralSyntaxError
from treemanifest.domain.scan_models import ScanPolicy

logger = logging.getLogger(__name__)

LITERAL_FIELDS: Tuple[str, ...] = POLICY_FLAGS + ("separator", "root_path")

_BOOL_NAMES = {"true": True, "false": False}


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_literal_to_config(text: str) -> Dict[str, Any]:
    """
    Parse an argument literal into configuration overrides.

    Args:
        text: The literal, e.g. 'true, false, true, true, true, "/", "."'.

    Returns:
        Dict[str, Any]: Keys from LITERAL_FIELDS mapped to parsed values.

    Raises:
        LiteralSyntaxError: If the text is not seven well-typed items.
    """
    try:
        tree = ast.parse(text.strip(), mode="eval")
    except SyntaxError as e:
        raise LiteralSyntaxError(f"Malformed argument literal: {e.msg}") from e

    body = tree.body
    nodes: List[ast.expr] = list(body.elts) if isinstance(body, ast.Tuple) else [body]

    if len(nodes) != len(LITERAL_FIELDS):
        raise LiteralSyntaxError(
            f"Expected {len(LITERAL_FIELDS)} comma-separated items, found {len(nodes)}."
        )

    values: Dict[str, Any] = {}
    for position, (field, node) in enumerate(zip(LITERAL_FIELDS, nodes), start=1):
        if field in POLICY_FLAGS:
            values[field] = _read_bool(node, position, field)
        else:
            values[field] = _read_str(node, position, field)

    logger.debug(f"Parsed argument literal: {values}")
    return values


def parse_arguments_literal(text: str) -> Tuple[ScanPolicy, str]:
    """
    Parse an argument literal into a ScanPolicy and a root path.

    Args:
        text: The seven-item positional literal.

    Returns:
        Tuple[ScanPolicy, str]: The policy and the root path as written.
    """
    values = parse_literal_to_config(text)
    policy = ScanPolicy(
        recursive=values["recursive"],
        include_dotfiles=values["include_dotfiles"],
        include_directories=values["include_directories"],
        include_symlinks=values["include_symlinks"],
        include_files=values["include_files"],
        separator=values["separator"],
    )
    return policy, values["root_path"]


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _read_bool(node: ast.expr, position: int, field: str) -> bool:
    if isinstance(node, ast.Constant) and isinstance(node.value, bool):
        return node.value
    if isinstance(node, ast.Name) and node.id.lower() in _BOOL_NAMES:
        return _BOOL_NAMES[node.id.lower()]
    raise LiteralSyntaxError(f"Item {position} ({field}) must be a boolean literal.")


def _read_str(node: ast.expr, position: int, field: str) -> str:
    if isinstance(node, ast.Constant) and isinstance(node.value, str):
        return node.value
    raise LiteralSyntaxError(f"Item {position} ({field}) must be a quoted string.")
