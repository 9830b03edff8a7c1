from __future__ import annotations

"""
Manifest Materialization Service.

Renders an enumerated result sequence into text and persists it. Order and
exact string contents are preserved: entries are never sorted or
deduplicated.
"""

import json
import logging
from typing import Callable, Dict, Sequence

from treemanifest.infra.fs import write_text_file

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# RENDERERS
# -----------------------------------------------------------------------------

def render_lines(entries: Sequence[str]) -> str:
    """One entry per line, with a trailing newline when non-empty."""
    if not entries:
        return ""
    return "\n".join(entries) + "\n"


def render_json(entries: Sequence[str]) -> str:
    return json.dumps(list(entries), ensure_ascii=False, indent=2) + "\n"


def render_python(entries: Sequence[str]) -> str:
    """Render a Python list literal suitable for embedding in source code."""
    if not entries:
        return "[]\n"
    body = "".join(f"    {entry!r},\n" for entry in entries)
    return f"[\n{body}]\n"


_RENDERERS: Dict[str, Callable[[Sequence[str]], str]] = {
    "lines": render_lines,
    "json": render_json,
    "python": render_python,
}


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_entries(entries: Sequence[str], output_format: str = "lines") -> str:
    """
    Render entries in the requested output format.

    Args:
        entries: Enumerated relative paths.
        output_format: One of 'lines', 'json' or 'python'.

    Returns:
        str: Rendered manifest text.

    Raises:
        ValueError: If the output format is unknown.
    """
    try:
        renderer = _RENDERERS[output_format]
    except KeyError:
        raise ValueError(f"Unknown output format: {output_format!r}") from None
    return renderer(entries)


def write_manifest(text: str, path: str) -> str:
    """
    Persist rendered manifest text.

    Args:
        text: Rendered manifest.
        path: Destination file.

    Returns:
        str: Absolute path of the written file.
    """
    abs_path = write_text_file(path, text)
    logger.info(f"Manifest saved to file: {abs_path}")
    return abs_path
