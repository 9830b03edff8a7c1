from __future__ import annotations

"""
Manifest Pipeline Data Models.

Result object passed from the manifest pipeline to the interface layer,
plus the factory functions that build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ManifestResult:
    """
    Outcome of one manifest pipeline run.

    Attributes:
        ok: True if the tree was enumerated (and persisted, if requested).
        error: Failure description, empty on success.
        root: Normalized scan root.
        policy: Scan policy used, as primitives.
        output_format: Rendering format.
        output_path: Absolute path of the written manifest, if any.
        entries: Enumerated relative paths in traversal order.
        rendered: Manifest text in 'output_format'.
        summary: Execution metadata (counts, dry_run, error kind).
    """
    ok: bool
    error: str

    root: str
    policy: Dict[str, Any]
    output_format: str

    output_path: str = ""
    entries: List[str] = field(default_factory=list)
    rendered: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        root: str,
        policy: Optional[Dict[str, Any]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> ManifestResult:
    """
    Create a failed result.

    Args:
        error: Failure description.
        cfg: Configuration used by the failed run.
        root: Normalized scan root.
        policy: Scan policy, if it was built before the failure.
        summary_extra: Additional summary metadata.

    Returns:
        ManifestResult: Immutable error result.
    """
    return ManifestResult(
        ok=False,
        error=error,
        root=root,
        policy=policy or {},
        output_format=cfg.get("output_format", "lines"),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        root: str,
        policy: Dict[str, Any],
        entries: List[str],
        rendered: str,
        output_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> ManifestResult:
    """
    Create a successful result.

    Args:
        cfg: Configuration used by the run.
        root: Normalized scan root.
        policy: Scan policy, as primitives.
        entries: Enumerated relative paths.
        rendered: Manifest text.
        output_path: Where the manifest was written, if anywhere.
        summary_extra: Additional summary metadata.

    Returns:
        ManifestResult: Immutable success result.
    """
    return ManifestResult(
        ok=True,
        error="",
        root=root,
        policy=policy,
        output_format=cfg.get("output_format", "lines"),
        output_path=output_path,
        entries=entries,
        rendered=rendered,
        summary=summary_extra or {},
    )
