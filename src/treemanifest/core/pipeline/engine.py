from __future__ import annotations

"""
Manifest Pipeline.

Coordinates one manifest run:
1. Validates the configuration and builds the ScanPolicy.
2. Checks for an existing output file.
3. Enumerates the tree.
4. Renders the manifest.
5. Persists it, unless running dry.
"""

import logging
import os
from typing import Any, Dict, Optional

from treemanifest.core.pipeline.validator import policy_from_config, validate_config
from treemanifest.core.services.enumerator import enumerate_tree
from treemanifest.core.services.materializer import render_entries, write_manifest
from treemanifest.domain.errors import ScanError
from treemanifest.domain.manifest_models import (
    ManifestResult,
    create_error_result,
    create_success_result,
)
from treemanifest.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_manifest(
        config: Optional[Dict[str, Any]],
        *,
        overwrite: bool = False,
        dry_run: bool = False,
        output_path: Optional[str] = None,
) -> ManifestResult:
    """
    Execute the full manifest pipeline.

    Scan failures are reported through the result instead of raised, so the
    caller decides how to present them.

    Args:
        config: Raw or partial configuration dictionary.
        overwrite: Replace an existing output file.
        dry_run: Enumerate and render without writing to disk.
        output_path: Overrides the configured 'output_file'.

    Returns:
        ManifestResult: Status, entries, rendered text and summary.
    """
    logger.info("Manifest pipeline started.")

    # -------------------------------------------------------------------------
    # 1) Config & Policy
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    root = normalize_path(cfg["root_path"], os.getcwd())
    policy = policy_from_config(cfg)
    policy_dict = policy.to_dict()

    target = output_path or cfg["output_file"]
    target_abs = os.path.abspath(target) if target else ""

    # -------------------------------------------------------------------------
    # 2) Overwrite Check
    # -------------------------------------------------------------------------
    if target_abs and os.path.exists(target_abs) and not overwrite and not dry_run:
        msg = f"Output file already exists and overwrite=False: {target_abs}"
        logger.warning(msg)
        return create_error_result(
            msg, cfg, root, policy_dict,
            summary_extra={"error_kind": "OutputExists", "output_path": target_abs},
        )

    # -------------------------------------------------------------------------
    # 3) Enumeration
    # -------------------------------------------------------------------------
    try:
        entries = enumerate_tree(policy, root)
    except ScanError as e:
        logger.error(f"Enumeration failed: {e}")
        return create_error_result(
            str(e), cfg, root, policy_dict,
            summary_extra={"error_kind": type(e).__name__, "path": e.path},
        )

    logger.info(f"Enumerated {len(entries)} entries under {root}")

    # -------------------------------------------------------------------------
    # 4) Rendering & Persistence
    # -------------------------------------------------------------------------
    rendered = render_entries(entries, cfg["output_format"])

    written = ""
    if target_abs and not dry_run:
        try:
            written = write_manifest(rendered, target_abs)
        except OSError as e:
            msg = f"Failed to save manifest to '{target_abs}': {e}"
            logger.error(msg)
            return create_error_result(
                msg, cfg, root, policy_dict,
                summary_extra={"error_kind": "OutputWriteError", "output_path": target_abs},
            )

    summary = {
        "dry_run": dry_run,
        "entries": len(entries),
        "planned_output": target_abs,
    }

    return create_success_result(
        cfg, root, policy_dict, entries, rendered,
        output_path=written,
        summary_extra=summary,
    )
