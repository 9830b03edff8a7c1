from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults or saved config, then argument literal, then explicit flags),
pipeline execution and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from treemanifest.core.pipeline.engine import run_manifest
from treemanifest.core.pipeline.literal import parse_literal_to_config
from treemanifest.core.pipeline.validator import validate_config
from treemanifest.domain.config import get_default_config, load_config
from treemanifest.domain.errors import LiteralSyntaxError
from treemanifest.domain.manifest_models import ManifestResult
from treemanifest.infra.logging import LoggingConfig, configure_logging, get_logger
from treemanifest.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Base configuration
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_path)

    # 4. Argument literal, then explicit flags
    if args.literal is not None:
        try:
            base_conf = _merge_config(base_conf, parse_literal_to_config(args.literal))
        except LiteralSyntaxError as e:
            logger.error(f"Invalid argument literal: {e}")
            print(f"ERROR: Invalid argument literal: {e}", file=sys.stderr)
            return EXIT_BAD_INPUT

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    # 5. Validation
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 6. Pre-flight input verification
    root_path = clean_conf["root_path"]
    if not os.path.exists(root_path):
        msg = f"Input path does not exist: {root_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_INPUT

    # 7. Pipeline execution
    try:
        result = run_manifest(
            clean_conf,
            overwrite=bool(args.overwrite),
            dry_run=bool(args.dry_run),
        )
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Manifest pipeline failed: {e}", exc_info=True)
        print(f"ERROR: Manifest pipeline failed: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 8. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_result(result)

    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None override values into 'base'.

    Args:
        base: Current configuration.
        overrides: Values to apply.

    Returns:
        Dict[str, Any]: New merged configuration.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_result(result: ManifestResult) -> None:
    """Print the manifest, or where it was saved, to stdout."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.output_path:
        print(f"Manifest saved: {result.output_path} ({len(result.entries)} entries)")
        return

    sys.stdout.write(result.rendered)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
