from __future__ import annotations

"""
Configuration Domain Management.

Defines the default scan configuration and its JSON persistence. The
configuration is a flat dictionary so that the CLI, config files and the
argument literal can all be merged into it before validation.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from treemanifest.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"

DEFAULT_SEPARATOR = "/"
HIDDEN_RULES = ("global_veto", "per_kind")
OUTPUT_FORMATS = ("lines", "json", "python")

POLICY_FLAGS = (
    "recursive",
    "include_dotfiles",
    "include_directories",
    "include_symlinks",
    "include_files",
)


def get_default_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Every inclusion flag defaults to True, so a bare scan lists everything.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "root_path": os.getcwd(),

        # Scan Policy
        "recursive": True,
        "include_dotfiles": True,
        "include_directories": True,
        "include_symlinks": True,
        "include_files": True,
        "separator": DEFAULT_SEPARATOR,
        "hidden_rule": "global_veto",

        # Output
        "output_format": "lines",
        "output_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file, merged over the defaults.

    A missing or unreadable file yields the defaults. Unknown keys are kept
    so the validator can report them.

    Args:
        path: Config file location. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: The merged (not yet validated) configuration.
    """
    config_path = path or get_default_config_path()
    config = get_default_config()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file '{config_path}' is not a JSON object. Using defaults.")
        return config

    data.pop("version", None)
    config.update(data)
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist configuration to disk as JSON.

    Args:
        config: Configuration to save.
        path: Destination file. Defaults to the user data directory.

    Returns:
        bool: True if the file was written.
    """
    config_path = path or get_default_config_path()
    payload = {"version": CURRENT_CONFIG_VERSION}
    payload.update(config)

    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {config_path}")
    return True
