from __future__ import annotations

"""
Configuration Validation Service.

Normalizes untrusted configuration dictionaries (config files, CLI
overrides, argument literals) into a strictly typed configuration and
builds the ScanPolicy consumed by the enumerator.
"""

import logging
import os
from typing import Any, Dict, List, Sequence, Tuple

from treemanifest.domain.config import (
    HIDDEN_RULES,
    OUTPUT_FORMATS,
    POLICY_FLAGS,
    get_default_config,
)
from treemanifest.domain.scan_models import HiddenRule, ScanPolicy
from treemanifest.infra.fs import normalize_path

logger = logging.getLogger(__name__)

_TRUE_WORDS = ("true", "1", "yes", "y", "on")
_FALSE_WORDS = ("false", "0", "no", "n", "off")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Missing keys are filled from the defaults. In non-strict mode, values of
    the wrong type are coerced where the intent is clear ('true', 0/1) or
    replaced by their default; each correction adds a warning.

    Args:
        config: Raw configuration data.
        strict: Raise on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on an unknown enum value or key.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    unknown = sorted(k for k in config if k not in defaults)
    if unknown:
        msg = f"Unknown configuration keys: {', '.join(map(str, unknown))}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Ignored.")

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    merged["root_path"] = normalize_path(
        _as_path(merged["root_path"], "root_path", warnings, strict), os.getcwd()
    )
    merged["output_file"] = _as_str(
        merged["output_file"], "", "output_file", warnings, strict
    )
    merged["separator"] = _as_separator(
        merged["separator"], defaults["separator"], warnings, strict
    )

    for field in POLICY_FLAGS:
        merged[field] = _as_bool(merged[field], defaults[field], field, warnings, strict)

    merged["hidden_rule"] = _as_choice(
        merged["hidden_rule"], HIDDEN_RULES, defaults["hidden_rule"], "hidden_rule", warnings, strict
    )
    merged["output_format"] = _as_choice(
        merged["output_format"], OUTPUT_FORMATS, defaults["output_format"], "output_format", warnings, strict
    )

    return merged, warnings


def policy_from_config(config: Dict[str, Any]) -> ScanPolicy:
    """
    Build a ScanPolicy from a validated configuration.

    Args:
        config: Output of validate_config.

    Returns:
        ScanPolicy: The immutable policy.
    """
    return ScanPolicy(
        recursive=config["recursive"],
        include_dotfiles=config["include_dotfiles"],
        include_directories=config["include_directories"],
        include_symlinks=config["include_symlinks"],
        include_files=config["include_files"],
        separator=config["separator"],
        hidden_rule=HiddenRule(config["hidden_rule"]),
    )


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and strip string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_path(value: Any, field: str, warnings: List[str], strict: bool) -> str:
    """Validate a path string. Surrounding spaces are part of the name."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value if value.strip() else ""

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return ""


def _as_separator(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    # Whitespace and the empty string are legal separators, never stripped
    if isinstance(value, str):
        return value
    if value is None:
        return fallback

    msg = f"Invalid field 'separator': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce human-friendly inputs into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in _TRUE_WORDS:
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in _FALSE_WORDS:
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_choice(
        value: Any,
        choices: Sequence[str],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Validate a value against a closed set of lowercase identifiers."""
    if isinstance(value, str) and value.strip().lower() in choices:
        return value.strip().lower()

    msg = f"Invalid field '{field}': {value!r} is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback '{fallback}'.")
    return fallback
