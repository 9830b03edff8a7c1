from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Cross-platform helpers for resolving the per-user data directory,
normalizing user supplied paths and writing UTF-8 text artifacts.
"""

import os
from typing import Optional

APP_DIR_NAME = "treemanifest"
UNIX_APP_DIR_NAME = ".treemanifest"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent application data.

    - Windows: %LOCALAPPDATA%/treemanifest
    - Linux/Mac: ~/.treemanifest

    The directory is not created here; writers create it on demand.

    Returns:
        str: Absolute path to the application data directory.
    """
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            return os.path.abspath(os.path.join(base, APP_DIR_NAME))

    return os.path.abspath(os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME))


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands environment variables and '~'. Empty or all-whitespace input
    resolves to the fallback; otherwise the string is kept as given, so
    names with leading or trailing spaces survive.

    Args:
        path: Raw input path string.
        fallback: Path used when 'path' is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = path if path and path.strip() else fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


# -----------------------------------------------------------------------------
# WRITE API
# -----------------------------------------------------------------------------

def write_text_file(path: str, content: str) -> str:
    """
    Write UTF-8 text to 'path', creating parent directories as needed.

    Args:
        path: Destination file.
        content: Text to write.

    Returns:
        str: Absolute path of the written file.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    abs_path = os.path.abspath(path)
    parent = os.path.dirname(abs_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(abs_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    return abs_path
