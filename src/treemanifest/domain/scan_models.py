from __future__ import annotations

"""
Scan Domain Data Models.

Defines the immutable scan policy that governs one enumeration call and the
classification records produced for every directory entry.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class HiddenRule(str, Enum):
    """
    Strategy used to decide how dot-prefixed entries are admitted.

    GLOBAL_VETO: A hidden entry of any kind is skipped unless dotfiles are
                 enabled. Once admitted, its kind alone decides inclusion.
    PER_KIND:    Hidden directories are gated by the dotfile flag before the
                 directory rules apply, while hidden non-directories form a
                 separate "dotfile" category included by the dotfile flag.
    """
    GLOBAL_VETO = "global_veto"
    PER_KIND = "per_kind"


class EntryKind(str, Enum):
    """Kind of a directory entry, resolved without following symlinks."""
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"


# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanPolicy:
    """
    Inclusion and recursion rules for a single enumeration call.

    Attributes:
        recursive: Descend into subdirectories.
        include_dotfiles: Admit entries whose name starts with '.'.
        include_directories: Emit directory entries themselves.
        include_symlinks: Emit entries reported as symbolic links.
        include_files: Emit entries reported as files.
        separator: Token joining nested path segments.
        hidden_rule: How hidden entries interact with the kind flags.
    """
    recursive: bool = True
    include_dotfiles: bool = True
    include_directories: bool = True
    include_symlinks: bool = True
    include_files: bool = True
    separator: str = "/"
    hidden_rule: HiddenRule = HiddenRule.GLOBAL_VETO

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the policy into JSON-friendly primitives."""
        data = asdict(self)
        data["hidden_rule"] = self.hidden_rule.value
        return data


@dataclass(frozen=True)
class EntryInfo:
    """
    Classification of one directory entry.

    Attributes:
        name: Entry name (single path segment).
        kind: Resolved entry kind.
        is_regular: True only for regular files (not FIFOs, sockets, devices).
    """
    name: str
    kind: EntryKind
    is_regular: bool = False

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")
