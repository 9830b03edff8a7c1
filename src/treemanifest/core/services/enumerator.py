from __future__ import annotations

"""
Tree Enumeration Service.

Walks a directory tree depth-first and produces the ordered list of relative
path strings admitted by a ScanPolicy. Entries are classified without
following symbolic links, so symlinked directories are never descended into.

Any failure (unreadable directory, unclassifiable entry, undecodable name)
aborts the whole enumeration. There is no partial result.
"""

import logging
import os
from typing import List, Union

from treemanifest.domain.errors import DirectoryReadError, InvalidEntryName, NotADirectory
from treemanifest.domain.scan_models import EntryInfo, EntryKind, HiddenRule, ScanPolicy

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


# ==============================================================================
# PUBLIC API
# ==============================================================================

def enumerate_tree(policy: ScanPolicy, root: PathLike) -> List[str]:
    """
    Enumerate the directory tree rooted at 'root' under the given policy.

    Children of a directory are emitted as one contiguous block right after
    the directory itself is considered, before its next sibling. Sibling
    order follows the operating system's listing order.

    Args:
        policy: Inclusion and recursion rules.
        root: Directory to scan.

    Returns:
        List[str]: Relative paths joined with 'policy.separator'.

    Raises:
        NotADirectory: If 'root' is missing or not a directory.
        DirectoryReadError: If a directory or entry cannot be read.
        InvalidEntryName: If an entry name is not valid UTF-8 text.
    """
    root_path = os.fsdecode(root)
    if not os.path.isdir(root_path):
        raise NotADirectory(root_path)

    logger.debug(f"Enumerating '{root_path}' with policy {policy}")

    entries: List[str] = []
    _collect(policy, root_path, "", entries)

    logger.debug(f"Enumeration of '{root_path}' produced {len(entries)} entries")
    return entries


def list_entries(path: str) -> List[EntryInfo]:
    """
    List and classify the immediate entries of a directory.

    The directory handle is released before the caller recurses, so open
    descriptors never grow with tree depth.

    Args:
        path: Directory to list.

    Returns:
        List[EntryInfo]: Classified entries in listing order.
    """
    try:
        scanner = os.scandir(path)
    except OSError as e:
        raise DirectoryReadError(path, e) from e

    infos: List[EntryInfo] = []
    with scanner:
        while True:
            try:
                dir_entry = next(scanner)
            except StopIteration:
                break
            except OSError as e:
                raise DirectoryReadError(path, e) from e
            infos.append(_classify(dir_entry))
    return infos


def include_entry(policy: ScanPolicy, entry: EntryInfo) -> bool:
    """Return True if 'entry' itself belongs in the result."""
    if policy.hidden_rule is HiddenRule.PER_KIND:
        return _include_per_kind(policy, entry)

    if entry.is_hidden and not policy.include_dotfiles:
        return False
    if entry.kind is EntryKind.DIRECTORY:
        return policy.include_directories
    if entry.kind is EntryKind.SYMLINK:
        return policy.include_symlinks
    return policy.include_files


def descend_into(policy: ScanPolicy, entry: EntryInfo) -> bool:
    """Return True if the enumerator should recurse into 'entry'."""
    if entry.kind is not EntryKind.DIRECTORY or not policy.recursive:
        return False
    return policy.include_dotfiles or not entry.is_hidden


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _collect(policy: ScanPolicy, path: str, prefix: str, acc: List[str]) -> None:
    """Append admitted entries under 'path' to 'acc', prefixed by 'prefix'."""
    logger.debug(f"Listing directory: {path}")

    for entry in list_entries(path):
        if include_entry(policy, entry):
            acc.append(prefix + entry.name)
        if descend_into(policy, entry):
            _collect(
                policy,
                os.path.join(path, entry.name),
                prefix + entry.name + policy.separator,
                acc,
            )


def _classify(dir_entry: os.DirEntry) -> EntryInfo:
    """Resolve name and kind of a single entry without following symlinks."""
    name = dir_entry.name
    try:
        # Undecodable bytes surface as lone surrogates (surrogateescape)
        name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidEntryName(dir_entry.path, e) from e

    try:
        if dir_entry.is_symlink():
            return EntryInfo(name=name, kind=EntryKind.SYMLINK)
        if dir_entry.is_dir(follow_symlinks=False):
            return EntryInfo(name=name, kind=EntryKind.DIRECTORY)
        is_regular = dir_entry.is_file(follow_symlinks=False)
    except OSError as e:
        raise DirectoryReadError(dir_entry.path, e) from e

    return EntryInfo(name=name, kind=EntryKind.FILE, is_regular=is_regular)


def _include_per_kind(policy: ScanPolicy, entry: EntryInfo) -> bool:
    """Inclusion rule with a distinct dotfile category for non-directories."""
    if entry.kind is EntryKind.DIRECTORY:
        if entry.is_hidden and not policy.include_dotfiles:
            return False
        return policy.include_directories

    as_symlink = entry.kind is EntryKind.SYMLINK and policy.include_symlinks
    as_file = entry.is_regular and not entry.is_hidden and policy.include_files
    as_dotfile = entry.is_hidden and policy.include_dotfiles
    return as_symlink or as_file or as_dotfile
