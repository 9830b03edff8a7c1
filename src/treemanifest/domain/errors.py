from __future__ import annotations

"""
Scan Error Taxonomy.

Every failure raised by the enumerator is terminal for the call that raised
it and carries the offending path together with its underlying cause.
"""

from typing import Optional


class ScanError(Exception):
    """
    Base class for enumeration failures.

    Attributes:
        path: Filesystem path being processed when the failure happened.
        cause: Underlying exception, if any.
    """

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        self.cause = cause
        super().__init__(self._format())

    def _format(self) -> str:
        if self.cause is None:
            return f"{self.describe()}: {self.path}"
        return f"{self.describe()}: {self.path} ({self.cause})"

    @classmethod
    def describe(cls) -> str:
        return "Scan failed"


class NotADirectory(ScanError):
    """The scan root does not exist or is not a directory."""

    @classmethod
    def describe(cls) -> str:
        return "Path is not a directory"


class DirectoryReadError(ScanError):
    """A directory could not be listed or an entry could not be classified."""

    @classmethod
    def describe(cls) -> str:
        return "Could not read directory"


class InvalidEntryName(ScanError):
    """An entry name is not representable as valid UTF-8 text."""

    @classmethod
    def describe(cls) -> str:
        return "Entry name is not valid UTF-8"


class LiteralSyntaxError(ValueError):
    """The compact argument literal could not be parsed."""
