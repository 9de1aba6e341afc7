"""Error types shared by the lockfile parsers and the scan pipeline."""

from __future__ import annotations


class LockfileError(RuntimeError):
    """Base error for failures while handling a lockfile."""


class ParseError(LockfileError):
    """Raised when a lockfile cannot be turned into package identifiers."""


class MalformedLockfileError(ParseError):
    """Raised when lockfile content is not valid JSON/YAML or has the wrong shape."""


class UnsupportedManagerError(LockfileError):
    """Raised for lockfile formats that are located but not parsed (Gradle).

    Kept outside the ``ParseError`` branch so that callers handling malformed
    input cannot mistake it for an empty dependency list.
    """
