"""Package manager kinds and lockfile location."""

from __future__ import annotations

import enum
import os
from pathlib import Path
from types import MappingProxyType


class ManagerKind(enum.Enum):
    """Package managers whose lockfiles can be located."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    IOS = "ios"
    ANDROID = "android"


LOCKFILE_PATHS: MappingProxyType[ManagerKind, str] = MappingProxyType(
    {
        ManagerKind.NPM: "package-lock.json",
        ManagerKind.YARN: "yarn.lock",
        ManagerKind.PNPM: "pnpm-lock.yaml",
        ManagerKind.IOS: "ios/Podfile.lock",
        ManagerKind.ANDROID: "android/build.gradle",
    }
)

ALL_MANAGERS = "all"


def lockfile_relative_path(manager: ManagerKind) -> str:
    """Return the lockfile path for ``manager`` relative to a project root."""
    return LOCKFILE_PATHS[manager]


def normalize_path(path: Path | str) -> Path:
    """Return ``path`` as an absolute path with ``.`` and ``..`` collapsed."""
    return Path(os.path.normpath(os.path.abspath(path)))


def locate(manager: ManagerKind, root: Path | str) -> Path | None:
    """Return the absolute lockfile path for ``manager`` under ``root``.

    Absence is a normal outcome and yields ``None``.
    """
    candidate = normalize_path(Path(root) / lockfile_relative_path(manager))
    if not candidate.is_file():
        return None
    return candidate


def parse_manager(value: str | ManagerKind) -> ManagerKind:
    """Return the ``ManagerKind`` named by ``value`` (case-insensitive)."""
    if isinstance(value, ManagerKind):
        return value
    try:
        return ManagerKind(value.strip().lower())
    except ValueError:
        known = ", ".join(kind.value for kind in ManagerKind)
        raise ValueError(f"Unknown package manager '{value}'. Known managers: {known}") from None


def expand_managers(value: str | ManagerKind) -> list[ManagerKind]:
    """Expand ``all`` to every manager; otherwise return a single-item list."""
    if isinstance(value, str) and value.strip().lower() == ALL_MANAGERS:
        return list(ManagerKind)
    return [parse_manager(value)]
