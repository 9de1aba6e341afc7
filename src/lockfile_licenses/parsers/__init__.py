"""Lockfile parsers and the manager -> parser dispatch table."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from types import MappingProxyType
from typing import TypeAlias

from ..managers import ManagerKind
from ..models.pod_dependency import PodDependency
from . import gradle, package_lock, podfile_lock, pnpm_lock, yarn_lock

ParseFunction: TypeAlias = Callable[[str], Sequence[object]]

PARSERS: MappingProxyType[ManagerKind, ParseFunction] = MappingProxyType(
    {
        ManagerKind.NPM: package_lock.parse,
        ManagerKind.YARN: yarn_lock.parse,
        ManagerKind.PNPM: pnpm_lock.parse,
        ManagerKind.IOS: podfile_lock.parse,
        ManagerKind.ANDROID: gradle.parse,
    }
)


def get_parser(manager: ManagerKind) -> ParseFunction:
    """Return the parse function registered for ``manager``."""
    return PARSERS[manager]


def parse_lockfile(manager: ManagerKind, content: str) -> list[str] | list[PodDependency]:
    """Parse ``content`` with the parser for ``manager``.

    Raises:
        MalformedLockfileError: If the content is not valid for the format.
        UnsupportedManagerError: If the manager's format is not parsed.
    """
    return get_parser(manager)(content)


__all__ = [
    "PARSERS",
    "ParseFunction",
    "get_parser",
    "parse_lockfile",
]
