"""Resolved package metadata record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedPackageRecord:
    """License metadata resolved for one installed package.

    ``license_url`` is the path of the discovered license file relative to the
    project root, or an empty string when none was found. ``path`` is the
    identifier the record was resolved from.
    """

    name: str = ""
    description: str = ""
    repository: str = ""
    author: str = ""
    license: str = ""
    license_url: str = ""
    path: str = ""

    @property
    def key(self) -> str:
        """Return the report key: the package name, or its path when unnamed."""
        return self.name or self.path

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "description": self.description,
            "repository": self.repository,
            "author": self.author,
            "license": self.license,
            "license_url": self.license_url,
            "path": self.path,
        }
