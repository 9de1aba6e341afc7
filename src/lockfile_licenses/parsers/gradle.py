"""Gradle build files are located but not parsed."""

from __future__ import annotations

from ..errors import UnsupportedManagerError


def parse(content: str) -> list[str]:
    """Always raise: dependency extraction from build.gradle is not implemented."""
    raise UnsupportedManagerError(
        "Dependency extraction from android/build.gradle is not supported; "
        "Android dependencies were not scanned"
    )
