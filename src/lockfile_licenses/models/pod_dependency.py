"""CocoaPods dependency entry."""

from __future__ import annotations

from typing import NamedTuple


class PodDependency(NamedTuple):
    """A library listed in the DEPENDENCIES section of a Podfile.lock."""

    name: str
    source_path: str

    @property
    def root_name(self) -> str:
        """Return the pod name without its subspec (``Firebase/Analytics`` -> ``Firebase``)."""
        return self.name.split("/", 1)[0]
