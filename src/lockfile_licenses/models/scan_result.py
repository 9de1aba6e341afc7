"""Per-manager scan outcome."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..managers import ManagerKind
from .package_record import ParsedPackageRecord

ScanStatus = Literal["ok", "missing", "malformed", "unsupported"]

_VALID_STATUSES = {"ok", "missing", "malformed", "unsupported"}


@dataclass(frozen=True)
class ScanResult:
    """Outcome of locating, parsing and resolving one manager's lockfile."""

    manager: ManagerKind
    status: ScanStatus
    lockfile: Path | None = None
    identifiers: tuple[str, ...] = ()
    records: tuple[ParsedPackageRecord, ...] = ()
    diagnostics: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.status not in _VALID_STATUSES:
            raise ValueError(f"Invalid status: {self.status}")
        if self.status == "missing" and self.lockfile is not None:
            raise ValueError("A missing lockfile cannot carry a path")

    @property
    def unsupported(self) -> bool:
        return self.status == "unsupported"
