"""Data models for lockfile scans and resolved package metadata."""

from __future__ import annotations

from .package_record import ParsedPackageRecord
from .pod_dependency import PodDependency
from .scan_result import ScanResult, ScanStatus

__all__ = [
    "ParsedPackageRecord",
    "PodDependency",
    "ScanResult",
    "ScanStatus",
]
