"""Human-readable Markdown summary of a scan."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from .models.scan_result import ScanResult
from .report import aggregate, collect_records

NO_LICENSE = "(none)"


def render_summary(results: Iterable[ScanResult]) -> str:
    """Return a Markdown string with per-manager totals and license counts."""
    results = list(results)
    report = aggregate(collect_records(results))

    lines = []
    lines.append("# Dependency License Summary")
    lines.append("")
    lines.append(f"Managers scanned: {len(results)} | Packages: {len(report)}")
    lines.append("")
    lines.append("| Manager | Lockfile | Status | Identifiers | Records |")
    lines.append("| --- | --- | --- | --- | --- |")
    for result in results:
        lockfile = str(result.lockfile) if result.lockfile is not None else "n/a"
        lines.append(
            f"| {result.manager.value} | {lockfile} | {result.status} "
            f"| {len(result.identifiers)} | {len(result.records)} |"
        )

    for result in results:
        if result.unsupported:
            lines.append("")
            lines.append(
                f"> **Warning:** {result.manager.value} lockfile found but not parsed; "
                "its dependencies are not included in this report."
            )

    counts = Counter(entry["license"] or NO_LICENSE for entry in report.values())
    lines.append("")
    lines.append("| License | Packages |")
    lines.append("| --- | --- |")
    if not counts:
        lines.append("| (no packages resolved) | 0 |")
    for license_id, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])):
        lines.append(f"| {license_id} | {count} |")

    return "\n".join(lines) + "\n"
