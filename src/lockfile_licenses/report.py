"""Report aggregation and serialisation."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Literal

from .models.package_record import ParsedPackageRecord
from .models.scan_result import ScanResult

ReportFormat = Literal["json", "jsonl"]
REPORT_FORMATS: tuple[str, ...] = ("json", "jsonl")


def collect_records(results: Iterable[ScanResult]) -> list[ParsedPackageRecord]:
    """Return the records of every result, in scan order."""
    records: list[ParsedPackageRecord] = []
    for result in results:
        records.extend(result.records)
    return records


def aggregate(records: Iterable[ParsedPackageRecord]) -> dict[str, dict[str, str]]:
    """Map package name -> serialised record.

    The first record for a name wins (nested copies of a package resolve to
    the same name). Records without a name are keyed by their path.
    """
    report: dict[str, dict[str, str]] = {}
    for record in records:
        key = record.key
        if not key or key in report:
            continue
        report[key] = record.to_dict()
    return report


def render_json(report: dict[str, dict[str, str]]) -> str:
    return json.dumps(report, indent=2, ensure_ascii=False) + "\n"


def render_jsonl(records: Iterable[ParsedPackageRecord]) -> str:
    """Render one JSON object per line, skipping names already emitted."""
    lines = [json.dumps(entry, ensure_ascii=False) for entry in aggregate(records).values()]
    return "".join(line + "\n" for line in lines)


def render(results: Iterable[ScanResult], fmt: ReportFormat = "json") -> str:
    records = collect_records(results)
    if fmt == "json":
        return render_json(aggregate(records))
    if fmt == "jsonl":
        return render_jsonl(records)
    raise ValueError(f"Unsupported report format: {fmt}")


def write_report(
    path: Path,
    results: Iterable[ScanResult],
    fmt: ReportFormat = "json",
) -> dict[str, dict[str, str]]:
    """Write the report for ``results`` to ``path`` and return the aggregated mapping."""
    results = list(results)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render(results, fmt), encoding="utf-8")
    return aggregate(collect_records(results))
