"""Core scanning entrypoints.

Locates a manager's lockfile, parses it and resolves license metadata for each
dependency. Nothing here is fatal: every failure becomes a ``ScanResult``
status plus diagnostics, and the CLI decides how to surface it.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import structlog

from .errors import MalformedLockfileError, UnsupportedManagerError
from .managers import ManagerKind, expand_managers, locate, normalize_path
from .models.pod_dependency import PodDependency
from .models.scan_result import ScanResult
from .parsers import parse_lockfile
from .resolver import resolve, resolve_pods

logger = structlog.get_logger(__name__)


def _read_lockfile(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedLockfileError(f"Failed to read {path}: {exc}") from exc


def scan_project(
    root: Path | str,
    manager: ManagerKind,
    *,
    max_workers: int | None = None,
) -> ScanResult:
    """Scan one manager's lockfile under ``root``.

    Params:
        root: project root; made absolute and normalised
        manager: which lockfile to locate and parse
        max_workers: bound on concurrent manifest reads (``None`` uses the
            resolver default)

    Returns: a ScanResult whose status is ``missing`` when no lockfile exists,
    ``malformed`` when it cannot be read or parsed, ``unsupported`` for formats
    that are located but not parsed, and ``ok`` otherwise.
    """
    root = normalize_path(root)
    log = logger.bind(manager=manager.value)

    lockfile = locate(manager, root)
    if lockfile is None:
        log.info("lockfile_missing", root=str(root))
        return ScanResult(manager=manager, status="missing")

    log = log.bind(lockfile=str(lockfile))
    try:
        parsed = parse_lockfile(manager, _read_lockfile(lockfile))
    except UnsupportedManagerError as exc:
        log.error("lockfile_unsupported", error=str(exc))
        return ScanResult(
            manager=manager, status="unsupported", lockfile=lockfile, diagnostics=(str(exc),)
        )
    except MalformedLockfileError as exc:
        log.warning("lockfile_malformed", error=str(exc))
        return ScanResult(
            manager=manager, status="malformed", lockfile=lockfile, diagnostics=(str(exc),)
        )

    if manager is ManagerKind.IOS:
        pods: list[PodDependency] = list(parsed)  # type: ignore[arg-type]
        identifiers = [pod.name for pod in pods]
        records = resolve_pods(pods, root, max_workers=max_workers)
        diagnostics: list[str] = []
    else:
        identifiers = []
        for identifier in parsed:
            if not identifier:
                log.debug("root_project_skipped")
                continue
            identifiers.append(identifier)
        records = resolve(identifiers, root, max_workers=max_workers)
        resolved = {record.path for record in records}
        diagnostics = [
            f"{identifier}: package.json missing or unreadable"
            for identifier in identifiers
            if identifier not in resolved
        ]

    log.info(
        "lockfile_scanned",
        identifiers=len(identifiers),
        records=len(records),
        dropped=len(diagnostics),
    )
    return ScanResult(
        manager=manager,
        status="ok",
        lockfile=lockfile,
        identifiers=tuple(identifiers),
        records=tuple(records),
        diagnostics=tuple(diagnostics),
    )


def scan_managers(
    root: Path | str,
    managers: Iterable[ManagerKind] | str,
    *,
    max_workers: int | None = None,
) -> list[ScanResult]:
    """Scan several managers in order; ``"all"`` selects every manager."""
    if isinstance(managers, str):
        managers = expand_managers(managers)
    return [scan_project(root, manager, max_workers=max_workers) for manager in managers]
