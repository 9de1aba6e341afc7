"""Resolve package identifiers to license metadata from installed manifests."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any

import structlog

from .managers import normalize_path
from .models.package_record import ParsedPackageRecord
from .models.pod_dependency import PodDependency
from .parsers.podfile_lock import PODS_DIR as PODS_SOURCE

logger = structlog.get_logger(__name__)

MANIFEST_NAME = "package.json"

# Checked in this order; the first existing file wins.
LICENSE_CANDIDATES = (
    "LICENSE",
    "license",
    "license.md",
    "LICENSE.md",
    "license.txt",
    "LICENSE.txt",
)

IOS_DIR = "ios"
PODS_DIR = "ios/Pods"

DEFAULT_MAX_WORKERS = 8


class ManifestError(ValueError):
    """Raised when a package manifest cannot be read or is not a JSON object."""


def read_manifest(path: Path) -> dict[str, Any]:
    """Return the JSON object stored at ``path``.

    Raises:
        ManifestError: If the file cannot be read or decoded, or is not an object.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        # ValueError covers undecodable bytes and paths with embedded NULs.
        raise ManifestError(f"Failed to read manifest {path}: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in manifest {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {path} must contain a JSON object")
    return data


def find_license_file(root: Path, relative_dir: str) -> str:
    """Return ``relative_dir/<candidate>`` for the first license file present, else ``""``."""
    package_dir = root / relative_dir
    prefix = relative_dir.rstrip("/")
    for candidate in LICENSE_CANDIDATES:
        try:
            found = (package_dir / candidate).is_file()
        except (OSError, ValueError):
            return ""
        if found:
            return f"{prefix}/{candidate}" if prefix else candidate
    return ""


def relative_within(root: Path, path: Path | str) -> str | None:
    """Return ``path`` normalised and relative to ``root``, or ``None`` if it leaves ``root``.

    ``root`` must already be normalised; the root itself maps to ``""``.
    """
    candidate = normalize_path(root / path)
    if candidate != root and root not in candidate.parents:
        return None
    relative = candidate.relative_to(root).as_posix()
    return "" if relative == "." else relative


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value)


def _repository_url(value: Any) -> str:
    # "repository" is either a shorthand string or {"type": ..., "url": ...}
    if isinstance(value, dict):
        return _as_text(value.get("url"))
    return _as_text(value)


def _author(value: Any) -> str:
    """Render an npm person field as ``name <email> (url)``."""
    if not isinstance(value, dict):
        return _as_text(value)

    parts = [_as_text(value.get("name"))]
    email = _as_text(value.get("email"))
    if email:
        parts.append(f"<{email}>")
    url = _as_text(value.get("url"))
    if url:
        parts.append(f"({url})")
    return " ".join(part for part in parts if part)


def _license(manifest: dict[str, Any]) -> str:
    value = manifest.get("license")
    if isinstance(value, dict):
        return _as_text(value.get("type"))
    if value is not None:
        return _as_text(value)

    # Deprecated form: "licenses": [{"type": "MIT", "url": ...}, ...]
    legacy = manifest.get("licenses")
    if isinstance(legacy, list):
        types = [
            _as_text(entry.get("type")) if isinstance(entry, dict) else _as_text(entry)
            for entry in legacy
        ]
        return " OR ".join(t for t in types if t)
    return ""


def record_from_manifest(
    manifest: dict[str, Any], *, identifier: str, license_url: str
) -> ParsedPackageRecord:
    """Build a record from manifest fields, defaulting absent ones to ``""``."""
    return ParsedPackageRecord(
        name=_as_text(manifest.get("name")),
        description=_as_text(manifest.get("description")),
        repository=_repository_url(manifest.get("repository")),
        author=_author(manifest.get("author")),
        license=_license(manifest),
        license_url=license_url,
        path=identifier,
    )


def resolve_one(identifier: str, root: Path) -> ParsedPackageRecord | None:
    """Resolve a single identifier; return ``None`` when its manifest is unusable."""
    relative = relative_within(root, identifier)
    if relative is None:
        logger.warning("identifier_outside_root", identifier=identifier)
        return None

    manifest_path = root / relative / MANIFEST_NAME
    try:
        manifest = read_manifest(manifest_path)
    except ManifestError as exc:
        logger.warning("manifest_unreadable", identifier=identifier, error=str(exc))
        return None

    license_url = find_license_file(root, relative)
    return record_from_manifest(manifest, identifier=identifier, license_url=license_url)


def _fan_out(func, items: Sequence[Any], max_workers: int | None) -> list[Any]:
    """Apply ``func`` to ``items`` on a bounded thread pool, keeping input order."""
    workers = DEFAULT_MAX_WORKERS if max_workers is None else max_workers
    if workers <= 1 or len(items) <= 1:
        return [func(item) for item in items]

    with ThreadPoolExecutor(max_workers=min(workers, len(items))) as executor:
        # map() yields results in submission order regardless of completion order.
        return list(executor.map(func, items))


def resolve(
    identifiers: Iterable[str],
    root: Path | str,
    *,
    max_workers: int | None = None,
) -> list[ParsedPackageRecord]:
    """Resolve identifiers (paths relative to ``root``) to metadata records.

    Identifiers whose ``package.json`` cannot be read or parsed are logged and
    dropped. Output order follows input order.
    """
    root_path = normalize_path(root)
    items = list(identifiers)
    results = _fan_out(lambda identifier: resolve_one(identifier, root_path), items, max_workers)
    records = [record for record in results if record is not None]

    logger.debug(
        "packages_resolved",
        requested=len(items),
        resolved=len(records),
        dropped=len(items) - len(records),
    )
    return records


def _is_remote(source: str) -> bool:
    return "://" in source or source.startswith("git@")


def pod_directory(pod: PodDependency, root: Path) -> str:
    """Return the directory holding the pod's files, relative to ``root``.

    Development pods live at their local source path (for example
    ``../node_modules/react-native/``), resolved against ``ios/``. Registry and
    remote pods are installed under ``ios/Pods/<root pod>``.
    """
    source = pod.source_path
    if source and source != PODS_SOURCE and not _is_remote(source):
        local = relative_within(root, Path(IOS_DIR) / source)
        if local is not None:
            return local
        logger.warning("pod_source_outside_root", pod=pod.name, source=source)
    return f"{PODS_DIR}/{pod.root_name}"


def resolve_pod(pod: PodDependency, root: Path) -> ParsedPackageRecord:
    """Build a record for a CocoaPods dependency.

    Pods carry no package.json; the license file is looked up in the pod's
    directory.
    """
    source = pod.source_path
    pod_dir = pod_directory(pod, root)
    return ParsedPackageRecord(
        name=pod.name,
        repository=source if _is_remote(source) else "",
        license_url=find_license_file(root, pod_dir),
        path=pod_dir,
    )


def resolve_pods(
    pods: Iterable[PodDependency],
    root: Path | str,
    *,
    max_workers: int | None = None,
) -> list[ParsedPackageRecord]:
    """Resolve CocoaPods dependencies to records, preserving input order."""
    root_path = normalize_path(root)
    return _fan_out(lambda pod: resolve_pod(pod, root_path), list(pods), max_workers)
