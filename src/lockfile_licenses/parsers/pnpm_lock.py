"""Parse pnpm-lock.yaml into installable package paths."""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import MalformedLockfileError

NODE_MODULES = "node_modules/"

# devDependencies was spelled dev_dependencies by some lockfile versions.
SECTIONS = ("dependencies", "devDependencies", "dev_dependencies", "packages")


def normalize_key(key: str) -> str:
    """Return the package name encoded in a pnpm lockfile key.

    ``/lodash@4.17.15`` -> ``lodash``; ``/@scope/name@1.0.0`` -> ``@scope/name``.
    Bare keys (``lodash``, ``@scope/name@1.0.0``) are read as if they carried
    the leading slash. Keys too short to hold a name normalise to ``""``.
    """
    if not key.startswith("/"):
        key = "/" + key
    segments = key.split("/")
    if len(segments) < 2:
        return ""

    second = segments[1]
    if second.startswith("@"):
        if len(segments) < 3:
            return ""
        name = segments[2].split("@", 1)[0]
        if not name:
            return ""
        return f"{second}/{name}"
    return second.split("@", 1)[0]


def _section_keys(data: dict, section: str) -> Iterable[str]:
    mapping = data.get(section)
    if mapping is None:
        return []
    if not isinstance(mapping, dict):
        raise MalformedLockfileError(f"'{section}' in pnpm-lock.yaml must be a mapping")
    return [str(key) for key in mapping.keys()]


def parse(content: str) -> list[str]:
    """Return de-duplicated ``node_modules/<name>`` paths from all sections.

    Sections are read in order: dependencies, dev dependencies, packages.
    """
    import yaml

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise MalformedLockfileError(f"Invalid YAML in pnpm-lock.yaml: {exc}") from exc

    if data is None:
        return []
    if not isinstance(data, dict):
        raise MalformedLockfileError("pnpm-lock.yaml must contain a mapping")

    seen: set[str] = set()
    names: list[str] = []
    for section in SECTIONS:
        for key in _section_keys(data, section):
            name = normalize_key(key)
            if not name or name in seen:
                continue
            seen.add(name)
            names.append(name)

    return [NODE_MODULES + name for name in names]
