"""Parse yarn.lock entry headers into installable package paths."""

from __future__ import annotations

NODE_MODULES = "node_modules/"

# Yarn Berry writes a metadata block with the same header shape as entries.
_METADATA_HEADER = "__metadata"


def _specifier_name(specifier: str) -> str:
    """Return the package name of ``name@range`` or ``@scope/name@range``.

    Returns an empty string for scoped specifiers lacking the ``/`` separator.
    """
    if specifier.startswith("@"):
        slash = specifier.find("/")
        if slash == -1:
            return ""
        at = specifier.find("@", slash + 1)
        return specifier if at == -1 else specifier[:at]
    return specifier.split("@", 1)[0]


def _header_specifiers(line: str) -> list[str]:
    header = line.split(":", 1)[0]
    return [part.strip().strip('"') for part in header.split(",")]


def parse(content: str) -> list[str]:
    """Return ``node_modules/<name>`` for every package named by an entry header.

    A header is an unindented line of comma-separated specifiers ending in a
    colon, e.g. ``lodash@^4.17.15, lodash@^4.17.0:``. Names are de-duplicated
    with first-seen order kept.
    """
    seen: set[str] = set()
    names: list[str] = []

    for raw in content.splitlines():
        if ":" not in raw:
            continue
        # Entry bodies are indented and may contain colons (resolved URLs).
        if raw[:1].isspace() or raw.lstrip().startswith("#"):
            continue

        for specifier in _header_specifiers(raw):
            name = _specifier_name(specifier)
            if not name or name == _METADATA_HEADER or name in seen:
                continue
            seen.add(name)
            names.append(name)

    return [NODE_MODULES + name for name in names]
