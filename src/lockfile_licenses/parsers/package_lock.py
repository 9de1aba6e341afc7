"""Parse npm package-lock.json into installable package paths."""

from __future__ import annotations

from ..errors import MalformedLockfileError


def parse(content: str) -> list[str]:
    """Return every key of the top-level ``packages`` map, in document order.

    Keys already encode the installable path (``node_modules/lodash``,
    ``node_modules/a/node_modules/b``). The root project appears under the
    empty key and is returned unchanged like the rest.
    """
    import json

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise MalformedLockfileError(f"Invalid JSON in package-lock.json: {exc}") from exc

    if not isinstance(data, dict):
        raise MalformedLockfileError("package-lock.json must contain a JSON object")

    packages = data.get("packages")
    if packages is None:
        return []
    if not isinstance(packages, dict):
        raise MalformedLockfileError("'packages' in package-lock.json must be an object")

    return list(packages.keys())
