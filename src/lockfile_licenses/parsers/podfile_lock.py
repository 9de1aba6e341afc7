"""Parse the DEPENDENCIES section of a CocoaPods Podfile.lock."""

from __future__ import annotations

import enum
import re

from ..models.pod_dependency import PodDependency

DEPENDENCIES_HEADER = "DEPENDENCIES:"
PODS_DIR = "./Pods"
FROM_MARKER = " (from `"

# Podfile.lock sections: "PODS:", "EXTERNAL SOURCES:", "SPEC CHECKSUMS:".
_SECTION_HEADER = re.compile(r"[A-Z][A-Z\s]*:?")


class _State(enum.Enum):
    OUTSIDE_DEPENDENCIES = enum.auto()
    INSIDE_DEPENDENCIES = enum.auto()


def _is_section_header(stripped: str) -> bool:
    return _SECTION_HEADER.fullmatch(stripped) is not None


def parse_line(line: str) -> PodDependency | None:
    """Extract a dependency from one DEPENDENCIES line.

    ``- Alamofire (5.6.2)`` -> ``("Alamofire", "")``;
    ``- Alamofire (from `https://...`)`` -> ``("Alamofire", "https://...")``;
    any ``~>`` constraint maps the source to ``./Pods``. Lines without ``(``
    are not dependency lines.
    """
    stripped = line.strip()
    if "(" not in stripped:
        return None

    head, _ = stripped.split("(", 1)
    name = head.strip().lstrip("-").strip().strip('"').strip()
    if not name:
        return None

    if "~>" in stripped:
        source = PODS_DIR
    elif FROM_MARKER in stripped:
        # Options may follow the source: (from `url`, tag `1.0.0`)
        source = stripped.split(FROM_MARKER, 1)[1].split("`", 1)[0]
    else:
        source = ""

    return PodDependency(name=name, source_path=source)


def parse(content: str) -> list[PodDependency]:
    """Return the pods listed under DEPENDENCIES, in encounter order.

    Scanning stops at the first uppercase section header after DEPENDENCIES.
    """
    state = _State.OUTSIDE_DEPENDENCIES
    pods: list[PodDependency] = []

    for raw in content.splitlines():
        stripped = raw.strip()
        if state is _State.OUTSIDE_DEPENDENCIES:
            if stripped == DEPENDENCIES_HEADER:
                state = _State.INSIDE_DEPENDENCIES
            continue

        if _is_section_header(stripped):
            break
        if not stripped:
            continue

        pod = parse_line(stripped)
        if pod is not None:
            pods.append(pod)

    return pods
