"""lockfile-licenses core package.

Locates a project's lockfile, extracts its dependencies and resolves license
metadata for each installed package. The CLI in ``cli`` is a thin wrapper
around ``core``.
"""

__version__ = "0.1.0"

__all__ = [
    "core",
]
