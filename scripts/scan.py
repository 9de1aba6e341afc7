#!/usr/bin/env python3
"""Local entrypoint to run the scanner from a checkout without installing it.

Usage:
  python scripts/scan.py npm path/to/project [output.json] [--format jsonl]

This calls the same cli.main used by the ``lockfile-licenses`` console script.
"""

from __future__ import annotations

from lockfile_licenses.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
