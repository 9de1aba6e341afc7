"""Shared fixtures: synthetic projects with installed node_modules."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


def write_package(
    root: Path,
    identifier: str,
    manifest: dict | str | None = None,
    license_file: str | None = None,
) -> Path:
    """Create ``root/identifier`` with an optional package.json and license file."""
    package_dir = root / identifier
    package_dir.mkdir(parents=True, exist_ok=True)
    if manifest is not None:
        text = manifest if isinstance(manifest, str) else json.dumps(manifest)
        (package_dir / "package.json").write_text(text, encoding="utf-8")
    if license_file is not None:
        (package_dir / license_file).write_text("Permission is hereby granted\n")
    return package_dir


@pytest.fixture
def npm_project(tmp_path: Path) -> Path:
    """Project with a package-lock.json and two installed packages."""
    lock = {
        "name": "app",
        "lockfileVersion": 3,
        "packages": {
            "": {"name": "app", "version": "1.0.0"},
            "node_modules/foo": {"version": "1.0.0"},
            "node_modules/@scope/bar": {"version": "2.0.0"},
        },
    }
    (tmp_path / "package-lock.json").write_text(json.dumps(lock), encoding="utf-8")
    (tmp_path / "package.json").write_text(json.dumps({"name": "app"}), encoding="utf-8")
    write_package(tmp_path, "node_modules/foo", {"name": "foo", "license": "MIT"}, "LICENSE")
    write_package(
        tmp_path,
        "node_modules/@scope/bar",
        {"name": "@scope/bar", "license": "ISC", "description": "bar lib"},
    )
    return tmp_path


@pytest.fixture
def make_package():
    return write_package
