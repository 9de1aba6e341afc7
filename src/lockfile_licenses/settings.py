"""Runtime settings loaded from an optional JSON file and the environment.

Precedence, lowest to highest: built-in defaults, the JSON config file (an
explicit path, or ``LOCKFILE_LICENSES_CONFIG``), then the individual
``LOCKFILE_LICENSES_*`` environment variables. The config file uses the keys
``logLevel``, ``logFormat``, ``maxWorkers`` and ``outputName``; all optional.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

CONFIG_PATH_ENV_VAR = "LOCKFILE_LICENSES_CONFIG"
LOG_LEVEL_ENV_VAR = "LOCKFILE_LICENSES_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "LOCKFILE_LICENSES_LOG_FORMAT"
MAX_WORKERS_ENV_VAR = "LOCKFILE_LICENSES_MAX_WORKERS"

DEFAULT_OUTPUT_NAME = "dependencies-licenses.json"

_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_VALID_FORMATS = {"console", "json"}


class ConfigError(RuntimeError):
    """Raised when the configuration file or environment holds invalid values."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    log_level: str = "INFO"
    log_format: str = "console"
    max_workers: int = 8
    output_name: str = DEFAULT_OUTPUT_NAME

    def __post_init__(self) -> None:
        if self.log_level not in _VALID_LEVELS:
            raise ConfigError(f"Invalid log level: {self.log_level}")
        if self.log_format not in _VALID_FORMATS:
            raise ConfigError(f"Invalid log format: {self.log_format} (expected console or json)")
        if self.max_workers < 1:
            raise ConfigError("max workers must be at least 1")
        if not self.output_name:
            raise ConfigError("output name must be non-empty")


def _coerce_workers(value: Any, source: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{source} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{source} must be an integer, got {value!r}") from None


def _from_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    overrides: dict[str, Any] = {}
    if "logLevel" in data:
        overrides["log_level"] = str(data["logLevel"]).upper()
    if "logFormat" in data:
        overrides["log_format"] = str(data["logFormat"]).lower()
    if "maxWorkers" in data:
        overrides["max_workers"] = _coerce_workers(data["maxWorkers"], "'maxWorkers'")
    if "outputName" in data:
        if not isinstance(data["outputName"], str):
            raise ConfigError("'outputName' must be a string")
        overrides["output_name"] = data["outputName"]
    return overrides


def _from_environ(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if environ.get(LOG_LEVEL_ENV_VAR):
        overrides["log_level"] = environ[LOG_LEVEL_ENV_VAR].strip().upper()
    if environ.get(LOG_FORMAT_ENV_VAR):
        overrides["log_format"] = environ[LOG_FORMAT_ENV_VAR].strip().lower()
    if environ.get(MAX_WORKERS_ENV_VAR):
        overrides["max_workers"] = _coerce_workers(
            environ[MAX_WORKERS_ENV_VAR].strip(), MAX_WORKERS_ENV_VAR
        )
    return overrides


def load_settings(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Load settings from defaults, an optional config file and the environment.

    Args:
        path: Optional path to a JSON config file. Falls back to the
            LOCKFILE_LICENSES_CONFIG environment variable when not given.
        environ: Environment mapping; defaults to ``os.environ``.

    Raises:
        ConfigError: If the file cannot be read or any value is invalid.
    """
    env = os.environ if environ is None else environ

    settings = Settings()
    config_path = path if path is not None else env.get(CONFIG_PATH_ENV_VAR)
    if config_path:
        settings = replace(settings, **_from_file(Path(config_path)))

    return replace(settings, **_from_environ(env))
