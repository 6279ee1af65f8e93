"""Viewer configuration: defaults, config file, environment, CLI overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from constants import AUTOSAVE_DELAY, DEFAULT_BASE_URL, DEFAULT_REQUEST_TIMEOUT
from store import build_base_url

log = logging.getLogger(__name__)

ENV_URL = "STOREVIEW_URL"
ENV_AUTOSAVE_DELAY = "STOREVIEW_AUTOSAVE_DELAY"


class ConfigValidationError(Exception):
    """Raised when a configuration value is unusable."""


def get_config_path() -> Path:
    """Get the config file path using XDG Base Directory spec."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    return Path(xdg_config) / "storeview" / "config.json"


@dataclass(frozen=True)
class ViewerConfig:
    """Settings for a viewer session."""

    base_url: str = DEFAULT_BASE_URL
    autosave_delay: float = AUTOSAVE_DELAY  # Seconds of inactivity before autosave
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def validate(self) -> ViewerConfig:
        """Return a normalized copy, raising ConfigValidationError on bad values."""
        base_url = build_base_url(self.base_url)
        if not base_url:
            raise ConfigValidationError("Store URL cannot be empty")
        if self.autosave_delay <= 0:
            raise ConfigValidationError(
                f"Invalid autosave delay: {self.autosave_delay} (must be > 0)"
            )
        if self.request_timeout <= 0:
            raise ConfigValidationError(
                f"Invalid request timeout: {self.request_timeout} (must be > 0)"
            )
        return replace(self, base_url=base_url)


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigValidationError(f"{name} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigValidationError(f"{name} must be a number, got {value!r}") from None


def _from_mapping(data: dict[str, Any], source: str) -> tuple[dict[str, Any], list[str]]:
    """Pick known keys out of a config mapping, warning about the rest."""
    known = {f.name for f in fields(ViewerConfig)}
    values: dict[str, Any] = {}
    warnings = []
    for key, value in data.items():
        if key not in known:
            warnings.append(f"{source}: unknown setting '{key}' ignored")
            continue
        if key == "base_url":
            if not isinstance(value, str):
                raise ConfigValidationError(f"{source}: base_url must be a string")
            values[key] = value
        else:
            values[key] = _as_float(f"{source}: {key}", value)
    return values, warnings


def load_config_file(path: Path) -> tuple[dict[str, Any], list[str]]:
    """Read settings from a JSON config file. A missing file yields no settings."""
    if not path.exists():
        return {}, []
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigValidationError(f"Cannot read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigValidationError(f"Config file {path} must contain a JSON object")
    return _from_mapping(data, str(path))


def load_env(environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Read settings from STOREVIEW_* environment variables."""
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    if env.get(ENV_URL):
        values["base_url"] = env[ENV_URL]
    if env.get(ENV_AUTOSAVE_DELAY):
        values["autosave_delay"] = _as_float(ENV_AUTOSAVE_DELAY, env[ENV_AUTOSAVE_DELAY])
    return values


def load_config(
    path: Path | None = None,
    overrides: dict[str, Any] | None = None,
    environ: dict[str, str] | None = None,
) -> tuple[ViewerConfig, list[str]]:
    """Build the effective config.

    Precedence, lowest first: defaults, config file, environment, overrides.
    Overrides with value None are ignored.

    Returns:
        (config, warnings)

    Raises:
        ConfigValidationError: For unreadable files or invalid values.
    """
    config_path = path if path is not None else get_config_path()
    values, warnings = load_config_file(config_path)
    values.update(load_env(environ))
    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})
    config = ViewerConfig(**values).validate()
    log.debug(f"Effective config: {config}")
    return config, warnings
