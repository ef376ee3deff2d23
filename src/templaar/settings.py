"""Runtime settings for the templaar CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from templaar import __version__
from templaar.domain.errors import ConfigurationError


@dataclass(frozen=True)
class RuntimeSettings:
    home_dir: Path
    log_dir: Path
    cli_version: str = __version__

    @property
    def config_file(self) -> Path:
        return self.home_dir / "config.yaml"


def _default_home_dir() -> Path:
    override = os.environ.get("TEMPLAAR_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "templaar"


def load_settings() -> RuntimeSettings:
    base = _default_home_dir()
    return RuntimeSettings(home_dir=base, log_dir=base / "logs")


def load_user_config(settings: RuntimeSettings) -> dict[str, Any]:
    """Read ``config.yaml`` from the global directory (empty if absent)."""

    path = settings.config_file
    if not path.exists():
        return {}
    try:
        payload = yaml.safe_load(path.read_text("utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigurationError(path, f"not valid UTF-8: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(path, f"invalid YAML: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigurationError(path, "top-level document must be a mapping")
    return payload


SETTINGS = load_settings()
