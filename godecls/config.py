"""Configuration loading for godecls (.godecls.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Sequence

import yaml

from .logging import LOG_FORMATS

CONFIG_FILENAME = ".godecls.yml"
DEFAULT_EXTENSION = ".go"


class ConfigError(RuntimeError):
    """Raised when the configuration file or options are invalid."""


@dataclass
class ScanConfig:
    """Settings for one scan, built once at startup and passed down explicitly."""

    root: Path
    extension: str = DEFAULT_EXTENSION
    exclude_paths: List[str] = field(default_factory=list)
    log_format: str = "text"
    verbosity: int = 0


def load_config(root: Path | str, config_path: Path | str | None = None) -> ScanConfig:
    """Load settings from ``config_path`` or from ``.godecls.yml`` under ``root``.

    A missing implicit config file yields the defaults. An explicit path that
    does not exist is an error.
    """
    root_path = Path(root).expanduser()
    if config_path is None:
        config_file = root_path / CONFIG_FILENAME
        if not config_file.is_file():
            return ScanConfig(root=root_path)
    else:
        config_file = Path(config_path).expanduser()
        if not config_file.is_file():
            raise ConfigError(f"Config file not found: {config_file}")

    data = _read_config(config_file)
    config = ScanConfig(root=root_path)
    return apply_overrides(
        config,
        extension=_as_extension(data.get("extension"), config_file),
        exclude_paths=_as_str_list(data.get("exclude_paths"), "exclude_paths", config_file),
        log_format=_as_log_format(data.get("log_format"), config_file),
    )


def apply_overrides(config: ScanConfig, **overrides: Any) -> ScanConfig:
    """Return a copy of ``config`` with every non-None override applied."""
    changes = {key: value for key, value in overrides.items() if value is not None}
    if "extension" in changes and not changes["extension"]:
        raise ConfigError("extension must not be empty")
    if "log_format" in changes and changes["log_format"] not in LOG_FORMATS:
        raise ConfigError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
    if "exclude_paths" in changes:
        changes["exclude_paths"] = list(changes["exclude_paths"])
    return replace(config, **changes)


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path.name} must contain a mapping at the root")
    return loaded


def _as_extension(value: Any, path: Path) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{path.name}: extension must be a non-empty string")
    return value.strip()


def _as_log_format(value: Any, path: Path) -> str | None:
    if value is None:
        return None
    if value not in LOG_FORMATS:
        raise ConfigError(f"{path.name}: log_format must be one of {', '.join(LOG_FORMATS)}")
    return value


def _as_str_list(value: Any, key: str, path: Path) -> List[str] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ConfigError(f"{path.name}: {key} must be a list of strings")
