"""Front-end configuration: defaults, YAML file lookup, and ``set`` toggles."""
from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .core.errors import ConfigError

ENV_VAR = "CMDASSIST_CONFIG"
STATE_DIR = Path.home() / ".cmdassist"

_SEARCH_PATHS = [
    STATE_DIR / "config.yaml",
    Path("cmdassist.yaml"),
]

# Options that ``set key=value`` may toggle.
TOGGLES = ("auto_fix", "format_check", "logging", "history", "verbose")


@dataclass(frozen=True)
class AssistantConfig:
    auto_fix: bool = True
    format_check: bool = True
    logging: bool = True
    history: bool = True
    verbose: bool = False
    log_file: Path = STATE_DIR / "cmdassist.log"
    history_file: Path = STATE_DIR / "history"
    source: Path | None = None


class ConfigLocator:
    """Finds the configuration file: explicit path, then $CMDASSIST_CONFIG, then the search paths."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._explicit_path = config_path

    def searched_locations(self) -> list[str]:
        locations: list[str] = []
        if self._explicit_path:
            locations.append(str(self._explicit_path))
        env_path = os.environ.get(ENV_VAR)
        if env_path:
            locations.append(f"${ENV_VAR} ({env_path})")
        locations.extend(str(p) for p in _SEARCH_PATHS)
        return locations

    def resolve(self) -> Path | None:
        if self._explicit_path:
            if not self._explicit_path.is_file():
                raise ConfigError(f"config file not found: {self._explicit_path}")
            return self._explicit_path

        env_path = os.environ.get(ENV_VAR)
        if env_path:
            p = Path(env_path)
            if p.is_file():
                return p

        for p in _SEARCH_PATHS:
            if p.is_file():
                return p

        return None


def load_config(config_path: Path | None = None) -> AssistantConfig:
    """Load the configuration, falling back to defaults when no file is found."""
    path = ConfigLocator(config_path).resolve()
    if path is None:
        return AssistantConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"{path}: cannot read config: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a YAML mapping at top level")

    values, errors = _coerce_values(data, base_dir=path.parent)
    if errors:
        joined = "\n  ".join(errors)
        raise ConfigError(f"{path}: config validation failed:\n  {joined}")

    return dataclasses.replace(AssistantConfig(), source=path, **values)


def apply_setting(config: AssistantConfig, option: str) -> AssistantConfig:
    """Apply ``key=true|false`` and return the updated configuration."""
    key, sep, raw = option.partition("=")
    key = key.strip()
    if not sep or key not in TOGGLES:
        raise ConfigError(f"Unknown configuration option: {option}")
    value = _normalize_bool(raw)
    if not isinstance(value, bool):
        raise ConfigError(f"Unknown configuration option: {option}")
    return dataclasses.replace(config, **{key: value})


def _coerce_values(data: dict, base_dir: Path) -> tuple[dict[str, Any], list[str]]:
    values: dict[str, Any] = {}
    errors: list[str] = []
    for key, raw in data.items():
        if key in TOGGLES:
            value = _normalize_bool(raw)
            if not isinstance(value, bool):
                errors.append(f"{key}: expected a boolean, got {raw!r}")
                continue
            values[key] = value
        elif key in ("log_file", "history_file"):
            if not isinstance(raw, str) or not raw:
                errors.append(f"{key}: expected a path string, got {raw!r}")
                continue
            p = Path(raw).expanduser()
            values[key] = p if p.is_absolute() else base_dir / p
        else:
            errors.append(f"unknown key '{key}'")
    return values, errors


def _normalize_bool(value: Any) -> bool | Any:
    """Coerce string booleans to actual bools. Pass through anything else unchanged."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    return value
