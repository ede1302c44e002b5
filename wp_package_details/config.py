"""Configuration loading for wp-package-details (.package-details.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".package-details.yml"
DEFAULT_OUTPUT_FILE = "package-details.json"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class PackageDetailsConfig:
    """Defaults applied to a run unless overridden on the command line."""

    root: Path
    date_format: Optional[str] = None
    pretty_print: bool = False
    output_file: Path = Path(DEFAULT_OUTPUT_FILE)


def load_config(config_path: Path) -> PackageDetailsConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return PackageDetailsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    return PackageDetailsConfig(
        root=root,
        date_format=_as_str(data.get("date_format")),
        pretty_print=_as_bool(data.get("pretty_print")) or False,
        output_file=_resolve_output(root, _as_str(data.get("output_file"))),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _resolve_output(root: Path, value: Optional[str]) -> Path:
    # Relative outputs are anchored at the directory holding the config file.
    if not value:
        return Path(DEFAULT_OUTPUT_FILE)
    path = Path(value).expanduser()
    return path if path.is_absolute() else root / path


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_OUTPUT_FILE",
    "PackageDetailsConfig",
    "load_config",
]
