"""Transform options and configuration loading (.dirimport.yml)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Tuple

import yaml

CONFIG_FILENAME = ".dirimport.yml"

DEFAULT_EXTENSIONS: Tuple[str, ...] = (".js", ".es6", ".es", ".jsx")


class ConfigError(RuntimeError):
    """Raised when transform options or the configuration file are invalid."""


@dataclass(frozen=True)
class TransformOptions:
    """Per-run settings read by the transform.

    The value is immutable so one instance can be shared by every import
    visited during a run; build a new one with :meth:`with_overrides`.
    """

    exts: Tuple[str, ...] = DEFAULT_EXTENSIONS
    snake_case: bool = False

    def with_overrides(
        self,
        *,
        exts: Optional[Sequence[str]] = None,
        snake_case: Optional[bool] = None,
    ) -> "TransformOptions":
        updated = self
        if exts:
            updated = replace(updated, exts=_normalize_extensions(exts))
        if snake_case is not None:
            updated = replace(updated, snake_case=snake_case)
        return updated


def options_from_mapping(data: Optional[Mapping[str, Any]]) -> TransformOptions:
    """Build options from a host-style mapping (``exts``, ``snakeCase``)."""
    if not data:
        return TransformOptions()
    if not isinstance(data, Mapping):
        raise ConfigError("dirimport options must be a mapping")

    options = TransformOptions()

    raw_exts = data.get("exts")
    if raw_exts is not None:
        if isinstance(raw_exts, str) or not isinstance(raw_exts, Sequence):
            raise ConfigError("'exts' must be a list of file extensions")
        if not raw_exts:
            raise ConfigError("'exts' must list at least one file extension")
        if not all(isinstance(item, str) and item.strip() for item in raw_exts):
            raise ConfigError("'exts' entries must be non-empty strings")
        options = replace(options, exts=_normalize_extensions(raw_exts))

    raw_snake = data.get("snakeCase", data.get("snake_case"))
    if raw_snake is not None:
        if not isinstance(raw_snake, bool):
            raise ConfigError("'snakeCase' must be true or false")
        options = replace(options, snake_case=raw_snake)

    return options


def load_config(config_path: Path) -> TransformOptions:
    """Load options from disk, returning defaults when no config file exists."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return TransformOptions()

    data = _read_config(config_file)
    if data is None:
        return TransformOptions()
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")
    return options_from_mapping(data)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return config_path / CONFIG_FILENAME
    return config_path


def _read_config(config_file: Path) -> Any:
    try:
        text = config_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {config_file}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_file}: {exc}") from exc


def _normalize_extensions(values: Sequence[str]) -> Tuple[str, ...]:
    normalized = []
    for value in values:
        ext = value.strip()
        if not ext.startswith("."):
            ext = f".{ext}"
        if ext not in normalized:
            normalized.append(ext)
    return tuple(normalized)


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_EXTENSIONS",
    "TransformOptions",
    "load_config",
    "options_from_mapping",
]
