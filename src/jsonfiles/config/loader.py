"""Config loading entry points for jsonfiles."""

from __future__ import annotations

import json
import os
import tomllib
from functools import reduce
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml
from pydantic import ValidationError

from .models import JsonFilesConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().with_name("jsonfiles.default.yaml")

ENV_OVERRIDES: Mapping[str, str] = {
    "JSONFILES_DOCUMENTS_ROOT": "storage.documents_root",
    "JSONFILES_DEFAULT_DIRECTORY": "storage.default_directory_name",
    "JSONFILES_BUNDLE_PATH": "bundle.path",
}

_PARSERS: Mapping[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".toml": tomllib.loads,
    ".json": json.loads,
}


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> JsonFilesConfig:
    """Load the jsonfiles configuration.

    Layers, lowest precedence first: packaged defaults, ``path``, ``JSONFILES_*``
    environment variables, then ``overrides`` (dotted keys allowed).
    """

    layers = (
        _read_mapping(DEFAULT_CONFIG_PATH),
        _read_mapping(path) if path else {},
        _nest_dotted(_environment_values()),
        _nest_dotted(overrides or {}),
    )
    merged = reduce(_merge_layer, layers, {})

    try:
        return JsonFilesConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid jsonfiles configuration: {exc}") from exc


def dump_example_config(dest: Path) -> None:
    """Write the packaged default configuration to ``dest``."""

    if dest.suffix.lower() == ".toml":
        raise ConfigError("TOML export is not supported yet; use a YAML destination.")

    dest.parent.mkdir(parents=True, exist_ok=True)

    defaults = _read_mapping(DEFAULT_CONFIG_PATH)
    if dest.suffix.lower() in {".json"}:
        dest.write_text(json.dumps(defaults, indent=2), encoding="utf-8")
        return
    dest.write_text(
        yaml.safe_dump(defaults, sort_keys=False),
        encoding="utf-8",
    )


def _environment_values() -> dict[str, str]:
    # Unset and empty variables leave the lower layers alone.
    values = {dotted_key: os.getenv(variable) for variable, dotted_key in ENV_OVERRIDES.items()}
    return {key: value for key, value in values.items() if value}


def _read_mapping(path: Path) -> dict[str, Any]:
    """Parse a settings file into a mapping; an empty file is an empty layer."""

    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ConfigError(f"Unsupported config format for {path}")

    try:
        payload = parser(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not parse config file {path}: {exc}") from exc

    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {path}, got {type(payload)!r}.")
    return dict(payload)


def _merge_layer(lower: Mapping[str, Any], upper: Mapping[str, Any]) -> dict[str, Any]:
    """Overlay ``upper`` on ``lower``; nested sections merge key by key."""

    merged = dict(lower)
    for key, value in upper.items():
        below = merged.get(key)
        if isinstance(below, Mapping) and isinstance(value, Mapping):
            value = _merge_layer(below, value)
        merged[key] = value
    return merged


def _nest_dotted(flat: Mapping[str, Any]) -> dict[str, Any]:
    """Expand ``{"storage.app_name": v}`` into ``{"storage": {"app_name": v}}``."""

    nested: dict[str, Any] = {}
    for key, value in flat.items():
        *sections, leaf = str(key).split(".")
        entry = reduce(lambda inner, section: {section: inner}, reversed(sections), {leaf: value})
        nested = _merge_layer(nested, entry)
    return nested


__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "ENV_OVERRIDES",
    "load_config",
    "dump_example_config",
]
