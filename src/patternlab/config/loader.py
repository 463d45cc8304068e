# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/patternlab/config/loader.py

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import LabConfig

log = logging.getLogger("patternlab")


class ConfigError(ValueError):
    """Raised when a config file is missing, unreadable or invalid."""


def _deep_merge(base: dict, override: dict) -> dict:
    """
    Recursively merge *override* into *base* (mutates base).
    Only overwrites when the override value is non-empty.
    """
    for key, value in override.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            _deep_merge(base[key], value)
        else:
            if value not in (None, ""):
                base[key] = value
    return base


def _find_overrides_file(config_path: Path) -> Path | None:
    """
    Locate an overrides file using this priority:

    1. PATTERNLAB_OVERRIDES_FILE environment variable
    2. local.yaml in the same directory as the config
    """
    env = os.environ.get("PATTERNLAB_OVERRIDES_FILE")
    if env:
        p = Path(env)
        if p.is_file():
            return p
        log.warning("PATTERNLAB_OVERRIDES_FILE=%s does not exist, skipping", env)
        return None

    p = config_path.parent / "local.yaml"
    if p.is_file() and p.resolve() != config_path.resolve():
        return p
    return None


def _load_yaml(path: Path) -> dict:
    """Load a YAML mapping, expanding ${ENV_VAR} references."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e

    try:
        data = yaml.safe_load(os.path.expandvars(raw))
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def load_config(path: str | Path | None = None) -> LabConfig:
    """
    Load and validate a patternlab YAML config.

    With no path the built-in defaults are returned. Otherwise the file is
    read with ``${ENV_VAR}`` expansion, an overrides file (see
    ``_find_overrides_file``) is deep-merged on top, and the result is
    validated by Pydantic.
    """
    if path is None:
        return LabConfig()

    path = Path(path)
    data = _load_yaml(path)

    overrides_path = _find_overrides_file(path)
    if overrides_path:
        log.debug("Merging overrides from %s", overrides_path)
        _deep_merge(data, _load_yaml(overrides_path))

    try:
        return LabConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid config {path}: {e}") from e
