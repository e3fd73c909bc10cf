"""
docshelf Configuration — Load and validate docshelf.yaml.

Usage:
    from docshelf.engine.config import load_config, get_config
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from docshelf.engine.errors import ConfigError

CONFIG_FILENAME = "docshelf.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Pydantic models for docshelf.yaml
# ---------------------------------------------------------------------------

class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "text"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}, got '{v}'")
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ("text", "json"):
            raise ValueError(f"format must be text/json, got '{v}'")
        return v


class DocShelfConfig(BaseModel):
    """Root model for docshelf.yaml."""
    documents_dir: Optional[str] = None
    logging: LoggingConfig = LoggingConfig()


# ---------------------------------------------------------------------------
# Config Loading Functions
# ---------------------------------------------------------------------------

_config: Optional[DocShelfConfig] = None


def _find_config_file() -> Optional[Path]:
    """Walk up from CWD looking for docshelf.yaml."""
    current = Path.cwd()
    for parent in [current, *current.parents]:
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def load_config(config_path: Optional[str] = None) -> DocShelfConfig:
    """
    Load and validate docshelf.yaml.

    Args:
        config_path: Explicit path to docshelf.yaml. If None, auto-discovers.

    Returns:
        Validated DocShelfConfig instance. Defaults if no file exists.

    Raises:
        ConfigError: The file is not valid YAML or fails validation.
    """
    global _config

    path = Path(config_path) if config_path is not None else _find_config_file()
    if path is None or not path.exists():
        _config = DocShelfConfig()
        return _config

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", config_path=str(path)) from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a mapping at top level of {path}", config_path=str(path))

    # Settings for the store itself live under a "docshelf:" key
    store_data = raw.get("docshelf") or {}
    config_data = {
        "documents_dir": store_data.get("documents_dir", raw.get("documents_dir")),
        "logging": raw.get("logging") or {},
    }

    try:
        _config = DocShelfConfig(**config_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}", config_path=str(path)) from e
    return _config


def get_config() -> DocShelfConfig:
    """Get the currently loaded config, loading if necessary."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
