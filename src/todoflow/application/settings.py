"""
Settings

Pydantic model for todoflow configuration plus the loader that layers its
sources. Priority, lowest first:

1. Field defaults
2. Optional YAML file (``--config``)
3. Environment variables (``TODOFLOW_WORK_DIR``, ``TODOFLOW_STORAGE_KEY``,
   ``TODOFLOW_LOG_LEVEL``)
4. Explicit overrides (CLI options)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from todoflow.core.domain.errors import ConfigError

ENV_PREFIX = "TODOFLOW_"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class TodoflowSettings(BaseModel):
    """Runtime configuration for a todoflow session."""

    model_config = ConfigDict(extra="forbid")

    work_dir: Path = Field(
        Path(".todoflow"),
        description="Directory holding the snapshot file",
    )
    storage_key: str = Field(
        "todos",
        description="Snapshot name; the file is {storage_key}.json",
        pattern=r"^[A-Za-z0-9_.-]+$",
    )
    log_level: str = Field(
        "WARNING",
        description="Log level: DEBUG, INFO, WARNING, ERROR or CRITICAL",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        return LOG_LEVELS[self.log_level]


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", details={"path": str(path)})
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(
            f"Config file could not be read: {path}",
            details={"path": str(path), "error": str(exc)},
        ) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file must contain a mapping: {path}",
            details={"path": str(path)},
        )
    return data


def _read_env(environ: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for field_name in TodoflowSettings.model_fields:
        raw = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if raw:
            values[field_name] = raw
    return values


def load_settings(
    config_path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> TodoflowSettings:
    """
    Build settings from defaults, YAML, environment and overrides.

    Args:
        config_path: Optional YAML file
        overrides: Explicit values; None entries are ignored
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        Validated TodoflowSettings

    Raises:
        ConfigError: If the file cannot be read or a value is invalid
    """
    values: dict[str, Any] = {}
    source = "defaults"
    if config_path is not None:
        values.update(_read_yaml(Path(config_path)))
        source = str(config_path)
    values.update(_read_env(os.environ if environ is None else environ))
    values.update({key: value for key, value in (overrides or {}).items() if value is not None})

    try:
        return TodoflowSettings.model_validate(values)
    except ValidationError as exc:
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        raise ConfigError(
            f"Invalid configuration ({source}): "
            + "; ".join(f"{e['field']}: {e['message']}" for e in errors),
            details={"source": source, "errors": errors},
        ) from exc
