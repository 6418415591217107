"""Application configuration for trackit.

Configuration is a small JSON document, by default ``config.json`` in
the working directory::

    {
      "data_file": "data/trackit.json",
      "log_level": "WARNING",
      "log_file": null,
      "module_limit": 10
    }

Every key is optional and unknown keys are ignored.  The environment
variable ``TRACKIT_DATA_FILE`` overrides ``data_file``.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Final

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE: Final[Path] = Path("config.json")
DEFAULT_DATA_FILE: Final[Path] = Path("data") / "trackit.json"
DATA_FILE_ENV_VAR: Final[str] = "TRACKIT_DATA_FILE"

MODULE_LIMIT: Final[int] = 10

_LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or holds bad values."""


@dataclass(frozen=True)
class Config:
    """Resolved application settings.

    Parameters
    ----------
    data_file:
        Path of the JSON file holding the Track.
    log_level:
        Name of the console logging level.
    log_file:
        Optional path of a rotating log file.
    module_limit:
        Maximum number of modules the command layer accepts.
    """

    data_file: Path = DEFAULT_DATA_FILE
    log_level: str = "WARNING"
    log_file: Path | None = None
    module_limit: int = MODULE_LIMIT

    def __post_init__(self) -> None:
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level {self.log_level!r}")
        if self.module_limit < 1:
            raise ConfigError(f"module_limit must be positive, got {self.module_limit}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Build a ``Config`` from a parsed JSON object, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config key(s): %s", ", ".join(unknown))
        values: dict[str, Any] = {k: v for k, v in data.items() if k in known}
        for key in ("data_file", "log_file"):
            if values.get(key) is None:
                continue
            if not isinstance(values[key], str):
                raise ConfigError(f"{key} must be a path string, got {values[key]!r}")
            values[key] = Path(values[key])
        if "module_limit" in values:
            try:
                values["module_limit"] = int(values["module_limit"])
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"module_limit must be an integer: {exc}") from exc
        try:
            return cls(**values)
        except TypeError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        return {
            "data_file": str(self.data_file),
            "log_level": self.log_level,
            "log_file": str(self.log_file) if self.log_file is not None else None,
            "module_limit": self.module_limit,
        }


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from ``path`` and apply environment overrides.

    A missing file yields the defaults.  The file named by ``path`` is
    only required to exist when it was given explicitly.

    Raises
    ------
    ConfigError
        If the file exists but is not a JSON object, or holds invalid
        values, or an explicitly given file does not exist.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_FILE
    if config_path.exists():
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must hold a JSON object")
        config = Config.from_dict(data)
        logger.debug("Loaded config from %s", config_path)
    elif path is not None:
        raise ConfigError(f"Config file not found: {config_path}")
    else:
        config = Config()

    override = os.environ.get(DATA_FILE_ENV_VAR)
    if override:
        config = replace(config, data_file=Path(override))
    return config
