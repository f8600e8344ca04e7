"""
Configuration loader for epicboard.

Precedence, lowest to highest: defaults, epicboard.env, EPICBOARD_* environment
variables, command line flags (applied by the CLI).
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from epicboard.errors import ConfigError
from . import envparse

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("data") / "db.json"
DEFAULT_LOG_LEVEL = "WARNING"
ENV_FILE_NAME = "epicboard.env"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONFIG_KEYS = (
    "EPICBOARD_DB_PATH",
    "EPICBOARD_LOG_LEVEL",
    "EPICBOARD_LOG_FILE",
)


@dataclass
class AppConfig:
    """Runtime settings for one epicboard session."""
    db_path: Path
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None


def normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in VALID_LOG_LEVELS:
        raise ConfigError(
            f"Unknown log level '{value}' (expected one of {', '.join(VALID_LOG_LEVELS)})"
        )
    return level


def load_config(
    env_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Build AppConfig from defaults, an optional env file and the environment.

    Args:
        env_file: KEY=value file; defaults to ./epicboard.env (skipped if missing)
        environ: Environment mapping; defaults to os.environ

    Raises:
        ConfigError: If the env file is malformed or a value is invalid
    """
    environ = os.environ if environ is None else environ
    env_file = Path(ENV_FILE_NAME) if env_file is None else env_file

    values: dict[str, str] = {}
    if env_file.exists():
        file_values = envparse.load_env(env_file)
        unknown = sorted(set(file_values) - set(CONFIG_KEYS))
        if unknown:
            logger.warning(
                f"Ignoring unknown keys in {env_file}: {', '.join(unknown)}"
            )
        values.update({k: v for k, v in file_values.items() if k in CONFIG_KEYS})

    values.update({k: environ[k] for k in CONFIG_KEYS if environ.get(k)})

    log_file = values.get("EPICBOARD_LOG_FILE")
    return AppConfig(
        db_path=Path(values.get("EPICBOARD_DB_PATH", DEFAULT_DB_PATH)),
        log_level=normalize_log_level(values.get("EPICBOARD_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        log_file=Path(log_file) if log_file else None,
    )
