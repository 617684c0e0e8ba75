"""
Application Configuration

Environment-driven settings for the StaySphere backend.

Includes:
- Database URL and SQL echo flag
- Log directory and log level
- CORS origins for the HTTP layer
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from exceptions import ConfigurationError


DATA_DIR = Path.home() / ".staysphere"

DEFAULT_DATABASE_URL = f"sqlite:///{DATA_DIR / 'staysphere.db'}"
DEFAULT_LOG_DIR = DATA_DIR / "logs"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    """Resolved application settings."""

    database_url: str
    log_dir: Path
    log_level: str
    sql_echo: bool
    cors_origins: Tuple[str, ...]

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def load_app_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Build an AppConfig from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        AppConfig instance

    Raises:
        ConfigurationError: If a value cannot be interpreted
    """
    env = os.environ if environ is None else environ

    log_level = env.get("STAYSPHERE_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level '{log_level}', expected one of {', '.join(VALID_LOG_LEVELS)}",
            invalid_keys=["STAYSPHERE_LOG_LEVEL"],
        )

    database_url = env.get("STAYSPHERE_DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL

    log_dir_value = env.get("STAYSPHERE_LOG_DIR", "").strip()
    log_dir = Path(log_dir_value).expanduser() if log_dir_value else DEFAULT_LOG_DIR

    origins = env.get("STAYSPHERE_CORS_ORIGINS", "*")
    cors_origins = tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",)

    return AppConfig(
        database_url=database_url,
        log_dir=log_dir,
        log_level=log_level,
        sql_echo=_parse_bool(env.get("STAYSPHERE_SQL_ECHO", "false")),
        cors_origins=cors_origins,
    )


APP_CONFIG = load_app_config()
