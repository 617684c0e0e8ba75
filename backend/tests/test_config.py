from pathlib import Path

import pytest

from config.app_config import DEFAULT_DATABASE_URL, DEFAULT_LOG_DIR, load_app_config
from exceptions import ConfigurationError


def test_defaults_when_environment_is_empty():
    config = load_app_config({})

    assert config.database_url == DEFAULT_DATABASE_URL
    assert config.log_dir == DEFAULT_LOG_DIR
    assert config.log_level == "INFO"
    assert config.sql_echo is False
    assert config.cors_origins == ("*",)
    assert config.is_sqlite


def test_values_are_read_from_environment(tmp_path):
    config = load_app_config({
        "STAYSPHERE_DATABASE_URL": "postgresql://app@db/staysphere",
        "STAYSPHERE_LOG_DIR": str(tmp_path),
        "STAYSPHERE_LOG_LEVEL": "debug",
        "STAYSPHERE_SQL_ECHO": "yes",
        "STAYSPHERE_CORS_ORIGINS": "http://localhost:3000, https://staysphere.example ,",
    })

    assert config.database_url == "postgresql://app@db/staysphere"
    assert not config.is_sqlite
    assert config.log_dir == Path(tmp_path)
    assert config.log_level == "DEBUG"
    assert config.sql_echo is True
    assert config.cors_origins == ("http://localhost:3000", "https://staysphere.example")


def test_unknown_log_level_is_rejected():
    with pytest.raises(ConfigurationError) as exc_info:
        load_app_config({"STAYSPHERE_LOG_LEVEL": "CHATTY"})

    assert exc_info.value.details["invalid_keys"] == ["STAYSPHERE_LOG_LEVEL"]
