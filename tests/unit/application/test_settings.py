"""Unit tests for settings loading and validation."""

import logging
from pathlib import Path

import pytest

from todoflow.application.settings import TodoflowSettings, load_settings
from todoflow.core.domain.errors import ConfigError


def test_defaults():
    settings = load_settings(environ={})

    assert settings.work_dir == Path(".todoflow")
    assert settings.storage_key == "todos"
    assert settings.log_level == "WARNING"
    assert settings.log_level_number == logging.WARNING


def test_yaml_file(tmp_path):
    config = tmp_path / "todoflow.yaml"
    config.write_text("work_dir: /tmp/todos\nstorage_key: home\nlog_level: debug\n", encoding="utf-8")

    settings = load_settings(config, environ={})

    assert settings.work_dir == Path("/tmp/todos")
    assert settings.storage_key == "home"
    assert settings.log_level == "DEBUG"


def test_empty_yaml_file_uses_defaults(tmp_path):
    config = tmp_path / "empty.yaml"
    config.write_text("", encoding="utf-8")

    assert load_settings(config, environ={}) == TodoflowSettings()


def test_priority_order(tmp_path):
    config = tmp_path / "todoflow.yaml"
    config.write_text("storage_key: from-file\nwork_dir: file-dir\n", encoding="utf-8")
    environ = {"TODOFLOW_STORAGE_KEY": "from-env", "TODOFLOW_LOG_LEVEL": "error"}

    settings = load_settings(
        config,
        overrides={"work_dir": Path("cli-dir"), "storage_key": None},
        environ=environ,
    )

    assert settings.work_dir == Path("cli-dir")
    assert settings.storage_key == "from-env"
    assert settings.log_level == "ERROR"


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError) as exc_info:
        load_settings(tmp_path / "missing.yaml", environ={})

    assert exc_info.value.code == "config_error"


def test_malformed_yaml(tmp_path):
    config = tmp_path / "bad.yaml"
    config.write_text("work_dir: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(config, environ={})


def test_non_mapping_yaml(tmp_path):
    config = tmp_path / "list.yaml"
    config.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(config, environ={})


@pytest.mark.parametrize(
    ("values", "field"),
    [
        ({"storage_key": "../escape"}, "storage_key"),
        ({"log_level": "LOUD"}, "log_level"),
        ({"colour": "blue"}, "colour"),
    ],
)
def test_invalid_values(values, field):
    with pytest.raises(ConfigError) as exc_info:
        load_settings(overrides=values, environ={})

    fields = [error["field"] for error in exc_info.value.details["errors"]]
    assert field in fields
