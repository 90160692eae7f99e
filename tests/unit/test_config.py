from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from text_splitter.config import load_settings

ENV_NAMES = [
    "TEXT_SPLITTER_REGEX_TIMEOUT",
    "TEXT_SPLITTER_ON_ERROR",
    "TEXT_SPLITTER_LOG_LEVEL",
    "TEXT_SPLITTER_JSON_LOGS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path: Path):
    # setenv first so monkeypatch restores (removes) values load_dotenv adds
    for name in ENV_NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def test_defaults(tmp_path: Path):
    settings = load_settings(config_path=tmp_path / "missing.yaml")
    assert settings.regex_timeout == 1.0
    assert settings.on_error == "abort"
    assert settings.log_level == "WARNING"
    assert settings.json_logs is False


def test_yaml_section(tmp_path: Path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "text_splitter:\n  regex_timeout: 0.5\n  on_error: continue\nother:\n  x: 1\n"
    )
    settings = load_settings(config_path=config_file)
    assert settings.regex_timeout == 0.5
    assert settings.on_error == "continue"


def test_default_config_location(tmp_path: Path):
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'demo'\n")
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "config.yaml").write_text("text_splitter:\n  log_level: DEBUG\n")
    assert load_settings().log_level == "DEBUG"


def test_env_overrides_yaml(monkeypatch, tmp_path: Path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("text_splitter:\n  on_error: continue\n")
    monkeypatch.setenv("TEXT_SPLITTER_ON_ERROR", "abort")
    monkeypatch.setenv("TEXT_SPLITTER_JSON_LOGS", "true")
    settings = load_settings(config_path=config_file)
    assert settings.on_error == "abort"
    assert settings.json_logs is True


def test_dotenv_file(tmp_path: Path):
    env_file = tmp_path / ".env"
    env_file.write_text('TEXT_SPLITTER_REGEX_TIMEOUT="3.5"\n')
    settings = load_settings(env_file=env_file, config_path=tmp_path / "none.yaml")
    assert settings.regex_timeout == 3.5


def test_dotenv_does_not_override_environment(monkeypatch, tmp_path: Path):
    env_file = tmp_path / ".env"
    env_file.write_text("TEXT_SPLITTER_LOG_LEVEL=DEBUG\n")
    monkeypatch.setenv("TEXT_SPLITTER_LOG_LEVEL", "ERROR")
    settings = load_settings(env_file=env_file, config_path=tmp_path / "none.yaml")
    assert settings.log_level == "ERROR"


def test_timeout_can_be_disabled(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("TEXT_SPLITTER_REGEX_TIMEOUT", "none")
    settings = load_settings(config_path=tmp_path / "none.yaml")
    assert settings.regex_timeout is None


def test_unreadable_yaml_falls_back_to_defaults(tmp_path: Path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("text_splitter: [unclosed\n")
    settings = load_settings(config_path=config_file)
    assert settings.on_error == "abort"


def test_invalid_value_raises(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("TEXT_SPLITTER_ON_ERROR", "explode")
    with pytest.raises(ValidationError):
        load_settings(config_path=tmp_path / "none.yaml")
