# tests/test_config.py

from __future__ import annotations

import pytest

from person_match import config as config_module
from person_match.core.exceptions import ConfigError
from person_match.matching import DEFAULT_SETTINGS, MatchSettings


@pytest.fixture(autouse=True)
def _fresh_config():
    config_module.reset_config()
    yield
    config_module.reset_config()


def test_project_config_matches_built_in_defaults() -> None:
    cfg = config_module.load_config()
    assert MatchSettings.from_config(cfg.matching) == DEFAULT_SETTINGS


def test_load_config_from_explicit_path(tmp_path) -> None:
    path = tmp_path / "custom.yml"
    path.write_text("matching:\n  token_limit: 0.8\ndebug: true\n", encoding="utf-8")

    cfg = config_module.load_config(path)
    assert cfg.debug is True
    assert MatchSettings.from_config(cfg.matching).token_limit == 0.8


def test_explicit_missing_path_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        config_module.load_config(tmp_path / "missing.yml")


def test_env_var_overrides_path(tmp_path, monkeypatch) -> None:
    path = tmp_path / "env.yml"
    path.write_text("evaluation:\n  workers: 4\n", encoding="utf-8")
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(path))

    assert config_module.get_config().evaluation["workers"] == 4


def test_env_var_pointing_nowhere_raises(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(tmp_path / "nope.yml"))
    with pytest.raises(FileNotFoundError):
        config_module.get_config()


def test_empty_file_gives_defaults(tmp_path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    cfg = config_module.load_config(path)
    assert cfg.matching == {}
    assert cfg.debug is False


def test_settings_from_config_coerces_numbers() -> None:
    settings = MatchSettings.from_config({"smart_limit": "0.9", "max_splits": 3})
    assert settings.smart_limit == 0.9
    assert settings.max_splits == 3


def test_settings_reject_unknown_keys() -> None:
    with pytest.raises(ConfigError):
        MatchSettings.from_config({"token_limt": 0.8})


def test_settings_reject_bad_values() -> None:
    with pytest.raises(ConfigError):
        MatchSettings.from_config({"token_limit": "high"})
    with pytest.raises(ConfigError):
        MatchSettings.from_config({"thorough_fallback": "yes"})
