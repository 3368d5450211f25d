from __future__ import annotations

import json

import pytest

import settings


def test_missing_default_config_means_no_config(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv(settings.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(settings, "DEFAULT_CONFIG_PATH", str(tmp_path / "config.json"))
    assert settings.load_config() is None


def test_missing_explicit_config_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        settings.load_config(str(tmp_path / "absent.json"))


def test_env_var_selects_config(tmp_path, monkeypatch) -> None:
    path = tmp_path / "blocks.json"
    path.write_text(json.dumps({"slack": {"textChunkLimit": 100}}), encoding="utf-8")
    monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(path))
    assert settings.config_path() == str(path)
    assert settings.load_config() == {"slack": {"textChunkLimit": 100}}


def test_non_object_root_is_rejected(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        settings.load_config(str(path))


def test_logging_config_section() -> None:
    assert settings.logging_config(None) == {}
    assert settings.logging_config({"logging": "on"}) == {}
    assert settings.logging_config({"logging": {"enabled": True}}) == {"enabled": True}
