from __future__ import annotations

from pathlib import Path

import pytest

from templaar.domain.errors import ConfigurationError
from templaar.settings import RuntimeSettings, load_settings, load_user_config


def make_settings(base: Path) -> RuntimeSettings:
    return RuntimeSettings(home_dir=base, log_dir=base / "logs")


def test_load_settings_honours_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMPLAAR_HOME", str(tmp_path / "custom"))
    settings = load_settings()
    assert settings.home_dir == tmp_path / "custom"
    assert settings.log_dir == tmp_path / "custom" / "logs"
    assert settings.config_file == tmp_path / "custom" / "config.yaml"


def test_load_settings_defaults_to_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TEMPLAAR_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert load_settings().home_dir == tmp_path / ".config" / "templaar"


def test_missing_config_is_empty(tmp_path: Path) -> None:
    assert load_user_config(make_settings(tmp_path)) == {}


def test_config_is_read_with_yaml(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("editor: nano -w\n", encoding="utf-8")
    assert load_user_config(make_settings(tmp_path)) == {"editor": "nano -w"}


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("- vim\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_user_config(make_settings(tmp_path))


def test_malformed_yaml_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_text("editor: [unterminated\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_user_config(make_settings(tmp_path))


def test_non_utf8_config_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "config.yaml").write_bytes(b"editor: \xff\xfe\n")
    with pytest.raises(ConfigurationError) as excinfo:
        load_user_config(make_settings(tmp_path))
    assert "UTF-8" in excinfo.value.reason
