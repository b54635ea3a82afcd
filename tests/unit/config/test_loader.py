"""Tests for config loader module."""

from __future__ import annotations

from pathlib import Path

import pytest

from strkit.config.env import EnvReader
from strkit.config.loader import (
    DEFAULT_CONFIG_FILE,
    get_config,
    get_default_config_path,
    load_config_file,
)


class TestGetDefaultConfigPath:
    """Tests for get_default_config_path function."""

    def test_returns_default_when_env_not_set(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should return default path when STRKIT_CONFIG_PATH not set."""
        monkeypatch.delenv("STRKIT_CONFIG_PATH", raising=False)
        assert get_default_config_path() == DEFAULT_CONFIG_FILE

    def test_returns_env_path_when_set(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STRKIT_CONFIG_PATH", "/custom/config.toml")
        assert get_default_config_path() == Path("/custom/config.toml")


class TestLoadConfigFile:
    """Tests for load_config_file function."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert load_config_file(tmp_path / "nope.toml") == {}

    def test_parses_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('[defaults]\nwidth = "utf16"\n', encoding="utf-8")
        assert load_config_file(path) == {"defaults": {"width": "utf16"}}

    def test_invalid_toml_is_empty(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A broken file logs a warning and is treated as empty."""
        path = tmp_path / "config.toml"
        path.write_text("[defaults\n", encoding="utf-8")
        assert load_config_file(path) == {}
        assert "Failed to load config file" in caplog.text

    def test_uses_default_path(self, write_config) -> None:
        write_config('[defaults]\npad_char = "0"\n')
        assert load_config_file() == {"defaults": {"pad_char": "0"}}


class TestGetConfig:
    """Tests for get_config layering."""

    def test_defaults_without_file_or_env(self) -> None:
        config = get_config(env=EnvReader(env={}))
        assert config.defaults.width == "narrow"
        assert config.defaults.capacity is None

    def test_file_values(self, write_config) -> None:
        write_config('[defaults]\nwidth = "utf32"\ncapacity = 12\n')
        config = get_config(env=EnvReader(env={}))
        assert config.defaults.width == "utf32"
        assert config.defaults.capacity == 12

    def test_env_overrides_file(self, write_config) -> None:
        write_config('[defaults]\nwidth = "utf32"\n')
        config = get_config(env=EnvReader(env={"STRKIT_WIDTH": "wide"}))
        assert config.defaults.width == "wide"

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "other.toml"
        path.write_text('[logging]\nlevel = "debug"\n', encoding="utf-8")
        config = get_config(config_path=path, env=EnvReader(env={}))
        assert config.logging.level == "debug"

    def test_invalid_value_raises(self, write_config) -> None:
        write_config('[defaults]\nwidth = "ebcdic"\n')
        with pytest.raises(ValueError, match="width"):
            get_config(env=EnvReader(env={}))
