"""Tests for configuration models."""

from __future__ import annotations

from pathlib import Path

import pytest

from strkit.config.models import DefaultsConfig, LoggingConfig, StrkitConfig
from strkit.core.charsets import CharWidth, whitespace


class TestDefaultsConfig:
    """Tests for DefaultsConfig validation."""

    def test_defaults(self) -> None:
        config = DefaultsConfig()
        assert config.width == "narrow"
        assert config.capacity is None
        assert config.pad_char == " "
        assert config.delimiters == whitespace()
        assert config.char_width is CharWidth.NARROW

    def test_width_is_case_insensitive(self) -> None:
        assert DefaultsConfig(width="UTF16").char_width is CharWidth.UTF16

    def test_invalid_width(self) -> None:
        with pytest.raises(ValueError, match="width"):
            DefaultsConfig(width="ascii")

    @pytest.mark.parametrize("capacity", [0, -5])
    def test_invalid_capacity(self, capacity: int) -> None:
        with pytest.raises(ValueError, match="capacity"):
            DefaultsConfig(capacity=capacity)

    @pytest.mark.parametrize("pad_char", ["", "ab"])
    def test_pad_char_must_be_single(self, pad_char: str) -> None:
        with pytest.raises(ValueError, match="pad_char"):
            DefaultsConfig(pad_char=pad_char)

    @pytest.mark.parametrize(
        ("field_name", "value"),
        [
            ("width", 3),
            ("capacity", "12"),
            ("capacity", 1.5),
            ("capacity", True),
            ("pad_char", 0),
            ("delimiters", [","]),
        ],
    )
    def test_wrong_type_raises_value_error(self, field_name: str, value) -> None:
        """Values of the wrong type from TOML raise ValueError, not TypeError."""
        with pytest.raises(ValueError, match=field_name):
            DefaultsConfig(**{field_name: value})


class TestLoggingConfig:
    """Tests for LoggingConfig validation."""

    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "warning"
        assert config.file is None
        assert config.format == "text"

    def test_invalid_level(self) -> None:
        with pytest.raises(ValueError, match="level"):
            LoggingConfig(level="verbose")

    def test_invalid_format(self) -> None:
        with pytest.raises(ValueError, match="format"):
            LoggingConfig(format="xml")

    @pytest.mark.parametrize(
        ("field_name", "value"),
        [
            ("level", 10),
            ("format", None),
            ("file", 5),
            ("include_stderr", "yes"),
            ("max_bytes", "10MB"),
            ("backup_count", False),
        ],
    )
    def test_wrong_type_raises_value_error(self, field_name: str, value) -> None:
        with pytest.raises(ValueError, match=field_name):
            LoggingConfig(**{field_name: value})


class TestLoggingOverrides:
    """Tests for LoggingConfig.with_overrides."""

    def test_no_overrides_keeps_values(self) -> None:
        config = LoggingConfig(level="info", format="json")
        assert config.with_overrides() == config

    def test_overrides_replace_values(self, tmp_path: Path) -> None:
        """Given overrides win; the rest of the config is kept."""
        config = LoggingConfig(level="info", include_stderr=True, backup_count=2)
        result = config.with_overrides(
            level="debug", file=tmp_path / "x.log", format="json"
        )
        assert result.level == "debug"
        assert result.file == tmp_path / "x.log"
        assert result.format == "json"
        assert result.include_stderr is True
        assert result.backup_count == 2
        assert config.level == "info"

    def test_invalid_override_raises(self) -> None:
        with pytest.raises(ValueError, match="level"):
            LoggingConfig().with_overrides(level="loud")


def test_strkit_config_defaults() -> None:
    config = StrkitConfig()
    assert isinstance(config.defaults, DefaultsConfig)
    assert isinstance(config.logging, LoggingConfig)
