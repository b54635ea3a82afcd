"""Configuration builder with explicit layering.

This module provides ConfigBuilder for building StrkitConfig by composing
multiple configuration sources with explicit precedence handling.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from strkit.config.env import EnvReader
from strkit.config.models import DefaultsConfig, LoggingConfig, StrkitConfig


@dataclass
class ConfigSource:
    """Configuration values from a single source.

    None values indicate "not specified in this source" and will not
    override values from lower-precedence sources.
    """

    # Defaults
    width: str | None = None
    capacity: int | None = None
    pad_char: str | None = None
    delimiters: str | None = None

    # Logging config
    logging_level: str | None = None
    logging_file: Path | None = None
    logging_format: str | None = None
    logging_include_stderr: bool | None = None
    logging_max_bytes: int | None = None
    logging_backup_count: int | None = None


class ConfigBuilder:
    """Builds StrkitConfig by layering ConfigSources with precedence.

    Later sources override earlier ones (for non-None values).

    Example:
        builder = ConfigBuilder()
        builder.apply(source_from_file(file_config))
        builder.apply(source_from_env(reader))
        builder.apply(cli_source)
        config = builder.build()
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def apply(self, source: ConfigSource) -> None:
        """Apply configuration source, overriding existing values.

        Args:
            source: Configuration source to apply.
        """
        for field_obj in fields(source):
            value = getattr(source, field_obj.name)
            if value is not None:
                self._values[field_obj.name] = value

    def _get(self, key: str, default: Any) -> Any:
        return self._values.get(key, default)

    def build(self) -> StrkitConfig:
        """Build the final StrkitConfig with defaults for unset values.

        Raises:
            ValueError: If a layered value fails model validation.
        """
        base_defaults = DefaultsConfig()
        defaults = DefaultsConfig(
            width=self._get("width", base_defaults.width),
            capacity=self._get("capacity", base_defaults.capacity),
            pad_char=self._get("pad_char", base_defaults.pad_char),
            delimiters=self._get("delimiters", base_defaults.delimiters),
        )

        base_logging = LoggingConfig()
        logging_config = LoggingConfig(
            level=self._get("logging_level", base_logging.level),
            file=self._get("logging_file", base_logging.file),
            format=self._get("logging_format", base_logging.format),
            include_stderr=self._get(
                "logging_include_stderr", base_logging.include_stderr
            ),
            max_bytes=self._get("logging_max_bytes", base_logging.max_bytes),
            backup_count=self._get("logging_backup_count", base_logging.backup_count),
        )

        return StrkitConfig(defaults=defaults, logging=logging_config)


def source_from_file(file_config: dict[str, Any]) -> ConfigSource:
    """Create a ConfigSource from a parsed config file.

    Args:
        file_config: Parsed TOML with optional [defaults] and [logging]
            tables.

    Returns:
        ConfigSource with the values found in the file.

    Raises:
        ValueError: If [defaults] or [logging] is not a table.
    """
    defaults = file_config.get("defaults", {})
    logging_section = file_config.get("logging", {})
    for name, section in (("defaults", defaults), ("logging", logging_section)):
        if not isinstance(section, dict):
            raise ValueError(f"[{name}] must be a table, got {section!r}")

    log_file = logging_section.get("file")
    if isinstance(log_file, str):
        log_file = Path(log_file).expanduser() if log_file else None

    return ConfigSource(
        width=defaults.get("width"),
        capacity=defaults.get("capacity"),
        pad_char=defaults.get("pad_char"),
        delimiters=defaults.get("delimiters"),
        logging_level=logging_section.get("level"),
        logging_file=log_file,
        logging_format=logging_section.get("format"),
        logging_include_stderr=logging_section.get("include_stderr"),
        logging_max_bytes=logging_section.get("max_bytes"),
        logging_backup_count=logging_section.get("backup_count"),
    )


def source_from_env(reader: EnvReader) -> ConfigSource:
    """Create a ConfigSource from STRKIT_* environment variables.

    Args:
        reader: Environment reader to use.

    Returns:
        ConfigSource with the values set in the environment.
    """
    return ConfigSource(
        width=reader.get_str("STRKIT_WIDTH"),
        capacity=reader.get_int("STRKIT_CAPACITY"),
        pad_char=reader.get_str("STRKIT_PAD_CHAR"),
        delimiters=reader.get_str("STRKIT_DELIMITERS"),
        logging_level=reader.get_str("STRKIT_LOG_LEVEL"),
        logging_file=reader.get_path("STRKIT_LOG_FILE"),
        logging_format=reader.get_str("STRKIT_LOG_FORMAT"),
        logging_include_stderr=reader.get_bool("STRKIT_LOG_STDERR"),
    )
