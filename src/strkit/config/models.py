"""Configuration models for strkit.

Plain dataclasses validated in ``__post_init__``; invalid values raise
ValueError at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

from strkit.core.charsets import CharWidth, whitespace

VALID_WIDTHS = frozenset(w.value for w in CharWidth)


def _check_type(name: str, value: object, expected: type | tuple[type, ...]) -> None:
    """Raise ValueError unless value is an instance of expected.

    bool only passes where bool itself is expected.
    """
    allowed = expected if isinstance(expected, tuple) else (expected,)
    if (isinstance(value, bool) and bool not in allowed) or not isinstance(
        value, allowed
    ):
        raise ValueError(
            f"{name} has the wrong type: got {type(value).__name__} {value!r}"
        )


@dataclass
class DefaultsConfig:
    """Defaults applied by the CLI when an option is not given."""

    # Code-unit width: narrow, wide, utf16, utf32
    width: str = "narrow"

    # Buffer capacity in code units (None = unbounded)
    capacity: int | None = None

    # Character used by pad commands
    pad_char: str = " "

    # Delimiter set used by tokenize and delimiter trims
    delimiters: str = field(default_factory=whitespace)

    def __post_init__(self) -> None:
        """Validate configuration."""
        _check_type("width", self.width, str)
        _check_type("capacity", self.capacity, (int, type(None)))
        _check_type("pad_char", self.pad_char, str)
        _check_type("delimiters", self.delimiters, str)

        if self.width.lower() not in VALID_WIDTHS:
            raise ValueError(
                f"width must be one of {sorted(VALID_WIDTHS)}, got {self.width}"
            )
        if self.capacity is not None and self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        if len(self.pad_char) != 1:
            raise ValueError(
                f"pad_char must be a single character, got {self.pad_char!r}"
            )

    @property
    def char_width(self) -> CharWidth:
        return CharWidth(self.width.lower())


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # Log level: debug, info, warning, error
    level: str = "warning"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        _check_type("level", self.level, str)
        _check_type("format", self.format, str)
        _check_type("file", self.file, (Path, type(None)))
        _check_type("include_stderr", self.include_stderr, bool)
        _check_type("max_bytes", self.max_bytes, int)
        _check_type("backup_count", self.backup_count, int)

        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )

    def with_overrides(
        self,
        *,
        level: str | None = None,
        file: Path | None = None,
        format: str | None = None,
    ) -> LoggingConfig:
        """Copy of this config with every non-None override applied.

        Raises:
            ValueError: If an override is invalid.
        """
        overrides = {"level": level, "file": file, "format": format}
        return replace(
            self, **{k: v for k, v in overrides.items() if v is not None}
        )


@dataclass
class StrkitConfig:
    """Top-level strkit configuration."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
