"""Shared test fixtures for strkit."""

import logging
from pathlib import Path

import pytest

from strkit.config.loader import clear_config_cache
from strkit.logging.context import clear_input_context

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config loading at a file that doesn't exist yet.

    Clears every STRKIT_* variable so the developer's own environment
    never leaks into a test.
    """
    for var in (
        "STRKIT_WIDTH",
        "STRKIT_CAPACITY",
        "STRKIT_PAD_CHAR",
        "STRKIT_DELIMITERS",
        "STRKIT_LOG_LEVEL",
        "STRKIT_LOG_FORMAT",
        "STRKIT_LOG_FILE",
        "STRKIT_LOG_STDERR",
    ):
        monkeypatch.delenv(var, raising=False)

    config_path = tmp_path / "config.toml"
    monkeypatch.setenv("STRKIT_CONFIG_PATH", str(config_path))
    clear_config_cache()
    yield config_path
    clear_config_cache()
    clear_input_context()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by configure_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_config(isolated_config: Path):
    """Write TOML text to the isolated config file."""

    def _write(text: str) -> Path:
        isolated_config.write_text(text, encoding="utf-8")
        clear_config_cache()
        return isolated_config

    return _write


@pytest.fixture
def recipes_dir() -> Path:
    """Return the path to the recipe fixtures directory."""
    return FIXTURES_DIR / "recipes"
