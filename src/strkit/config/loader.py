"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (applied by the CLI on top of get_config())
2. Environment variables (STRKIT_*)
3. Config file (~/.strkit/config.toml)
4. Default values

Environment variables:
- STRKIT_CONFIG_PATH: Path to config file (overrides default location)
- STRKIT_WIDTH: Default code-unit width (narrow, wide, utf16, utf32)
- STRKIT_CAPACITY: Default buffer capacity
- STRKIT_PAD_CHAR: Default pad character
- STRKIT_DELIMITERS: Default delimiter set
- STRKIT_LOG_LEVEL, STRKIT_LOG_FORMAT, STRKIT_LOG_FILE, STRKIT_LOG_STDERR:
  Logging overrides
"""

from __future__ import annotations

import logging
import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from strkit.config.builder import ConfigBuilder, source_from_env, source_from_file
from strkit.config.env import EnvReader
from strkit.config.models import StrkitConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".strkit"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

# Cache for loaded config files (path -> (parsed dict, mtime))
_config_cache: dict[Path, tuple[dict[str, Any], float]] = {}
_config_cache_lock = threading.Lock()


def get_default_config_path() -> Path:
    """Get the config file path, honouring STRKIT_CONFIG_PATH."""
    env_path = os.environ.get("STRKIT_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE


def clear_config_cache() -> None:
    """Forget every cached config file."""
    with _config_cache_lock:
        _config_cache.clear()


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load and parse a TOML config file.

    Results are cached per path and reloaded when the file's mtime changes.

    Args:
        path: Config file path. Defaults to get_default_config_path().

    Returns:
        Parsed dictionary. Empty if the file doesn't exist or cannot be
        parsed.
    """
    if path is None:
        path = get_default_config_path()

    try:
        mtime = path.stat().st_mtime
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except OSError as e:
        logger.warning("Cannot stat config file %s: %s", path, e)
        return {}

    with _config_cache_lock:
        cached = _config_cache.get(path)
        if cached is not None and cached[1] == mtime:
            return cached[0]

    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}

    logger.debug("Loaded config from %s", path)
    with _config_cache_lock:
        _config_cache[path] = (config, mtime)
    return config


def get_config(
    config_path: Path | None = None,
    env: EnvReader | None = None,
) -> StrkitConfig:
    """Build the effective configuration from file and environment.

    Args:
        config_path: Config file to read (None uses the default location).
        env: Environment reader (None reads os.environ).

    Returns:
        The layered StrkitConfig.

    Raises:
        ValueError: If a configured value is invalid.
    """
    builder = ConfigBuilder()
    builder.apply(source_from_file(load_config_file(config_path)))
    builder.apply(source_from_env(env if env is not None else EnvReader()))
    return builder.build()
