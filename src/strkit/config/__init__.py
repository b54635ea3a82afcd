"""Configuration management for strkit.

Configuration is layered with this precedence:
1. CLI flags (highest priority)
2. Environment variables (STRKIT_*)
3. Config file (~/.strkit/config.toml)
4. Default values (lowest priority)
"""

from strkit.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from strkit.config.env import EnvReader
from strkit.config.loader import (
    clear_config_cache,
    get_config,
    get_default_config_path,
    load_config_file,
)
from strkit.config.models import DefaultsConfig, LoggingConfig, StrkitConfig

__all__ = [
    # Models
    "DefaultsConfig",
    "LoggingConfig",
    "StrkitConfig",
    # Loader
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    # Layering
    "EnvReader",
    "ConfigBuilder",
    "ConfigSource",
    "source_from_env",
    "source_from_file",
]
