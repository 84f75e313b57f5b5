"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging setup (Loguru)
- Console output (Rich)
"""

from .config import (
    Config,
    LoggingConfig,
    MusicConfig,
    PlayerConfig,
    UIConfig,
    create_default_config,
    ensure_directories,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
    parse_config,
)
from . import console
from .output import setup_loguru

__all__ = [
    # Config
    "Config",
    "LoggingConfig",
    "MusicConfig",
    "PlayerConfig",
    "UIConfig",
    "create_default_config",
    "ensure_directories",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "load_config",
    "parse_config",
    # Output
    "setup_loguru",
    # Console
    "console",
]
