"""
Configuration management for Sonic Shelf
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

VALID_OUTPUTS = ("auto", "mpv", "null")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class MusicConfig:
    """Configuration for music library settings."""

    library_paths: List[str] = field(
        default_factory=lambda: [str(Path.home() / "Music")]
    )
    supported_formats: List[str] = field(
        default_factory=lambda: [".mp3", ".ogg", ".flac"]
    )
    follow_symlinks: bool = True


@dataclass
class PlayerConfig:
    """Configuration for the audio output."""

    output: str = "auto"  # auto, mpv or null
    volume: float = 1.0  # 0.0 - 1.0
    volume_step: float = 0.05
    mpv_socket_path: Optional[str] = None

    def validate(self) -> None:
        """Clamp and normalize player values in place."""
        if self.output not in VALID_OUTPUTS:
            logger.warning(f"Unknown player output {self.output!r}, using 'auto'")
            self.output = "auto"
        self.volume = max(0.0, min(1.0, float(self.volume)))
        self.volume_step = max(0.0, min(1.0, float(self.volume_step)))


@dataclass
class UIConfig:
    """Configuration for user interface."""

    key_delay_ms: int = 150  # Ignore key repeats faster than this
    refresh_interval: float = 0.1  # inkey() timeout in seconds


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/sonic-shelf/sonic-shelf.log)
    )
    max_file_size_mb: int = 10
    backup_count: int = 5


@dataclass
class Config:
    """Main configuration object."""

    music: MusicConfig = field(default_factory=MusicConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "sonic-shelf"
    return Path.home() / ".config" / "sonic-shelf"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/sonic-shelf (or ~/.config/sonic-shelf)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "sonic-shelf"
    return Path.home() / ".local" / "share" / "sonic-shelf"


def get_log_file_path(config: Config) -> Path:
    """Resolve the log file from config, defaulting into the data directory."""
    if config.logging.log_file:
        return Path(config.logging.log_file).expanduser()
    return get_data_dir() / "sonic-shelf.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Sonic Shelf Configuration

[music]
# Directories to index at startup
library_paths = ["~/Music"]

# Audio file extensions to index (matched case-insensitively)
supported_formats = [".mp3", ".ogg", ".flac"]

# Follow symbolic links while scanning
follow_symlinks = true

[player]
# Audio output: "auto" (mpv if installed), "mpv", or "null" (silent)
output = "auto"

# Initial volume (0.0 - 1.0)
volume = 1.0

# Volume change per +/- key press
volume_step = 0.05

# Path for mpv socket (auto-detected if not specified)
# mpv_socket_path = "/tmp/sonic-shelf-mpv.sock"

[ui]
# Ignore repeated key presses closer together than this (milliseconds)
key_delay_ms = 150

# How long to wait for a key before redrawing (seconds)
refresh_interval = 0.1

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/sonic-shelf/sonic-shelf.log)
# log_file = "/path/to/custom/sonic-shelf.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of rotated log files to keep
backup_count = 5
""".strip()


def parse_config(toml_data: dict) -> Config:
    """Build a Config from parsed TOML data, keeping defaults for missing keys."""
    config = Config()

    if "music" in toml_data:
        music_data = toml_data["music"]
        config.music = MusicConfig(
            library_paths=[
                str(Path(p).expanduser())
                for p in music_data.get("library_paths", config.music.library_paths)
            ],
            supported_formats=[
                ext if ext.startswith(".") else f".{ext}"
                for ext in music_data.get(
                    "supported_formats", config.music.supported_formats
                )
            ],
            follow_symlinks=music_data.get(
                "follow_symlinks", config.music.follow_symlinks
            ),
        )

    if "player" in toml_data:
        player_data = toml_data["player"]
        config.player = PlayerConfig(
            output=player_data.get("output", config.player.output),
            volume=player_data.get("volume", config.player.volume),
            volume_step=player_data.get("volume_step", config.player.volume_step),
            mpv_socket_path=player_data.get("mpv_socket_path"),
        )
    config.player.validate()

    if "ui" in toml_data:
        ui_data = toml_data["ui"]
        config.ui = UIConfig(
            key_delay_ms=ui_data.get("key_delay_ms", config.ui.key_delay_ms),
            refresh_interval=ui_data.get(
                "refresh_interval", config.ui.refresh_interval
            ),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        level = str(logging_data.get("level", config.logging.level)).upper()
        if level not in VALID_LOG_LEVELS:
            logger.warning(f"Unknown log level {level!r}, using INFO")
            level = "INFO"
        config.logging = LoggingConfig(
            level=level,
            log_file=log_file,
            max_file_size_mb=logging_data.get(
                "max_file_size_mb", config.logging.max_file_size_mb
            ),
            backup_count=logging_data.get(
                "backup_count", config.logging.backup_count
            ),
        )

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Args:
        config_path: Explicit file to read. When omitted the usual lookup
            order applies and a default file is written if none exists.
    """
    config_path = config_path or get_config_path()

    if not config_path.exists():
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(create_default_config())
            logger.info(f"Created default configuration at: {config_path}")
        except OSError as e:
            logger.warning(f"Could not write default config to {config_path}: {e}")
        return Config()

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Error loading configuration from {config_path}: {e}")
        logger.warning("Using default configuration.")
        return Config()

    logger.debug(f"Loaded configuration from {config_path}")
    return parse_config(toml_data)


def ensure_directories() -> None:
    """Ensure all necessary directories exist."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_data_dir().mkdir(parents=True, exist_ok=True)
