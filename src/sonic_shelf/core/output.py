"""
Logging setup using Loguru.

The blessed UI owns the terminal, so log records go to a rotating file only.
"""

from pathlib import Path

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {thread.name} | {name}:{line} | {message}"


def setup_loguru(
    log_file: Path,
    level: str = "INFO",
    max_file_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """
    Configure loguru for file-only logging.

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
        max_file_size_mb: Rotate the file once it grows past this size
        backup_count: Number of rotated files to keep
    """
    # Remove default stderr handler
    logger.remove()

    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_file,
        rotation=f"{max_file_size_mb} MB",
        retention=backup_count,
        level=level,
        format=LOG_FORMAT,
        enqueue=True,  # Engine thread and UI thread both log
    )

    logger.info(f"Loguru initialized: {log_file} (level={level})")
