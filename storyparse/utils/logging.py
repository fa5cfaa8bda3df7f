"""Logging configuration for storyparse."""

import logging
import sys
from pathlib import Path
from datetime import datetime, timedelta
from typing import Optional

LOGGER_NAME = "storyparse"


def cleanup_old_logs(log_dir: Path, days_to_keep: int = 1) -> int:
    """
    Clean up log files older than specified days.

    Args:
        log_dir: Directory containing logs
        days_to_keep: Number of days to keep logs (default 1)

    Returns:
        Number of files deleted
    """
    if not log_dir.exists():
        return 0

    cutoff_time = datetime.now() - timedelta(days=days_to_keep)
    files_deleted = 0

    for log_file in log_dir.glob("*.log"):
        try:
            file_mtime = datetime.fromtimestamp(log_file.stat().st_mtime)
            if file_mtime < cutoff_time:
                log_file.unlink()
                files_deleted += 1
        except OSError:
            # Another process may have removed or locked it
            continue

    return files_deleted


def setup_logging(
    log_file: Optional[Path] = None,
    level: str = "INFO",
    console_output: bool = False
) -> logging.Logger:
    """
    Setup logging configuration.

    Args:
        log_file: Path to log file (defaults to a dated file in the configured log_dir)
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        console_output: Whether to also output to console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    files_deleted = 0
    if log_file is None:
        from ..config import get_settings
        settings = get_settings()
        log_dir = settings.log_dir
        log_dir.mkdir(parents=True, exist_ok=True)

        files_deleted = cleanup_old_logs(log_dir, days_to_keep=settings.log_retention_days)

        timestamp = datetime.now().strftime("%Y%m%d")
        log_file = log_dir / f"storyparse_{timestamp}.log"

    log_file.parent.mkdir(parents=True, exist_ok=True)

    # File handler with detailed format
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_format = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)

    # Console handler if requested (simpler format)
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_format = logging.Formatter('%(levelname)s: %(message)s')
        console_handler.setFormatter(console_format)
        logger.addHandler(console_handler)

    logger.debug(f"storyparse logging started - Level: {level} - Log file: {log_file}")
    if files_deleted > 0:
        logger.debug(f"Cleaned up {files_deleted} old log files")

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance. If logging hasn't been set up yet, sets it up from Settings.

    Args:
        name: Logger name below 'storyparse' (defaults to the package logger)

    Returns:
        Logger instance
    """
    logger_name = f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME
    logger = logging.getLogger(logger_name)

    root_logger = logging.getLogger(LOGGER_NAME)
    if not root_logger.handlers:
        from ..config import get_settings
        settings = get_settings()
        try:
            setup_logging(level=settings.log_level)
        except OSError:
            # Unusable log directory: logging is off, callers keep working
            root_logger.handlers.clear()
            root_logger.addHandler(logging.NullHandler())

    return logger
