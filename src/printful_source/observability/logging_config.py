"""
Logging configuration using Loguru.

Features:
- Colored console output
- Optional JSON file log with rotation (10MB per file, 30 days retention)
- Context binding so every line carries the source name
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(verbose: bool = False, log_dir: Optional[Path] = None):
    """
    Configure Loguru logger with console and (optionally) file handlers.

    Args:
        verbose: If True, set console level to DEBUG (shows every API request)
        log_dir: Directory for the rotating JSON log; no file handler when None

    Returns:
        Logger bound with ``source="printful"``
    """
    logger.remove()

    console_level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stdout,
        level=console_level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
        colorize=True,
    )

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "printful_source.log",
            level="DEBUG",
            format="{time} {level} {message}",
            rotation="10 MB",
            retention="30 days",
            serialize=True,
            enqueue=True,
        )

    return logger.bind(source="printful")
