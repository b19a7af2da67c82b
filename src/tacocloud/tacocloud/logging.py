"""Loguru logging configuration.

Call setup_logging() once at application startup to configure sinks.
All other modules simply do `from loguru import logger` and log normally.
"""

import sys
from pathlib import Path

from loguru import logger


def setup_logging(
    level: str = "INFO",
    log_dir: str | Path | None = None,
    to_file: bool = True,
) -> None:
    """Configure loguru with a stderr sink and, optionally, a rotating file sink.

    Args:
        level: Minimum log level (default INFO).
        log_dir: Directory for tacocloud.log. Required when to_file is True.
        to_file: Whether to add the file sink.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )

    if not to_file or log_dir is None:
        return

    # Rotate daily, keep a week
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path / "tacocloud.log",
        level=level,
        rotation="1 day",
        retention="7 days",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
    )
