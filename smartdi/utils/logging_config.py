"""Loguru sink configuration for smartdi."""

import sys
from pathlib import Path
from typing import Any, Optional, TextIO, Union

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[Union[str, Path]] = None,
    sink: Union[TextIO, Any] = None,
) -> None:
    """Replace loguru's sinks with a console sink and an optional file sink.

    Args:
        level: Minimum level for all sinks
        log_file: Rotating log file path
        sink: Console sink, stderr by default
    """
    logger.remove()

    logger.add(
        sink if sink is not None else sys.stderr,
        format=CONSOLE_FORMAT,
        level=level,
        colorize=sink is None,
        backtrace=True,
        diagnose=False,
    )

    if log_file:
        logger.add(
            Path(log_file),
            format=FILE_FORMAT,
            level=level,
            rotation="10 MB",
            retention="7 days",
        )

    logger.debug(f"Logging configured at {level}")
