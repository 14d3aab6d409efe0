import os
import sys
from datetime import datetime
from typing import Any

from loguru import logger
from loguru._logger import Logger

from movietracker.core.config import settings


def dynamic_formatter(record: Any) -> str:
    base = "[{time:HH:mm:ss}] [{level}] {module}:{function}:{line} - {message}"

    extras = record.get("extra", {})
    if extras:
        base += " ("
        for key, value in extras.items():
            base += f"{key}={value}, "
        base += ")\n"
    else:
        base += "\n"

    if record["exception"]:
        base += "{exception}"

    return base


def dynamic_console_formatter(record: Any) -> str:
    base = "[<green>{time:HH:mm:ss}</green>] <level>[{level}]</level> {module}:{function}:<blue>{line}</blue> - {message}\n"

    if record["exception"]:
        base += "{exception}"

    return base


def setup_logger(log_dir: str | None = None) -> Logger:
    """
    Configure the process-wide loguru logger.

    A console sink is always installed. File sinks are only added when a log
    directory is given; they rotate daily at midnight and are zipped.

    Parameters:
        log_dir (str | None): Root directory for log files, one subdirectory per day.
    Returns:
        Logger: The configured loguru logger.
    """
    logger.remove()  # Remove default handler

    if log_dir:
        today = datetime.now().strftime("%Y-%m-%d")
        log_path = os.path.join(log_dir, today)
        os.makedirs(log_path, exist_ok=True)

        if settings.DEBUG:
            logger.add(
                os.path.join(log_path, "debug.log"),
                format=dynamic_formatter,
                level="DEBUG",
                rotation="00:00",
                compression="zip",
                enqueue=True,
                backtrace=True,
                diagnose=True,
                retention="7 days",
            )

        logger.add(
            os.path.join(log_path, "error.log"),
            format=dynamic_formatter,
            level="ERROR",
            rotation="00:00",
            compression="zip",
            enqueue=True,
            backtrace=True,
            diagnose=settings.is_development,
            retention="30 days",
        )

        logger.add(
            os.path.join(log_path, "info.log"),
            format=dynamic_formatter,
            level="INFO",
            rotation="00:00",
            compression="zip",
            enqueue=True,
            backtrace=True,
            diagnose=settings.is_development,
        )

    logger.add(
        sys.stderr,
        format=dynamic_console_formatter,
        level="DEBUG" if settings.DEBUG else "INFO",
        backtrace=True,
        diagnose=settings.is_development,
        colorize=True,
    )

    return logger  # type: ignore
