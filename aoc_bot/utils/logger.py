"""
Logging setup for the Advent Of Code leaderboard bot.

Handlers live on the ``aoc_bot`` package logger only. Module loggers,
whether obtained through setup_logger or logging.getLogger(__name__),
propagate to it and share its console and daily file output.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from aoc_bot.config import Config

PACKAGE_LOGGER = "aoc_bot"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_package_logger(log_dir: Path = Path('logs')) -> logging.Logger:
    """Attach console and file handlers to the package logger once."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers:
        return package_logger

    log_level = logging.DEBUG if Config.DEBUG else logging.INFO
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    log_dir.mkdir(exist_ok=True)
    file_handler = logging.FileHandler(
        log_dir / f'aoc_bot_{datetime.now().strftime("%Y%m%d")}.log',
        encoding='utf-8'
    )
    file_handler.setFormatter(formatter)
    package_logger.addHandler(file_handler)

    return package_logger


def setup_logger(name: str) -> logging.Logger:
    """Module logger under the configured package logger"""
    configure_package_logger()
    # Scripts run with ``python -m`` are named __main__
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
