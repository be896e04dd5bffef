from loguru import logger
import sys
from pathlib import Path
from typing import Union

from stockapp.config import LOG_DIR, LOG_LEVEL, LOG_TO_FILE

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"

# file name, minimum level, rotation, retention
FILE_SINKS = (
    ("app.log", LOG_LEVEL, "500 MB", "10 days"),
    ("error.log", "ERROR", "100 MB", "30 days"),
)


class AppLogger:
    """Process-wide loguru setup, configured on first instantiation"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._configure()
        return cls._instance

    def _configure(self):
        logger.remove()
        logger.add(sys.stdout, colorize=True, format=CONSOLE_FORMAT, level=LOG_LEVEL)

        if LOG_TO_FILE:
            self._add_file_sinks(Path(LOG_DIR))

    def _add_file_sinks(self, log_dir: Path):
        log_dir.mkdir(parents=True, exist_ok=True)
        for filename, level, rotation, retention in FILE_SINKS:
            logger.add(
                log_dir / filename,
                rotation=rotation,
                retention=retention,
                compression="zip",
                format=FILE_FORMAT,
                level=level,
            )

    @staticmethod
    def get_logger(name: Union[str, None] = None):
        return logger.bind(module=name or "app")


app_logger = AppLogger()


def get_logger(name: Union[str, None] = None):
    return app_logger.get_logger(name)
