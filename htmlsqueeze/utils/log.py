"""Logging helpers shared by the optimizer."""
import logging
import os

from htmlsqueeze.settings import Settings

_logger = logging.getLogger(Settings.APP_NAME)


class Log:
    """Thin static wrapper around the ``htmlsqueeze`` logger."""

    @staticmethod
    def setup() -> None:
        """Attach console (and optionally file) handlers according to ``Settings``."""
        for handler in list(_logger.handlers):
            _logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter("[%(levelname)s] %(message)s")
        handlers = [logging.StreamHandler()]
        if Settings.LOG_TO_FILE:
            folder = os.path.dirname(Settings.LOG_FILE_ROOT)
            if folder:
                os.makedirs(folder, exist_ok=True)
            handlers.append(logging.FileHandler(Settings.LOG_FILE_ROOT, encoding="utf-8"))
        for handler in handlers:
            handler.setFormatter(formatter)
            _logger.addHandler(handler)

        _logger.setLevel(Settings.LOG_LEVEL.upper())

    @staticmethod
    def debug(message: str) -> None:
        _logger.debug(message)

    @staticmethod
    def info(message: str) -> None:
        _logger.info(message)

    @staticmethod
    def warning(message: str) -> None:
        _logger.warning(message)

    @staticmethod
    def error(message: str) -> None:
        _logger.error(message)
