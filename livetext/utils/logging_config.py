"""
Logging configuration built on loguru.

Library modules import ``logger`` from here and log freely; nothing is
written anywhere until the application calls ``setup_logging``.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from .resource_loader import get_log_dir

# Remove default handler
logger.remove()


class LoggerManager:
    """
    Owns the loguru sinks for the application.

    Console output is colorized; the main log file rotates and a separate
    error log keeps ERROR and above with tracebacks.
    """

    def __init__(self):
        self._initialized = False
        self._log_dir: Optional[Path] = None
        self._handlers: Dict[str, int] = {}

    @property
    def log_dir(self) -> Path:
        if self._log_dir is None:
            self._log_dir = get_log_dir()
        return self._log_dir

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def _add_console_handler(self, level: str) -> int:
        handler_id = logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
            level=level,
            colorize=True,
            backtrace=False,
            diagnose=False,
        )
        self._handlers["console"] = handler_id
        return handler_id

    def _add_file_handler(self, level: str) -> int:
        handler_id = logger.add(
            str(self.log_dir / "livetext.log"),
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}",
            level=level,
            rotation="5 MB",
            retention="7 days",
            encoding="utf-8",
            backtrace=True,
            diagnose=False,
            enqueue=True,  # OCR worker logs from its own thread
        )
        self._handlers["file"] = handler_id
        return handler_id

    def _add_error_handler(self) -> int:
        handler_id = logger.add(
            str(self.log_dir / "error.log"),
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}\n{exception}",
            level="ERROR",
            rotation="5 MB",
            retention="14 days",
            encoding="utf-8",
            backtrace=True,
            diagnose=False,
            enqueue=True,
        )
        self._handlers["error_file"] = handler_id
        return handler_id

    def initialize(self, console_level: str = "INFO", file_level: str = "DEBUG"):
        """
        Install console and file sinks. Safe to call more than once.

        Args:
            console_level: Minimum level for console output
            file_level: Minimum level for the rotating log file
        """
        if self._initialized:
            return

        self._add_console_handler(console_level)
        self._add_file_handler(file_level)
        self._add_error_handler()

        self._initialized = True
        logger.debug(f"Log directory: {self.log_dir}")

    def shutdown(self):
        """Remove every sink this manager installed."""
        for handler_id in self._handlers.values():
            try:
                logger.remove(handler_id)
            except ValueError:
                pass
        self._handlers.clear()
        self._initialized = False


_manager = LoggerManager()


def setup_logging(console_level: str = "INFO", file_level: str = "DEBUG") -> LoggerManager:
    """Initialize application logging and return the manager."""
    _manager.initialize(console_level=console_level, file_level=file_level)
    return _manager


__all__ = ["logger", "setup_logging", "LoggerManager"]
