"""
Logging configuration for Boss Overlay.

Console output is human-oriented (optionally colored); the file log is a
semicolon-separated CSV that always records DEBUG so a bug report can include
the whole reconciliation history of a session.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..settings import AppSettings

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(name)s : %(message)s"
CONSOLE_DATE_FORMAT = "%H:%M:%S"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_MAX_BYTES = 5 * 1024 * 1024
FILE_BACKUP_COUNT = 3

PACKAGE_LOGGER = "boss_overlay"


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name with ANSI codes."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return text
        return text.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)


class CSVFormatter(logging.Formatter):
    """One quoted CSV row per record: time;level;elapsed;logger;line;message."""

    @staticmethod
    def _quote(value: str) -> str:
        return '"' + value.replace('"', '""') + '"'

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        fields = [
            self._quote(self.formatTime(record, self.datefmt)),
            record.levelname,
            self._quote(f"{int(record.relativeCreated)} ms"),
            self._quote(record.name),
            self._quote(str(record.lineno)),
            self._quote(message),
        ]
        return ";".join(fields)


def _console_handler(level_name: str, use_colors: bool) -> logging.Handler:
    formatter_class = ColoredFormatter if use_colors else logging.Formatter
    handler = logging.StreamHandler()
    handler.setLevel(logging.getLevelName(level_name.upper()))
    handler.setFormatter(formatter_class(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT))
    return handler


def _file_handler(log_file: Path) -> Optional[logging.Handler]:
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=FILE_MAX_BYTES,
            backupCount=FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        logging.getLogger(__name__).warning(f"File logging disabled, cannot open {log_file}: {e}")
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CSVFormatter(datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logging(settings: "AppSettings") -> None:
    """
    Replace root handlers with the console and file handlers from settings.

    Args:
        settings: Application settings providing the `logging` subsystem
    """
    options = settings.logging

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if options.console_logging:
        root_logger.addHandler(
            _console_handler(options.console_log_level, options.console_use_colors)
        )

    file_handler = _file_handler(options.log_file_path) if options.file_logging else None
    if file_handler is not None:
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    if options.console_logging:
        logger.debug(f"Console logging at {options.console_log_level}")
    if file_handler is not None:
        logger.debug(f"File logging at DEBUG to {options.log_file_path}")
