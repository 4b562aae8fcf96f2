import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from nosticky.utilities.env import Configuration

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_log_directory() -> Path | None:
    """Return the directory where log files should be written, if any."""

    path = Configuration.log_directory()
    if path is None:
        return None
    path.mkdir(parents=True, exist_ok=True)
    return path


def _sanitize_logger_name(name: str) -> str:
    """Convert a logger name to a filesystem-friendly filename."""

    sanitized = name.replace("/", "_").replace(os.sep, "_")
    sanitized = sanitized.replace("..", ".")
    return sanitized.replace(".", "_") or "root"


def _attach_handler(
    logger: logging.Logger,
    handler: logging.Handler,
    formatter: logging.Formatter,
    level: int,
) -> None:
    """Attach a handler to ``logger`` with shared configuration."""

    handler.setFormatter(formatter)
    handler.setLevel(level)
    logger.addHandler(handler)


def _configure_logger(logger: logging.Logger, log_level: str) -> None:
    level = getattr(logging, log_level, logging.INFO)
    logger.setLevel(level)

    if logger.handlers:
        # Logger already configured elsewhere; respect existing handlers.
        return

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    _attach_handler(logger, stream_handler, formatter, level)

    log_directory = _resolve_log_directory()
    if log_directory is not None:
        log_filename = log_directory / f"{_sanitize_logger_name(logger.name)}.log"
        file_handler = RotatingFileHandler(
            log_filename,
            maxBytes=Configuration.log_file_max_bytes(),
            backupCount=Configuration.log_file_backups(),
        )
        _attach_handler(logger, file_handler, formatter, level)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger with a stream handler and, when configured, a rolling file."""

    logger = logging.getLogger(name)
    _configure_logger(logger, Configuration.log_level())
    return logger
