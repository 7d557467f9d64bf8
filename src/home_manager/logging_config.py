"""Centralized logging configuration."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Server loggers that install their own handlers
SERVER_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "fastapi",
)


def _stream_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_logging(level: str = "INFO") -> None:
    """Configure one logging format for the service and its server.

    Args:
        level: Log level name, e.g. "INFO" or "DEBUG"
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(_stream_handler(numeric_level, formatter))

    for logger_name in SERVER_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(numeric_level)

        # Replace server handlers so records are not duplicated
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.propagate = False
        logger.addHandler(_stream_handler(numeric_level, formatter))
