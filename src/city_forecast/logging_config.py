"""Centralized logging configuration."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that install their own handlers or would otherwise print twice:
# the ASGI server and the upstream HTTP client.
SERVICE_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "fastapi",
)


def _console_handler(formatter: logging.Formatter, level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)


def configure_logging(level: int = logging.INFO) -> None:
    """
    Route the service, server and HTTP client logs through one console format.

    Args:
        level: Log level for the root logger and every logger in SERVICE_LOGGERS
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    _reset_handlers(root_logger)
    root_logger.addHandler(_console_handler(formatter, level))

    for logger_name in SERVICE_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        _reset_handlers(logger)
        logger.propagate = False
        logger.addHandler(_console_handler(formatter, level))
