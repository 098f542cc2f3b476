"""Logging configuration."""
import logging
import sys
from typing import Optional, Union


LOGGER_NAME = "pgdesk"


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Setup application logging.

    ``level`` may be a number or a name such as ``"debug"``; unknown names
    fall back to INFO. Uvicorn's access log is lowered to WARNING because
    LoggingMiddleware already writes one line per API call.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    # Already configured (uvicorn reload imports the app twice)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s [%(levelname)s] [%(name)s] %(message)s',
        datefmt='%H:%M:%S'
    ))

    logger.addHandler(handler)
    return logger


def log_request(method: str, path: str, status_code: int, duration_ms: float):
    """Log an API call; server errors at ERROR, client errors at WARNING."""
    logger = logging.getLogger(LOGGER_NAME)
    if status_code >= 500:
        level = logging.ERROR
    elif status_code >= 400:
        level = logging.WARNING
    else:
        level = logging.INFO
    logger.log(level, f"{method} {path} {status_code} in {duration_ms:.0f}ms")


def log_info(message: str, source: str = "app"):
    """Log info message."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.info(f"[{source}] {message}")


def log_error(message: str, source: str = "app", exc: Optional[Exception] = None):
    """Log error message."""
    logger = logging.getLogger(LOGGER_NAME)
    if exc:
        logger.error(f"[{source}] {message}: {str(exc)}", exc_info=True)
    else:
        logger.error(f"[{source}] {message}")


def log_warning(message: str, source: str = "app"):
    """Log warning message."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.warning(f"[{source}] {message}")


def log_debug(message: str, source: str = "app"):
    """Log debug message."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.debug(f"[{source}] {message}")
