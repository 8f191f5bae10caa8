"""Logging configuration for the application."""
import logging
import sys
from uxscore.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty below WARNING
QUIET_LOGGERS = ("httpx", "httpcore", "multipart", "python_multipart", "uvicorn.access")


def setup_logging() -> logging.Logger:
    """
    Configure the ``uxscore`` logger once and return it.

    Records go to stdout at LOG_LEVEL (DEBUG in development, INFO
    otherwise) and do not propagate to the root logger.
    """
    level = getattr(logging, settings.effective_log_level, logging.INFO)

    app_logger = logging.getLogger("uxscore")
    app_logger.setLevel(level)

    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        app_logger.addHandler(handler)

    app_logger.propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return app_logger


logger = setup_logging()

__all__ = ["logger", "setup_logging"]
