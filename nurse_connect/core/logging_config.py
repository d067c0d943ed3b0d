import logging
import logging.config
import os
from typing import Any, Dict

from nurse_connect.core.config import settings

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 10

_FORMATTERS = {
    "console": {
        "format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        "datefmt": "%H:%M:%S",
    },
    "file": {
        "format": "%(asctime)s %(levelname)s %(name)s [%(funcName)s:%(lineno)d] %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
    "access": {
        "format": "%(asctime)s %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
}


def _rotating_file(log_dir: str, name: str, level: str, formatter: str) -> Dict[str, Any]:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": formatter,
        "filename": os.path.join(log_dir, f"{name}.log"),
        "maxBytes": MAX_LOG_BYTES,
        "backupCount": LOG_BACKUPS,
        "encoding": "utf-8",
    }


def build_logging_config(log_dir: str, level: str) -> Dict[str, Any]:
    """
    dictConfig for the service.

    * ``nurse.log``: everything at ``level`` and above
    * ``error.log``: errors only
    * ``access.log``: one line per HTTP request (the ``access`` logger)
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": _FORMATTERS,
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "console",
                "stream": "ext://sys.stdout",
            },
            "app_file": _rotating_file(log_dir, "nurse", level, "file"),
            "error_file": _rotating_file(log_dir, "error", "ERROR", "file"),
            "access_file": _rotating_file(log_dir, "access", "INFO", "access"),
        },
        "root": {
            "level": level,
            "handlers": ["console", "app_file", "error_file"],
        },
        "loggers": {
            "access": {
                "level": "INFO",
                "handlers": ["console", "access_file"],
                "propagate": False,
            },
            # LoggingMiddleware already writes one line per request
            "uvicorn.access": {"level": "WARNING"},
            "sqlalchemy.engine": {"level": "WARNING"},
        },
    }


def setup_logging():
    log_dir = settings.LOG_DIR
    os.makedirs(log_dir, exist_ok=True)

    logging.config.dictConfig(build_logging_config(log_dir, settings.LOG_LEVEL.upper()))
    logging.getLogger(__name__).info(f"Logging to {os.path.abspath(log_dir)} at {settings.LOG_LEVEL}")
