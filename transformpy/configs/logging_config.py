"""
Logging configuration for transformpy (configs).
"""

import logging
import logging.config
import os
import sys
from typing import Any

from loguru import logger as loguru_logger

from transformpy.configs.config import config


def setup_logging(
    log_level: str | None = None,
    log_format: str | None = None,
    enable_file_logging: bool = False,
    log_file: str | None = None,
    log_dir: str | None = None,
) -> None:
    if log_level is None:
        log_level = config.log_level
    log_level = log_level.upper()

    if log_file is None:
        log_file = config.log_file or "transformpy.log"
    log_dir = log_dir or config.log_dir

    if log_format is None:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging_dict: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": log_format, "datefmt": "%Y-%m-%d %H:%M:%S"},
            "detailed": {
                "format": (
                    "%(asctime)s - %(name)s - %(levelname)s - "
                    "%(module)s - %(funcName)s - %(lineno)d - %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "level": log_level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            # httpx logs every request line (including query strings) at INFO
            "httpx": {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
            "httpcore": {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
        "root": {"level": log_level, "handlers": ["console"]},
    }

    if enable_file_logging:
        os.makedirs(log_dir, exist_ok=True)
        logging_dict["handlers"]["file"] = {
            "level": "DEBUG",
            "class": "logging.handlers.RotatingFileHandler",
            "filename": os.path.join(log_dir, log_file),
            "maxBytes": 10485760,
            "backupCount": 5,
            "formatter": "detailed",
        }
        for logger_name in logging_dict["loggers"]:
            logging_dict["loggers"][logger_name]["handlers"].append("file")
        logging_dict["root"]["handlers"].append("file")

    logging.config.dictConfig(logging_dict)

    # Library modules log through loguru; align its sinks with the levels above
    loguru_logger.remove()
    loguru_logger.add(sys.stdout, level=log_level)
    loguru_logger.enable("transformpy")
    if enable_file_logging:
        loguru_logger.add(
            os.path.join(log_dir, log_file),
            level="DEBUG",
            rotation="10 MB",
            retention=5,
            backtrace=False,
            diagnose=False,
        )
