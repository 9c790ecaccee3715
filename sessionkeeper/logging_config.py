"""
Logging configuration for processes embedding the session registry
"""

import logging
import logging.config
from typing import Any, Dict, Optional

from sessionkeeper.config.provider import EnvConfigProvider


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration for the sessionkeeper logger tree."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout"
            }
        },
        "loggers": {
            "sessionkeeper": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            }
        }
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the logging configuration. Level defaults to SESSIONKEEPER_LOG_LEVEL."""
    if level is None:
        level = EnvConfigProvider().get_log_level()
    logging.config.dictConfig(get_logging_config(level.upper()))
