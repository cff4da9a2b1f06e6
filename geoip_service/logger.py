import os
from logging import config, getLevelName, getLogger
from typing import Any

LOGGER_NAME = "geoip"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def build_log_config(level: str | int) -> dict[str, Any]:
    """Logging config sharing uvicorn's formatters so app and server lines look alike."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": '%(levelprefix)s %(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s',
                "datefmt": DEFAULT_DATEFMT,
            },
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": "%(levelprefix)s %(asctime)s - %(name)s - %(message)s",
                "datefmt": DEFAULT_DATEFMT,
            },
        },
        "handlers": {
            "access": {"class": "logging.StreamHandler", "formatter": "access", "stream": "ext://sys.stdout"},
            "default": {"class": "logging.StreamHandler", "formatter": "default", "stream": "ext://sys.stderr"},
        },
        "loggers": {
            LOGGER_NAME: {"handlers": ["default"], "level": level, "propagate": False},
            "uvicorn": {"handlers": ["default"], "level": level, "propagate": True},
            "uvicorn.access": {"handlers": ["access"], "level": level, "propagate": False},
            "uvicorn.error": {"level": level, "propagate": False},
        },
    }


LOG_LEVEL = getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
log_config = build_log_config(LOG_LEVEL)

config.dictConfig(log_config)

logger = getLogger(LOGGER_NAME)
