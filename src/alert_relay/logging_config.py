"""Structured JSON logging configuration.

Configures Python stdlib logging to emit JSON with GCP-compatible field names,
so delivery failures and filter decisions show up as queryable records.

Usage:
    from alert_relay.logging_config import configure_logging
    configure_logging("INFO")
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "alert-relay",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging configuration.

    Call once at application startup (e.g., in FastAPI lifespan).
    ``level`` overrides the root level; unknown names fall back to INFO.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    config["root"]["level"] = level
    logging.config.dictConfig(config)
