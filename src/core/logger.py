import json
import logging
import logging.config
import sys

from core.config import configs


class JsonFormatter(logging.Formatter):
    """
    Formatter for logging in JSON format.
    """

    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def _build_logging_config(formatter_name: str, handler_name: str) -> dict:
    loggers = {
        # Root Logger: Catches everything not caught by specific loggers
        "root": {
            "level": configs.LOG_LEVEL,
            "handlers": [handler_name],
        },
        # Application Logger
        "app": {
            "level": configs.LOG_LEVEL,
            "handlers": [handler_name],
            "propagate": False,
        },
        # Uvicorn (FastAPI Server) Loggers
        "uvicorn": {
            "level": "INFO",
            "handlers": [handler_name],
            "propagate": False,
        },
        "uvicorn.access": {
            "level": "INFO",
            "handlers": [handler_name],
            "propagate": False,
        },
        "uvicorn.error": {
            "level": "INFO",
            "handlers": [handler_name],
            "propagate": False,
        },
    }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": FORMATTERS[formatter_name],
        "handlers": {
            handler_name: {
                "class": "logging.StreamHandler",
                "stream": sys.stdout,
                "formatter": formatter_name,
            },
        },
        "loggers": loggers,
    }


FORMATTERS = {
    # Console-friendly, readable text format.
    "default": {
        "default": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    # JSON structured, machine-parsable, suitable for aggregation (ELK, CloudWatch, etc.)
    "json": {
        "json": {
            "()": JsonFormatter,
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
    },
}

# -----------------------------------------------------------------------------
# Development Logging Configuration
# -----------------------------------------------------------------------------
DEV_LOGGING_CONFIG = _build_logging_config("default", "console")

# -----------------------------------------------------------------------------
# Production Logging Configuration
# -----------------------------------------------------------------------------
PROD_LOGGING_CONFIG = _build_logging_config("json", "console_json")
PROD_LOGGING_CONFIG["loggers"]["uvicorn.error"]["level"] = "ERROR"


def setup_logging():
    """
    Set up logging configuration based on the environment.
    """
    env = configs.ENVIRONMENT.lower()

    if env == "production":
        log_config = PROD_LOGGING_CONFIG
    else:
        log_config = DEV_LOGGING_CONFIG

    # Apply configuration
    logging.config.dictConfig(log_config)

    # Log the setup confirmation (using a logger defined in the config)
    logger = logging.getLogger("app")
    logger.info(f"Logging setup complete for {env} environment with level {configs.LOG_LEVEL}")
