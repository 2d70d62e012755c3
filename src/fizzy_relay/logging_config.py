"""JSON logging on stdout, shaped for Cloud Run.

Cloud Run lifts ``severity`` and ``message`` out of JSON lines, so records are
rendered by python-json-logger with the level renamed to ``severity``.
"""

import logging.config

SERVICE_NAME = "fizzy-slack-relay"

# Record attributes pulled into each line, and their names in the JSON output
JSON_FIELDS = {
    "asctime": "timestamp",
    "levelname": "severity",
    "name": "logger",
    "funcName": "funcName",
    "message": "message",
}


def build_logging_config(level: str = "INFO", service: str = SERVICE_NAME) -> dict:
    """Return a ``dictConfig`` mapping that sends JSON records to stdout.

    Args:
        level: Root logger level name, case-insensitive.
        service: Value of the static ``service`` field on every record.
    """
    renames = {attr: key for attr, key in JSON_FIELDS.items() if attr != key}
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": " ".join(f"%({attr})s" for attr in JSON_FIELDS),
                "rename_fields": renames,
                "static_fields": {"service": service},
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"level": level.upper(), "handlers": ["stdout"]},
    }


def configure_logging(level: str = "INFO") -> None:
    """Install JSON logging for the whole process. Called once from the app lifespan."""
    logging.config.dictConfig(build_logging_config(level))
