"""Application-wide JSON logging for the shortener Lambda

IMPORTANT: Call `initialize_logging()` in the lambda handler's `__init__.py` file
before any other logging is done.

Every log line is a single JSON object. Fields passed through `extra=` are
copied next to the base fields, and a traceback is added when the record
carries exception info:
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "ERROR",
    "logger": "s3shortener.lambdas.shorten_url.app",
    "message": "Failed to store URL record. Aborting invocation.",
    "event": "STORAGE_WRITE_FAILED",
    "errorCode": "dao:storage_write_error",
    "shortcode": "1b9d6bcd",
    "exception": "Traceback (most recent call last): ..."
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC
from typing import Any

from s3shortener.constants import ENV


# Attributes every LogRecord carries (plus `message`/`asctime` set by formatters)
RESERVED_RECORD_ATTRS = frozenset(logging.LogRecord('', logging.NOTSET, '', 0, '', (), None).__dict__) | {'message', 'asctime'}


def record_extras(record: logging.LogRecord) -> dict[str, Any]:
    """Return the `extra=` fields attached to a log record."""
    return {key: value for key, value in record.__dict__.items() if key not in RESERVED_RECORD_ATTRS}


def utc_timestamp(created: float) -> str:
    """Render a LogRecord creation time as ISO-8601 UTC with millisecond precision ('...Z')."""
    return datetime.fromtimestamp(created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class JsonFormatter(logging.Formatter):
    """Render log records as one JSON object per line, extras included"""

    def format(self, record: logging.LogRecord) -> str:
        document = {
            'timestamp': utc_timestamp(record.created),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            **record_extras(record),
        }
        if record.exc_info:
            document['exception'] = self.formatException(record.exc_info)

        # extras may hold non-JSON values (exceptions, datetimes)
        return json.dumps(document, default=str)


def logging_config(log_level: str) -> dict[str, Any]:
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'json': {'()': JsonFormatter},
        },
        'handlers': {
            'stdout': {
                'class': 'logging.StreamHandler',
                'formatter': 'json',
                'stream': 'ext://sys.stdout',
            },
        },
        'root': {'level': log_level, 'handlers': ['stdout']},
    }


def initialize_logging() -> None:
    logging.config.dictConfig(logging_config(os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()))
