import logging
import os
import sys

from pythonjsonlogger import jsonlogger

DEFAULT_SERVICE_NAME = "speech-recap"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
_RENAMED_FIELDS = {"asctime": "timestamp", "levelname": "level"}
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def build_formatter(service_name: str = DEFAULT_SERVICE_NAME) -> jsonlogger.JsonFormatter:
    """JSON formatter that stamps every record with the emitting service."""
    return jsonlogger.JsonFormatter(
        _LOG_FORMAT,
        rename_fields=_RENAMED_FIELDS,
        static_fields={"service": service_name},
    )


def setup_logging(service_name: str | None = None, level: str | None = None):
    """
    Configures structured JSON logging for the service.

    Every record becomes one JSON object on stdout carrying ``timestamp``,
    ``level``, logger name, message and ``service``, plus the ddtrace
    ``trace_id`` and ``span_id`` when a span is active. Fields passed through
    ``extra`` land in the same object. Uvicorn's loggers share the handler.

    Args:
        service_name: Value of the ``service`` field. Defaults to the
            ``SERVICE_NAME`` env var, then ``speech-recap``.
        level: Level name. Defaults to the ``LOG_LEVEL`` env var, then INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    service_name = service_name or os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME)
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(build_formatter(service_name))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [stream_handler]

    for logger_name in _UVICORN_LOGGERS:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [stream_handler]
        u_logger.propagate = False

    return root_logger
