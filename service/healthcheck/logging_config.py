"""Structured logging configuration using structlog."""

import logging
import os
import sys

import structlog

NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.pool", "sqlalchemy.engine")


def add_service(service: str) -> structlog.types.Processor:
    """Processor stamping every event with the emitting service name."""

    def processor(logger, method_name, event_dict):
        event_dict.setdefault("service", service)
        return event_dict

    return processor


def setup_logging(
    level: str | None = None,
    fmt: str | None = None,
    service: str = "healthcheck",
) -> None:
    """Configure structlog and the stdlib root logger.

    ``level`` and ``fmt`` fall back to LOG_LEVEL (INFO) and LOG_FORMAT
    (json). ``console`` gives colored output for development. Records from
    stdlib loggers (uvicorn, SQLAlchemy) go through the same renderer.
    """
    log_level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    log_format = (fmt or os.environ.get("LOG_FORMAT", "json")).lower()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_service(service),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level, logging.INFO))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
