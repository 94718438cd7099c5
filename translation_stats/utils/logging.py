"""Structured logging configuration using structlog.

Application modules log through the standard library (``logging.getLogger``);
their records are rendered by the same structlog processors as native
structlog events, so every line carries the request id and service fields.
"""

import logging
import sys
from typing import Any, Literal

import structlog

LogFormat = Literal["json", "console"]

# Chatty third-party loggers, capped at WARNING.
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "sqlalchemy.engine")


def _static_fields(fields: dict[str, Any]) -> structlog.types.Processor:
    def add_static_fields(_logger: Any, _method: str, event_dict: dict) -> dict:
        for key, value in fields.items():
            event_dict.setdefault(key, value)
        return event_dict

    return add_static_fields


def _shared_processors(fields: dict[str, Any]) -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _static_fields(fields),
    ]


def _renderer(log_format: LogFormat) -> structlog.types.Processor:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def build_formatter(log_format: LogFormat = "json", **fields: Any) -> logging.Formatter:
    """Formatter that renders stdlib records through structlog.

    *fields* (for example ``service`` and ``version``) are added to every
    line that does not set them itself.
    """
    final: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta
    ]
    if log_format == "json":
        final.append(structlog.processors.format_exc_info)
    final.append(_renderer(log_format))
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[*_shared_processors(fields), structlog.stdlib.add_logger_name],
        processors=final,
    )


def setup_logging(
    log_level: str = "INFO",
    log_format: LogFormat = "json",
    **fields: Any,
) -> None:
    """Configure structlog and route stdlib logging to stdout.

    The ``audit`` logger always logs at INFO so privileged actions are
    recorded whatever the configured level.
    """
    level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            *_shared_processors(fields),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            _renderer(log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(log_format, **fields))
    root = logging.getLogger()
    for existing in [h for h in root.handlers if getattr(h, "_translation_stats", False)]:
        root.removeHandler(existing)
    handler._translation_stats = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("audit").setLevel(logging.INFO)
