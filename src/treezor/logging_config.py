"""Structured logging configuration using structlog."""

import logging
import sys
from collections.abc import Mapping
from contextvars import Token

import structlog

from treezor.config import settings

# loggers that report every HTTP exchange at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def _renderer(json_output: bool):
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(log_level: str | None = None, json_output: bool | None = None) -> None:
    """Send stdlib and structlog records through one ProcessorFormatter on the root logger.

    Args:
        log_level: Logging level string (debug/info/warning/error).
            Defaults to ``TREEZOR_LOG_LEVEL``.
        json_output: JSON lines when True, console output otherwise.
            Defaults to ``TREEZOR_JSON_LOGS``.
    """
    if log_level is None:
        log_level = settings.log_level
    if json_output is None:
        json_output = settings.json_logs
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        pre_chain.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output),
            ],
            foreign_pre_chain=pre_chain,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def bind_webhook_context(
    event_type: str,
    object_id: str | None = None,
    webhook_id: str | None = None,
) -> Mapping[str, Token]:
    """Bind the delivery being processed to the current context.

    Returns the tokens to hand back to ``clear_webhook_context``.
    """
    ctx = {"event_type": event_type}
    if object_id:
        ctx["object_id"] = object_id
    if webhook_id:
        ctx["webhook_id"] = webhook_id
    return structlog.contextvars.bind_contextvars(**ctx)


def clear_webhook_context(tokens: Mapping[str, Token]) -> None:
    """Restore the keys bound by ``bind_webhook_context``, leaving other context alone."""
    structlog.contextvars.reset_contextvars(**tokens)
