"""Logging setup: structlog rendering for stdlib loggers."""

import logging
import sys

import structlog

SERVICE_NAME = "uma-openapi"


def _add_service(logger, method_name, event_dict):
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(log_level: str = "info", json_output: bool = False) -> None:
    """Route every stdlib logger through one structlog formatter on stderr.

    Modules log with ``logging.getLogger(__name__)`` and pass fields through
    ``extra=``; `ExtraAdder` lifts those into the rendered event.

    Args:
        log_level: Level name (debug/info/warning/error). Unknown names mean info.
        json_output: JSON lines when True, colored console output otherwise.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        _add_service,
        timestamper,
    ]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            _add_service,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if json_output:
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
        foreign_pre_chain=pre_chain,
    )

    # stderr keeps `uma-openapi export` output on stdout clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def bind_request_context(trace_id: str, path: str | None = None) -> None:
    """Attach the trace id (and request path) to log lines of the current request."""
    structlog.contextvars.clear_contextvars()
    if path:
        structlog.contextvars.bind_contextvars(trace_id=trace_id, path=path)
    else:
        structlog.contextvars.bind_contextvars(trace_id=trace_id)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
