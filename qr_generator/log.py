"""Structured logging with per-request correlation ids."""
import sys
import uuid
from typing import Any

import structlog
from flask import Flask, Response, g, request

REQUEST_ID_HEADER = "X-Request-ID"


def configure_logging(json_logs: bool = True, cache_loggers: bool = True) -> None:
    """Configure structlog for JSON (or console) output on stdout."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=cache_loggers,
    )


def init_request_logging(app: Flask) -> None:
    """Bind a request_id for every request and echo it back as a header."""
    logger = structlog.get_logger(__name__)

    @app.before_request
    def bind_request_id() -> None:
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        structlog.contextvars.bind_contextvars(request_id=g.request_id)

    @app.after_request
    def log_request(response: Response) -> Response:
        request_id = g.get("request_id")
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "request completed",
            method=request.method,
            path=request.path,
            status=response.status_code,
        )
        return response

    @app.teardown_request
    def clear_request_context(exc: BaseException | None) -> None:
        structlog.contextvars.clear_contextvars()
