"""Structured logging for the request pipeline.

Events are emitted on the ``basekit.rest.runtime.telemetry`` logger with
snake_case messages and their fields in ``extra``. The library installs no
handlers.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_dispatched(*, method: str, url: str, body_bytes: int) -> None:
    """Log a request handed to the transport.

    Args:
        method: HTTP method token
        url: Absolute request URL
        body_bytes: Size of the serialized payload (0 for no payload)
    """
    logger.debug(
        "rest_request_dispatched",
        extra={"method": method, "url": url, "body_bytes": body_bytes},
    )


def log_request_completed(
    *,
    method: str,
    url: str,
    status: int,
    latency_ms: float,
) -> None:
    """Log a response that decoded successfully.

    Args:
        method: HTTP method token
        url: Absolute request URL
        status: HTTP status code
        latency_ms: Time from dispatch to decoded value in milliseconds
    """
    logger.info(
        "rest_request_completed",
        extra={"method": method, "url": url, "status": status, "latency_ms": latency_ms},
    )


def log_request_failed(
    *,
    method: str,
    url: str | None,
    stage: str,
    error: BaseException,
    status: int | None = None,
) -> None:
    """Log a call that ended in an error outcome.

    Args:
        method: HTTP method token
        url: Request URL, or None if composition failed
        stage: Pipeline stage that failed ("build", "transport",
                "dispatch", "decode")
        error: Error delivered to the caller
        status: HTTP status code, if a response was received
    """
    level = logging.WARNING if stage == "decode" else logging.ERROR
    logger.log(
        level,
        "rest_request_failed",
        extra={
            "method": method,
            "url": url,
            "stage": stage,
            "status": status,
            "error_type": type(error).__name__,
            "error_message": str(error),
        },
    )


def log_callback_error(*, method: str, error: BaseException) -> None:
    """Log an exception raised by a caller's completion callback."""
    logger.error(
        "rest_callback_error",
        extra={"method": method, "error_type": type(error).__name__},
        exc_info=error,
    )
