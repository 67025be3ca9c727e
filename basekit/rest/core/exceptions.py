"""Custom exception hierarchy.

Every failure of a client call is delivered through the outcome triple, so
these exceptions are usually inspected rather than caught. ``build_request``
is the one public entry point that raises them directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import ResponseMeta


class RestError(Exception):
    """Base exception for all client errors."""

    pass


class CompositionError(RestError):
    """Endpoint and base URL do not resolve to a valid absolute URL.

    Detected before dispatch, so no network activity has happened.
    """

    def __init__(
        self,
        message: str,
        *,
        base_url: str | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.base_url = base_url
        self.endpoint = endpoint


class EncodeError(RestError):
    """Outgoing request body cannot be serialized to JSON."""

    def __init__(self, message: str, *, body_type: str | None = None) -> None:
        super().__init__(message)
        self.body_type = body_type


class TransportError(RestError):
    """Network-level failure reported by the transport.

    The originating exception (aiohttp, DNS, TLS, timeout) is chained as
    ``__cause__``. ``response`` is set when the failure happened after
    response headers were received.
    """

    def __init__(self, message: str, *, response: ResponseMeta | None = None) -> None:
        super().__init__(message)
        self.response = response


class DecodeError(RestError):
    """Response payload does not match the requested response type."""

    def __init__(
        self,
        message: str,
        *,
        response: ResponseMeta | None = None,
        payload: bytes | None = None,
        response_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self.response = response
        self.payload = payload
        self.response_type = response_type

    @property
    def status_code(self) -> int | None:
        return self.response.status if self.response is not None else None
