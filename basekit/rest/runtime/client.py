"""Typed REST client.

Architecture:
    RestClient is a thin facade over a Transport. Every verb method feeds
    the same pipeline:

    1. URL composition → resolve endpoint against the base URL, set query
    2. Header assembly → fixed JSON negotiation plus client identification
    3. Body encoding → JSON for POST/PUT, no payload for GET/DELETE
    4. Dispatch → hand the PreparedRequest to the transport
    5. Decode & deliver → validate payload into the caller's type and
       deliver one Outcome (value, response, error)

Design Decisions:
    - Verb methods are synchronous and return an asyncio.Task right away;
      the calling coroutine is never suspended on the network
    - Failures at any stage become the error slot of the Outcome; nothing
      escapes the task
    - Body encoding failures abort the call before dispatch
    - The client holds no locks: the base URL is immutable and the
      transport must tolerate concurrent sends

See Also:
    - Transport: Pluggable network backend
    - Outcome: Triple delivered to awaiters and callbacks
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from functools import partial
from time import perf_counter
from typing import Any, TypeVar

from yarl import URL

from ..core.enums import RestMethod
from ..core.exceptions import DecodeError, RestError, TransportError
from ..models import Outcome, OutcomeCallback, PreparedRequest
from .codec import decode_body, encode_body
from .headers import ClientInfo, PlatformClientInfo, build_headers
from .telemetry import (
    log_callback_error,
    log_request_completed,
    log_request_dispatched,
    log_request_failed,
)
from .transport import AiohttpTransport, Transport, TransportConfig
from .urls import compose_url, parse_base_url

T = TypeVar("T")


def _unexpected_error(method: RestMethod, stage: str, exc: Exception) -> RestError:
    error = RestError(
        f"{method.value} request failed during {stage}: {type(exc).__name__}: {exc}"
    )
    error.__cause__ = exc
    return error


class RestClient:
    """Generic JSON REST client over a pluggable transport.

    Usage::

        async with RestClient("https://api.example.com/") as client:
            user, response, error = await client.get(User, "users/42")

    Each verb also accepts ``callback=``, invoked once with
    ``(value, response, error)`` when the call completes.
    """

    def __init__(
        self,
        base_url: str | URL,
        transport: Transport | None = None,
        *,
        client_info: ClientInfo | None = None,
        config: TransportConfig | None = None,
    ) -> None:
        """Initialize client.

        Args:
            base_url: Absolute http(s) URL endpoints are resolved against
            transport: Transport to dispatch through; a default
                AiohttpTransport is created and owned when omitted
            client_info: Source of the identification header values
            config: Configuration for the default transport (ignored when a
                transport is supplied)

        Raises:
            CompositionError: If base_url is not an absolute http(s) URL
        """
        self._base_url = parse_base_url(base_url)
        self._owns_transport = transport is None
        self._transport: Transport = (
            transport if transport is not None else AiohttpTransport(config)
        )
        self._client_info = client_info or PlatformClientInfo()
        # Strong references to scheduled calls until they finish
        self._inflight: set[asyncio.Task[Any]] = set()

    @property
    def base_url(self) -> URL:
        return self._base_url

    @property
    def transport(self) -> Transport:
        return self._transport

    def build_headers(self) -> dict[str, str]:
        return build_headers(self._client_info)

    def build_request(
        self,
        method: RestMethod | str,
        endpoint: str,
        params: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> PreparedRequest:
        """Build the request for one call without dispatching it.

        GET and DELETE never carry a payload, whatever ``body`` is.

        Raises:
            ValueError: If method is not GET, POST, PUT or DELETE
            CompositionError: If the URL cannot be composed
            EncodeError: If the body cannot be serialized
        """
        try:
            method = RestMethod(method.upper())
        except ValueError:
            supported = ", ".join(m.value for m in RestMethod)
            raise ValueError(
                f"Unsupported HTTP method {method!r}; expected one of {supported}"
            ) from None
        url = compose_url(self._base_url, endpoint, params)
        payload = encode_body(body) if method.accepts_body else None
        return PreparedRequest(
            method=method.value,
            url=url,
            headers=self.build_headers(),
            body=payload,
        )

    def get(
        self,
        response_type: type[T],
        endpoint: str,
        params: Mapping[str, str] | None = None,
        *,
        callback: OutcomeCallback | None = None,
    ) -> asyncio.Task[Outcome[T]]:
        return self._submit(RestMethod.GET, response_type, endpoint, params, None, callback)

    def post(
        self,
        response_type: type[T],
        endpoint: str,
        params: Mapping[str, str] | None = None,
        body: Any = None,
        *,
        callback: OutcomeCallback | None = None,
    ) -> asyncio.Task[Outcome[T]]:
        return self._submit(RestMethod.POST, response_type, endpoint, params, body, callback)

    def put(
        self,
        response_type: type[T],
        endpoint: str,
        params: Mapping[str, str] | None = None,
        body: Any = None,
        *,
        callback: OutcomeCallback | None = None,
    ) -> asyncio.Task[Outcome[T]]:
        return self._submit(RestMethod.PUT, response_type, endpoint, params, body, callback)

    def delete(
        self,
        response_type: type[T],
        endpoint: str,
        params: Mapping[str, str] | None = None,
        *,
        callback: OutcomeCallback | None = None,
    ) -> asyncio.Task[Outcome[T]]:
        return self._submit(RestMethod.DELETE, response_type, endpoint, params, None, callback)

    async def perform_request(
        self, response_type: type[T], request: PreparedRequest
    ) -> Outcome[T]:
        """Dispatch a prepared request and decode its payload.

        Returns:
            Outcome with the decoded value, or with a TransportError or
            DecodeError and whatever response metadata is available
        """
        url = str(request.url)
        log_request_dispatched(
            method=request.method, url=url, body_bytes=len(request.body or b"")
        )
        start = perf_counter()
        try:
            payload, meta = await self._transport.send(request)
        except TransportError as e:
            log_request_failed(method=request.method, url=url, stage="transport", error=e)
            return Outcome.failure(e, e.response)
        except Exception as e:
            # Injected transports may raise their own exception types
            error = TransportError(f"{request.method} {url} failed: {type(e).__name__}: {e}")
            error.__cause__ = e
            log_request_failed(method=request.method, url=url, stage="transport", error=error)
            return Outcome.failure(error)

        try:
            value = decode_body(response_type, payload, response=meta)
        except DecodeError as e:
            log_request_failed(
                method=request.method, url=url, stage="decode", error=e, status=meta.status
            )
            return Outcome.failure(e, meta)

        log_request_completed(
            method=request.method,
            url=url,
            status=meta.status,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return Outcome.success(value, meta)

    async def close(self) -> None:
        """Wait for in-flight calls, then close the transport if owned."""
        if self._inflight:
            await asyncio.gather(*self._inflight, return_exceptions=True)
        if self._owns_transport:
            close = getattr(self._transport, "close", None)
            if close is not None:
                await close()

    async def __aenter__(self) -> RestClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()

    def _submit(
        self,
        method: RestMethod,
        response_type: type[T],
        endpoint: str,
        params: Mapping[str, str] | None,
        body: Any,
        callback: OutcomeCallback | None,
    ) -> asyncio.Task[Outcome[T]]:
        task = asyncio.get_running_loop().create_task(
            self._run(method, response_type, endpoint, params, body)
        )
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        if callback is not None:
            task.add_done_callback(partial(self._deliver, method, callback))
        return task

    async def _run(
        self,
        method: RestMethod,
        response_type: type[T],
        endpoint: str,
        params: Mapping[str, str] | None,
        body: Any,
    ) -> Outcome[T]:
        try:
            request = self.build_request(method, endpoint, params, body)
        except RestError as e:
            log_request_failed(method=method.value, url=None, stage="build", error=e)
            return Outcome.failure(e)
        except Exception as e:
            # e.g. a ClientInfo that cannot describe the platform
            error = _unexpected_error(method, "build", e)
            log_request_failed(method=method.value, url=None, stage="build", error=error)
            return Outcome.failure(error)
        try:
            return await self.perform_request(response_type, request)
        except Exception as e:
            error = _unexpected_error(method, "dispatch", e)
            log_request_failed(
                method=method.value, url=str(request.url), stage="dispatch", error=error
            )
            return Outcome.failure(error)

    @staticmethod
    def _deliver(
        method: RestMethod,
        callback: OutcomeCallback,
        task: asyncio.Task[Outcome[Any]],
    ) -> None:
        if task.cancelled():
            outcome: Outcome[Any] = Outcome.failure(
                TransportError(f"{method.value} request was cancelled before completion")
            )
        elif task.exception() is not None:
            exc = task.exception()
            outcome = Outcome.failure(
                exc if isinstance(exc, RestError) else _unexpected_error(method, "delivery", exc)
            )
        else:
            outcome = task.result()
        try:
            callback(*outcome)
        except Exception as e:
            log_callback_error(method=method.value, error=e)
