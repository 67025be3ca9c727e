"""Transport abstraction and the default aiohttp-backed implementation.

Architecture:
    The client never talks to the network directly. It hands a fully built
    PreparedRequest to a Transport and gets back the raw payload plus
    response metadata. Anything implementing ``send`` can be injected, which
    is how tests substitute an in-memory fake.

Design Decisions:
    - HTTP error statuses are not transport failures; only connectivity,
      DNS, TLS and timeout problems raise TransportError
    - Session is created lazily inside the running event loop and recreated
      if it was closed
    - Timeouts belong to TransportConfig, not to the client
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import aiohttp

from ..core.exceptions import TransportError
from ..models import PreparedRequest, ResponseMeta


@runtime_checkable
class Transport(Protocol):
    """Sends one prepared request and returns ``(payload, metadata)``.

    Implementations must be safe for many concurrent ``send`` calls and
    raise TransportError for network-level failures.
    """

    async def send(self, request: PreparedRequest) -> tuple[bytes, ResponseMeta]: ...


@dataclass(frozen=True)
class TransportConfig:
    """Configuration for the default transport.

    Attributes:
        timeout: Total time budget per request in seconds
        connect_timeout: Connection establishment budget in seconds (None = no
            separate limit)
        limit: Maximum simultaneous connections in the pool
    """

    timeout: float = 30.0
    connect_timeout: float | None = None
    limit: int = 100

    def __post_init__(self) -> None:
        """Validate transport configuration."""
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.connect_timeout is not None and self.connect_timeout <= 0:
            raise ValueError("connect_timeout must be positive")
        if self.limit < 0:
            raise ValueError("limit must be >= 0 (0 means unlimited)")

    def client_timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self.timeout, connect=self.connect_timeout)


class AiohttpTransport:
    """Transport backed by a pooled ``aiohttp.ClientSession``."""

    def __init__(
        self,
        config: TransportConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.config = config or TransportConfig()
        self._session = session
        # An injected session belongs to the caller
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.config.client_timeout(),
                connector=aiohttp.TCPConnector(limit=self.config.limit),
            )
            self._owns_session = True
        return self._session

    async def send(self, request: PreparedRequest) -> tuple[bytes, ResponseMeta]:
        meta: ResponseMeta | None = None
        try:
            async with self.session.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                data=request.body,
            ) as response:
                meta = ResponseMeta.from_aiohttp(response)
                payload = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(
                f"{request.method} {request.url} failed: {type(e).__name__}: {e}",
                response=meta,
            ) from e
        return payload, meta

    async def close(self) -> None:
        """Close session."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> AiohttpTransport:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
