"""Client protocol.

Architecture:
    Callers that only issue requests should depend on RestClientProtocol
    rather than on RestClient itself, so tests and alternative clients can
    be substituted without touching calling code.

Design Decisions:
    - Structural typing (Protocol): no inheritance required of fakes
    - Verb methods return awaitable tasks: submission never waits on the
      network, completion is observed by awaiting or by the callback
    - perform_request is part of the surface so prebuilt requests can be
      dispatched through the same decode/delivery path

See Also:
    - RestClient: Default implementation over a pluggable transport
    - Transport: Protocol the client dispatches through
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from yarl import URL

    from ..models import Outcome, OutcomeCallback, PreparedRequest

T = TypeVar("T")


@runtime_checkable
class RestClientProtocol(Protocol):
    """Surface shared by REST clients."""

    @property
    def base_url(self) -> URL: ...

    def get(
        self,
        response_type: type[T],
        endpoint: str,
        params: Mapping[str, str] | None = None,
        *,
        callback: OutcomeCallback | None = None,
    ) -> asyncio.Task[Outcome[T]]: ...

    def post(
        self,
        response_type: type[T],
        endpoint: str,
        params: Mapping[str, str] | None = None,
        body: Any = None,
        *,
        callback: OutcomeCallback | None = None,
    ) -> asyncio.Task[Outcome[T]]: ...

    def put(
        self,
        response_type: type[T],
        endpoint: str,
        params: Mapping[str, str] | None = None,
        body: Any = None,
        *,
        callback: OutcomeCallback | None = None,
    ) -> asyncio.Task[Outcome[T]]: ...

    def delete(
        self,
        response_type: type[T],
        endpoint: str,
        params: Mapping[str, str] | None = None,
        *,
        callback: OutcomeCallback | None = None,
    ) -> asyncio.Task[Outcome[T]]: ...

    async def perform_request(
        self, response_type: type[T], request: PreparedRequest
    ) -> Outcome[T]: ...
