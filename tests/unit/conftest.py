"""Shared fixtures for unit tests."""

from __future__ import annotations

import asyncio

import pytest

from basekit.rest import PreparedRequest, ResponseMeta


class StubClientInfo:
    """Fixed identification values."""

    def device_descriptor(self) -> str:
        return "TestOS 1.0 (x86_64)"

    def app_descriptor(self) -> str:
        return "test-app/9.9.9"


class FakeTransport:
    """In-memory transport recording every request it receives.

    Returns ``payload`` (or echoes the request body when ``echo`` is set)
    with ``status``, or raises ``error``. An optional ``gate`` event holds
    every send until it is set.
    """

    def __init__(
        self,
        *,
        payload: bytes = b"{}",
        status: int = 200,
        echo: bool = False,
        error: BaseException | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.payload = payload
        self.status = status
        self.echo = echo
        self.error = error
        self.gate = gate
        self.requests: list[PreparedRequest] = []

    async def send(self, request: PreparedRequest) -> tuple[bytes, ResponseMeta]:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        meta = ResponseMeta(
            status=self.status,
            reason="OK" if self.status == 200 else None,
            url=request.url,
            headers={"Content-Type": "application/json"},
        )
        body = (request.body or b"") if self.echo else self.payload
        return body, meta


@pytest.fixture
def client_info():
    return StubClientInfo()


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def echo_transport():
    return FakeTransport(echo=True)


@pytest.fixture
def make_transport():
    """Factory for FakeTransport with custom behavior."""
    return FakeTransport
