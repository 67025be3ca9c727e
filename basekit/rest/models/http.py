"""Request and response metadata exchanged with the transport."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from yarl import URL

if TYPE_CHECKING:
    import aiohttp


@dataclass(frozen=True)
class PreparedRequest:
    """Fully built request, ready to hand to a transport.

    Attributes:
        method: HTTP method token ("GET", "POST", ...)
        url: Absolute request URL including the query string
        headers: Header map sent verbatim
        body: Serialized JSON payload, or None for no payload
    """

    method: str
    url: URL
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class ResponseMeta:
    """Transport-level metadata of a completed response.

    Attributes:
        status: HTTP status code
        reason: Reason phrase, if the server sent one
        url: Final URL after redirects
        headers: Response headers (last value wins for repeated names)
    """

    status: int
    reason: str | None = None
    url: URL | None = None
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True for 2xx responses."""
        return 200 <= self.status < 300

    @property
    def content_type(self) -> str | None:
        for name, value in self.headers.items():
            if name.lower() == "content-type":
                return value
        return None

    @classmethod
    def from_aiohttp(cls, response: aiohttp.ClientResponse) -> ResponseMeta:
        """Build metadata from an aiohttp response."""
        return cls(
            status=response.status,
            reason=response.reason,
            url=response.url,
            headers=dict(response.headers),
        )
