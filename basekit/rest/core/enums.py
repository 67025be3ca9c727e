"""HTTP method enumeration."""

from __future__ import annotations

from enum import Enum


class RestMethod(str, Enum):
    """HTTP verbs supported by the REST client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def accepts_body(self) -> bool:
        """Whether a caller-supplied body is sent for this verb."""
        return self in BODY_METHODS


BODY_METHODS = frozenset({RestMethod.POST, RestMethod.PUT})
