"""Outcome triple delivered once per client call."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..core.exceptions import RestError
from .http import ResponseMeta

T = TypeVar("T")

# Receives (value, response, error) exactly once per call.
OutcomeCallback = Callable[[Any, ResponseMeta | None, RestError | None], None]


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of one call: decoded value, response metadata, error.

    ``error is None`` means the payload was decoded into ``value``. Exactly
    one of ``value`` and ``error`` is set, so a caller can always tell a
    success from a failure. Unpacks as a triple::

        value, response, error = await client.get(User, "users/42")
    """

    value: T | None = None
    response: ResponseMeta | None = None
    error: RestError | None = None

    def __post_init__(self) -> None:
        if (self.error is None) == (self.value is None):
            raise ValueError("Outcome must carry exactly one of a value and an error")

    @classmethod
    def success(cls, value: T, response: ResponseMeta | None) -> Outcome[T]:
        return cls(value=value, response=response)

    @classmethod
    def failure(cls, error: RestError, response: ResponseMeta | None = None) -> Outcome[T]:
        return cls(response=response, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the decoded value or raise the delivered error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def __iter__(self) -> Iterator[Any]:
        return iter((self.value, self.response, self.error))
