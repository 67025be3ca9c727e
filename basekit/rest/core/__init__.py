"""Core components."""

from .base import RestClientProtocol
from .enums import BODY_METHODS, RestMethod
from .exceptions import (
    CompositionError,
    DecodeError,
    EncodeError,
    RestError,
    TransportError,
)

__all__ = [
    "RestClientProtocol",
    "RestMethod",
    "BODY_METHODS",
    "RestError",
    "CompositionError",
    "EncodeError",
    "TransportError",
    "DecodeError",
]
