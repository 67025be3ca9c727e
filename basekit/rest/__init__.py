"""basekit.rest - Typed JSON REST client over a pluggable async transport."""

from .core import (
    BODY_METHODS,
    CompositionError,
    DecodeError,
    EncodeError,
    RestClientProtocol,
    RestError,
    RestMethod,
    TransportError,
)
from .models import (
    EmptyRequest,
    EmptyResponse,
    Outcome,
    OutcomeCallback,
    PreparedRequest,
    ResponseMeta,
)
from .runtime import (
    AiohttpTransport,
    ClientInfo,
    PlatformClientInfo,
    RestClient,
    Transport,
    TransportConfig,
)

__all__ = [
    # Client
    "RestClient",
    "RestClientProtocol",
    "RestMethod",
    "BODY_METHODS",
    # Transport
    "Transport",
    "TransportConfig",
    "AiohttpTransport",
    "ClientInfo",
    "PlatformClientInfo",
    # Models
    "EmptyRequest",
    "EmptyResponse",
    "Outcome",
    "OutcomeCallback",
    "PreparedRequest",
    "ResponseMeta",
    # Exceptions
    "RestError",
    "CompositionError",
    "EncodeError",
    "TransportError",
    "DecodeError",
]
