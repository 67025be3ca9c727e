"""REST runtime: request pipeline, transport and client."""

from .client import RestClient
from .codec import decode_body, encode_body, is_empty_body
from .headers import ClientInfo, PlatformClientInfo, build_headers
from .transport import AiohttpTransport, Transport, TransportConfig
from .urls import compose_url, parse_base_url

__all__ = [
    "RestClient",
    "Transport",
    "TransportConfig",
    "AiohttpTransport",
    "ClientInfo",
    "PlatformClientInfo",
    "build_headers",
    "compose_url",
    "parse_base_url",
    "encode_body",
    "decode_body",
    "is_empty_body",
]
