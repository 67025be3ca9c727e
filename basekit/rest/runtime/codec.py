"""JSON encoding of request bodies and decoding of response payloads.

Bodies and response types are whatever pydantic can handle: models,
dataclasses, TypedDicts, builtin containers and scalars. Decoding validates
the payload against the caller-chosen type, so a payload that is valid JSON
but has the wrong shape is a decode failure.

Strict JSON has no spelling for NaN or infinity, so bodies carrying
non-finite floats are rejected instead of being sent as ``null``. A payload
that decodes to ``None`` (a bare ``null``) is rejected too: a delivered
outcome always holds either a value or an error.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import PydanticUserError, TypeAdapter, ValidationError

from ..core.exceptions import DecodeError, EncodeError
from ..models import EmptyRequest, EmptyResponse, ResponseMeta

T = TypeVar("T")

_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


@lru_cache(maxsize=256)
def _adapter_for(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def _has_non_finite(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(_has_non_finite(v) for v in value.values())
    if isinstance(value, (list, tuple, set, frozenset)):
        return any(_has_non_finite(v) for v in value)
    return False


def is_empty_body(body: Any) -> bool:
    """Whether ``body`` stands for "no payload"."""
    return body is None or isinstance(body, EmptyRequest)


def encode_body(body: Any) -> bytes | None:
    """Serialize a request body to UTF-8 JSON.

    Returns:
        JSON bytes, or None for an empty body

    Raises:
        EncodeError: If the value cannot be serialized, or holds NaN or
            infinity
    """
    if is_empty_body(body):
        return None
    name = _type_name(type(body))
    try:
        # Any-typed serialization dispatches on the runtime type
        payload = _ANY_ADAPTER.dump_json(body)
        # Python-mode dump keeps floats as floats; JSON mode would turn them into null
        plain = _ANY_ADAPTER.dump_python(body)
    except (TypeError, ValueError, PydanticUserError) as e:
        raise EncodeError(
            f"Cannot serialize request body of type {name}: {e}",
            body_type=name,
        ) from e
    if _has_non_finite(plain):
        raise EncodeError(
            f"Cannot serialize request body of type {name}: NaN and infinity are not valid JSON",
            body_type=name,
        )
    return payload


def decode_body(
    response_type: type[T],
    payload: bytes,
    *,
    response: ResponseMeta | None = None,
) -> T:
    """Validate a JSON payload into ``response_type``.

    Raises:
        DecodeError: If the payload is not JSON, does not match the type,
            or decodes to ``None``
    """
    if isinstance(response_type, type) and issubclass(response_type, EmptyResponse):
        if not payload.strip():
            return response_type()
    name = _type_name(response_type)
    try:
        value = _adapter_for(response_type).validate_json(payload)
    except ValidationError as e:
        raise DecodeError(
            f"Failed to decode response as {name}: {e.error_count()} validation error(s)",
            response=response,
            payload=payload,
            response_type=name,
        ) from e
    except (TypeError, PydanticUserError) as e:
        # No schema can be generated for the requested type
        raise DecodeError(
            f"Cannot decode into {name}: {e}",
            response=response,
            payload=payload,
            response_type=name,
        ) from e
    if value is None:
        raise DecodeError(
            f"Response decoded as {name} carries no value",
            response=response,
            payload=payload,
            response_type=name,
        )
    return value
