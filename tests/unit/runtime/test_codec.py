"""Unit tests for JSON body encoding and response decoding."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import pytest
from pydantic import BaseModel, PydanticUserError

from basekit.rest.core import DecodeError, EncodeError
from basekit.rest.models import EmptyRequest, EmptyResponse, ResponseMeta
from basekit.rest.runtime.codec import decode_body, encode_body, is_empty_body


class Order(BaseModel):
    item: str
    qty: int


class Priced(BaseModel):
    item: str
    price: float


class User(BaseModel):
    id: int
    name: str | None = None


@dataclass
class Point:
    x: int
    y: int


class TestEncodeBody:
    """Test request body serialization."""

    @pytest.mark.parametrize("body", [None, EmptyRequest()])
    def test_empty_markers_have_no_payload(self, body):
        assert is_empty_body(body)
        assert encode_body(body) is None

    def test_dict_body(self):
        payload = encode_body({"item": "A", "qty": 2})
        assert json.loads(payload) == {"item": "A", "qty": 2}

    def test_model_body(self):
        payload = encode_body(Order(item="A", qty=2))
        assert json.loads(payload) == {"item": "A", "qty": 2}

    def test_dataclass_and_list_bodies(self):
        assert json.loads(encode_body(Point(x=1, y=2))) == {"x": 1, "y": 2}
        assert json.loads(encode_body([Order(item="B", qty=1)])) == [{"item": "B", "qty": 1}]

    def test_payload_is_utf8_json(self):
        payload = encode_body({"name": "Nguyễn"})
        assert json.loads(payload.decode("utf-8")) == {"name": "Nguyễn"}

    def test_unserializable_body_raises(self):
        with pytest.raises(EncodeError) as exc_info:
            encode_body({"handle": object()})
        assert exc_info.value.body_type == "dict"
        assert exc_info.value.__cause__ is not None

    @pytest.mark.parametrize(
        "body",
        [
            {"price": float("nan")},
            {"prices": [1.0, float("inf")]},
            [float("-inf")],
            Priced(item="A", price=float("nan")),
        ],
    )
    def test_non_finite_floats_rejected(self, body):
        with pytest.raises(EncodeError) as exc_info:
            encode_body(body)
        assert "NaN and infinity" in str(exc_info.value)

    def test_finite_floats_encoded(self):
        assert json.loads(encode_body(Priced(item="A", price=9.5))) == {"item": "A", "price": 9.5}


class TestDecodeBody:
    """Test response payload validation."""

    def test_decode_model(self):
        assert decode_body(Order, b'{"item": "A", "qty": 2}') == Order(item="A", qty=2)

    def test_decode_generic_types(self):
        assert decode_body(list[Order], b'[{"item": "A", "qty": 2}]') == [Order(item="A", qty=2)]
        assert decode_body(dict[str, Any], b'{"a": [1, 2]}') == {"a": [1, 2]}

    def test_missing_required_field(self):
        """A payload without a required field is a decode failure."""
        meta = ResponseMeta(status=200)
        with pytest.raises(DecodeError) as exc_info:
            decode_body(User, b"{}", response=meta)

        error = exc_info.value
        assert error.response is meta
        assert error.payload == b"{}"
        assert error.response_type == "User"

    @pytest.mark.parametrize("payload", [b"", b"not json", b"\xff\xfe"])
    def test_invalid_json(self, payload):
        with pytest.raises(DecodeError):
            decode_body(Order, payload)

    @pytest.mark.parametrize("payload", [b"", b"  ", b"{}", b'{"ignored": true}'])
    def test_empty_response_accepts_blank_or_object(self, payload):
        assert decode_body(EmptyResponse, payload) == EmptyResponse()

    def test_empty_response_rejects_non_object(self):
        with pytest.raises(DecodeError):
            decode_body(EmptyResponse, b"[1, 2]")

    def test_type_without_schema(self):
        class Opaque:
            pass

        meta = ResponseMeta(status=200)
        with pytest.raises(DecodeError) as exc_info:
            decode_body(Opaque, b"{}", response=meta)

        error = exc_info.value
        assert error.response is meta
        assert error.response_type == "Opaque"
        assert isinstance(error.__cause__, PydanticUserError)

    @pytest.mark.parametrize("response_type", [User | None, Any, dict[str, Any] | None])
    def test_null_payload_is_decode_error(self, response_type):
        """A bare null leaves nothing to deliver, so it is reported as a failure."""
        meta = ResponseMeta(status=200)
        with pytest.raises(DecodeError) as exc_info:
            decode_body(response_type, b"null", response=meta)

        assert exc_info.value.response is meta
        assert exc_info.value.payload == b"null"
