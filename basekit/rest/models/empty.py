"""Placeholder bodies for calls without a request or response payload."""

from pydantic import BaseModel, ConfigDict


class EmptyRequest(BaseModel):
    """Marker body: the request is sent without a payload."""

    model_config = ConfigDict(frozen=True)


class EmptyResponse(BaseModel):
    """Response type for endpoints whose payload is irrelevant.

    Accepts any JSON object (unknown keys are ignored) as well as an empty
    payload, e.g. from a 204 response.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")
