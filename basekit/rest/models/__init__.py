"""Data models for request/response plumbing.

Architecture:
    Every model here is transient: built at the start of one call and
    dropped once its outcome has been delivered. Bodies supplied by callers
    are their own types (pydantic models, dataclasses, plain JSON values);
    the models below only describe the envelope around them.

Model Categories:
    - Bodies: EmptyRequest, EmptyResponse
    - Transport: PreparedRequest, ResponseMeta
    - Delivery: Outcome, OutcomeCallback
"""

from .empty import EmptyRequest, EmptyResponse
from .http import PreparedRequest, ResponseMeta
from .outcome import Outcome, OutcomeCallback

__all__ = [
    "EmptyRequest",
    "EmptyResponse",
    "PreparedRequest",
    "ResponseMeta",
    "Outcome",
    "OutcomeCallback",
]
