"""Endorsement response types and the ResponseClassifier."""

from .classifier import ResponseClassifier, classify_responses
from .types import (
    ClassifiedResponses,
    EndorsementResponse,
    InvalidResponse,
    ValidResponse,
    invalid_response,
    invalid_response_from_exception,
    valid_response,
)

__all__ = [
    "ResponseClassifier",
    "classify_responses",
    "ClassifiedResponses",
    "EndorsementResponse",
    "InvalidResponse",
    "ValidResponse",
    "invalid_response",
    "invalid_response_from_exception",
    "valid_response",
]
