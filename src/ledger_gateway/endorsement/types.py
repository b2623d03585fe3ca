"""Types for endorsement responses."""
from typing import Any, List, Literal, Optional, TypedDict, Union

from ledger_gateway.core.types import Payload

class ValidResponse(TypedDict):
    """A successful endorsement from one peer."""
    kind: Literal["valid"]
    peer: Optional[str]
    status: int
    payload: Optional[Payload]
    endorsement: Any # Opaque, forwarded untouched to the ordering service

class InvalidResponse(TypedDict):
    """An endorsement-level or transport-level failure from one peer."""
    kind: Literal["invalid"]
    peer: Optional[str]
    status: Optional[int]
    message: str

EndorsementResponse = Union[ValidResponse, InvalidResponse]

class ClassifiedResponses(TypedDict):
    """Endorsement responses partitioned by kind, each in the order received."""
    valid: List[ValidResponse]
    invalid: List[InvalidResponse]


def valid_response(payload: Optional[Payload] = None, peer: Optional[str] = None, status: int = 200, endorsement: Any = None) -> ValidResponse:
    return ValidResponse(kind="valid", peer=peer, status=status, payload=payload, endorsement=endorsement)

def invalid_response(message: str, peer: Optional[str] = None, status: Optional[int] = None) -> InvalidResponse:
    return InvalidResponse(kind="invalid", peer=peer, status=status, message=message)

def invalid_response_from_exception(exception: BaseException, peer: Optional[str] = None) -> InvalidResponse:
    """Wraps an exception raised while talking to one endorser. Uses `exception.status` if present."""
    status = getattr(exception, "status", None)
    return invalid_response(str(exception), peer=peer, status=status if isinstance(status, int) else None)
