"""Exceptions raised while submitting or evaluating a transaction."""
import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ledger_gateway.core.types import StructuredError

if TYPE_CHECKING:
    from ledger_gateway.endorsement.types import InvalidResponse

logger = logging.getLogger(__name__)

class TransactionError(Exception):
    """Base class for all transaction invocation failures."""
    def __init__(self, message: str, transaction_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.transaction_id = transaction_id

    def _details(self) -> Dict[str, Any]:
        return {}

    def to_structured_error(self) -> StructuredError:
        details: Dict[str, Any] = {"transaction_id": self.transaction_id}
        details.update(self._details())
        return {"type": self.__class__.__name__, "message": self.message, "details": details}


class InvalidArgumentError(TransactionError, TypeError):
    """Raised before any I/O when a transaction argument is not a string."""
    def __init__(self, message: str, invalid_args: Optional[Sequence[Any]] = None, transaction_id: Optional[str] = None):
        super().__init__(message, transaction_id)
        self.invalid_args = list(invalid_args or [])

    def _details(self) -> Dict[str, Any]:
        return {"invalid_args": [repr(a) for a in self.invalid_args]}


class AlreadyInvokedError(TransactionError, RuntimeError):
    """A Transaction object was submitted or evaluated more than once."""


class EndorsementError(TransactionError):
    """Endorsement responses did not allow the transaction to proceed."""


class NoResponsesError(EndorsementError):
    pass


class NoValidResponsesError(EndorsementError):
    """Every endorser returned an error. Keeps each peer's failure for diagnosis."""
    def __init__(self, message: str, invalid_responses: Optional[List["InvalidResponse"]] = None, transaction_id: Optional[str] = None):
        super().__init__(message, transaction_id)
        self.invalid_responses = list(invalid_responses or [])

    @property
    def messages(self) -> List[str]:
        return [r["message"] for r in self.invalid_responses]

    def _details(self) -> Dict[str, Any]:
        return {"invalid_responses": [dict(r) for r in self.invalid_responses]}


class CommitRejectedError(TransactionError):
    """The ordering service answered with a non-success status."""
    def __init__(self, message: str, transaction_id: Optional[str] = None, status: Any = None, info: Optional[str] = None):
        super().__init__(message, transaction_id)
        self.status = status
        self.info = info

    def _details(self) -> Dict[str, Any]:
        return {"status": self.status, "info": self.info}


class ConfirmationFailedError(TransactionError):
    """A commit event reported the transaction invalid, or no peer confirmed it."""
    def __init__(self, message: str, transaction_id: Optional[str] = None, peer: Optional[str] = None, validation_code: Optional[str] = None):
        super().__init__(message, transaction_id)
        self.peer = peer
        self.validation_code = validation_code

    def _details(self) -> Dict[str, Any]:
        return {"peer": self.peer, "validation_code": self.validation_code}


class ConfirmationTimeoutError(ConfirmationFailedError, TimeoutError):
    def __init__(self, message: str, transaction_id: Optional[str] = None, timeout_seconds: Optional[float] = None, unresponsive_peers: Optional[List[str]] = None):
        super().__init__(message, transaction_id)
        self.timeout_seconds = timeout_seconds
        self.unresponsive_peers = list(unresponsive_peers or [])

    def _details(self) -> Dict[str, Any]:
        return {"timeout_seconds": self.timeout_seconds, "unresponsive_peers": self.unresponsive_peers}
