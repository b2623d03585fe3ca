"""ResponseClassifier: partitions endorsement responses into valid and invalid."""
import logging
from typing import List, Optional, Sequence

from ledger_gateway.errors import NoResponsesError, NoValidResponsesError

from .types import (
    ClassifiedResponses,
    EndorsementResponse,
    InvalidResponse,
    ValidResponse,
    invalid_response,
)

logger = logging.getLogger(__name__)

class ResponseClassifier:
    """
    Splits the raw responses of one endorsement round.

    No client-side verification of signatures or result consistency is done
    here. Peers and the ordering service validate endorsements anyway, so any
    entry tagged "valid" is accepted as is.
    """

    def __init__(self, transaction_id: Optional[str] = None):
        self._transaction_id = transaction_id

    def classify(self, responses: Sequence[EndorsementResponse]) -> ClassifiedResponses:
        """
        Args:
            responses: Per-endorser responses, in the order received.
        Returns:
            ClassifiedResponses with `valid` and `invalid` in input order.
        Raises:
            NoResponsesError: If `responses` is empty.
            NoValidResponsesError: If no endorser returned a valid response.
        """
        if not responses:
            msg = "No results were returned from the request"
            logger.error(f"classify: {msg}")
            raise NoResponsesError(msg, transaction_id=self._transaction_id)

        valid: List[ValidResponse] = []
        invalid: List[InvalidResponse] = []

        for response in responses:
            kind = response.get("kind") if isinstance(response, dict) else None
            if kind == "valid":
                logger.debug(f"classify: valid response from peer {response.get('peer')!r}")
                valid.append(response) # type: ignore[arg-type]
            elif kind == "invalid":
                logger.warning(f"classify: error response from peer {response.get('peer')!r}: {response.get('message')}")
                invalid.append(response) # type: ignore[arg-type]
            else:
                msg = f"Unrecognised endorsement response: {response!r}"
                logger.warning(f"classify: {msg}")
                invalid.append(invalid_response(msg))

        if not valid:
            lines = [f"No valid responses from any peers. {len(invalid)} peer error responses:"]
            lines.extend(r["message"] for r in invalid)
            msg = "\n    ".join(lines)
            logger.error(f"classify: {msg}")
            raise NoValidResponsesError(msg, invalid_responses=invalid, transaction_id=self._transaction_id)

        return ClassifiedResponses(valid=valid, invalid=invalid)


def classify_responses(responses: Sequence[EndorsementResponse], transaction_id: Optional[str] = None) -> ClassifiedResponses:
    return ResponseClassifier(transaction_id).classify(responses)
