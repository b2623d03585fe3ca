"""Request and response shapes exchanged with the peer/orderer transport."""
from typing import Any, List, Literal, Optional, TypedDict

from ledger_gateway.core.types import TransientMap

SUCCESS_STATUS = "SUCCESS"
VALID_CODE = "VALID"

EventHubScope = Literal["msp", "network"]

class ProposalRequest(TypedDict, total=False):
    """Endorsement proposal sent to the channel's endorsing peers."""
    chaincode_id: str
    transaction_id: Any # TransactionID; typed as Any to avoid a circular import
    fcn: str
    args: List[str]
    transient_map: TransientMap # Only present when transient data was set

class CommitRequest(TypedDict):
    """Endorsed transaction handed to the ordering service."""
    proposal_responses: List[Any] # List[ValidResponse]
    proposal: Any # Opaque proposal handle returned with the endorsements

class BroadcastResponse(TypedDict, total=False):
    """Ordering service reply. Only `status == SUCCESS_STATUS` counts as accepted."""
    status: str
    info: Optional[str]
