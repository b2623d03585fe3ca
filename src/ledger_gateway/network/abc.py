"""Protocols for the network collaborators a Transaction drives.

Implementations live outside this package (gRPC peers, orderers, event
services). Only the contract each one must honour is described here.
"""
from typing import (
    Any,
    Callable,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    runtime_checkable,
)

from ledger_gateway.core.types import Payload, TransientMap
from ledger_gateway.endorsement.types import EndorsementResponse

from .types import BroadcastResponse, CommitRequest, EventHubScope, ProposalRequest

# on_event(transaction_id, validation_code, block_number)
TxEventCallback = Callable[[str, str, Optional[int]], None]
TxErrorCallback = Callable[[Exception], None]


@runtime_checkable
class SigningIdentity(Protocol):
    """The client identity that creates transactions."""
    mspid: str

    def serialize(self) -> bytes:
        """Returns the serialized identity, used as the transaction creator."""
        ...


@runtime_checkable
class Channel(Protocol):
    """Endorsement and commit transport for a single channel."""
    name: str

    async def send_transaction_proposal(self, request: ProposalRequest) -> Tuple[List[EndorsementResponse], Any]:
        """
        Sends the proposal to the endorsing peers.

        Returns:
            A tuple of (per-endorser responses in the order received, proposal handle).
            Transport failures may be raised directly.
        """
        ...

    async def send_transaction(self, request: CommitRequest) -> BroadcastResponse:
        """Submits the endorsed transaction to the ordering service."""
        ...


@runtime_checkable
class CommitEventHub(Protocol):
    """A peer's event service, delivering commit events for transactions."""
    peer_name: str

    async def connect(self) -> None:
        """Connects to the peer's event service. No-op if already connected."""
        ...

    def register_tx_listener(self, transaction_id: str, on_event: TxEventCallback, on_error: TxErrorCallback) -> None:
        ...

    def unregister_tx_listener(self, transaction_id: str) -> None:
        ...


@runtime_checkable
class QueryHandler(Protocol):
    """Routes read-only evaluations to a peer and returns the payload."""

    async def query_chaincode(
        self,
        chaincode_id: str,
        transaction_id: Any,
        fcn: str,
        args: List[str],
        transient_map: Optional[TransientMap] = None,
    ) -> Payload:
        ...


@runtime_checkable
class Network(Protocol):
    """The channel-level context shared by every contract on it."""

    def get_channel(self) -> Channel:
        ...

    def get_event_hubs(self, scope: EventHubScope) -> Sequence[CommitEventHub]:
        """
        Event hubs to observe for commit events.
        'msp' returns hubs for the client's own organisation, 'network' all of them.
        """
        ...

    def get_query_handler(self) -> QueryHandler:
        ...
