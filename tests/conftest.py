"""Pytest fixtures and fake network collaborators for ledger_gateway tests."""
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
from unittest.mock import AsyncMock

import pytest

from ledger_gateway.config.models import EventHandlerOptions, GatewayConfig
from ledger_gateway.contract import Contract
from ledger_gateway.endorsement.types import EndorsementResponse, valid_response
from ledger_gateway.network.types import SUCCESS_STATUS, BroadcastResponse


class FakeIdentity:
    def __init__(self, mspid: str = "Org1MSP", certificate: bytes = b"-----BEGIN CERTIFICATE-----fake"):
        self.mspid = mspid
        self._certificate = certificate

    def serialize(self) -> bytes:
        return self.mspid.encode() + self._certificate


class FakeEventHub:
    """Event hub double. Tests fire events with emit()/fail() once a listener is registered."""
    def __init__(self, peer_name: str, connect_error: Optional[Exception] = None):
        self.peer_name = peer_name
        self.connect_error = connect_error
        self.connect_calls = 0
        self.listeners: Dict[str, Tuple[Callable, Callable]] = {}
        self.unregistered: List[str] = []

    async def connect(self) -> None:
        self.connect_calls += 1
        if self.connect_error:
            raise self.connect_error

    def register_tx_listener(self, transaction_id: str, on_event: Callable, on_error: Callable) -> None:
        self.listeners[transaction_id] = (on_event, on_error)

    def unregister_tx_listener(self, transaction_id: str) -> None:
        self.listeners.pop(transaction_id, None)
        self.unregistered.append(transaction_id)

    def emit(self, transaction_id: str, validation_code: str = "VALID", block_number: int = 7) -> None:
        on_event, _ = self.listeners[transaction_id]
        on_event(transaction_id, validation_code, block_number)

    def fail(self, transaction_id: str, error: Exception) -> None:
        _, on_error = self.listeners[transaction_id]
        on_error(error)


class FakeChannel:
    """Records every call in `call_log` so tests can assert ordering across collaborators."""
    def __init__(self, call_log: List[str]):
        self.name = "mychannel"
        self.call_log = call_log
        self.responses: Sequence[EndorsementResponse] = [valid_response(b"payload", peer="peer0.org1")]
        self.proposal: Any = object()
        self.proposal_error: Optional[Exception] = None
        self.broadcast_response: BroadcastResponse = {"status": SUCCESS_STATUS}
        self.broadcast_error: Optional[Exception] = None
        self.proposal_requests: List[Dict[str, Any]] = []
        self.commit_requests: List[Dict[str, Any]] = []

    async def send_transaction_proposal(self, request):
        self.call_log.append("send_transaction_proposal")
        self.proposal_requests.append(request)
        if self.proposal_error:
            raise self.proposal_error
        return list(self.responses), self.proposal

    async def send_transaction(self, request):
        self.call_log.append("send_transaction")
        self.commit_requests.append(request)
        if self.broadcast_error:
            raise self.broadcast_error
        return self.broadcast_response


class FakeNetwork:
    def __init__(self, channel: FakeChannel, query_handler: Any, event_hubs: Optional[Dict[str, List[FakeEventHub]]] = None):
        self.channel = channel
        self.query_handler = query_handler
        self.event_hubs = event_hubs or {"msp": [], "network": []}

    def get_channel(self) -> FakeChannel:
        return self.channel

    def get_event_hubs(self, scope: str) -> List[FakeEventHub]:
        return self.event_hubs.get(scope, [])

    def get_query_handler(self) -> Any:
        return self.query_handler


class RecordingEventStrategy:
    """CommitEventStrategy double that logs lifecycle calls into the shared call log."""
    def __init__(self, call_log: List[str], wait_error: Optional[Exception] = None):
        self.call_log = call_log
        self.wait_error = wait_error
        self.created_with: Optional[Tuple[str, Any, Any]] = None

    async def start_listening(self) -> None:
        self.call_log.append("start_listening")

    async def wait_for_events(self) -> None:
        self.call_log.append("wait_for_events")
        if self.wait_error:
            raise self.wait_error

    def cancel_listening(self) -> None:
        self.call_log.append("cancel_listening")


@pytest.fixture()
def call_log() -> List[str]:
    return []


@pytest.fixture()
def fake_identity() -> FakeIdentity:
    return FakeIdentity()


@pytest.fixture()
def fake_channel(call_log: List[str]) -> FakeChannel:
    return FakeChannel(call_log)


@pytest.fixture()
def mock_query_handler() -> AsyncMock:
    handler = AsyncMock()
    handler.query_chaincode = AsyncMock(return_value=b"query_result")
    return handler


@pytest.fixture()
def fake_event_hubs() -> Dict[str, List[FakeEventHub]]:
    org1 = [FakeEventHub("peer0.org1"), FakeEventHub("peer1.org1")]
    org2 = [FakeEventHub("peer0.org2")]
    return {"msp": org1, "network": org1 + org2}


@pytest.fixture()
def make_event_hub() -> Callable[..., FakeEventHub]:
    return FakeEventHub


@pytest.fixture()
def fake_network(fake_channel: FakeChannel, mock_query_handler: AsyncMock, fake_event_hubs) -> FakeNetwork:
    return FakeNetwork(fake_channel, mock_query_handler, fake_event_hubs)


@pytest.fixture()
def recording_strategy(call_log: List[str]) -> RecordingEventStrategy:
    return RecordingEventStrategy(call_log)


@pytest.fixture()
def make_recording_strategy(call_log: List[str]) -> Callable[..., RecordingEventStrategy]:
    def make(wait_error: Optional[Exception] = None) -> RecordingEventStrategy:
        return RecordingEventStrategy(call_log, wait_error=wait_error)
    return make


@pytest.fixture()
def recording_strategy_factory(recording_strategy: RecordingEventStrategy):
    def factory(transaction_id, network, options):
        recording_strategy.created_with = (transaction_id, network, options)
        return recording_strategy
    return factory


@pytest.fixture()
def gateway_config() -> GatewayConfig:
    return GatewayConfig(event_handler_options=EventHandlerOptions(strategy="none"))


@pytest.fixture()
def contract(fake_network: FakeNetwork, fake_identity: FakeIdentity, gateway_config: GatewayConfig) -> Contract:
    return Contract(fake_network, "fabcar", identity=fake_identity, config=gateway_config)


@pytest.fixture(autouse=True)
def _quiet_library_logger():
    # DefaultLogAdapter may detach the library logger from root; reattach it so caplog keeps working.
    yield
    library_logger = logging.getLogger("ledger_gateway")
    for handler in list(library_logger.handlers):
        library_logger.removeHandler(handler)
    library_logger.propagate = True
    library_logger.setLevel(logging.NOTSET)
