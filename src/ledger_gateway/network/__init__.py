"""Network collaborator protocols and transport request/response types."""

from .abc import (
    Channel,
    CommitEventHub,
    Network,
    QueryHandler,
    SigningIdentity,
    TxErrorCallback,
    TxEventCallback,
)
from .types import (
    SUCCESS_STATUS,
    VALID_CODE,
    BroadcastResponse,
    CommitRequest,
    EventHubScope,
    ProposalRequest,
)

__all__ = [
    "Channel",
    "CommitEventHub",
    "Network",
    "QueryHandler",
    "SigningIdentity",
    "TxEventCallback",
    "TxErrorCallback",
    "SUCCESS_STATUS",
    "VALID_CODE",
    "BroadcastResponse",
    "CommitRequest",
    "EventHubScope",
    "ProposalRequest",
]
