"""
ledger-gateway-tooling
-----------------------------

Client-side transaction invocation for permissioned ledgers: endorse,
order and confirm commits, or evaluate read-only queries.
Async-first.
"""
__version__ = "0.1.0"

from .config.models import EventHandlerOptions, GatewayConfig
from .contract import Contract
from .core.types import Plugin, StructuredError
from .endorsement import (
    ClassifiedResponses,
    InvalidResponse,
    ResponseClassifier,
    ValidResponse,
    invalid_response,
    invalid_response_from_exception,
    valid_response,
)
from .errors import (
    AlreadyInvokedError,
    CommitRejectedError,
    ConfirmationFailedError,
    ConfirmationTimeoutError,
    EndorsementError,
    InvalidArgumentError,
    NoResponsesError,
    NoValidResponsesError,
    TransactionError,
)
from .event_strategies import (
    CommitEventStrategy,
    NoOpEventStrategy,
    TransactionEventHandler,
    get_event_strategy_factory,
)
from .log_adapters import DefaultLogAdapter, LogAdapter
from .network import SUCCESS_STATUS, Channel, CommitEventHub, Network, QueryHandler, SigningIdentity
from .transaction import InvocationState, Transaction, TransactionID

__all__ = [
    "__version__",
    "EventHandlerOptions",
    "GatewayConfig",
    "Contract",
    "Plugin",
    "StructuredError",
    "ClassifiedResponses",
    "InvalidResponse",
    "ResponseClassifier",
    "ValidResponse",
    "invalid_response",
    "invalid_response_from_exception",
    "valid_response",
    "AlreadyInvokedError",
    "CommitRejectedError",
    "ConfirmationFailedError",
    "ConfirmationTimeoutError",
    "EndorsementError",
    "InvalidArgumentError",
    "NoResponsesError",
    "NoValidResponsesError",
    "TransactionError",
    "CommitEventStrategy",
    "NoOpEventStrategy",
    "TransactionEventHandler",
    "get_event_strategy_factory",
    "DefaultLogAdapter",
    "LogAdapter",
    "SUCCESS_STATUS",
    "Channel",
    "CommitEventHub",
    "Network",
    "QueryHandler",
    "SigningIdentity",
    "InvocationState",
    "Transaction",
    "TransactionID",
]
