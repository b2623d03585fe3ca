"""Implementations of CommitEventStrategy."""
from .noop_strategy import NoOpEventStrategy, noop_event_strategy_factory
from .policies import AllForTxPolicy, AnyForTxPolicy, EventCountPolicy, EventCounts
from .tx_event_handler import TransactionEventHandler

__all__ = [
    "NoOpEventStrategy",
    "noop_event_strategy_factory",
    "AllForTxPolicy",
    "AnyForTxPolicy",
    "EventCountPolicy",
    "EventCounts",
    "TransactionEventHandler",
]
