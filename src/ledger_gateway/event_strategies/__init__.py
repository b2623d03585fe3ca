"""CommitEventStrategy Abstractions and Implementations."""

from .abc import CommitEventStrategy, EventStrategyFactory
from .factory import (
    EVENT_STRATEGY_FACTORIES,
    create_event_strategy,
    get_event_strategy_factory,
)
from .impl import NoOpEventStrategy, TransactionEventHandler, noop_event_strategy_factory

__all__ = [
    "CommitEventStrategy",
    "EventStrategyFactory",
    "EVENT_STRATEGY_FACTORIES",
    "create_event_strategy",
    "get_event_strategy_factory",
    "NoOpEventStrategy",
    "TransactionEventHandler",
    "noop_event_strategy_factory",
]
