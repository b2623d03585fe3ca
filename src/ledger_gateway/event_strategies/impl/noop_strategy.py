from typing import Any

from ledger_gateway.event_strategies.abc import CommitEventStrategy


class NoOpEventStrategy(CommitEventStrategy):
    """Does not wait for commit events. submit() returns once the orderer accepts."""

    async def start_listening(self) -> None:
        pass

    async def wait_for_events(self) -> None:
        pass

    def cancel_listening(self) -> None:
        pass


NOOP_EVENT_STRATEGY = NoOpEventStrategy()

def noop_event_strategy_factory(transaction_id: str, network: Any, options: Any) -> CommitEventStrategy:
    return NOOP_EVENT_STRATEGY
