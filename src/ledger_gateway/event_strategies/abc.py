"""Abstract Base Class/Protocol for commit event strategies."""
from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class CommitEventStrategy(Protocol):
    """
    Observes commit events for one transaction.

    Lifecycle, driven by Transaction.submit():
        start_listening() -> [ordering service accepts] -> wait_for_events()
        start_listening() -> [ordering service rejects] -> cancel_listening()
    A strategy instance serves exactly one transaction.
    """

    async def start_listening(self) -> None:
        """Begins observing commit events. Called once, before the transaction is sent for ordering."""
        ...

    async def wait_for_events(self) -> None:
        """
        Suspends until enough commit events were observed.
        Raises ConfirmationFailedError (or ConfirmationTimeoutError) otherwise.
        """
        ...

    def cancel_listening(self) -> None:
        """
        Releases listeners and timers. Must be safe to call even if
        start_listening() never ran or did not complete, and more than once.
        """
        ...


# factory(transaction_id, network, options) -> CommitEventStrategy
EventStrategyFactory = Callable[[str, Any, Any], CommitEventStrategy]
