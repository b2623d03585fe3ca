"""TransactionEventHandler: waits for commit events from a set of event hubs."""
import asyncio
import logging
from functools import partial
from typing import List, Optional, Sequence, Set

from ledger_gateway.config.models import EventHandlerOptions
from ledger_gateway.errors import ConfirmationFailedError, ConfirmationTimeoutError
from ledger_gateway.event_strategies.abc import CommitEventStrategy
from ledger_gateway.network.abc import CommitEventHub
from ledger_gateway.network.types import VALID_CODE

from .policies import EventCountPolicy, EventCounts

logger = logging.getLogger(__name__)

class TransactionEventHandler(CommitEventStrategy):
    """
    Listens on every event hub in scope and settles once `policy` is decided.

    Event hub callbacks must be delivered on the event loop thread that ran
    start_listening(); transports reading from other threads should hop over
    with `loop.call_soon_threadsafe`.
    """

    def __init__(
        self,
        transaction_id: str,
        event_hubs: Sequence[CommitEventHub],
        policy: EventCountPolicy,
        options: Optional[EventHandlerOptions] = None,
    ):
        self._transaction_id = transaction_id
        self._event_hubs: List[CommitEventHub] = list(event_hubs)
        self._policy = policy
        self._timeout_seconds = (options or EventHandlerOptions()).commit_timeout_seconds
        self._counts = EventCounts(expected=len(self._event_hubs))
        self._registered_hubs: List[CommitEventHub] = []
        self._responded_peers: Set[str] = set()
        self._outcome: Optional["asyncio.Future[None]"] = None
        self._timeout_handle: Optional[asyncio.TimerHandle] = None

    @property
    def transaction_id(self) -> str:
        return self._transaction_id

    @property
    def counts(self) -> EventCounts:
        return self._counts

    async def start_listening(self) -> None:
        if self._outcome is not None:
            logger.warning(f"start_listening: already listening for transaction {self._transaction_id}.")
            return
        loop = asyncio.get_running_loop()
        self._outcome = loop.create_future()

        if not self._event_hubs:
            logger.warning(f"start_listening: no event hubs for strategy '{self._policy.name}', not waiting for transaction {self._transaction_id}.")
            self._outcome.set_result(None)
            return

        connect_results = await asyncio.gather(*(hub.connect() for hub in self._event_hubs), return_exceptions=True)
        for hub, result in zip(self._event_hubs, connect_results):
            if isinstance(result, Exception):
                logger.warning(f"start_listening: could not connect to event hub {hub.peer_name!r}: {result}")
                self._on_error(hub, result)
                continue
            if isinstance(result, BaseException):
                self.cancel_listening()
                raise result
            hub.register_tx_listener(self._transaction_id, partial(self._on_event, hub), partial(self._on_error, hub))
            self._registered_hubs.append(hub)

        if not self._outcome.done():
            self._timeout_handle = loop.call_later(self._timeout_seconds, self._on_timeout)
        logger.debug(f"start_listening: listening on {len(self._registered_hubs)} of {len(self._event_hubs)} event hubs for transaction {self._transaction_id}.")

    async def wait_for_events(self) -> None:
        if self._outcome is None:
            raise RuntimeError("start_listening() must be awaited before wait_for_events().")
        try:
            await self._outcome
        finally:
            self._release()

    def cancel_listening(self) -> None:
        logger.debug(f"cancel_listening: transaction {self._transaction_id}")
        self._release()
        if self._outcome is None:
            return
        if not self._outcome.done():
            self._outcome.cancel()
        elif not self._outcome.cancelled():
            # Mark any stored exception as retrieved; nobody will await it now.
            self._outcome.exception()

    def _on_event(self, hub: CommitEventHub, transaction_id: str, validation_code: str, block_number: Optional[int] = None) -> None:
        if self._is_settled():
            return
        self._mark_responded(hub)
        if validation_code != VALID_CODE:
            msg = f"Commit of transaction {transaction_id} failed on peer {hub.peer_name} with status {validation_code}"
            logger.info(f"_on_event: {msg}")
            self._settle(ConfirmationFailedError(msg, transaction_id=transaction_id, peer=hub.peer_name, validation_code=validation_code))
            return
        logger.debug(f"_on_event: transaction {transaction_id} committed on peer {hub.peer_name} in block {block_number}")
        self._counts.success += 1
        self._check_completion()

    def _on_error(self, hub: CommitEventHub, error: Exception) -> None:
        if self._is_settled():
            return
        self._mark_responded(hub)
        logger.info(f"_on_error: event hub {hub.peer_name!r} failed for transaction {self._transaction_id}: {error}")
        self._counts.fail += 1
        self._check_completion()

    def _on_timeout(self) -> None:
        self._timeout_handle = None
        if self._is_settled():
            return
        unresponsive = [hub.peer_name for hub in self._event_hubs if hub.peer_name not in self._responded_peers]
        msg = (
            f"Event strategy not satisfied within timeout period of {self._timeout_seconds} seconds. "
            f"No response received from event hubs: {', '.join(unresponsive)}"
        )
        logger.warning(f"_on_timeout: transaction {self._transaction_id}: {msg}")
        self._settle(ConfirmationTimeoutError(msg, transaction_id=self._transaction_id, timeout_seconds=self._timeout_seconds, unresponsive_peers=unresponsive))

    def _check_completion(self) -> None:
        decision = self._policy.evaluate(self._counts)
        if decision is None:
            return
        if decision:
            self._settle(None)
        else:
            msg = f"No successful events received for transaction {self._transaction_id}"
            logger.info(f"_check_completion: {msg} ({self._counts!r})")
            self._settle(ConfirmationFailedError(msg, transaction_id=self._transaction_id))

    def _mark_responded(self, hub: CommitEventHub) -> None:
        self._responded_peers.add(hub.peer_name)
        if hub in self._registered_hubs:
            self._registered_hubs.remove(hub)
            hub.unregister_tx_listener(self._transaction_id)

    def _is_settled(self) -> bool:
        return self._outcome is None or self._outcome.done()

    def _settle(self, error: Optional[ConfirmationFailedError]) -> None:
        self._release()
        if self._outcome is None or self._outcome.done():
            return
        if error is None:
            self._outcome.set_result(None)
        else:
            self._outcome.set_exception(error)

    def _release(self) -> None:
        if self._timeout_handle is not None:
            self._timeout_handle.cancel()
            self._timeout_handle = None
        for hub in self._registered_hubs:
            try:
                hub.unregister_tx_listener(self._transaction_id)
            except Exception as e:
                logger.error(f"Error unregistering listener on event hub {hub.peer_name!r}: {e}", exc_info=True)
        self._registered_hubs.clear()
