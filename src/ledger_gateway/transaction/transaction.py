"""Transaction: a single invocation of a ledger transaction function."""
import json
import logging
import threading
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ledger_gateway.core.types import Payload, StructuredError, TransientMap
from ledger_gateway.endorsement.classifier import ResponseClassifier
from ledger_gateway.errors import (
    AlreadyInvokedError,
    CommitRejectedError,
    InvalidArgumentError,
    TransactionError,
)
from ledger_gateway.event_strategies.abc import CommitEventStrategy, EventStrategyFactory
from ledger_gateway.event_strategies.impl.noop_strategy import noop_event_strategy_factory
from ledger_gateway.network.types import SUCCESS_STATUS, CommitRequest, ProposalRequest

from .transaction_id import TransactionID

if TYPE_CHECKING:
    from ledger_gateway.contract import Contract

logger = logging.getLogger(__name__)

class InvocationState(Enum):
    FRESH = "fresh"
    INVOKED = "invoked"

def _format_argument(arg: Any) -> str:
    try:
        return json.dumps(arg)
    except (TypeError, ValueError):
        return repr(arg)

def verify_arguments(args: Sequence[Any], transaction_id: Optional[str] = None) -> None:
    """Raises InvalidArgumentError, listing every argument, if any of them is not a str."""
    invalid = [arg for arg in args if not isinstance(arg, str)]
    if invalid:
        args_string = ", ".join(_format_argument(arg) for arg in args)
        msg = f"Transaction arguments must be strings: {args_string}"
        logger.error(f"verify_arguments: {msg}")
        raise InvalidArgumentError(msg, invalid_args=invalid, transaction_id=transaction_id)

def _structured(error: Exception) -> StructuredError:
    if isinstance(error, TransactionError):
        return error.to_structured_error()
    return {"type": type(error).__name__, "message": str(error)}


class Transaction:
    """
    One invocation of a transaction function, either submitted to the ledger
    or evaluated as a query.

    Instances are obtained from `Contract.create_transaction()` and are
    single-use: a second call to `submit()` or `evaluate()` raises
    AlreadyInvokedError. A retry needs a new Transaction, and so a new
    transaction ID.
    """

    def __init__(self, contract: "Contract", name: str):
        if not name or not isinstance(name, str):
            raise ValueError("Transaction name must be a non-empty string.")
        self._contract = contract
        self._name = name
        self._transaction_id: TransactionID = contract.create_transaction_id()
        self._transient_map: Optional[TransientMap] = None
        self._create_event_strategy: EventStrategyFactory = noop_event_strategy_factory
        self._state = InvocationState.FRESH
        self._state_lock = threading.Lock()

    @property
    def name(self) -> str:
        """Fully qualified transaction function name."""
        return self._name

    @property
    def transaction_id(self) -> TransactionID:
        return self._transaction_id

    @property
    def transient_map(self) -> Optional[TransientMap]:
        return self._transient_map

    @property
    def state(self) -> InvocationState:
        return self._state

    @property
    def is_invoked(self) -> bool:
        return self._state is InvocationState.INVOKED

    def set_transient(self, transient_map: Optional[TransientMap]) -> "Transaction":
        """
        Sets data passed to the transaction function but not stored on the ledger,
        e.g. private data. Returns self for chaining.
        """
        self._transient_map = transient_map
        return self

    def set_event_handler_strategy(self, factory: EventStrategyFactory) -> "Transaction":
        """Overrides the commit event strategy factory for this invocation. Returns self for chaining."""
        self._create_event_strategy = factory
        return self

    async def submit(self, *args: str) -> Optional[Payload]:
        """
        Endorses the transaction on the channel's peers, sends it to the ordering
        service and waits for commit events according to the event strategy.

        Returns:
            The payload of the first valid endorsement, or None if it had none.
        Raises:
            InvalidArgumentError, AlreadyInvokedError, NoResponsesError,
            NoValidResponsesError, CommitRejectedError, ConfirmationFailedError,
            or any transport error, unwrapped.
        """
        tx_id = self._transaction_id.transaction_id
        verify_arguments(args, tx_id)
        self._set_invoked_or_raise()

        await self._trace("transaction.submit.start", {"args_count": len(args), "transient_keys": self._transient_keys()})
        try:
            result = await self._submit(list(args))
        except Exception as e:
            await self._trace("transaction.submit.error", {"error": _structured(e)})
            raise
        await self._trace("transaction.submit.success", {"result_type": type(result).__name__})
        return result

    async def _submit(self, args: List[str]) -> Optional[Payload]:
        tx_id = self._transaction_id.transaction_id
        network = self._contract.get_network()
        channel = network.get_channel()
        event_strategy: CommitEventStrategy = self._create_event_strategy(tx_id, network, self._contract.get_event_handler_options())

        request: ProposalRequest = {
            "chaincode_id": self._contract.get_chaincode_id(),
            "transaction_id": self._transaction_id,
            "fcn": self._name,
            "args": args,
        }
        if self._transient_map:
            request["transient_map"] = self._transient_map

        proposal_responses, proposal = await channel.send_transaction_proposal(request)

        classified = ResponseClassifier(tx_id).classify(proposal_responses)
        await self._trace(
            "transaction.endorsement.classified",
            {
                "valid_count": len(classified["valid"]),
                "invalid_responses": [dict(r) for r in classified["invalid"]],
            },
        )

        try:
            await event_strategy.start_listening()
            response = await channel.send_transaction(
                CommitRequest(proposal_responses=classified["valid"], proposal=proposal)
            )
        except BaseException:
            event_strategy.cancel_listening()
            raise

        status = response.get("status")
        if status != SUCCESS_STATUS:
            msg = f"Failed to send peer responses for transaction '{tx_id}' to orderer. Response status: '{status}'"
            logger.error(f"submit: {msg}")
            event_strategy.cancel_listening()
            await self._trace("transaction.commit.rejected", {"status": status, "info": response.get("info")})
            raise CommitRejectedError(msg, transaction_id=tx_id, status=status, info=response.get("info"))

        await event_strategy.wait_for_events()

        return classified["valid"][0].get("payload") or None

    async def evaluate(self, *args: str) -> Payload:
        """
        Evaluates the transaction function on a peer without ordering or
        committing it. Used to query the world state.
        """
        tx_id = self._transaction_id.transaction_id
        verify_arguments(args, tx_id)
        self._set_invoked_or_raise()

        await self._trace("transaction.evaluate.start", {"args_count": len(args), "transient_keys": self._transient_keys()})
        query_handler = self._contract.get_query_handler()
        try:
            result = await query_handler.query_chaincode(
                self._contract.get_chaincode_id(),
                self._transaction_id,
                self._name,
                list(args),
                self._transient_map,
            )
        except Exception as e:
            await self._trace("transaction.evaluate.error", {"error": _structured(e)})
            raise
        await self._trace("transaction.evaluate.success", {"result_type": type(result).__name__})
        return result

    def _set_invoked_or_raise(self) -> None:
        with self._state_lock:
            if self._state is not InvocationState.FRESH:
                msg = "Transaction has already been invoked"
                logger.error(f"{msg}: {self._transaction_id.transaction_id}")
                raise AlreadyInvokedError(msg, transaction_id=self._transaction_id.transaction_id)
            self._state = InvocationState.INVOKED

    def _transient_keys(self) -> List[str]:
        return sorted(self._transient_map) if self._transient_map else []

    async def _trace(self, event_type: str, data: Dict[str, Any]) -> None:
        log_adapter = self._contract.get_log_adapter()
        if not log_adapter:
            return
        event_data = {"transaction_id": self._transaction_id.transaction_id, "name": self._name}
        event_data.update(data)
        try:
            await log_adapter.process_event(event_type, event_data)
        except Exception as e:
            logger.error(f"Error processing event '{event_type}' with log adapter '{getattr(log_adapter, 'plugin_id', 'unknown')}': {e}", exc_info=True)
