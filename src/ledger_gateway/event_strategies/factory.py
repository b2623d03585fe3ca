"""Named commit event strategies, selected when a transaction is created."""
import logging
from typing import Any, Dict, Optional

from ledger_gateway.config.models import EventHandlerOptions, EventStrategyName
from ledger_gateway.network.abc import Network
from ledger_gateway.network.types import EventHubScope

from .abc import CommitEventStrategy, EventStrategyFactory
from .impl.noop_strategy import noop_event_strategy_factory
from .impl.policies import AllForTxPolicy, AnyForTxPolicy, EventCountPolicy
from .impl.tx_event_handler import TransactionEventHandler

logger = logging.getLogger(__name__)

def _event_handler_factory(scope: EventHubScope, policy: EventCountPolicy) -> EventStrategyFactory:
    def create(transaction_id: str, network: Network, options: Optional[EventHandlerOptions]) -> CommitEventStrategy:
        event_hubs = network.get_event_hubs(scope)
        logger.debug(f"Creating '{scope}_{policy.name}' event handler for transaction {transaction_id} with {len(event_hubs)} event hubs.")
        return TransactionEventHandler(transaction_id, event_hubs, policy, options)
    return create

EVENT_STRATEGY_FACTORIES: Dict[str, EventStrategyFactory] = {
    "none": noop_event_strategy_factory,
    "msp_all_for_tx": _event_handler_factory("msp", AllForTxPolicy()),
    "msp_any_for_tx": _event_handler_factory("msp", AnyForTxPolicy()),
    "network_all_for_tx": _event_handler_factory("network", AllForTxPolicy()),
    "network_any_for_tx": _event_handler_factory("network", AnyForTxPolicy()),
}

def get_event_strategy_factory(name: EventStrategyName) -> EventStrategyFactory:
    factory = EVENT_STRATEGY_FACTORIES.get(name)
    if factory is None:
        raise ValueError(f"Unknown event strategy '{name}'. Available: {sorted(EVENT_STRATEGY_FACTORIES)}")
    return factory

def create_event_strategy(name: EventStrategyName, transaction_id: str, network: Any, options: Optional[EventHandlerOptions] = None) -> CommitEventStrategy:
    return get_event_strategy_factory(name)(transaction_id, network, options)
