"""Contract: the entry point for invoking transaction functions of one chaincode."""
import logging
from typing import Optional

from ledger_gateway.config.models import EventHandlerOptions, GatewayConfig
from ledger_gateway.core.types import Payload
from ledger_gateway.event_strategies.factory import get_event_strategy_factory
from ledger_gateway.log_adapters.abc import LogAdapter
from ledger_gateway.log_adapters.impl.default_adapter import DefaultLogAdapter
from ledger_gateway.network.abc import Network, QueryHandler, SigningIdentity
from ledger_gateway.transaction.transaction import Transaction
from ledger_gateway.transaction.transaction_id import TransactionID

logger = logging.getLogger(__name__)

class Contract:
    """
    A chaincode deployed on a network's channel, optionally scoped to a
    namespace (a named contract inside the chaincode).

    The network, identity and configuration are shared across every
    Transaction this contract creates and are never modified by them.
    """

    def __init__(
        self,
        network: Network,
        chaincode_id: str,
        namespace: str = "",
        identity: Optional[SigningIdentity] = None,
        config: Optional[GatewayConfig] = None,
        log_adapter: Optional[LogAdapter] = None,
    ):
        if not chaincode_id:
            raise ValueError("chaincode_id must be a non-empty string.")
        self._network = network
        self._chaincode_id = chaincode_id
        self._namespace = namespace
        self._identity = identity
        self._config = config or GatewayConfig()
        self._log_adapter = log_adapter
        logger.debug(
            f"Contract initialized for chaincode '{chaincode_id}' (namespace '{namespace}'), "
            f"event strategy '{self._config.event_handler_options.strategy}'."
        )

    @classmethod
    async def create(
        cls,
        network: Network,
        chaincode_id: str,
        namespace: str = "",
        identity: Optional[SigningIdentity] = None,
        config: Optional[GatewayConfig] = None,
    ) -> "Contract":
        """Builds a Contract with a DefaultLogAdapter configured from `config`."""
        cfg = config or GatewayConfig()
        adapter_config = {"log_level": cfg.default_log_level, **cfg.log_adapter_configuration}
        log_adapter = DefaultLogAdapter()
        await log_adapter.setup(adapter_config)
        return cls(network, chaincode_id, namespace=namespace, identity=identity, config=cfg, log_adapter=log_adapter)

    def get_network(self) -> Network:
        return self._network

    def get_chaincode_id(self) -> str:
        return self._chaincode_id

    def get_namespace(self) -> str:
        return self._namespace

    def get_event_handler_options(self) -> EventHandlerOptions:
        return self._config.event_handler_options

    def get_query_handler(self) -> QueryHandler:
        return self._network.get_query_handler()

    def get_log_adapter(self) -> Optional[LogAdapter]:
        return self._log_adapter

    def create_transaction_id(self) -> TransactionID:
        return TransactionID(self._identity)

    def create_transaction(self, name: str) -> Transaction:
        """Creates a single-use Transaction for the function `name`, using the configured event strategy."""
        if not name:
            raise ValueError("Transaction name must be a non-empty string.")
        transaction = Transaction(self, self._qualified_name(name))
        transaction.set_event_handler_strategy(get_event_strategy_factory(self._config.event_handler_options.strategy))
        return transaction

    async def submit_transaction(self, name: str, *args: str) -> Optional[Payload]:
        return await self.create_transaction(name).submit(*args)

    async def evaluate_transaction(self, name: str, *args: str) -> Payload:
        return await self.create_transaction(name).evaluate(*args)

    async def teardown(self) -> None:
        if self._log_adapter:
            await self._log_adapter.teardown()

    def _qualified_name(self, name: str) -> str:
        return f"{self._namespace}:{name}" if self._namespace else name
