"""Abstract Base Classes/Protocols for LogAdapter Plugins."""
import logging
from typing import Any, Dict, Protocol, runtime_checkable

from ledger_gateway.core.types import Plugin

logger = logging.getLogger(__name__)

@runtime_checkable
class LogAdapter(Plugin, Protocol):
    """Protocol for an adapter receiving transaction lifecycle events."""
    plugin_id: str
    description: str

    async def setup(self, config: Dict[str, Any]) -> None:
        """
        Configures logging handlers or integrates with external monitoring systems.
        Args:
            config: Adapter-specific configuration dictionary.
        """
        pass

    async def process_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """
        Processes a structured event (e.g., "transaction.submit.start").
        Implementations must not let transient data reach their output.
        Args:
            event_type: A string identifying the type of event.
            data: A dictionary containing event-specific data.
        """
        pass
