# src/ledger_gateway/core/types.py
"""Core shared types and protocols for the gateway."""
import logging
from typing import (
    Any,
    Dict,
    Optional,
    Protocol,
    TypedDict,
    runtime_checkable,
)

logger = logging.getLogger(__name__)

@runtime_checkable
class Plugin(Protocol):
    """Base protocol for all plugins."""
    @property
    def plugin_id(self) -> str:
        """A unique string identifier for this plugin instance/type."""
        ...

    async def setup(self, config: Optional[Dict[str, Any]] = None) -> None:
        """
        Optional asynchronous setup method for plugins.

        Args:
            config: A dictionary containing the specific configuration for this
                plugin instance, usually taken from `GatewayConfig`.
        """
        pass

    async def teardown(self) -> None:
        """Optional asynchronous teardown method for plugins. Called before application shutdown."""
        pass

# Ledger payloads are opaque; peers return bytes but test doubles often use str.
Payload = Any
TransientMap = Dict[str, bytes]

class StructuredError(TypedDict, total=False):
    """Standardized structure for reporting errors to log adapters and callers."""
    type: str
    message: str
    details: Optional[Dict[str, Any]]
    suggestion: Optional[str]
