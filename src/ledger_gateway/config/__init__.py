"""Configuration models."""
from .models import (
    DEFAULT_COMMIT_TIMEOUT_SECONDS,
    EventHandlerOptions,
    EventStrategyName,
    GatewayConfig,
)

__all__ = [
    "DEFAULT_COMMIT_TIMEOUT_SECONDS",
    "EventHandlerOptions",
    "EventStrategyName",
    "GatewayConfig",
]
