"""Core framework components: base plugin protocol and shared types."""
from .types import (
    Payload,
    Plugin,
    StructuredError,
    TransientMap,
)

__all__ = [
    "Plugin", "Payload", "StructuredError", "TransientMap",
]
