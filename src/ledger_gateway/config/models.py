# src/ledger_gateway/config/models.py
import logging
from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

EventStrategyName = Literal[
    "none",
    "msp_all_for_tx",
    "msp_any_for_tx",
    "network_all_for_tx",
    "network_any_for_tx",
]

DEFAULT_COMMIT_TIMEOUT_SECONDS = 300.0

class EventHandlerOptions(BaseModel):
    """Options handed to every commit event strategy created for a contract."""
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    strategy: EventStrategyName = Field(
        default="msp_all_for_tx",
        description=(
            "Which commit events submit() waits for. 'msp_*' observes peers in the client's "
            "own organisation, 'network_*' every peer on the channel. '*_all_for_tx' waits for "
            "every peer to report, '*_any_for_tx' for the first successful one. 'none' returns "
            "as soon as the ordering service accepts the transaction."
        )
    )
    commit_timeout_seconds: float = Field(
        default=DEFAULT_COMMIT_TIMEOUT_SECONDS,
        description="How long to wait for commit events after listening starts."
    )

    @field_validator("commit_timeout_seconds")
    @classmethod
    def validate_commit_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"commit_timeout_seconds must be positive, got {value}")
        return value


class GatewayConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    event_handler_options: EventHandlerOptions = Field(default_factory=EventHandlerOptions)
    default_log_level: str = Field(default="INFO")
    log_adapter_configuration: Dict[str, Any] = Field(
        default_factory=dict,
        description=(
            "Passed to DefaultLogAdapter.setup(). Keys: 'log_level', 'library_logger_name', "
            "'add_console_handler_if_no_handlers', 'redact_keys'."
        )
    )

    @field_validator("default_log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        log_level_upper = value.upper()
        if log_level_upper not in valid_levels:
            logger.warning(f"Invalid log_level '{value}' in GatewayConfig. Defaulting to INFO.")
            return "INFO"
        return log_level_upper
