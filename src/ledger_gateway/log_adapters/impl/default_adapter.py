import json
import logging
from typing import Any, Dict, FrozenSet, Optional

from ledger_gateway.log_adapters.abc import LogAdapter

logger = logging.getLogger(__name__)
DEFAULT_LIBRARY_LOGGER_NAME = "ledger_gateway"
DEFAULT_REDACT_KEYS = frozenset({"transient_map"})
REDACTED = "[REDACTED]"
MAX_EVENT_DATA_CHARS = 2000

def redact(data: Any, keys: FrozenSet[str]) -> Any:
    """Returns a copy of `data` with values under any of `keys` replaced, at any depth."""
    if isinstance(data, dict):
        return {k: (REDACTED if k in keys and v is not None else redact(v, keys)) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [redact(item, keys) for item in data]
    return data

class DefaultLogAdapter(LogAdapter):
    plugin_id: str = "default_log_adapter_v1"
    description: str = "Configures standard Python logging for the library and logs lifecycle events with transient data redacted."

    _library_logger: Optional[logging.Logger] = None
    _redact_keys: FrozenSet[str] = DEFAULT_REDACT_KEYS

    async def setup(self, config: Optional[Dict[str, Any]] = None) -> None:
        cfg = config or {}
        log_level_str = cfg.get("log_level", "INFO").upper()
        log_level = getattr(logging, log_level_str, logging.INFO)
        library_logger_name = cfg.get("library_logger_name", DEFAULT_LIBRARY_LOGGER_NAME)
        self._library_logger = logging.getLogger(library_logger_name)
        add_console_handler = cfg.get("add_console_handler_if_no_handlers", True)
        if add_console_handler and not self._library_logger.handlers:
            console_h = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s - %(name)s - [%(levelname)s] - %(message)s (%(module)s:%(lineno)d)")
            console_h.setFormatter(formatter)
            self._library_logger.addHandler(console_h)
            self._library_logger.propagate = False
            logger.debug(f"Added default console handler to logger '{library_logger_name}'.")
        self._library_logger.setLevel(log_level)
        self._redact_keys = DEFAULT_REDACT_KEYS | frozenset(cfg.get("redact_keys", []))
        logger.info(f"{self.plugin_id}: Logging configured for '{library_logger_name}' at level {log_level_str}. Redacted keys: {sorted(self._redact_keys)}")

    async def process_event(self, event_type: str, data: Dict[str, Any]) -> None:
        if not self._library_logger:
            logger.debug(f"EMERGENCY LOG (logger not init): EVENT: {event_type} | KEYS: {sorted(data)}")
            return
        sanitized = redact(data, self._redact_keys)
        try:
            log_data_str = json.dumps(sanitized, sort_keys=True, default=str)
        except (TypeError, ValueError):
            log_data_str = str(sanitized)
        if len(log_data_str) > MAX_EVENT_DATA_CHARS:
            log_data_str = log_data_str[:MAX_EVENT_DATA_CHARS] + "..."
        self._library_logger.info(f"EVENT: {event_type} | DATA: {log_data_str}")

    async def teardown(self) -> None:
        logger.info(f"{self.plugin_id}: Tearing down.")
        self._library_logger = None
