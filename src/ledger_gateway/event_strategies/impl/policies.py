"""Completion rules deciding when enough commit events have arrived."""
from typing import Optional, Protocol


class EventCounts:
    def __init__(self, expected: int):
        self.expected = expected
        self.success = 0
        self.fail = 0

    @property
    def received(self) -> int:
        return self.success + self.fail

    def __repr__(self) -> str:
        return f"EventCounts(expected={self.expected}, success={self.success}, fail={self.fail})"


class EventCountPolicy(Protocol):
    name: str

    def evaluate(self, counts: EventCounts) -> Optional[bool]:
        """Returns True once satisfied, False once it can no longer be satisfied, None to keep waiting."""
        ...


class AllForTxPolicy(EventCountPolicy):
    """Waits until every event hub has reported. Succeeds if at least one reported a commit."""
    name: str = "all_for_tx"

    def evaluate(self, counts: EventCounts) -> Optional[bool]:
        if counts.received < counts.expected:
            return None
        return counts.success > 0


class AnyForTxPolicy(EventCountPolicy):
    """Succeeds on the first commit event. Fails only when every event hub has errored."""
    name: str = "any_for_tx"

    def evaluate(self, counts: EventCounts) -> Optional[bool]:
        if counts.success > 0:
            return True
        if counts.fail >= counts.expected:
            return False
        return None
