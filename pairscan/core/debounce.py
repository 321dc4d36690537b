"""Suppress re-reads of the same physical code held in front of the scanner."""
from typing import Optional

from pairscan.config import DEBOUNCE_SEC
from pairscan.models.workflow import DebounceMemo


class ScanDebouncer:
    """Single memo of the last accepted value, shared by both capture steps."""

    def __init__(self, window_sec: float = DEBOUNCE_SEC) -> None:
        self.window_sec = window_sec
        self._memo: Optional[DebounceMemo] = None

    @property
    def memo(self) -> Optional[DebounceMemo]:
        return self._memo

    def is_repeat(self, value: str, now: float) -> bool:
        """True if value equals the last accepted value and is still inside the window."""
        if self._memo is None:
            return False
        return value == self._memo.last_value and (now - self._memo.last_accepted_at) < self.window_sec

    def commit(self, value: str, now: float) -> None:
        """Remember value as the last accepted scan."""
        self._memo = DebounceMemo(last_value=value, last_accepted_at=now)

    def accept(self, value: str, now: float) -> bool:
        """Check and commit in one step. Returns False when the read is suppressed."""
        if self.is_repeat(value, now):
            return False
        self.commit(value, now)
        return True
