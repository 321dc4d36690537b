"""Single-slot status message that clears itself after a delay."""
import asyncio
import itertools
import logging
import time
from typing import Any, Callable, Optional

from pairscan.config import STATUS_CLEAR_SEC
from pairscan.models.workflow import StatusMessage

logger = logging.getLogger(__name__)

Scheduler = Callable[[float, Callable[[], None]], Any]


def schedule_on_running_loop(
    delay: float, callback: Callable[[], None]
) -> Optional[asyncio.TimerHandle]:
    """Default scheduler: run callback on the current event loop after delay seconds.

    Outside a running loop nothing is armed; StatusChannel expires the message on read.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return None
    return loop.call_later(delay, callback)


class StatusChannel:
    """Most recent message wins; a pending clear only removes the message it was scheduled for."""

    def __init__(
        self,
        clear_after_sec: float = STATUS_CLEAR_SEC,
        schedule: Scheduler = schedule_on_running_loop,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.clear_after_sec = clear_after_sec
        self._schedule = schedule
        self._clock = clock
        self._ids = itertools.count(1)
        self._current: Optional[StatusMessage] = None

    @property
    def current(self) -> Optional[StatusMessage]:
        """Live message; one older than clear_after_sec is dropped even if no timer fired."""
        if (
            self._current is not None
            and self._clock() - self._current.issued_at >= self.clear_after_sec
        ):
            self._current = None
        return self._current

    @property
    def text(self) -> str:
        """Live message text, empty string when nothing is shown."""
        current = self.current
        return current.text if current else ""

    def show(self, text: str) -> StatusMessage:
        message = StatusMessage(id=next(self._ids), text=text, issued_at=self._clock())
        self._current = message
        logger.debug("Status #%d: %s", message.id, text)
        self._schedule(self.clear_after_sec, lambda: self._clear_if_current(message.id))
        return message

    def _clear_if_current(self, message_id: int) -> None:
        if self._current is not None and self._current.id == message_id:
            self._current = None
