"""Shared fixtures: a workflow with a manual clock and a fake timer."""
from typing import Callable, List, Tuple

import pytest

from pairscan.core.debounce import ScanDebouncer
from pairscan.core.status import StatusChannel
from pairscan.core.workflow import CaptureWorkflow


class FakeScheduler:
    """Collects (delay, callback) pairs instead of arming real timers."""

    def __init__(self) -> None:
        self.pending: List[Tuple[float, Callable[[], None]]] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> None:
        self.pending.append((delay, callback))

    def fire_all(self) -> None:
        pending, self.pending = self.pending, []
        for _, callback in pending:
            callback()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def accepted():
    return []


@pytest.fixture
def workflow(scheduler, accepted):
    return CaptureWorkflow(
        debouncer=ScanDebouncer(),
        status=StatusChannel(schedule=scheduler, clock=lambda: 0.0),
        on_accepted=accepted.append,
        clock=lambda: 0.0,
    )
