"""Two-step capture: ID QR (o1) then post Code128 (l1), paired into records."""
import logging
import time
from typing import Callable, List, Optional

from pairscan.core.debounce import ScanDebouncer
from pairscan.core.feedback import play_accept_cue
from pairscan.core.status import StatusChannel
from pairscan.models.scan import Record, ScanEvent, Symbology
from pairscan.models.workflow import ScanOutcome, Step1, Step2, WorkflowState

logger = logging.getLogger(__name__)

MSG_STEP1_QR_ONLY = "Only QR codes accepted for Step 1"
MSG_STEP2_CODE128_ONLY = "Only Code128 accepted for Step 2"
MSG_CANCELED = "Current scan canceled"
MSG_ROW_REMOVED = "Last row removed"


class CaptureWorkflow:
    """Owns the step state, the record list and the status channel.

    Not thread-safe: every call must come from the event-loop thread. The
    scanner service marshals camera reads onto the loop before calling
    handle_scan.
    """

    def __init__(
        self,
        debouncer: Optional[ScanDebouncer] = None,
        status: Optional[StatusChannel] = None,
        on_accepted: Callable[[ScanEvent], None] = play_accept_cue,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.debouncer = debouncer or ScanDebouncer()
        self.status = status or StatusChannel()
        self._on_accepted = on_accepted
        self._clock = clock
        self._state: WorkflowState = Step1()
        self._records: List[Record] = []

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def pending_primary_code(self) -> Optional[str]:
        if isinstance(self._state, Step2):
            return self._state.pending_primary_code
        return None

    @property
    def records(self) -> tuple[Record, ...]:
        """Snapshot of records, oldest first."""
        return tuple(self._records)

    @property
    def record_count(self) -> int:
        return len(self._records)

    @property
    def can_undo(self) -> bool:
        return bool(self._records)

    @property
    def status_text(self) -> str:
        return self.status.text

    def show_message(self, text: str) -> None:
        self.status.show(text)

    def handle_scan(self, event: ScanEvent, now: Optional[float] = None) -> ScanOutcome:
        """Apply one decoded read to the state machine."""
        value = event.value.strip()
        if not value:
            return ScanOutcome.IGNORED_BLANK

        if now is None:
            now = self._clock()
        if self.debouncer.is_repeat(value, now):
            logger.debug("Debounced repeat read: %s", value)
            return ScanOutcome.DEBOUNCED

        accepted = ScanEvent(value=value, symbology=event.symbology)
        if isinstance(self._state, Step1):
            if event.symbology is not Symbology.QR:
                self.show_message(MSG_STEP1_QR_ONLY)
                return ScanOutcome.REJECTED
            self._accept(accepted, now)
            self._state = Step2(pending_primary_code=value)
            logger.info("Captured o1: %s", value)
            return ScanOutcome.PRIMARY_CAPTURED

        if event.symbology is not Symbology.CODE128:
            self.show_message(MSG_STEP2_CODE128_ONLY)
            return ScanOutcome.REJECTED
        self._accept(accepted, now)
        record = Record(primary_code=self._state.pending_primary_code, secondary_code=value)
        self._records.append(record)
        self._state = Step1()
        logger.info(
            "Record %d: o1=%s l1=%s", len(self._records), record.primary_code, record.secondary_code
        )
        return ScanOutcome.RECORD_CREATED

    def _accept(self, event: ScanEvent, now: float) -> None:
        self.debouncer.commit(event.value, now)
        self._on_accepted(event)

    def cancel_current(self) -> None:
        """Drop any captured o1 and return to step 1. Records are untouched."""
        if isinstance(self._state, Step2):
            logger.info("Canceled pending o1: %s", self._state.pending_primary_code)
        self._state = Step1()
        self.show_message(MSG_CANCELED)

    def undo_last_row(self) -> Optional[Record]:
        """Remove the newest record. No-op (and no message) when there are none."""
        if not self._records:
            return None
        record = self._records.pop()
        logger.info("Removed last row: o1=%s l1=%s", record.primary_code, record.secondary_code)
        self.show_message(MSG_ROW_REMOVED)
        return record
