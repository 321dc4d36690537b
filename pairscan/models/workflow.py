"""Capture workflow state and status messages."""
from dataclasses import dataclass
from enum import Enum

from pairscan.config import STEP1_TITLE, STEP2_TITLE


@dataclass(frozen=True)
class Step1:
    """Waiting for the ID QR code."""
    title = STEP1_TITLE
    name = "step1"


@dataclass(frozen=True)
class Step2:
    """Waiting for the post Code128; holds the captured QR value."""
    pending_primary_code: str
    title = STEP2_TITLE
    name = "step2"


WorkflowState = Step1 | Step2


class ScanOutcome(str, Enum):
    """What handle_scan did with an event."""
    IGNORED_BLANK = "ignored_blank"
    DEBOUNCED = "debounced"
    REJECTED = "rejected"
    PRIMARY_CAPTURED = "primary_captured"
    RECORD_CREATED = "record_created"


@dataclass(frozen=True)
class StatusMessage:
    """Live status text; id increases with every message shown."""
    id: int
    text: str
    issued_at: float


@dataclass(frozen=True)
class DebounceMemo:
    last_value: str
    last_accepted_at: float
