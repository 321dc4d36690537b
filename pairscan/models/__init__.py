"""Data models for scans, records and workflow state."""
from pairscan.models.scan import Record, ScanEvent, Symbology
from pairscan.models.workflow import ScanOutcome, StatusMessage, Step1, Step2, WorkflowState

__all__ = [
    "Record",
    "ScanEvent",
    "Symbology",
    "ScanOutcome",
    "StatusMessage",
    "Step1",
    "Step2",
    "WorkflowState",
]
