"""Core services: capture workflow, debouncing, status, CSV export, scanner."""
from pairscan.core.scanner_service import ScannerService
from pairscan.core.workflow import CaptureWorkflow

__all__ = ["CaptureWorkflow", "ScannerService"]
