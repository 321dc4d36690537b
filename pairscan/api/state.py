"""Shared application state (injected into routes)."""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from pairscan.config import EXPORT_DIR
from pairscan.core.csv_export import ExportError, ExportResult, serialize, write_csv_export
from pairscan.core.scanner_service import ScannerService
from pairscan.core.workflow import CaptureWorkflow

logger = logging.getLogger(__name__)


class AppState:
    def __init__(self, export_dir: Path = EXPORT_DIR, simulate: Optional[bool] = None) -> None:
        self.workflow = CaptureWorkflow()
        self.export_dir = export_dir
        self._simulate = simulate
        self._scanner_service: ScannerService | None = None

    def csv_text(self) -> str:
        return serialize(self.workflow.records)

    def export_csv(self, now: Optional[datetime] = None) -> ExportResult:
        """Write the current records to export_dir; records are kept for another export."""
        try:
            return write_csv_export(self.workflow.records, self.export_dir, now)
        except ExportError as e:
            logger.warning("%s", e)
            self.workflow.show_message(str(e))
            raise

    @property
    def scanner_service(self) -> ScannerService:
        if self._scanner_service is None:
            if self._simulate is None:
                self._scanner_service = ScannerService(on_scan=self.workflow.handle_scan)
            else:
                self._scanner_service = ScannerService(
                    on_scan=self.workflow.handle_scan, simulate=self._simulate
                )
        return self._scanner_service


_state = AppState()


def get_state() -> AppState:
    return _state
