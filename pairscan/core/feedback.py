"""Accept cue for successful scans (terminal bell + log line)."""
import logging
import sys

from pairscan.config import FEEDBACK_BELL
from pairscan.models.scan import ScanEvent

logger = logging.getLogger(__name__)


def play_accept_cue(event: ScanEvent, bell: bool = FEEDBACK_BELL) -> None:
    """Notify the operator that a scan was taken. Never affects workflow state."""
    logger.info("Accepted %s scan: %s", event.symbology.value, event.value)
    if bell:
        sys.stdout.write("\a")
        sys.stdout.flush()
