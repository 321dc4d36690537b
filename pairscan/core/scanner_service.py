"""Camera read loop (OpenCV + pyzbar) feeding decoded codes to the capture workflow."""
import asyncio
import logging
import threading
from typing import Callable, Optional

from pairscan.config import CAMERA_INDEX, SCAN_INTERVAL_SEC, SIMULATE_HARDWARE
from pairscan.models.scan import ScanEvent, Symbology

logger = logging.getLogger(__name__)

# Optional: camera stack for real hardware (pip install pairscan[camera])
_CAMERA_AVAILABLE = False
try:
    import cv2
    from pyzbar.pyzbar import decode as pyzbar_decode
    _CAMERA_AVAILABLE = True
except ImportError:
    pass


def decode_frame(frame) -> Optional[ScanEvent]:
    """Decode one frame; returns the first readable code or None."""
    for obj in pyzbar_decode(frame):
        if not obj.data:
            continue
        value = obj.data.decode("utf-8", errors="replace")
        return ScanEvent(value=value, symbology=Symbology.parse(obj.type))
    return None


class ScannerService:
    """Start/stop camera polling; every read is delivered on the event loop via on_scan."""

    def __init__(
        self,
        on_scan: Callable[[ScanEvent], object],
        simulate: bool = SIMULATE_HARDWARE or not _CAMERA_AVAILABLE,
        camera_index: int = CAMERA_INDEX,
    ) -> None:
        self._on_scan = on_scan
        self._simulate = simulate
        self._camera_index = camera_index
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._poll_thread: Optional[threading.Thread] = None
        self._stop_poll = threading.Event()
        self._last_event: Optional[ScanEvent] = None

    @property
    def is_simulated(self) -> bool:
        return self._simulate

    @property
    def is_running(self) -> bool:
        return self._poll_thread is not None and self._poll_thread.is_alive()

    @property
    def last_event(self) -> Optional[ScanEvent]:
        return self._last_event

    def submit(self, value: str, symbology: Symbology) -> object:
        """Deliver a read directly. Must be called on the event loop thread."""
        event = ScanEvent(value=value, symbology=symbology)
        self._last_event = event
        return self._on_scan(event)

    def _deliver_from_thread(self, event: ScanEvent) -> None:
        if self._loop is None or self._loop.is_closed():
            return
        self._loop.call_soon_threadsafe(self.submit, event.value, event.symbology)

    def start(self, loop: asyncio.AbstractEventLoop, interval_sec: float = SCAN_INTERVAL_SEC) -> bool:
        """Start background camera loop. Returns False when simulated or already running."""
        if self._simulate:
            logger.info("Scanner simulated; use /api/scanner/simulate to feed reads")
            return False
        if self.is_running:
            return False
        self._loop = loop
        self._stop_poll.clear()

        def _poll_loop() -> None:
            capture = cv2.VideoCapture(self._camera_index)
            if not capture.isOpened():
                logger.warning("Scanner: could not open camera %d", self._camera_index)
                return
            logger.info("Scanner: camera %d opened", self._camera_index)
            try:
                while not self._stop_poll.is_set():
                    ok, frame = capture.read()
                    if not ok:
                        logger.warning("Scanner: frame read failed")
                        self._stop_poll.wait(timeout=interval_sec)
                        continue
                    event = decode_frame(frame)
                    if event is not None:
                        self._deliver_from_thread(event)
                    self._stop_poll.wait(timeout=interval_sec)
            finally:
                capture.release()
                logger.info("Scanner: camera %d released", self._camera_index)

        self._poll_thread = threading.Thread(target=_poll_loop, daemon=True)
        self._poll_thread.start()
        return True

    def stop(self) -> None:
        """Stop background camera loop. Blocks up to 2 s joining the poll thread."""
        self._stop_poll.set()
        if self._poll_thread:
            self._poll_thread.join(timeout=2.0)
            self._poll_thread = None
