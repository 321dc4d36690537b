"""Configuration: env, export location, scanner and timing constants."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of pairscan package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so PAIRSCAN_* overrides are set
load_dotenv(BASE_DIR / ".env")

DATA_DIR = BASE_DIR / "data"
EXPORT_DIR = Path(os.getenv("PAIRSCAN_EXPORT_DIR", str(DATA_DIR / "exports")))

# API
API_HOST = os.getenv("PAIRSCAN_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("PAIRSCAN_API_PORT", "8000"))

# Capture workflow
DEBOUNCE_SEC = 0.8  # identical value inside this window is a re-read of the same code
STATUS_CLEAR_SEC = 2.0
SEQUENCE = 1  # s1 column; only one sequence per pairing for now

CSV_HEADER = ("o1", "l1", "s1")
EXPORT_FILENAME_FORMAT = "scan_export_%Y%m%d_%H%M%S.csv"

STEP1_TITLE = "Step 1/2: Scan ID QR"
STEP2_TITLE = "Step 2/2: Scan Post Code128"

# Camera scanner
CAMERA_INDEX = int(os.getenv("PAIRSCAN_CAMERA_INDEX", "0"))
SCAN_INTERVAL_SEC = float(os.getenv("PAIRSCAN_SCAN_INTERVAL_SEC", "0.1"))
SCANNER_AUTOSTART = os.getenv("PAIRSCAN_SCANNER_AUTOSTART", "0").lower() in ("1", "true", "yes")

# Terminal bell on accepted scans
FEEDBACK_BELL = os.getenv("PAIRSCAN_FEEDBACK_BELL", "0").lower() in ("1", "true", "yes")

# Hardware simulation (for development without a camera)
SIMULATE_HARDWARE = os.getenv("PAIRSCAN_SIMULATE_HARDWARE", "0").lower() in ("1", "true", "yes")


def ensure_export_dir(directory: Path = EXPORT_DIR) -> None:
    directory.mkdir(parents=True, exist_ok=True)
