"""CSV text for captured records (o1,l1,s1) and export files."""
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from pairscan.config import CSV_HEADER, EXPORT_FILENAME_FORMAT
from pairscan.models.scan import Record

logger = logging.getLogger(__name__)

_NEEDS_QUOTES = (",", '"', "\n", "\r")


class ExportError(Exception):
    """Export file could not be written. str() is the user-facing message."""


@dataclass(frozen=True)
class ExportResult:
    filename: str
    path: Path
    csv_text: str
    row_count: int


def escape_field(value: str) -> str:
    """Quote only fields containing a comma, quote or line break; double inner quotes."""
    if any(ch in value for ch in _NEEDS_QUOTES):
        return '"' + value.replace('"', '""') + '"'
    return value


def serialize(records: Iterable[Record]) -> str:
    """Header plus one row per record, newline-joined, no trailing newline."""
    lines = [",".join(CSV_HEADER)]
    for record in records:
        lines.append(",".join(escape_field(field) for field in record.as_row()))
    return "\n".join(lines)


def export_filename(now: Optional[datetime] = None) -> str:
    """scan_export_YYYYMMDD_HHMMSS.csv for the given (or current local) time."""
    return (now or datetime.now()).strftime(EXPORT_FILENAME_FORMAT)


def write_csv_export(
    records: Iterable[Record],
    directory: Path,
    now: Optional[datetime] = None,
) -> ExportResult:
    """Serialize records and write them as UTF-8 into directory. Does not touch the records."""
    rows = list(records)
    csv_text = serialize(rows)
    filename = export_filename(now)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExportError(f"Failed to create export file: {e}") from e
    path = directory / filename
    try:
        path.write_text(csv_text, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Export failed: {e}") from e
    logger.info("Exported %d rows to %s", len(rows), path)
    return ExportResult(filename=filename, path=path, csv_text=csv_text, row_count=len(rows))
