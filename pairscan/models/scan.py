"""Scan events and completed pairings."""
from dataclasses import dataclass
from enum import Enum

from pairscan.config import SEQUENCE


class Symbology(str, Enum):
    """Barcode symbology as reported by the scanner."""
    QR = "qr"
    CODE128 = "code128"
    OTHER = "other"

    @classmethod
    def parse(cls, name: str | None) -> "Symbology":
        """Map an API or decoder type name (e.g. 'qr', 'QRCODE', 'CODE128') to a symbology."""
        key = (name or "").strip().lower().replace("-", "").replace("_", "")
        if key in ("qr", "qrcode"):
            return cls.QR
        if key == "code128":
            return cls.CODE128
        return cls.OTHER


@dataclass(frozen=True)
class ScanEvent:
    """One decoded read from the scanner."""
    value: str
    symbology: Symbology


@dataclass(frozen=True)
class Record:
    """Completed pairing: ID QR (o1) + post Code128 (l1)."""
    primary_code: str
    secondary_code: str
    sequence: int = SEQUENCE

    def as_row(self) -> tuple[str, str, str]:
        return (self.primary_code, self.secondary_code, str(self.sequence))
