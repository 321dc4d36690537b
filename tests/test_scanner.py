"""Symbology mapping and scanner service tests (no camera required)."""
import asyncio
from types import SimpleNamespace

import pytest

from pairscan.core import scanner_service
from pairscan.core.scanner_service import ScannerService, decode_frame
from pairscan.models.scan import ScanEvent, Symbology


@pytest.mark.parametrize(
    "name,expected",
    [
        ("qr", Symbology.QR),
        ("QR", Symbology.QR),
        ("QRCODE", Symbology.QR),
        ("code128", Symbology.CODE128),
        ("CODE128", Symbology.CODE128),
        ("code_128", Symbology.CODE128),
        ("EAN13", Symbology.OTHER),
        ("", Symbology.OTHER),
        (None, Symbology.OTHER),
    ],
)
def test_symbology_parse(name, expected):
    assert Symbology.parse(name) is expected


def test_decode_frame_takes_first_readable(monkeypatch):
    results = [
        SimpleNamespace(data=b"", type="QRCODE"),
        SimpleNamespace(data=b"ID-001", type="QRCODE"),
        SimpleNamespace(data=b"PC-777", type="CODE128"),
    ]
    monkeypatch.setattr(scanner_service, "pyzbar_decode", lambda frame: results, raising=False)
    assert decode_frame(object()) == ScanEvent("ID-001", Symbology.QR)


def test_decode_frame_nothing_found(monkeypatch):
    monkeypatch.setattr(scanner_service, "pyzbar_decode", lambda frame: [], raising=False)
    assert decode_frame(object()) is None


def test_submit_forwards_to_callback():
    seen = []
    service = ScannerService(on_scan=seen.append, simulate=True)
    service.submit("ID-001", Symbology.QR)
    assert seen == [ScanEvent("ID-001", Symbology.QR)]
    assert service.last_event == ScanEvent("ID-001", Symbology.QR)


def test_simulated_service_does_not_start():
    service = ScannerService(on_scan=lambda e: None, simulate=True)
    loop = asyncio.new_event_loop()
    try:
        assert service.start(loop) is False
    finally:
        loop.close()
    assert service.is_running is False
    service.stop()


def test_thread_reads_are_marshalled_onto_loop():
    seen = []
    service = ScannerService(on_scan=seen.append, simulate=True)

    async def scenario():
        service._loop = asyncio.get_running_loop()
        await asyncio.get_running_loop().run_in_executor(
            None, service._deliver_from_thread, ScanEvent("ID-7", Symbology.QR)
        )
        await asyncio.sleep(0)

    asyncio.run(scenario())
    assert seen == [ScanEvent("ID-7", Symbology.QR)]
