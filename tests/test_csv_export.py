"""CSV serialization and export file tests."""
import csv
import io
from datetime import datetime

import pytest

from pairscan.core.csv_export import (
    ExportError,
    escape_field,
    export_filename,
    serialize,
    write_csv_export,
)
from pairscan.models.scan import Record


def test_empty_list_is_header_only():
    assert serialize([]) == "o1,l1,s1"


def test_quoting_and_escaping():
    records = [Record(primary_code="A,1", secondary_code='B"2', sequence=1)]
    assert serialize(records) == 'o1,l1,s1\n"A,1","B""2",1'


def test_rows_in_append_order_without_trailing_newline():
    records = [Record("ID-001", "PC-777"), Record("ID-002", "PC-778")]
    text = serialize(records)
    assert text == "o1,l1,s1\nID-001,PC-777,1\nID-002,PC-778,1"
    assert not text.endswith("\n")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("plain", "plain"),
        ("with space", "with space"),
        ("a,b", '"a,b"'),
        ('say "hi"', '"say ""hi"""'),
        ("line\nbreak", '"line\nbreak"'),
        ("carriage\rreturn", '"carriage\rreturn"'),
    ],
)
def test_escape_field(value, expected):
    assert escape_field(value) == expected


def test_csv_module_reads_back_records():
    records = [
        Record("ID,001", 'PC"777'),
        Record("multi\nline", "plain"),
        Record("https://example.com/?a=1&b=2", "0123456789"),
    ]
    rows = list(csv.reader(io.StringIO(serialize(records), newline="")))
    assert rows[0] == ["o1", "l1", "s1"]
    parsed = [Record(o1, l1, int(s1)) for o1, l1, s1 in rows[1:]]
    assert parsed == records


def test_export_filename_format():
    assert export_filename(datetime(2026, 10, 18, 9, 5, 3)) == "scan_export_20261018_090503.csv"


def test_write_csv_export(tmp_path):
    records = [Record("ID-001", "PC-777")]
    out_dir = tmp_path / "exports"
    result = write_csv_export(records, out_dir, datetime(2026, 1, 2, 3, 4, 5))

    assert result.filename == "scan_export_20260102_030405.csv"
    assert result.path == out_dir / result.filename
    assert result.row_count == 1
    assert result.path.read_text(encoding="utf-8") == "o1,l1,s1\nID-001,PC-777,1"
    assert result.csv_text == serialize(records)


def test_write_csv_export_keeps_utf8(tmp_path):
    result = write_csv_export([Record("ÄÖÜ-1", "Ł-2")], tmp_path)
    assert result.path.read_bytes().decode("utf-8").endswith("ÄÖÜ-1,Ł-2,1")


def test_write_failure_raises_export_error(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x")
    with pytest.raises(ExportError) as exc:
        write_csv_export([Record("A", "B")], blocker / "exports")
    assert str(exc.value).startswith("Failed to create export file")
