import json
from datetime import datetime, timezone
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from treescan.core.common.enums import ReportFormat
from treescan.core.exceptions import ReportWriteError
from treescan.features.hashing.domain.models import FileDigests
from treescan.features.hashing.service.api import digest_chunks
from treescan.features.report.data.json_writer import JsonReportWriter
from treescan.features.report.data.sql_models import FileDataModel, ScanMetaModel
from treescan.features.report.data.sqlite_writer import SqliteReportWriter
from treescan.features.report.service.api import build_report, detect_format, write_report
from treescan.features.source_scanner.domain.models import FileRecord

MOD_TIME = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def records():
    return [
        FileRecord(
            path="/data/a.txt",
            name="a.txt",
            extension="txt",
            size=5,
            modified_at=MOD_TIME,
            is_dir=False,
            permissions=0o100644,
            digests=digest_chunks([b"hello"]),
        ),
        FileRecord(
            path="/data/link",
            name="link",
            extension="",
            size=0,
            modified_at=MOD_TIME,
            is_dir=True,
            permissions=0o40755,
            digests=FileDigests.empty(),
        ),
    ]


def test_build_report_wraps_inventory(records):
    document = build_report(records, flags={"scan_sub_dirs": True}, host={"hostname": "h"})

    data = document.to_dict()
    assert [r["file_name"] for r in data["file_data"]] == ["a.txt", "link"]
    assert data["flag_data"] == {"scan_sub_dirs": True}
    assert data["host_data"] == {"hostname": "h"}


def test_build_report_with_empty_inventory():
    assert build_report([]).to_dict() == {"host_data": {}, "flag_data": {}, "file_data": []}


def test_build_report_does_not_alias_inputs(records):
    flags = {"debug": False}
    document = build_report(records, flags=flags)

    records.clear()
    flags["debug"] = True

    assert len(document.file_data) == 2
    assert document.flag_data == {"debug": False}


def test_record_invariant_blocks_partial_digests():
    with pytest.raises(ValueError):
        FileRecord(
            path="x", name="x", extension="", size=1, modified_at=MOD_TIME,
            is_dir=False, permissions=0, digests=FileDigests.empty(),
        )


def test_json_writer_overwrites_existing_file(records, tmp_path):
    destination = tmp_path / "file_data.json"
    destination.write_text("stale content that is not json")

    JsonReportWriter().write(build_report(records), destination)

    data = json.loads(destination.read_text(encoding="utf-8"))
    assert data["file_data"][0]["md5"] == "5d41402abc4b2a76b9719d911017c592"
    assert data["file_data"][0]["mod_time"] == "2024-05-01T12:30:00+00:00"
    assert data["file_data"][1]["md5"] == ""


def test_json_writer_failure_raises(records, tmp_path):
    with pytest.raises(ReportWriteError):
        JsonReportWriter().write(build_report(records), tmp_path / "no_such_dir" / "out.json")


def test_sqlite_writer_round_trip(records, tmp_path):
    destination = tmp_path / "inventory.sqlite"
    document = build_report(records, flags={"concurrency": 4}, host={"hostname": "h"})

    SqliteReportWriter().write(document, destination)

    engine = create_engine(f"sqlite:///{destination}")
    Session = sessionmaker(bind=engine)
    try:
        with Session() as db:
            rows = {row.file_name: row for row in db.query(FileDataModel).all()}
            assert set(rows) == {"a.txt", "link"}
            assert rows["a.txt"].sha1 == "aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d"
            assert rows["a.txt"].size == 5
            assert rows["link"].is_dir is True
            assert rows["link"].sha256 == ""

            meta = db.query(ScanMetaModel).one()
            assert meta.flag_data == {"concurrency": 4}
            assert meta.host_data == {"hostname": "h"}
    finally:
        engine.dispose()


def test_sqlite_writer_replaces_existing_file_and_cleans_up(records, tmp_path):
    destination = tmp_path / "inventory.db"
    destination.write_bytes(b"not a database")

    SqliteReportWriter().write(build_report(records), destination)

    assert destination.read_bytes()[:16] == b"SQLite format 3\x00"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["inventory.db"]


def test_sqlite_writer_failure_raises(records, tmp_path):
    with pytest.raises(ReportWriteError):
        SqliteReportWriter().write(build_report(records), tmp_path / "no_such_dir" / "out.db")


@pytest.mark.parametrize("name, expected", [
    ("file_data.json", ReportFormat.JSON),
    ("report.txt", ReportFormat.JSON),
    ("inventory.db", ReportFormat.SQLITE),
    ("inventory.SQLITE3", ReportFormat.SQLITE),
])
def test_detect_format(name, expected):
    assert detect_format(Path(name)) == expected


def test_write_report_dispatches_on_suffix(records, tmp_path):
    assert write_report(build_report(records), tmp_path / "a.json") == ReportFormat.JSON
    assert write_report(build_report(records), tmp_path / "a.db") == ReportFormat.SQLITE
