"""Tests for the snapshot record source."""

import json
import logging

import pytest

from application_monitor.sources.base import RecordSourceError
from application_monitor.sources.snapshot import SnapshotSource


@pytest.fixture
def write_snapshot(tmp_path):
    def _write(payload, name="jobs.json"):
        path = tmp_path / name
        path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
        return path

    return _write


class TestSnapshotSource:
    def test_reads_api_envelope(self, write_snapshot):
        path = write_snapshot({"jobDB": [{"_id": "1", "userID": "U1"}, {"_id": "2", "userID": "U2"}]})
        records = SnapshotSource(path).fetch()
        assert [r.key for r in records] == ["1", "2"]
        assert records[0].raw == {"_id": "1", "userID": "U1"}

    def test_reads_bare_list(self, write_snapshot):
        path = write_snapshot([{"_id": "1"}])
        assert len(SnapshotSource(path).fetch()) == 1

    @pytest.mark.parametrize("payload", [{"jobDB": None}, {"other": []}, "null", 5])
    def test_unexpected_shape_is_empty(self, write_snapshot, payload, caplog):
        path = write_snapshot(payload)
        with caplog.at_level(logging.WARNING):
            assert SnapshotSource(path).fetch() == []
        assert "No record list" in caplog.text

    def test_skips_non_object_entries(self, write_snapshot):
        path = write_snapshot([{"_id": "1"}, "junk", 3, None])
        assert [r.key for r in SnapshotSource(path).fetch()] == ["1"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(RecordSourceError):
            SnapshotSource(tmp_path / "missing.json").fetch()

    def test_invalid_json(self, write_snapshot):
        with pytest.raises(RecordSourceError):
            SnapshotSource(write_snapshot("{not json")).fetch()

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"_id": "\xff"}]')
        with pytest.raises(RecordSourceError):
            SnapshotSource(path).fetch()
