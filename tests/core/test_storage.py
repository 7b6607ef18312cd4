"""Tests for entry list persistence."""

import json

import pytest

from watch_progress.core.models import Entry
from watch_progress.core.storage import JsonFileStorage, MemoryStorage


@pytest.fixture
def data_file(tmp_path):
    """Path to a data file that does not exist yet."""
    return tmp_path / "nested" / "entries.json"


@pytest.fixture
def sample_entries():
    """Two entries of different kinds."""
    return [
        Entry(link="https://youtube.com/playlist?list=PL1", title="Course", total="40", completed="12"),
        Entry(link="https://youtu.be/abc", title="Talk", total="1:12:30", completed="30:00"),
    ]


class TestJsonFileStorage:
    """Test JSON file storage."""

    def test_missing_file_loads_empty(self, data_file):
        assert JsonFileStorage(data_file).load() == []

    def test_save_and_load(self, data_file, sample_entries):
        storage = JsonFileStorage(data_file)
        storage.save(sample_entries)

        assert data_file.exists()
        assert JsonFileStorage(data_file).load() == sample_entries

    def test_save_overwrites(self, data_file, sample_entries):
        storage = JsonFileStorage(data_file)
        storage.save(sample_entries)
        storage.save(sample_entries[:1])

        assert storage.load() == sample_entries[:1]

    def test_file_format(self, data_file, sample_entries):
        JsonFileStorage(data_file).save(sample_entries[:1])
        records = json.loads(data_file.read_text())

        assert records[0]["title"] == "Course"
        assert records[0]["total"] == "40"
        assert records[0]["completed"] == "12"
        assert records[0]["kind"] == "count"

    def test_malformed_json_degrades_to_empty(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text("{not json")

        assert JsonFileStorage(data_file).load() == []

    def test_non_list_degrades_to_empty(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text('{"link": "x"}')

        assert JsonFileStorage(data_file).load() == []

    def test_malformed_records_skipped(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(json.dumps([
            {"link": "https://youtu.be/a", "title": "Kept", "total": "10"},
            {"title": "No link"},
            "not a record",
        ]))

        entries = JsonFileStorage(data_file).load()
        assert [e.title for e in entries] == ["Kept"]

    def test_plain_records_load(self, data_file):
        """Records holding only link, title, total and completed load."""
        data_file.parent.mkdir(parents=True)
        data_file.write_text(json.dumps([
            {"link": "https://youtu.be/a", "title": "Talk", "total": "20:00", "completed": "5:00"}
        ]))

        entry = JsonFileStorage(data_file).load()[0]
        assert entry.percent == 25


class TestMemoryStorage:
    """Test in-memory storage."""

    def test_starts_empty(self):
        assert MemoryStorage().load() == []

    def test_loads_are_copies(self, sample_entries):
        """Mutating loaded entries does not change stored state."""
        storage = MemoryStorage(sample_entries)
        loaded = storage.load()
        loaded[0].completed = "40"
        loaded.pop()

        assert storage.load() == sample_entries
