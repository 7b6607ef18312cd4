"""Tests for the entry store."""

import pytest
from unittest.mock import Mock

from watch_progress.core.models import Entry, ValidationError
from watch_progress.core.progress import ValueKind
from watch_progress.core.storage import JsonFileStorage, MemoryStorage
from watch_progress.core.store import EntryStore

PLAYLIST = "https://www.youtube.com/playlist?list=PL123"
VIDEO = "https://youtu.be/abc123"


@pytest.fixture
def store():
    """Store over empty in-memory storage."""
    return EntryStore(MemoryStorage())


@pytest.fixture
def three_entries(store):
    """Store holding three entries."""
    store.add(PLAYLIST, "First", "10")
    store.add(VIDEO, "Second", "1:00:00")
    store.add(PLAYLIST, "Third", "20")
    return store


class TestAdd:
    """Test adding entries."""

    def test_add_then_load(self, store):
        entry = store.add(PLAYLIST, "Python Course", "40")
        loaded = store.entries()

        assert loaded[-1] == entry
        assert loaded[-1].completed == "0"
        assert loaded[-1].kind is ValueKind.COUNT

    def test_add_appends_in_order(self, three_entries):
        assert [e.title for e in three_entries.entries()] == ["First", "Second", "Third"]

    def test_fields_are_trimmed(self, store):
        entry = store.add(f"  {VIDEO} ", "  Talk ", " 1:30:00 ")
        assert entry.link == VIDEO
        assert entry.title == "Talk"
        assert entry.total == "1:30:00"
        assert entry.kind is ValueKind.DURATION

    @pytest.mark.parametrize("link,title,total,field", [
        ("", "title", "10", "link"),
        (VIDEO, "   ", "10", "title"),
        (VIDEO, "title", "", "total"),
        (None, "title", "10", "link"),
    ])
    def test_empty_field_rejected(self, store, link, title, total, field):
        with pytest.raises(ValidationError) as exc_info:
            store.add(link, title, total)

        assert exc_info.value.field == field
        assert store.entries() == []

    def test_non_media_link_rejected(self, store):
        with pytest.raises(ValidationError) as exc_info:
            store.add("https://vimeo.com/123", "Other", "10")

        assert exc_info.value.field == "link"
        assert store.entries() == []

    def test_rejected_add_does_not_write(self):
        storage = Mock()
        storage.load.return_value = []
        store = EntryStore(storage)

        with pytest.raises(ValidationError):
            store.add("", "title", "10")

        storage.save.assert_not_called()

    def test_custom_media_hosts(self):
        store = EntryStore(MemoryStorage(), media_hosts=["vimeo.com"])
        store.add("https://vimeo.com/123", "Other", "10")

        with pytest.raises(ValidationError):
            store.add(VIDEO, "Talk", "10")


class TestUpdateCompleted:
    """Test replacing completed amounts."""

    def test_replaces_only_completed(self, three_entries):
        before = three_entries.entries()[1]

        assert three_entries.update_completed(1, " 30:00 ") is True

        after = three_entries.entries()[1]
        assert after.completed == "30:00"
        assert after.title == before.title
        assert after.total == before.total
        assert after.entry_id == before.entry_id
        assert after.percent == 50

    def test_empty_value_rejected(self, three_entries):
        with pytest.raises(ValidationError):
            three_entries.update_completed(0, "  ")

        assert three_entries.entries()[0].completed == "0"

    def test_missing_index_is_noop(self, three_entries):
        assert three_entries.update_completed(5, "3") is False
        assert all(e.completed == "0" for e in three_entries.entries())


class TestRemove:
    """Test removing entries."""

    def test_remove_shifts_indices(self, three_entries):
        before = three_entries.entries()

        assert three_entries.remove(0) is True

        after = three_entries.entries()
        assert len(after) == 2
        assert after[0] == before[1]
        assert after[1] == before[2]

    def test_missing_index_is_noop(self, three_entries):
        assert three_entries.remove(3) is False
        assert three_entries.remove(-1) is False
        assert len(three_entries.entries()) == 3

    def test_index_of(self, three_entries):
        entries = three_entries.entries()
        assert three_entries.index_of(entries[2].entry_id) == 2

        three_entries.remove(0)
        assert three_entries.index_of(entries[2].entry_id) == 1
        assert three_entries.index_of(entries[0].entry_id) is None


class TestFullListPersistence:
    """Test that mutations re-read and re-write the full list."""

    def test_changes_made_elsewhere_are_seen(self, tmp_path):
        data_file = tmp_path / "entries.json"
        first = EntryStore(JsonFileStorage(data_file))
        second = EntryStore(JsonFileStorage(data_file))

        first.add(VIDEO, "A", "10")
        second.add(VIDEO, "B", "10")

        assert [e.title for e in first.entries()] == ["A", "B"]

    def test_each_mutation_loads_and_saves(self):
        storage = Mock()
        storage.load.return_value = [Entry(link=VIDEO, title="A", total="10")]
        store = EntryStore(storage)

        store.update_completed(0, "5")

        storage.load.assert_called_once()
        saved = storage.save.call_args[0][0]
        assert len(saved) == 1
        assert saved[0].completed == "5"
