"""Entry list persistence."""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from .models import Entry

# Configure logging
logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path.home() / ".watch_progress" / "entries.json"


class EntryStorage:
    """Load/save contract for the full entry list.

    There is no incremental format: ``save`` always overwrites the whole
    list, so only one writer may use a storage location at a time.
    """

    def load(self) -> List[Entry]:
        raise NotImplementedError

    def save(self, entries: List[Entry]) -> None:
        raise NotImplementedError


class MemoryStorage(EntryStorage):
    """In-process storage, handy for tests and embedding shells."""

    def __init__(self, entries: Optional[List[Entry]] = None):
        self._records = [entry.to_dict() for entry in entries or []]

    def load(self) -> List[Entry]:
        return [Entry.from_dict(record) for record in self._records]

    def save(self, entries: List[Entry]) -> None:
        self._records = [entry.to_dict() for entry in entries]


class JsonFileStorage(EntryStorage):
    """Stores the entry list as a JSON array on disk."""

    def __init__(self, data_file: Optional[Path] = None):
        """Initialize JSON storage.

        Args:
            data_file: Path to the data file
        """
        self.data_file = Path(data_file) if data_file else DEFAULT_DATA_FILE

    def load(self) -> List[Entry]:
        """Load entries from file.

        Unreadable or malformed data degrades to an empty list.

        Returns:
            List of entries in stored order
        """
        if not self.data_file.exists():
            return []

        try:
            with open(self.data_file, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, IOError) as e:
            logger.error(f"Failed to load data file {self.data_file}: {e}")
            return []

        if not isinstance(raw, list):
            logger.error(f"Data file {self.data_file} does not contain a list")
            return []

        return self._parse_records(raw)

    def save(self, entries: List[Entry]) -> None:
        """Save entries to file, replacing prior contents.

        Args:
            entries: Full entry list
        """
        self.data_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.data_file, 'w', encoding='utf-8') as f:
            json.dump([entry.to_dict() for entry in entries], f, indent=2)

    def _parse_records(self, records: List[Any]) -> List[Entry]:
        entries = []
        for i, record in enumerate(records):
            try:
                entries.append(Entry.from_dict(record))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed record {i} in {self.data_file}: {e}")
        return entries
