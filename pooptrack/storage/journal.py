import json
import logging
from typing import Callable, Dict, List, Optional

from pydantic import ValidationError

from pooptrack.config import STORAGE_KEY, SAVE_FAILED_TITLE, SAVE_FAILED_MESSAGE
from pooptrack.models import Entry
from pooptrack.storage.kvstore import FileKeyValueStore, StorageError

logger = logging.getLogger("PoopTrack.Store")

Mapping = Dict[str, List[Entry]]
Notifier = Callable[[str, str], None]


def replace_day(mapping: Mapping, date_key: str, entries: List[Entry]) -> Mapping:
    """Return a copy of ``mapping`` with ``date_key`` holding ``entries``.

    An empty list is still stored, so the day keeps counting as logged.
    """
    updated = dict(mapping)
    updated[date_key] = list(entries)
    return updated


def _parse_day(date_key: str, raw_entries) -> Optional[List[Entry]]:
    if not isinstance(raw_entries, list):
        logger.warning(f"Dropping {date_key}: expected a list, got {type(raw_entries).__name__}")
        return None
    entries = []
    for raw in raw_entries:
        try:
            entry = Entry.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Dropping invalid entry on {date_key}: {e.error_count()} error(s)")
            continue
        if entry.date != date_key:
            logger.warning(f"Dropping entry {entry.id}: dated {entry.date} but stored under {date_key}")
            continue
        entries.append(entry)
    return entries


def _dump(mapping: Mapping) -> str:
    return json.dumps({
        d: [e.model_dump(by_alias=True) for e in entries]
        for d, entries in mapping.items()
    })


class EntryStore:
    """In-memory day -> entries mapping mirrored to a key-value backend.

    ``entries`` is only ever replaced wholesale, and only after the backend
    accepted the new snapshot.
    """

    def __init__(self, backend=None, key: str = STORAGE_KEY, notify: Optional[Notifier] = None):
        self.backend = backend if backend is not None else FileKeyValueStore()
        self.key = key
        self.notify = notify
        self.entries: Mapping = {}

    def load(self) -> Mapping:
        try:
            raw = self.backend.get(self.key)
            if raw is None:
                logger.info("No stored entries found")
                self.entries = {}
                return self.entries
            data = json.loads(raw)
        except (StorageError, OSError, json.JSONDecodeError, TypeError) as e:
            logger.warning(f"Error loading entries: {e}")
            self.entries = {}
            return self.entries

        if not isinstance(data, dict):
            logger.warning(f"Error loading entries: stored value is a {type(data).__name__}, not an object")
            self.entries = {}
            return self.entries

        loaded = {}
        for date_key, raw_entries in data.items():
            entries = _parse_day(date_key, raw_entries)
            if entries is not None:
                loaded[date_key] = entries
        self.entries = loaded
        logger.info(f"Loaded entries for {len(loaded)} day(s)")
        return self.entries

    def persist(self, mapping: Mapping) -> bool:
        try:
            self.backend.set(self.key, _dump(mapping))
        except (StorageError, OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving entries: {e}")
            if self.notify is not None:
                self.notify(SAVE_FAILED_TITLE, SAVE_FAILED_MESSAGE)
            return False
        self.entries = mapping
        logger.info(f"Saved entries for {len(mapping)} day(s)")
        return True
