from datetime import datetime

import pytest

from pooptrack.storage.journal import EntryStore
from pooptrack.storage.kvstore import FileKeyValueStore, StorageError


class BrokenStore(FileKeyValueStore):
    """Reads normally, fails every write."""

    def set(self, key, value):
        raise StorageError("disk full")


class Alerts:
    def __init__(self):
        self.calls = []

    def __call__(self, title, message):
        self.calls.append((title, message))


@pytest.fixture
def alerts():
    return Alerts()


@pytest.fixture
def backend(tmp_path):
    return FileKeyValueStore(tmp_path / "storage.json")


@pytest.fixture
def store(backend, alerts):
    s = EntryStore(backend, notify=alerts)
    s.load()
    return s


@pytest.fixture
def clock():
    return lambda: datetime(2024, 1, 15, 8, 30, 5)
