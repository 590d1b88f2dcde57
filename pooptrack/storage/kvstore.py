import os
import json
import logging
from pathlib import Path
from typing import Dict, Optional

from pooptrack.config import STORAGE_FILE

logger = logging.getLogger("PoopTrack.KeyValue")


class StorageError(Exception):
    """Raised when the backing file cannot be read or written."""


class FileKeyValueStore:
    """String-keyed store kept as a single JSON object on disk."""

    def __init__(self, path: Path = STORAGE_FILE):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        # an unreadable file is replaced, the same way load() reads it as empty
        try:
            data = self._read()
        except StorageError as e:
            logger.warning(f"Overwriting unreadable store: {e}")
            data = {}
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(data, f)
                f.flush()
                os.fsync(f.fileno())
            tmp.replace(self.path)
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e
