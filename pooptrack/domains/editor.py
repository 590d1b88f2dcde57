import logging
from datetime import datetime
from typing import Callable, List, Optional

from pooptrack.config import KINDS, RATINGS
from pooptrack.domains.tracker import counts_for_day
from pooptrack.models import Entry
from pooptrack.storage.journal import EntryStore, replace_day

logger = logging.getLogger("PoopTrack.Editor")

Clock = Callable[[], datetime]


def _check_bristol(bristol_type: Optional[int]) -> None:
    if bristol_type is not None and not 1 <= bristol_type <= 7:
        raise ValueError(f"Bristol type must be between 1 and 7, got {bristol_type}")


def build_day_entries(date_key: str, successful: int, accidents: int, failed: int,
                      bristol_type: Optional[int], now: datetime) -> List[Entry]:
    base_id = int(now.timestamp() * 1000)
    stamp = now.strftime("%H:%M:%S")
    entries = []
    for kind, n in zip(KINDS, (successful, accidents, failed)):
        for _ in range(n):
            entries.append(Entry(
                id=base_id + len(entries),
                date=date_key,
                time=stamp,
                kind=kind,
                bristol_type=bristol_type,
                notes="",
                rating=RATINGS[kind],
            ))
    return entries


def day_bristol(mapping, date_key: str) -> Optional[int]:
    """The Bristol type shared by every entry of the day, else None."""
    types = {e.bristol_type for e in mapping.get(date_key, [])}
    return types.pop() if len(types) == 1 else None


def apply_bulk_edit(store: EntryStore, date_key: str, successful: int, accidents: int,
                    failed: int, bristol_type: Optional[int] = None,
                    now: Optional[Clock] = None) -> bool:
    """Replace the whole day with freshly built entries and persist.

    Returns False when the store could not be written; the in-memory
    mapping is then left as it was.
    """
    if min(successful, accidents, failed) < 0:
        raise ValueError("Counts must be non-negative")
    _check_bristol(bristol_type)
    clock = now or datetime.now
    entries = build_day_entries(date_key, successful, accidents, failed, bristol_type, clock())
    logger.debug(f"Bulk edit {date_key}: {successful}/{accidents}/{failed} bristol={bristol_type}")
    return store.persist(replace_day(store.entries, date_key, entries))


class EditSession:
    """Stepper state for one open-and-save cycle on a single date."""

    FIELDS = ("successful", "accidents", "failed")

    def __init__(self, store: EntryStore, date_key: str, now: Optional[Clock] = None):
        self.store = store
        self.date_key = date_key
        self.now = now
        counts = counts_for_day(store.entries, date_key)
        self.counts = dict(zip(self.FIELDS, counts))
        self.bristol_type: Optional[int] = day_bristol(store.entries, date_key)
        self.is_open = True

    def _field(self, name: str) -> str:
        if name not in self.FIELDS:
            raise KeyError(f"Unknown counter {name}")
        return name

    def increment(self, name: str) -> int:
        name = self._field(name)
        self.counts[name] += 1
        return self.counts[name]

    def decrement(self, name: str) -> int:
        name = self._field(name)
        self.counts[name] = max(0, self.counts[name] - 1)
        return self.counts[name]

    def set_bristol_type(self, value: Optional[int]) -> None:
        _check_bristol(value)
        self.bristol_type = value

    def save(self) -> bool:
        ok = apply_bulk_edit(
            self.store, self.date_key,
            self.counts["successful"], self.counts["accidents"], self.counts["failed"],
            self.bristol_type, now=self.now,
        )
        if ok:
            self.is_open = False
        return ok

    def cancel(self) -> None:
        self.is_open = False
