import json
from collections import Counter
from pooptrack.storage.journal import EntryStore
from pooptrack.storage.kvstore import StorageError


def main(store=None):
    store = store or EntryStore()
    try:
        raw = store.backend.get(store.key)
    except StorageError as e:
        print(f"ERROR: {e}")
        return
    if not raw:
        print(f"No records found under '{store.key}'")
        return

    entries = store.load()
    kinds = Counter(e.kind for day in entries.values() for e in day)

    print(f"Found {sum(kinds.values())} entries across {len(entries)} days:")
    print(f"  Normal: {kinds['Normal']}")
    print(f"  Accidents: {kinds['Accident']}")
    print(f"  Failed: {kinds['Failed']}")

    try:
        print(json.dumps(json.loads(raw), indent=2))
    except json.JSONDecodeError:
        print(raw)

if __name__ == "__main__":
    main()
