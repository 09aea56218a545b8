"""Demo script for pay-period-events."""

import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pay_period_events.adapters.blob_store import InMemoryBlobStore
from pay_period_events.pay_periods import generate
from pay_period_events.store import EventRecordStore


def main() -> None:
    blobs = InMemoryBlobStore()
    store = EventRecordStore(blobs, "data/events.csv", generate(date(2025, 2, 16), 2))
    store.load()
    store.append("Standup", date(2025, 2, 20), "0930", 15)
    store.append("Offsite", date(2025, 4, 1), "1330", 240)

    for record in store.render():
        print(record.name, record.date, record.pay_period or "(no pay period)")
    print(blobs.get("data/events.csv").decode("utf-8"))


if __name__ == "__main__":
    main()
