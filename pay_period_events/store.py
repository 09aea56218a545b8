"""Event record store: in-memory event table kept in sync with a blob."""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from pay_period_events.adapters import csv_adapter
from pay_period_events.adapters.blob_store import BlobNotFound, BlobStore
from pay_period_events.errors import StorageWriteError
from pay_period_events.pay_periods import resolve
from pay_period_events.schema import EventRecord, PayPeriod
from pay_period_events.validation import validate_submission

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    NOT_LOADED = "not_loaded"
    LOADED = "loaded"
    MISSING = "missing"
    FAILED = "failed"


class EventRecordStore:
    """Owns the event table and rewrites the whole blob on every append.

    There is no locking or version check on the blob: two sessions that
    append concurrently race and the last full write wins.
    """

    def __init__(
        self,
        blob_store: BlobStore,
        key: str,
        periods: tuple[PayPeriod, ...],
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.blob_store = blob_store
        self.key = key
        self.periods = periods
        self.clock = clock
        self.load_status = LoadStatus.NOT_LOADED
        self.load_error: Exception | None = None
        self._records: list[EventRecord] = []

    def load(self) -> tuple[EventRecord, ...]:
        """Hydrate the table from storage, falling back to an empty table."""

        self.load_error = None
        try:
            payload = self.blob_store.get(self.key)
            records = csv_adapter.parse(payload)
        except BlobNotFound:
            logger.info("No event table at %s, starting empty", self.key)
            self.load_status = LoadStatus.MISSING
            records = []
        except Exception as exc:  # noqa: BLE001
            logger.warning("Could not read event table at %s, starting empty", self.key, exc_info=True)
            self.load_status = LoadStatus.FAILED
            self.load_error = exc
            records = []
        else:
            self.load_status = LoadStatus.LOADED
            logger.info("Loaded %d events from %s", len(records), self.key)

        self._records = records
        return self.render()

    def append(self, name: Any, event_date: Any, time: Any, duration: Any) -> tuple[EventRecord, ...]:
        """Validate a submission, add it to the table and persist the table.

        Raises ValidationError before anything changes. If the write fails,
        the new record is removed again and StorageWriteError is raised.
        """

        submission = validate_submission(name, event_date, time, duration)
        record = EventRecord(
            name=submission.name,
            date=submission.date,
            time=submission.time,
            duration_minutes=submission.duration_minutes,
            pay_period=resolve(submission.date, self.periods),
            submitted_at=self.clock().replace(microsecond=0),
        )

        if self.load_status is LoadStatus.FAILED:
            logger.warning("Overwriting unreadable event table at %s; its previous contents are lost", self.key)

        self._records.append(record)
        try:
            self.blob_store.put(self.key, csv_adapter.serialize(self._records))
        except Exception as exc:
            self._records.pop()
            logger.error("Failed to persist event table to %s", self.key, exc_info=True)
            raise StorageWriteError(f"Could not save the event table: {exc}") from exc

        logger.info("Recorded event '%s' in pay period %s", record.name, record.pay_period or "(none)")
        return self.render()

    def render(self) -> tuple[EventRecord, ...]:
        return tuple(self._records)

    def rows(self) -> list[dict[str, str]]:
        """Snapshot as column-keyed rows, in the persisted text format."""
        return [csv_adapter.to_row(record) for record in self._records]
