"""CSV adapter for the persisted event table."""

from __future__ import annotations

import csv
import io
from datetime import datetime
from typing import Iterable

from pay_period_events.schema import DATE_FORMAT, EVENT_COLUMNS, TIMESTAMP_FORMAT, EventRecord


def _format_duration(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _parse_row(row: dict, row_number: int) -> EventRecord:
    missing = [column for column in EVENT_COLUMNS if row.get(column) is None]
    if missing:
        raise ValueError(f"Row {row_number}: missing columns {missing}")

    name = row["Event_Name"]
    if not name:
        raise ValueError(f"Row {row_number}: empty Event_Name")

    try:
        event_date = datetime.strptime(row["Event_Date"], DATE_FORMAT).date()
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: malformed Event_Date") from exc

    try:
        submitted_at = datetime.strptime(row["Form_Submission_Timestamp"], TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: malformed Form_Submission_Timestamp") from exc

    try:
        duration = float(row["Event_Duration"])
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: invalid Event_Duration") from exc

    return EventRecord(
        name=name,
        date=event_date,
        time=row["Event_Time"],
        duration_minutes=duration,
        pay_period=row["Pay_Period"] or None,
        submitted_at=submitted_at,
    )


def to_row(record: EventRecord) -> dict[str, str]:
    """Render a record as column-keyed text, exactly as it is persisted."""

    return {
        "Event_Name": record.name,
        "Event_Date": record.date.strftime(DATE_FORMAT),
        "Event_Time": record.time,
        "Event_Duration": _format_duration(record.duration_minutes),
        "Pay_Period": record.pay_period or "",
        "Form_Submission_Timestamp": record.submitted_at.strftime(TIMESTAMP_FORMAT),
    }


def serialize(records: Iterable[EventRecord]) -> bytes:
    """Encode the whole event table as UTF-8 CSV with a header row."""

    buffer = io.StringIO(newline="")
    writer = csv.DictWriter(buffer, fieldnames=list(EVENT_COLUMNS))
    writer.writeheader()
    for record in records:
        writer.writerow(to_row(record))
    return buffer.getvalue().encode("utf-8")


def parse(payload: bytes) -> list[EventRecord]:
    """Decode a CSV payload produced by ``serialize``."""

    text = payload.decode("utf-8")
    if not text.strip():
        return []

    reader = csv.DictReader(io.StringIO(text, newline=""))
    if not reader.fieldnames:
        return []
    missing = [column for column in EVENT_COLUMNS if column not in reader.fieldnames]
    if missing:
        raise ValueError(f"Header: missing columns {missing}")

    return [_parse_row(row, row_number) for row_number, row in enumerate(reader, start=2)]
