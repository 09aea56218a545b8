"""Core data schema for pay periods and event records."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

EVENT_COLUMNS = (
    "Event_Name",
    "Event_Date",
    "Event_Time",
    "Event_Duration",
    "Pay_Period",
    "Form_Submission_Timestamp",
)


@dataclass(frozen=True)
class PayPeriod:
    """Fixed 14-day window, both ends inclusive."""

    start: date
    end: date
    label: str

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class EventRecord:
    """A submitted event, as stored in the event table."""

    name: str
    date: date
    time: str
    duration_minutes: float
    pay_period: Optional[str]
    submitted_at: datetime
