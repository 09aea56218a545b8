"""Pay period generation and date-to-period lookup."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional

from pay_period_events.schema import DATE_FORMAT, PayPeriod

PERIOD_DAYS = 14


def period_label(start: date, end: date) -> str:
    return f"{start.strftime(DATE_FORMAT)} to {end.strftime(DATE_FORMAT)}"


def generate(anchor_date: date, count: int) -> tuple[PayPeriod, ...]:
    """Build ``count`` contiguous 14-day periods starting on ``anchor_date``."""

    if count <= 0:
        raise ValueError(f"Pay period count must be positive, got {count}")

    periods = []
    for index in range(count):
        start = anchor_date + timedelta(days=PERIOD_DAYS * index)
        end = start + timedelta(days=PERIOD_DAYS - 1)
        periods.append(PayPeriod(start=start, end=end, label=period_label(start, end)))
    return tuple(periods)


def resolve(day: date, periods: Iterable[PayPeriod]) -> Optional[str]:
    """Return the label of the first period containing ``day``, or None."""

    for period in periods:
        if period.contains(day):
            return period.label
    return None


def coverage(periods: tuple[PayPeriod, ...]) -> tuple[date, date]:
    """First start and last end of a generated table."""

    if not periods:
        raise ValueError("Pay period table is empty")
    return periods[0].start, periods[-1].end
