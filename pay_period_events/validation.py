"""Validation of raw form fields into a typed submission."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from pay_period_events.errors import ValidationError
from pay_period_events.schema import DATE_FORMAT

MISSING_FIELDS_MESSAGE = "Error: All fields must be filled out."
TIME_FORMAT_MESSAGE = "Error: Event Time must be in HHMM format (military time) without a colon."
DURATION_NUMBER_MESSAGE = "Error: Event Duration must be a number of minutes."
DURATION_NEGATIVE_MESSAGE = "Error: Event Duration cannot be negative."
DATE_MESSAGE = "Error: Event Date must be a calendar date (YYYY-MM-DD)."

_TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3])[0-5][0-9]")

__all__ = ["Submission", "ValidationError", "validate_submission"]


@dataclass(frozen=True)
class Submission:
    name: str
    date: date
    time: str
    duration_minutes: float


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, float):
        return math.isnan(value)
    return False


def _parse_duration(value: Any) -> float:
    if isinstance(value, bool):
        raise ValidationError(DURATION_NUMBER_MESSAGE)
    try:
        duration = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(DURATION_NUMBER_MESSAGE) from exc
    if math.isinf(duration) or math.isnan(duration):
        raise ValidationError(DURATION_NUMBER_MESSAGE)
    if duration < 0:
        raise ValidationError(DURATION_NEGATIVE_MESSAGE)
    return duration


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), DATE_FORMAT).date()
        except ValueError as exc:
            raise ValidationError(DATE_MESSAGE) from exc
    raise ValidationError(DATE_MESSAGE)


def validate_submission(name: Any, event_date: Any, time: Any, duration: Any) -> Submission:
    """Check the form fields in order and return a typed submission.

    The first failing check raises ValidationError with the message to show
    on the form's status line.
    """

    if _is_missing(name):
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    if _is_missing(time):
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    time_text = str(time)
    if not _TIME_PATTERN.fullmatch(time_text):
        raise ValidationError(TIME_FORMAT_MESSAGE)

    if _is_missing(duration):
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    duration_minutes = _parse_duration(duration)

    if event_date is None:
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    return Submission(
        name=str(name).strip(),
        date=_parse_date(event_date),
        time=time_text,
        duration_minutes=duration_minutes,
    )
