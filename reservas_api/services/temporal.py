"""
Conversion of client supplied wall-clock strings into storable values.

Clients send schedules as a date-only string ("2023-06-20") plus one or more
time-only strings ("10:30:00"). Times are anchored on the epoch day and
shifted by a fixed hour offset before they are persisted; dates are parsed
as-is with no offset.

The offset is UTC-6 by default. Whether that is a fixed business time zone
or compensation for a server clock running in UTC is still undecided, so it
stays configurable (Settings.schedule_utc_offset_hours) instead of being
derived from the server time zone.
"""

from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, Union

DEFAULT_UTC_OFFSET_HOURS = -6

EPOCH_DAY_PREFIX = "1970-01-01T"


def parse_calendar_date(value: Union[str, date]) -> date:
    """
    Parse an ISO date ("2023-06-20") or date-time string into a date.

    Raises:
        ValueError: if the value is not a valid ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid date value: {value!r}")
    return datetime.fromisoformat(value.strip()).date()


def normalize_time_of_day(
    time_str: str, offset_hours: int = DEFAULT_UTC_OFFSET_HOURS
) -> datetime:
    """
    Anchor a time-only string on 1970-01-01 and shift it by offset_hours.

    The result may land on the previous (or next) day:

        >>> normalize_time_of_day("10:30:00")
        datetime.datetime(1970, 1, 1, 4, 30)
        >>> normalize_time_of_day("02:00:00")
        datetime.datetime(1969, 12, 31, 20, 0)

    Raises:
        ValueError: if time_str is not a valid HH:MM[:SS] string
    """
    if not isinstance(time_str, str) or not time_str.strip():
        raise ValueError(f"Invalid time value: {time_str!r}")
    anchored = datetime.fromisoformat(EPOCH_DAY_PREFIX + time_str.strip())
    if anchored.tzinfo is not None:
        raise ValueError(f"Time must not carry a UTC offset: {time_str!r}")
    return anchored + timedelta(hours=offset_hours)


def normalize_schedule(
    payload: Dict[str, Any],
    date_field: str,
    time_fields: Iterable[str],
    offset_hours: int = DEFAULT_UTC_OFFSET_HOURS,
) -> Dict[str, Any]:
    """Return a copy of payload with its date and time fields converted."""
    data = dict(payload)
    data[date_field] = parse_calendar_date(data.get(date_field))
    for field in time_fields:
        data[field] = normalize_time_of_day(data.get(field), offset_hours)
    return data
