"""Calendar and epoch arithmetic used by the temporal subjects.

Everything in here is a pure function over values produced by the standard
library (``calendar.Month``, ``calendar.Day``, ``datetime``).
"""

from __future__ import annotations

from calendar import Day, Month
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

SECONDS_PER_DAY = 86_400
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
MILLIS_PER_SECOND = 1_000

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MIN_INSTANT = datetime.min.replace(tzinfo=timezone.utc)
MAX_INSTANT = datetime.max.replace(tzinfo=timezone.utc)

ISO_CHRONOLOGY = "ISO"

_MIN_LENGTHS = {
    Month.JANUARY: 31,
    Month.FEBRUARY: 28,
    Month.MARCH: 31,
    Month.APRIL: 30,
    Month.MAY: 31,
    Month.JUNE: 30,
    Month.JULY: 31,
    Month.AUGUST: 31,
    Month.SEPTEMBER: 30,
    Month.OCTOBER: 31,
    Month.NOVEMBER: 30,
    Month.DECEMBER: 31,
}


# --- ordinal positions ---


def month_position(month: Month) -> int:
    """Position of *month* in the year, 1 for January to 12 for December."""
    return Month(month).value


def day_position(day: Day) -> int:
    """ISO position of *day* in the week, 1 for Monday to 7 for Sunday."""
    return Day(day).value + 1


# --- month tables ---


def month_min_length(month: Month) -> int:
    return _MIN_LENGTHS[Month(month)]


def month_max_length(month: Month) -> int:
    month = Month(month)
    if month is Month.FEBRUARY:
        return 29
    return _MIN_LENGTHS[month]


def month_length(month: Month, leap_year: bool) -> int:
    """Number of days in *month*; only February depends on *leap_year*."""
    if leap_year:
        return month_max_length(month)
    return month_min_length(month)


def first_day_of_year(month: Month, leap_year: bool) -> int:
    """Day of the year on which *month* starts.

    January starts on day 1; March starts on day 60, or 61 in a leap year.
    """
    month = Month(month)
    earlier = (m for m in Month if m.value < month.value)
    return 1 + sum(month_length(m, leap_year) for m in earlier)


def first_month_of_quarter(month: Month) -> Month:
    """First month of the quarter *month* belongs to."""
    month = Month(month)
    return Month(((month.value - 1) // 3) * 3 + 1)


# --- exact integer arithmetic ---


def _check_int64(value: int, operation: str) -> int:
    if value < INT64_MIN or value > INT64_MAX:
        raise OverflowError(f"long overflow in {operation}: {value}")
    return value


def add_exact(a: int, b: int) -> int:
    """Add two signed 64-bit integers, raising ``OverflowError`` on overflow."""
    return _check_int64(a + b, "add_exact")


def multiply_exact(a: int, b: int) -> int:
    """Multiply two signed 64-bit integers, raising ``OverflowError`` on overflow."""
    return _check_int64(a * b, "multiply_exact")


def floor_div(a: int, b: int) -> int:
    return a // b


# --- epoch units ---


def epoch_milli(epoch_second: int, nano: int) -> int:
    """Milliseconds since the epoch for ``epoch_second`` seconds and ``nano`` nanoseconds.

    Raises:
        OverflowError: if the result does not fit a signed 64-bit integer.
    """
    if epoch_second < 0 and nano > 0:
        # Stay in range for the most negative representable instants.
        millis = multiply_exact(epoch_second + 1, MILLIS_PER_SECOND)
        adjustment = nano // NANOS_PER_MILLI - MILLIS_PER_SECOND
        return add_exact(millis, adjustment)
    millis = multiply_exact(epoch_second, MILLIS_PER_SECOND)
    return add_exact(millis, nano // NANOS_PER_MILLI)


def epoch_day(epoch_second: int) -> int:
    return floor_div(epoch_second, SECONDS_PER_DAY)


def to_utc(value: datetime) -> datetime:
    """Project an aware datetime onto the UTC time axis."""
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"cannot take the instant of a naive datetime: {value!r}")
    return value.astimezone(timezone.utc)


def instant_epoch_second(value: datetime) -> int:
    """Whole seconds since the epoch of an aware datetime, floored."""
    return (to_utc(value) - EPOCH) // timedelta(seconds=1)


def instant_nano(value: datetime) -> int:
    # Offsets may carry microseconds, so read the fraction on the UTC clock.
    return to_utc(value).microsecond * 1_000


def instant_epoch_milli(value: datetime) -> int:
    return epoch_milli(instant_epoch_second(value), instant_nano(value))


def instant_epoch_day(value: datetime) -> int:
    return epoch_day(instant_epoch_second(value))


def attach_zone(value: datetime, zone: tzinfo) -> datetime:
    """Read a local date-time as a clock reading in *zone*."""
    if zone is None:
        raise ValueError("zone must not be None")
    return value.replace(tzinfo=zone)


# --- local time-line ---


def nano_of_day(value: Any) -> int:
    seconds = value.hour * 3_600 + value.minute * 60 + value.second
    return seconds * NANOS_PER_SECOND + value.microsecond * 1_000


def chronology_of(value: Any) -> Any:
    """Calendar system of a local date-time; plain datetimes are ISO."""
    return getattr(value, "chronology", ISO_CHRONOLOGY)


def local_position(value: Any) -> tuple[int, int]:
    """Position of a local date-time on the local time-line, independent of chronology."""
    return value.toordinal(), nano_of_day(value)


def comparative_key(value: Any) -> tuple[int, int, Any]:
    """Local time-line position plus chronology; compared for equality only."""
    return (*local_position(value), chronology_of(value))
