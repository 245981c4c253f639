"""Calendar field projections shared by local and zoned date-time subjects."""

from __future__ import annotations

from calendar import Day, Month
from datetime import datetime
from typing import Any

from truthext.subjects.base import IntegerSubject
from truthext.subjects.days import DayOfWeekSubject
from truthext.subjects.months import MonthSubject


class DateTimeFields:
    """Derivations over the displayed fields of a date-time.

    Mixed into subjects that also derive from ``Subject``; the fields are read
    as displayed, in whatever zone or offset the value carries.
    """

    derive: Any

    def month(self) -> MonthSubject:
        return self.derive("month()", lambda v: Month(v.month), MonthSubject)

    def day_of_week(self) -> DayOfWeekSubject:
        return self.derive("day_of_week()", lambda v: Day(v.weekday()), DayOfWeekSubject)

    def month_value(self) -> IntegerSubject:
        return self.derive("month_value()", lambda v: v.month, IntegerSubject)

    def day_of_year(self) -> IntegerSubject:
        return self.derive("day_of_year()", _day_of_year, IntegerSubject)

    def day_of_month(self) -> IntegerSubject:
        return self.derive("day_of_month()", lambda v: v.day, IntegerSubject)

    def hour(self) -> IntegerSubject:
        return self.derive("hour()", lambda v: v.hour, IntegerSubject)

    def minute(self) -> IntegerSubject:
        return self.derive("minute()", lambda v: v.minute, IntegerSubject)

    def second(self) -> IntegerSubject:
        return self.derive("second()", lambda v: v.second, IntegerSubject)

    def nano(self) -> IntegerSubject:
        """Nanosecond of the second; datetime stores microseconds."""
        return self.derive("nano()", lambda v: v.microsecond * 1_000, IntegerSubject)


def _day_of_year(value: datetime) -> int:
    return value.toordinal() - value.replace(month=1, day=1).toordinal() + 1
