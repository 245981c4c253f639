"""Subject for days of the week (``calendar.Day``)."""

from __future__ import annotations

from calendar import Day

from truthext import arithmetic
from truthext.config import TruthConfig
from truthext.subjects.base import IntegerSubject, Subject
from truthext.subjects.ordering import check_order


class DayOfWeekSubject(Subject[Day]):
    """Days are ordered Monday first, as in ISO-8601."""

    kind = "day of week"

    def is_before(self, other_day_of_week: Day) -> None:
        check_order(self, "before", arithmetic.day_position, other_day_of_week, "other_day_of_week")

    def is_before_or_equal_to(self, other_day_of_week: Day) -> None:
        check_order(self, "before_or_equal_to", arithmetic.day_position, other_day_of_week, "other_day_of_week")

    def is_after(self, other_day_of_week: Day) -> None:
        check_order(self, "after", arithmetic.day_position, other_day_of_week, "other_day_of_week")

    def is_after_or_equal_to(self, other_day_of_week: Day) -> None:
        check_order(self, "after_or_equal_to", arithmetic.day_position, other_day_of_week, "other_day_of_week")

    def value(self) -> IntegerSubject:
        """ISO day number, 1 (Monday) to 7 (Sunday)."""
        return self.derive("value()", arithmetic.day_position, IntegerSubject)

    def ordinal(self) -> IntegerSubject:
        return self.derive("ordinal()", lambda d: arithmetic.day_position(d) - 1, IntegerSubject)


def assert_that(actual: Day | None, *, config: TruthConfig | None = None) -> DayOfWeekSubject:
    return DayOfWeekSubject(actual, config=config)
