"""Subject for months of the ISO year (``calendar.Month``)."""

from __future__ import annotations

from calendar import Month

from truthext import arithmetic
from truthext.config import TruthConfig
from truthext.subjects.base import IntegerSubject, Subject, derivation_label
from truthext.subjects.ordering import check_order


class MonthSubject(Subject[Month]):
    kind = "month"

    def is_before(self, other_month: Month) -> None:
        check_order(self, "before", arithmetic.month_position, other_month, "other_month")

    def is_before_or_equal_to(self, other_month: Month) -> None:
        check_order(self, "before_or_equal_to", arithmetic.month_position, other_month, "other_month")

    def is_after(self, other_month: Month) -> None:
        check_order(self, "after", arithmetic.month_position, other_month, "other_month")

    def is_after_or_equal_to(self, other_month: Month) -> None:
        check_order(self, "after_or_equal_to", arithmetic.month_position, other_month, "other_month")

    def value(self) -> IntegerSubject:
        """Month number, 1 to 12."""
        return self.derive("value()", arithmetic.month_position, IntegerSubject)

    def ordinal(self) -> IntegerSubject:
        """Zero-based position, 0 to 11."""
        return self.derive("ordinal()", lambda m: arithmetic.month_position(m) - 1, IntegerSubject)

    def min_length(self) -> IntegerSubject:
        return self.derive("min_length()", arithmetic.month_min_length, IntegerSubject)

    def max_length(self) -> IntegerSubject:
        """Length of the month in a leap year."""
        return self.derive("max_length()", arithmetic.month_max_length, IntegerSubject)

    def length(self, leap_year: bool) -> IntegerSubject:
        return self.derive(
            derivation_label("length", leap_year),
            lambda m: arithmetic.month_length(m, leap_year),
            IntegerSubject,
        )

    def first_day_of_year(self, leap_year: bool) -> IntegerSubject:
        """Day of the year the month starts on.

        January 1st is day 1; March 1st is day 60, or day 61 in a leap year.
        """
        return self.derive(
            derivation_label("first_day_of_year", leap_year),
            lambda m: arithmetic.first_day_of_year(m, leap_year),
            IntegerSubject,
        )

    def first_month_of_quarter(self) -> MonthSubject:
        return self.derive("first_month_of_quarter()", arithmetic.first_month_of_quarter, MonthSubject)


def assert_that(actual: Month | None, *, config: TruthConfig | None = None) -> MonthSubject:
    return MonthSubject(actual, config=config)
