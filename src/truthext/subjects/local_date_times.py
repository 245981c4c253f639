"""Subject for local date-times.

A local date-time is a clock reading without a zone: a naive ``datetime``, or
any value with ``toordinal()`` and time fields. Values in another calendar
system carry a ``chronology`` attribute; plain datetimes are ISO.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Any

from truthext import arithmetic
from truthext.config import TruthConfig
from truthext.failure import simple_fact
from truthext.subjects.base import IntegerSubject, Subject, derivation_label, require_argument
from truthext.subjects.fields import DateTimeFields
from truthext.subjects.instants import InstantSubject
from truthext.subjects.ordering import check_equivalent, check_order
from truthext.subjects.zoned_date_times import ZonedDateTimeSubject


class LocalDateTimeSubject(DateTimeFields, Subject[datetime]):
    """Claims about a local date-time.

    ``is_same_local_time_as`` compares positions on the local time-line and
    ignores the calendar system. ``is_comparatively_equal_to`` also requires
    the same chronology.
    """

    kind = "local date time"

    def is_same_local_time_as(self, other: Any) -> None:
        check_equivalent(
            self, arithmetic.local_position, other, "other",
            "expected actual to have same local time as other",
        )

    def is_not_same_local_time_as(self, other: Any) -> None:
        check_equivalent(
            self, arithmetic.local_position, other, "other",
            "expected actual to not have same local time as other",
            expected=False,
        )

    def is_comparatively_equal_to(self, other: Any) -> None:
        require_argument(other, "other")
        if arithmetic.comparative_key(self.require_non_absent()) != arithmetic.comparative_key(other):
            self.fail_with_actual(
                simple_fact("expected actual to be comparatively equal local time as other"),
                self.fact("other", other),
                self.fact("chronology", arithmetic.chronology_of(other)),
            )

    def is_comparatively_not_equal_to(self, other: Any) -> None:
        require_argument(other, "other")
        if arithmetic.comparative_key(self.require_non_absent()) == arithmetic.comparative_key(other):
            self.fail_with_actual(
                simple_fact("expected actual to not be comparatively equal local time as other"),
                self.fact("other", other),
            )

    def is_before(self, other: Any) -> None:
        check_order(self, "before", arithmetic.local_position, other, "other")

    def is_before_or_equal_to(self, other: Any) -> None:
        check_order(self, "before_or_equal_to", arithmetic.local_position, other, "other")

    def is_after(self, other: Any) -> None:
        check_order(self, "after", arithmetic.local_position, other, "other")

    def is_after_or_equal_to(self, other: Any) -> None:
        check_order(self, "after_or_equal_to", arithmetic.local_position, other, "other")

    def instant(self, offset: tzinfo) -> InstantSubject:
        """The instant this clock reading denotes at *offset*."""
        require_argument(offset, "offset")
        return self.derive(
            derivation_label("instant", offset),
            lambda value: arithmetic.to_utc(arithmetic.attach_zone(value, offset)),
            InstantSubject,
        )

    def zoned(self, zone: tzinfo) -> ZonedDateTimeSubject:
        require_argument(zone, "zone")
        return self.derive(
            derivation_label("zoned", zone),
            lambda value: arithmetic.attach_zone(value, zone),
            ZonedDateTimeSubject,
        )

    # Epoch units read the clock as UTC; once anchored there they do not
    # depend on any zone.

    def epoch_milli(self) -> IntegerSubject:
        return self.instant(timezone.utc).epoch_milli()

    def epoch_second(self) -> IntegerSubject:
        return self.instant(timezone.utc).epoch_second()

    def epoch_day(self) -> IntegerSubject:
        return self.instant(timezone.utc).epoch_day()


def assert_that(actual: datetime | None, *, config: TruthConfig | None = None) -> LocalDateTimeSubject:
    return LocalDateTimeSubject(actual, config=config)
