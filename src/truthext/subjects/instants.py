"""Subject for instants on the time-line.

An instant is a timezone-aware ``datetime``. Only its projection onto UTC
matters: the same instant viewed through different offsets is one value.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import TYPE_CHECKING

from truthext import arithmetic
from truthext.config import TruthConfig
from truthext.failure import simple_fact
from truthext.subjects.base import IntegerSubject, Subject, derivation_label, require_argument
from truthext.subjects.ordering import check_equivalent, check_order

if TYPE_CHECKING:
    from truthext.subjects.zoned_date_times import ZonedDateTimeSubject


class InstantSubject(Subject[datetime]):
    kind = "instant"

    def _utc(self) -> datetime:
        return arithmetic.to_utc(self.require_non_absent())

    def is_max(self) -> None:
        if self._utc() != arithmetic.MAX_INSTANT:
            self.fail_with_actual(simple_fact("expected actual to be max"))

    def is_not_max(self) -> None:
        if self._utc() == arithmetic.MAX_INSTANT:
            self.fail_with_actual(simple_fact("expected actual to not be max"))

    def is_min(self) -> None:
        if self._utc() != arithmetic.MIN_INSTANT:
            self.fail_with_actual(simple_fact("expected actual to be min"))

    def is_not_min(self) -> None:
        if self._utc() == arithmetic.MIN_INSTANT:
            self.fail_with_actual(simple_fact("expected actual to not be min"))

    def is_same_instant_as(self, other_instant: datetime) -> None:
        check_equivalent(
            self, arithmetic.to_utc, other_instant, "other_instant",
            "expected actual to be the same instant as other_instant",
        )

    def is_not_same_instant_as(self, other_instant: datetime) -> None:
        check_equivalent(
            self, arithmetic.to_utc, other_instant, "other_instant",
            "expected actual to be a different instant than other_instant",
            expected=False,
        )

    def is_before(self, other_instant: datetime) -> None:
        check_order(self, "before", arithmetic.to_utc, other_instant, "other_instant")

    def is_before_or_equal_to(self, other_instant: datetime) -> None:
        check_order(self, "before_or_equal_to", arithmetic.to_utc, other_instant, "other_instant")

    def is_after(self, other_instant: datetime) -> None:
        check_order(self, "after", arithmetic.to_utc, other_instant, "other_instant")

    def is_after_or_equal_to(self, other_instant: datetime) -> None:
        check_order(self, "after_or_equal_to", arithmetic.to_utc, other_instant, "other_instant")

    def epoch_milli(self) -> IntegerSubject:
        """Milliseconds since the epoch.

        Raises:
            OverflowError: if the value does not fit a signed 64-bit integer.
        """
        return self.derive("epoch_milli()", arithmetic.instant_epoch_milli, IntegerSubject)

    def epoch_second(self) -> IntegerSubject:
        return self.derive("epoch_second()", arithmetic.instant_epoch_second, IntegerSubject)

    def epoch_day(self) -> IntegerSubject:
        """Days since the epoch, rounded towards negative infinity."""
        return self.derive("epoch_day()", arithmetic.instant_epoch_day, IntegerSubject)

    def nano(self) -> IntegerSubject:
        """Nanosecond of the second."""
        return self.derive("nano()", arithmetic.instant_nano, IntegerSubject)

    def at_zone(self, zone: tzinfo) -> ZonedDateTimeSubject:
        from truthext.subjects.zoned_date_times import ZonedDateTimeSubject

        require_argument(zone, "zone")
        return self.derive(
            derivation_label("at_zone", zone),
            lambda value: arithmetic.to_utc(value).astimezone(zone),
            ZonedDateTimeSubject,
        )

    def at_utc(self) -> ZonedDateTimeSubject:
        return self.at_zone(timezone.utc)


def assert_that(actual: datetime | None, *, config: TruthConfig | None = None) -> InstantSubject:
    return InstantSubject(actual, config=config)
