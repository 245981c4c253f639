"""Subject for zoned date-times (timezone-aware ``datetime`` values)."""

from __future__ import annotations

from datetime import datetime, tzinfo

from truthext import arithmetic
from truthext.config import TruthConfig
from truthext.subjects.base import IntegerSubject, Subject, derivation_label, require_argument
from truthext.subjects.fields import DateTimeFields
from truthext.subjects.instants import InstantSubject
from truthext.subjects.ordering import check_equivalent, check_order


class ZonedDateTimeSubject(DateTimeFields, Subject[datetime]):
    """Claims about a date-time that carries its zone.

    Two families of equality apply and must not be confused:
    ``is_same_instant_as`` compares the position on the UTC time-line,
    ``is_same_local_as`` compares the displayed clock reading and ignores the
    zone. Ordering is always by instant.
    """

    kind = "zoned date time"

    def is_same_instant_as(self, other: datetime) -> None:
        """*other* may be an instant or another zoned date-time."""
        check_equivalent(
            self, arithmetic.to_utc, other, "other",
            "expected actual to have same instant in time as other",
        )

    def is_not_same_instant_as(self, other: datetime) -> None:
        check_equivalent(
            self, arithmetic.to_utc, other, "other",
            "expected actual to have different instant in time as other",
            expected=False,
        )

    def is_same_local_as(self, other: datetime) -> None:
        check_equivalent(
            self, arithmetic.local_position, other, "other",
            "expected actual to have same local as other",
        )

    def is_not_same_local_as(self, other: datetime) -> None:
        check_equivalent(
            self, arithmetic.local_position, other, "other",
            "expected actual to have different local as other",
            expected=False,
        )

    def is_before(self, other: datetime) -> None:
        check_order(self, "before", arithmetic.to_utc, other, "other")

    def is_before_or_equal_to(self, other: datetime) -> None:
        check_order(self, "before_or_equal_to", arithmetic.to_utc, other, "other")

    def is_after(self, other: datetime) -> None:
        check_order(self, "after", arithmetic.to_utc, other, "other")

    def is_after_or_equal_to(self, other: datetime) -> None:
        check_order(self, "after_or_equal_to", arithmetic.to_utc, other, "other")

    def instant(self) -> InstantSubject:
        return self.derive("instant()", arithmetic.to_utc, InstantSubject)

    def with_zone_same_instant(self, zone: tzinfo) -> ZonedDateTimeSubject:
        """Same instant viewed from *zone*; the displayed fields may change."""
        require_argument(zone, "zone")
        return self.derive(
            derivation_label("with_zone_same_instant", zone),
            lambda value: value.astimezone(zone),
            ZonedDateTimeSubject,
        )

    def with_zone_same_local(self, zone: tzinfo) -> ZonedDateTimeSubject:
        """Same displayed fields in *zone*; the instant may change."""
        require_argument(zone, "zone")
        return self.derive(
            derivation_label("with_zone_same_local", zone),
            lambda value: arithmetic.attach_zone(value, zone),
            ZonedDateTimeSubject,
        )

    def epoch_milli(self) -> IntegerSubject:
        return self.instant().epoch_milli()

    def epoch_second(self) -> IntegerSubject:
        return self.instant().epoch_second()

    def epoch_day(self) -> IntegerSubject:
        return self.instant().epoch_day()


def assert_that(actual: datetime | None, *, config: TruthConfig | None = None) -> ZonedDateTimeSubject:
    return ZonedDateTimeSubject(actual, config=config)
