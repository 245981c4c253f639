"""Fluent assertions about currencies, calendar fields and date-times.

``assert_that`` picks the subject from the type of the value::

    from calendar import Month
    from truthext import assert_that

    assert_that(Month.JANUARY).is_before(Month.DECEMBER)
    assert_that(datetime(1970, 1, 1, tzinfo=timezone.utc)).epoch_milli().is_equal_to(0)

Aware datetimes get the zoned date-time subject; use ``assert_that_instant``
to make claims about them as instants.
"""

from __future__ import annotations

from calendar import Day, Month
from datetime import datetime
from functools import singledispatch
from typing import Any

from truthext.config import TruthConfig, load_config
from truthext.failure import AssertionFailure, Fact, FailureReport
from truthext.subjects import (
    CURRENCY_TYPE,
    CurrencySubject,
    DayOfWeekSubject,
    InstantSubject,
    IntegerSubject,
    LocalDateTimeSubject,
    MonthSubject,
    StringSubject,
    Subject,
    ZonedDateTimeSubject,
)


@singledispatch
def assert_that(actual: Any, *, config: TruthConfig | None = None) -> Subject[Any]:
    return Subject(actual, config=config)


@assert_that.register
def _(actual: Day, *, config: TruthConfig | None = None) -> DayOfWeekSubject:
    return DayOfWeekSubject(actual, config=config)


@assert_that.register
def _(actual: Month, *, config: TruthConfig | None = None) -> MonthSubject:
    return MonthSubject(actual, config=config)


@assert_that.register
def _(actual: int, *, config: TruthConfig | None = None) -> IntegerSubject:
    return IntegerSubject(actual, config=config)


@assert_that.register
def _(actual: str, *, config: TruthConfig | None = None) -> StringSubject:
    return StringSubject(actual, config=config)


@assert_that.register
def _(actual: datetime, *, config: TruthConfig | None = None) -> Subject[datetime]:
    if actual.tzinfo is None:
        return LocalDateTimeSubject(actual, config=config)
    return ZonedDateTimeSubject(actual, config=config)


@assert_that.register(CURRENCY_TYPE)
def _(actual: Any, *, config: TruthConfig | None = None) -> CurrencySubject:
    return CurrencySubject(actual, config=config)


def assert_that_instant(actual: datetime | None, *, config: TruthConfig | None = None) -> InstantSubject:
    return InstantSubject(actual, config=config)


__all__ = [
    "AssertionFailure",
    "CurrencySubject",
    "DayOfWeekSubject",
    "Fact",
    "FailureReport",
    "InstantSubject",
    "IntegerSubject",
    "LocalDateTimeSubject",
    "MonthSubject",
    "StringSubject",
    "Subject",
    "TruthConfig",
    "ZonedDateTimeSubject",
    "assert_that",
    "assert_that_instant",
    "load_config",
]
