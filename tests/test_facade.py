"""Tests for the top-level assert_that entry point."""

from calendar import Day, Month
from datetime import datetime, timezone

import pycountry
import pytest

from truthext import (
    AssertionFailure,
    CurrencySubject,
    DayOfWeekSubject,
    InstantSubject,
    IntegerSubject,
    LocalDateTimeSubject,
    MonthSubject,
    StringSubject,
    Subject,
    TruthConfig,
    ZonedDateTimeSubject,
    assert_that,
    assert_that_instant,
)


@pytest.mark.parametrize(
    "value,subject_type",
    [
        (Month.MAY, MonthSubject),
        (Day.MONDAY, DayOfWeekSubject),
        (datetime(2020, 1, 1), LocalDateTimeSubject),
        (datetime(2020, 1, 1, tzinfo=timezone.utc), ZonedDateTimeSubject),
        (pycountry.currencies.get(alpha_3="EUR"), CurrencySubject),
        (42, IntegerSubject),
        ("text", StringSubject),
        (3.5, Subject),
        (None, Subject),
    ],
)
def test_dispatch_by_type(value, subject_type):
    assert type(assert_that(value)) is subject_type


def test_non_currency_pycountry_record_gets_generic_subject():
    country = pycountry.countries.get(alpha_2="DE")
    assert type(assert_that(country)) is Subject


def test_currency_dispatch_is_by_record_class_not_name():
    class Currency:
        alpha_3 = "EUR"

    assert type(assert_that(Currency())) is Subject
    assert type(assert_that(pycountry.currencies.get(alpha_3="JPY"))) is CurrencySubject


def test_config_is_passed_through():
    config = TruthConfig(max_value_length=30)
    assert assert_that(Month.MAY, config=config).config is config


def test_instant_entry():
    subject = assert_that_instant(datetime(1970, 1, 1, tzinfo=timezone.utc))
    assert isinstance(subject, InstantSubject)
    subject.epoch_milli().is_equal_to(0)


def test_end_to_end_examples():
    assert_that(Month.JANUARY).is_before(Month.DECEMBER)
    with pytest.raises(AssertionFailure):
        assert_that(Month.MAY).is_before(Month.MAY)

    zoned_utc_epoch0 = datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert_that(zoned_utc_epoch0).epoch_milli().is_equal_to(0)
    assert_that(zoned_utc_epoch0.replace(year=1971)).epoch_second().is_equal_to(31_536_000)


def test_failure_text_is_deterministic():
    def failure_text():
        with pytest.raises(AssertionFailure) as exc_info:
            assert_that(datetime(2021, 5, 3, tzinfo=timezone.utc)).month().is_after(Month.JUNE)
        return str(exc_info.value)

    assert failure_text() == failure_text() == "\n".join(
        [
            "expected actual to be after other_month",
            "other_month: Month.JUNE",
            "value of: zoned_date_time.month()",
            "actual: Month.MAY",
        ]
    )
