"""Tests for the day-of-week subject."""

from calendar import Day
from itertools import permutations

import pytest

from truthext.failure import AssertionFailure
from truthext.subjects.days import assert_that


def test_monday_starts_the_week():
    assert_that(Day.MONDAY).is_before(Day.SUNDAY)
    assert_that(Day.SUNDAY).is_after(Day.SATURDAY)


def test_same_day_is_neither_before_nor_after():
    with pytest.raises(AssertionFailure):
        assert_that(Day.WEDNESDAY).is_before(Day.WEDNESDAY)
    with pytest.raises(AssertionFailure):
        assert_that(Day.WEDNESDAY).is_after(Day.WEDNESDAY)
    assert_that(Day.WEDNESDAY).is_before_or_equal_to(Day.WEDNESDAY)
    assert_that(Day.WEDNESDAY).is_after_or_equal_to(Day.WEDNESDAY)


@pytest.mark.parametrize("a,b", list(permutations(Day, 2)))
def test_before_and_after_are_mirrors(a, b):
    if a.value < b.value:
        assert_that(a).is_before(b)
        assert_that(b).is_after(a)
        with pytest.raises(AssertionFailure):
            assert_that(b).is_before(a)
    else:
        assert_that(a).is_after(b)
        with pytest.raises(AssertionFailure):
            assert_that(a).is_before(b)


def test_failure_facts():
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(Day.FRIDAY).is_before_or_equal_to(Day.MONDAY)
    assert [f.render() for f in exc_info.value.facts] == [
        "expected actual to be before or equal to other_day_of_week",
        "other_day_of_week: Day.MONDAY",
        "actual: Day.FRIDAY",
    ]


def test_value_is_iso_and_ordinal_is_zero_based():
    assert_that(Day.MONDAY).value().is_equal_to(1)
    assert_that(Day.SUNDAY).value().is_equal_to(7)
    assert_that(Day.SUNDAY).ordinal().is_equal_to(6)


def test_absent_day_fails():
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(None).value()
    assert exc_info.value.facts[0].key == "expected day of week to be non-null"


def test_missing_argument_is_a_value_error():
    with pytest.raises(ValueError):
        assert_that(Day.MONDAY).is_after(None)
