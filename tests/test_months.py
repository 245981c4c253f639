"""Tests for the month subject."""

from calendar import Month
from itertools import permutations

import pytest

from truthext.failure import AssertionFailure
from truthext.subjects.months import MonthSubject, assert_that


# --- ordering ---


def test_january_is_before_december():
    assert_that(Month.JANUARY).is_before(Month.DECEMBER)
    assert_that(Month.DECEMBER).is_after(Month.JANUARY)


def test_is_before_is_strict():
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(Month.MAY).is_before(Month.MAY)
    assert [f.render() for f in exc_info.value.facts] == [
        "expected actual to be before other_month",
        "other_month: Month.MAY",
        "actual: Month.MAY",
    ]
    with pytest.raises(AssertionFailure):
        assert_that(Month.MAY).is_after(Month.MAY)


def test_or_equal_to_variants_pass_on_tie():
    assert_that(Month.MAY).is_before_or_equal_to(Month.MAY)
    assert_that(Month.MAY).is_after_or_equal_to(Month.MAY)
    with pytest.raises(AssertionFailure):
        assert_that(Month.JUNE).is_before_or_equal_to(Month.MAY)
    with pytest.raises(AssertionFailure):
        assert_that(Month.APRIL).is_after_or_equal_to(Month.MAY)


def test_exactly_one_of_two_distinct_months_is_before():
    for a, b in permutations(Month, 2):
        outcomes = []
        for x, y in ((a, b), (b, a)):
            try:
                assert_that(x).is_before(y)
                outcomes.append(True)
            except AssertionFailure:
                outcomes.append(False)
        assert outcomes.count(True) == 1, (a, b)


def test_ordering_requires_other_month():
    with pytest.raises(ValueError, match="other_month must not be None"):
        assert_that(Month.MAY).is_before(None)


def test_absent_month_fails():
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(None).is_after(Month.MAY)
    assert exc_info.value.facts[0].key == "expected month to be non-null"


# --- derivations ---


def test_value_and_ordinal():
    assert_that(Month.MARCH).value().is_equal_to(3)
    assert_that(Month.MARCH).ordinal().is_equal_to(2)


def test_lengths():
    assert_that(Month.FEBRUARY).min_length().is_equal_to(28)
    assert_that(Month.FEBRUARY).max_length().is_equal_to(29)
    assert_that(Month.FEBRUARY).length(True).is_equal_to(29)
    assert_that(Month.FEBRUARY).length(False).is_equal_to(28)
    assert_that(Month.APRIL).length(True).is_equal_to(30)
    assert_that(Month.APRIL).length(False).is_equal_to(30)


def test_first_day_of_year():
    assert_that(Month.JANUARY).first_day_of_year(False).is_equal_to(1)
    assert_that(Month.JANUARY).first_day_of_year(True).is_equal_to(1)
    assert_that(Month.MARCH).first_day_of_year(False).is_equal_to(60)
    assert_that(Month.MARCH).first_day_of_year(True).is_equal_to(61)


def test_first_month_of_quarter_returns_month_subject():
    subject = assert_that(Month.MAY).first_month_of_quarter()
    assert isinstance(subject, MonthSubject)
    subject.is_equal_to(Month.APRIL)
    subject.first_month_of_quarter().is_equal_to(Month.APRIL)
    assert_that(Month.DECEMBER).first_month_of_quarter().is_equal_to(Month.OCTOBER)


def test_derivation_failure_describes_path():
    with pytest.raises(AssertionFailure) as exc_info:
        assert_that(Month.MAY).first_month_of_quarter().is_after(Month.JUNE)
    assert exc_info.value.report.subject_description == "month.first_month_of_quarter()"
    assert "value of: month.first_month_of_quarter()" in str(exc_info.value)


def test_derivation_label_includes_arguments():
    assert assert_that(Month.MAY).length(True).path == ("length(True)",)
    assert assert_that(Month.MAY).first_day_of_year(False).path == ("first_day_of_year(False)",)


def test_derivation_on_absent_month_fails():
    with pytest.raises(AssertionFailure):
        assert_that(None).first_month_of_quarter()
