"""Assertion subjects for currencies, calendar fields and date-times."""

from truthext.subjects.base import IntegerSubject, StringSubject, Subject
from truthext.subjects.currencies import CURRENCY_TYPE, CurrencySubject
from truthext.subjects.days import DayOfWeekSubject
from truthext.subjects.instants import InstantSubject
from truthext.subjects.local_date_times import LocalDateTimeSubject
from truthext.subjects.months import MonthSubject
from truthext.subjects.zoned_date_times import ZonedDateTimeSubject

__all__ = [
    "CURRENCY_TYPE",
    "CurrencySubject",
    "DayOfWeekSubject",
    "InstantSubject",
    "IntegerSubject",
    "LocalDateTimeSubject",
    "MonthSubject",
    "StringSubject",
    "Subject",
    "ZonedDateTimeSubject",
]
