"""Pytest configuration and fixtures."""

import logging
from calendar import Month
from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from truthext loggers after each test.

    Module loggers stay registered so that a later ``setup_logger("truthext")``
    still receives their records.
    """
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("truthext"):
            continue
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


class ThaiBuddhistDateTime(datetime):
    """A date-time in the Thai solar calendar.

    Same local time-line as the ISO calendar; only the era of the displayed
    year differs, so the fields inherited from ``datetime`` stay ISO.
    """

    chronology = "ThaiBuddhist"

    @property
    def buddhist_year(self) -> int:
        return self.year + 543


@pytest.fixture
def epoch_utc():
    return datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def plus_four():
    return timezone(timedelta(hours=4))


@pytest.fixture
def all_months():
    return list(Month)


@pytest.fixture
def thai_buddhist():
    """Factory for date-times in a non-ISO chronology."""
    return ThaiBuddhistDateTime
