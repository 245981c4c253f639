"""Tests for debug logging of assertion chains."""

import logging
from calendar import Month
from pathlib import Path

import pytest

from truthext.failure import AssertionFailure
from truthext.subjects.months import assert_that
from truthext.verbose import setup_logger


def test_logger_creates_debug_log(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    logger = setup_logger(debug_file=debug_file, verbose=False, logger_name="truthext_test_create")

    assert not logger.disabled
    assert logger.level == logging.DEBUG
    assert debug_file.exists()


def test_logger_creates_parent_directories(tmp_path: Path):
    debug_file = tmp_path / "nested" / "dir" / "debug.log"
    setup_logger(debug_file=debug_file, verbose=False, logger_name="truthext_test_nested")
    assert debug_file.exists()


def test_verbose_mode_adds_stderr_handler(tmp_path: Path):
    quiet = setup_logger(tmp_path / "q.log", verbose=False, logger_name="truthext_test_quiet")
    loud = setup_logger(tmp_path / "l.log", verbose=True, logger_name="truthext_test_loud")

    assert [type(h).__name__ for h in quiet.handlers] == ["FileHandler"]
    assert sorted(type(h).__name__ for h in loud.handlers) == ["FileHandler", "StreamHandler"]


def test_verbose_without_debug_file():
    logger = setup_logger(None, verbose=True, logger_name="truthext_test_stderr_only")
    assert [type(h).__name__ for h in logger.handlers] == ["StreamHandler"]


def test_nothing_to_log_to_raises_error():
    with pytest.raises(ValueError, match="debug file or verbose"):
        setup_logger(None, verbose=False, logger_name="truthext_test_nowhere")


def test_same_logger_name_raises_error(tmp_path: Path):
    setup_logger(tmp_path / "a.log", logger_name="truthext_test_shared")
    with pytest.raises(RuntimeError, match="already exists"):
        setup_logger(tmp_path / "b.log", logger_name="truthext_test_shared")


def test_package_logger_records_derivations_and_failures(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file)

    assert_that(Month.MAY).first_month_of_quarter().is_equal_to(Month.APRIL)
    with pytest.raises(AssertionFailure):
        assert_that(Month.MAY).is_after(Month.JUNE)

    content = debug_file.read_text()
    assert "truthext.subjects.base: Derived first_month_of_quarter() from month: Month.APRIL" in content
    assert "Assertion failed on month: expected actual to be after other_month" in content
