"""Ordering claims shared by the temporal subjects."""

from __future__ import annotations

import operator
from typing import Any, Callable

from truthext.failure import simple_fact
from truthext.subjects.base import Subject, require_argument

RELATIONS: dict[str, tuple[Callable[[Any, Any], bool], str]] = {
    "before": (operator.lt, "before"),
    "before_or_equal_to": (operator.le, "before or equal to"),
    "after": (operator.gt, "after"),
    "after_or_equal_to": (operator.ge, "after or equal to"),
}


def check_order(
    subject: Subject[Any],
    relation: str,
    key: Callable[[Any], Any],
    other: Any,
    other_name: str,
) -> None:
    """Fail *subject* unless ``key(actual)`` stands in *relation* to ``key(other)``.

    ``before`` and ``after`` are strict; the ``or_equal_to`` variants pass on a tie.
    """
    require_argument(other, other_name)
    compare, phrase = RELATIONS[relation]
    actual = subject.require_non_absent()
    if not compare(key(actual), key(other)):
        subject.fail_with_actual(
            simple_fact(f"expected actual to be {phrase} {other_name}"),
            subject.fact(other_name, other),
        )


def check_equivalent(
    subject: Subject[Any],
    key: Callable[[Any], Any],
    other: Any,
    other_name: str,
    claim: str,
    *,
    expected: bool = True,
) -> None:
    """Fail *subject* unless ``key(actual) == key(other)`` is *expected*."""
    require_argument(other, other_name)
    actual = subject.require_non_absent()
    if (key(actual) == key(other)) is not expected:
        subject.fail_with_actual(simple_fact(claim), subject.fact(other_name, other))
