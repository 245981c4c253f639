"""Structured failure facts and the failure signal raised by subjects."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any


@dataclass(frozen=True)
class Fact:
    """A single line of a failure report.

    Attributes:
        key: Label of the fact, or the whole message for a simple fact.
        value: Rendered value, ``None`` for a simple fact.
    """

    key: str
    value: str | None = None

    def render(self) -> str:
        if self.value is None:
            return self.key
        return f"{self.key}: {self.value}"


def simple_fact(message: str) -> Fact:
    return Fact(message)


def fact(key: str, value: Any, *, max_length: int = 200) -> Fact:
    return Fact(key, render_value(value, max_length=max_length))


@dataclass(frozen=True)
class FailureReport:
    """Everything known about a failed assertion.

    Attributes:
        subject_description: Where the failing value came from, e.g.
            ``zoned_date_time.instant().epoch_milli()``. Empty for a root subject.
        facts: Ordered facts, the rendered actual value last.
    """

    subject_description: str
    facts: tuple[Fact, ...] = field(default_factory=tuple)

    def render(self) -> str:
        return "\n".join(f.render() for f in self.facts)


class AssertionFailure(AssertionError):
    """Raised when a claim made through a subject does not hold."""

    def __init__(self, report: FailureReport):
        super().__init__(report.render())
        self.report = report

    @property
    def facts(self) -> tuple[Fact, ...]:
        return self.report.facts


def render_value(value: Any, *, max_length: int = 200) -> str:
    """Render a value for a failure report.

    Enum members render as ``Month.MAY``, dates and times in ISO format and
    everything else through ``repr``.
    """
    if isinstance(value, enum.Enum):
        text = f"{type(value).__name__}.{value.name}"
    elif isinstance(value, (datetime, date, time)):
        text = value.isoformat()
    else:
        text = repr(value)

    if len(text) > max_length:
        text = text[: max_length - 3] + "..."
    return text
