"""The generic assertion subject and the derivation protocol."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Container, Generic, NoReturn, TypeVar

from truthext.config import DEFAULT_CONFIG, TruthConfig
from truthext.failure import AssertionFailure, Fact, FailureReport, fact, render_value, simple_fact

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
S = TypeVar("S", bound="Subject[Any]")


def require_argument(value: Any, name: str) -> None:
    """Reject a missing comparison argument before any comparison runs."""
    if value is None:
        raise ValueError(f"{name} must not be None")


def derivation_label(name: str, *args: Any) -> str:
    """Path segment for a derivation, e.g. ``at_zone(UTC)``."""
    return f"{name}({', '.join(str(a) for a in args)})"


class Subject(Generic[T]):
    """Wraps a possibly absent value and makes claims about it.

    A subject is never mutated after construction. Derivations build a new
    subject whose path is this subject's path plus one segment; the path is
    only used to describe failures.
    """

    kind = "value"

    def __init__(
        self,
        actual: T | None,
        *,
        path: tuple[str, ...] = (),
        root: str | None = None,
        config: TruthConfig | None = None,
    ):
        self._actual = actual
        self._path = tuple(path)
        self._root = root or self.kind.replace(" ", "_")
        self._config = config or DEFAULT_CONFIG

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._actual!r}, path={self._path!r})"

    @property
    def actual(self) -> T | None:
        return self._actual

    @property
    def path(self) -> tuple[str, ...]:
        return self._path

    @property
    def root(self) -> str:
        return self._root

    @property
    def config(self) -> TruthConfig:
        return self._config

    @property
    def description(self) -> str:
        if not self._path:
            return ""
        return ".".join((self._root, *self._path))

    # --- core protocol ---

    def require_non_absent(self) -> T:
        if self._actual is not None:
            return self._actual
        self.fail_with_actual(simple_fact(f"expected {self.kind} to be non-null"))

    def fail_with_actual(self, *facts: Fact) -> NoReturn:
        lines = list(facts)
        if self._path and self._config.show_path:
            lines.append(Fact("value of", self.description))
        lines.append(self.fact("actual", self._actual))

        report = FailureReport(self.description, tuple(lines))
        claim = facts[0].render() if facts else "assertion failed"
        logger.info(f"Assertion failed on {self.description or self._root}: {claim}")
        raise AssertionFailure(report)

    def fact(self, key: str, value: Any) -> Fact:
        return fact(key, value, max_length=self._config.max_value_length)

    def derive(self, label: str, compute: Callable[[T], U], factory: Callable[..., S]) -> S:
        """Build a child subject over a value computed from this one.

        Errors raised by ``compute`` propagate unchanged.
        """
        actual = self.require_non_absent()
        value = compute(actual)
        logger.debug(
            f"Derived {label} from {self.description or self._root}: "
            f"{render_value(value, max_length=self._config.max_value_length)}"
        )
        return factory(value, path=self._path + (label,), root=self._root, config=self._config)

    # --- generic claims ---

    def is_equal_to(self, expected: Any) -> None:
        if self._actual != expected:
            self.fail_with_actual(self.fact("expected", expected))

    def is_not_equal_to(self, unexpected: Any) -> None:
        if self._actual == unexpected:
            self.fail_with_actual(
                simple_fact("expected not to be"), self.fact("unexpected", unexpected)
            )

    def is_none(self) -> None:
        if self._actual is not None:
            self.fail_with_actual(simple_fact("expected to be None"))

    def is_not_none(self) -> None:
        if self._actual is None:
            self.fail_with_actual(simple_fact("expected not to be None"))

    def is_in(self, iterable: Container[Any]) -> None:
        require_argument(iterable, "iterable")
        if self._actual not in iterable:
            self.fail_with_actual(simple_fact("expected any of"), self.fact("iterable", iterable))

    def is_not_in(self, iterable: Container[Any]) -> None:
        require_argument(iterable, "iterable")
        if self._actual in iterable:
            self.fail_with_actual(simple_fact("expected none of"), self.fact("iterable", iterable))

    def is_instance_of(self, cls: type) -> None:
        require_argument(cls, "cls")
        if not isinstance(self._actual, cls):
            self.fail_with_actual(
                simple_fact("expected instance of"), Fact("type", cls.__qualname__)
            )

    def is_greater_than(self, other: Any) -> None:
        require_argument(other, "other")
        if not self.require_non_absent() > other:
            self.fail_with_actual(simple_fact("expected to be greater than"), self.fact("other", other))

    def is_less_than(self, other: Any) -> None:
        require_argument(other, "other")
        if not self.require_non_absent() < other:
            self.fail_with_actual(simple_fact("expected to be less than"), self.fact("other", other))

    def is_at_least(self, other: Any) -> None:
        require_argument(other, "other")
        if not self.require_non_absent() >= other:
            self.fail_with_actual(simple_fact("expected to be at least"), self.fact("other", other))

    def is_at_most(self, other: Any) -> None:
        require_argument(other, "other")
        if not self.require_non_absent() <= other:
            self.fail_with_actual(simple_fact("expected to be at most"), self.fact("other", other))


class IntegerSubject(Subject[int]):
    kind = "integer"

    def is_zero(self) -> None:
        if self.require_non_absent() != 0:
            self.fail_with_actual(simple_fact("expected zero"))

    def is_positive(self) -> None:
        if self.require_non_absent() <= 0:
            self.fail_with_actual(simple_fact("expected to be positive"))

    def is_negative(self) -> None:
        if self.require_non_absent() >= 0:
            self.fail_with_actual(simple_fact("expected to be negative"))

    def is_between(self, low: int, high: int) -> None:
        """Inclusive on both ends."""
        require_argument(low, "low")
        require_argument(high, "high")
        if not low <= self.require_non_absent() <= high:
            self.fail_with_actual(
                simple_fact("expected to be between"), self.fact("low", low), self.fact("high", high)
            )


class StringSubject(Subject[str]):
    kind = "string"

    def contains(self, substring: str) -> None:
        require_argument(substring, "substring")
        if substring not in self.require_non_absent():
            self.fail_with_actual(simple_fact("expected to contain"), self.fact("substring", substring))

    def does_not_contain(self, substring: str) -> None:
        require_argument(substring, "substring")
        if substring in self.require_non_absent():
            self.fail_with_actual(simple_fact("expected not to contain"), self.fact("substring", substring))

    def starts_with(self, prefix: str) -> None:
        require_argument(prefix, "prefix")
        if not self.require_non_absent().startswith(prefix):
            self.fail_with_actual(simple_fact("expected to start with"), self.fact("prefix", prefix))

    def ends_with(self, suffix: str) -> None:
        require_argument(suffix, "suffix")
        if not self.require_non_absent().endswith(suffix):
            self.fail_with_actual(simple_fact("expected to end with"), self.fact("suffix", suffix))

    def matches(self, pattern: str) -> None:
        require_argument(pattern, "pattern")
        if re.search(pattern, self.require_non_absent()) is None:
            self.fail_with_actual(simple_fact("expected to match"), self.fact("pattern", pattern))

    def is_empty(self) -> None:
        if self.require_non_absent() != "":
            self.fail_with_actual(simple_fact("expected to be empty"))

    def is_not_empty(self) -> None:
        if self.require_non_absent() == "":
            self.fail_with_actual(simple_fact("expected not to be empty"))

    def has_length(self, length: int) -> None:
        require_argument(length, "length")
        if len(self.require_non_absent()) != length:
            self.fail_with_actual(simple_fact("expected to have length"), self.fact("length", length))
