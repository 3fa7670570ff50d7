from __future__ import annotations

import math
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from tinytest.cases.assertion import AssertionTest
from tinytest.cases.base import BaseTest
from tinytest.cases.simple import SimpleTest
from tinytest.cases.timed import TimedTest
from tinytest.config import HarnessConfig

_TEST_TYPES: dict[str, type[BaseTest]] = {
    "simple": SimpleTest,
    "assertion": AssertionTest,
}


def make_test(kind: str, name: str, func: Callable[..., Any]) -> BaseTest:
    """Build a test of the given kind ("simple" or "assertion")."""
    cls = _TEST_TYPES.get(kind)
    if cls is None:
        raise ValueError(
            f"Unknown test kind: {kind!r}. Available: {', '.join(sorted(_TEST_TYPES))}"
        )
    return cls(name, func)


def make_simple_test(name: str, predicate: Callable[[], bool]) -> SimpleTest:
    return SimpleTest(name, predicate)


def make_assertion_test(name: str, body: Callable[..., Any]) -> AssertionTest:
    return AssertionTest(name, body)


def _to_milliseconds(time_limit: timedelta | float) -> float:
    if isinstance(time_limit, timedelta):
        return time_limit.total_seconds() * 1000.0
    return float(time_limit)


def make_timed_test(
    kind: str,
    name: str,
    func: Callable[..., Any],
    time_limit: timedelta | float | None = None,
    config: HarnessConfig | None = None,
) -> TimedTest:
    """Build a test of the given kind wrapped in a TimedTest.

    ``time_limit`` is a timedelta or a number of milliseconds. When omitted,
    ``config.default_time_limit_ms`` applies, and with neither the budget is
    unbounded.
    """
    if time_limit is not None:
        limit_ms = _to_milliseconds(time_limit)
    elif config is not None and config.default_time_limit_ms is not None:
        limit_ms = config.default_time_limit_ms
    else:
        limit_ms = math.inf
    return TimedTest(make_test(kind, name, func), limit_ms)


__all__ = [
    "AssertionTest",
    "BaseTest",
    "SimpleTest",
    "TimedTest",
    "make_assertion_test",
    "make_simple_test",
    "make_test",
    "make_timed_test",
]
