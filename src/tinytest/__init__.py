"""Minimal embeddable unit-test harness."""

from tinytest.assertions import AssertionContext, DiagnosticLocation
from tinytest.cases import (
    AssertionTest,
    BaseTest,
    SimpleTest,
    TimedTest,
    make_assertion_test,
    make_simple_test,
    make_test,
    make_timed_test,
)
from tinytest.config import ClockType, HarnessConfig, load_config
from tinytest.console import Console
from tinytest.group import TestGroup
from tinytest.runner import load_groups, run_groups

__all__ = [
    "AssertionContext",
    "AssertionTest",
    "BaseTest",
    "ClockType",
    "Console",
    "DiagnosticLocation",
    "HarnessConfig",
    "SimpleTest",
    "TestGroup",
    "TimedTest",
    "load_config",
    "load_groups",
    "make_assertion_test",
    "make_simple_test",
    "make_test",
    "make_timed_test",
    "run_groups",
]
