"""Tests for the TimedTest wrapper and make_timed_test."""

import math
import time
from datetime import timedelta

import pytest

from tinytest.cases import SimpleTest, TimedTest, make_simple_test, make_timed_test
from tinytest.config import HarnessConfig
from tinytest.console import Console


@pytest.fixture
def fake_time(mocker):
    return mocker.patch("tinytest.cases.timed.time")


def test_slow_body_fails_even_if_predicate_passes(console, capsys):
    def sleepy():
        time.sleep(0.005)
        return True

    test = TimedTest(make_simple_test("sleepy", sleepy), max_runtime_ms=1.0)
    assert test.run(console) is False
    out = capsys.readouterr().out
    assert "finished in " in out
    assert "SLOWER than given limit: 1.00ms" in out
    assert out.rstrip().endswith("[FAIL]")


def test_unbounded_budget_keeps_wrapped_outcome(console):
    assert TimedTest(SimpleTest("t", lambda: True)).run(console) is True
    assert TimedTest(SimpleTest("f", lambda: False)).run(console) is False


def test_default_budget_is_infinite():
    assert TimedTest(SimpleTest("t", lambda: True)).max_runtime_ms == math.inf


def test_elapsed_time_is_printed(console, capsys, fake_time):
    fake_time.perf_counter.side_effect = [10.0, 10.25]
    TimedTest(SimpleTest("t", lambda: True)).run(console)
    assert "finished in 250.00ms" in capsys.readouterr().out


def test_elapsed_equal_to_budget_passes(console, capsys, fake_time):
    fake_time.perf_counter.side_effect = [0.25, 0.5]
    assert TimedTest(SimpleTest("t", lambda: True), 250.0).run(console) is True
    assert "SLOWER" not in capsys.readouterr().out


def test_within_budget_keeps_failing_outcome(console, fake_time):
    fake_time.perf_counter.side_effect = [0.0, 0.0]
    assert TimedTest(SimpleTest("t", lambda: False), 100.0).run(console) is False


def test_process_clock_is_used_when_configured(capsys, fake_time):
    fake_time.process_time.side_effect = [1.0, 1.5]
    console = Console(HarnessConfig(color=False, clock="process"))
    assert TimedTest(SimpleTest("t", lambda: True), 100.0).run(console) is False
    fake_time.perf_counter.assert_not_called()
    assert "finished in 500.00ms" in capsys.readouterr().out


def test_timing_precision_from_config(capsys, fake_time):
    fake_time.perf_counter.side_effect = [0.0, 0.0125]
    console = Console(HarnessConfig(color=False, timing_precision=1))
    TimedTest(SimpleTest("t", lambda: True)).run(console)
    assert "finished in 12.5ms" in capsys.readouterr().out


def test_exception_in_wrapped_body_still_reports_time(console, capsys):
    def boom():
        raise RuntimeError("boom")

    assert TimedTest(SimpleTest("t", boom), 1000.0).run(console) is False
    out = capsys.readouterr().out
    assert "finished in " in out
    assert "caught exception: boom" in out


def test_timed_assertion_test_reports_checks(console, capsys):
    def body(test):
        test.equals(1, 2)

    test = make_timed_test("assertion", "timed checks", body, timedelta(seconds=10))
    assert test.run(console) is False
    out = capsys.readouterr().out
    assert "1 (int) != 2 (int)" in out
    assert out.count('test "timed checks"') == 1


def test_timed_test_takes_wrapped_name():
    inner = SimpleTest("inner", lambda: True)
    timed = TimedTest(inner, 5.0)
    assert timed.name == "inner"
    assert timed.test is inner


def test_negative_budget_rejected():
    with pytest.raises(ValueError, match="negative"):
        TimedTest(SimpleTest("t", lambda: True), -1.0)


# --- make_timed_test ---


def test_timedelta_limit_is_converted_to_milliseconds():
    test = make_timed_test("simple", "t", lambda: True, timedelta(microseconds=1500))
    assert test.max_runtime_ms == pytest.approx(1.5)


def test_numeric_limit_is_milliseconds():
    assert make_timed_test("simple", "t", lambda: True, 20).max_runtime_ms == 20.0


def test_config_default_limit_applies_without_explicit_limit():
    config = HarnessConfig(default_time_limit_ms=42.0)
    test = make_timed_test("simple", "t", lambda: True, config=config)
    assert test.max_runtime_ms == 42.0


def test_explicit_limit_overrides_config_default():
    config = HarnessConfig(default_time_limit_ms=42.0)
    test = make_timed_test("simple", "t", lambda: True, 7, config=config)
    assert test.max_runtime_ms == 7.0


def test_no_limit_is_unbounded():
    assert make_timed_test("simple", "t", lambda: True).max_runtime_ms == math.inf
