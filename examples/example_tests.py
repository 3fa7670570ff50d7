"""Example test groups.

Run with:

    tinytest run examples/example_tests.py

The "exception" test and the "too slow" test fail on purpose.
"""

import io
import time
from datetime import timedelta

from tinytest import TestGroup, make_assertion_test, make_simple_test, make_timed_test


def _raises():
    raise RuntimeError("this is expected")


def _push_back_and_length(test):
    s = ""
    repeats = 1000
    for i in range(repeats):
        test.check(i == len(s))
        s += "a"

    try:
        s[repeats]
        test.fail()
    except IndexError:
        pass


def _back_and_front(test):
    chars = ["q"] * 100
    chars[0] = "a"
    chars[-1] = "b"
    test.equals(chars[0], "a")
    test.equals(chars[-1], "b")


def _several_writes(test):
    stream = io.StringIO()
    stream.write("python")
    stream.write(" is the")
    stream.write(" best!")
    test.equals(stream.getvalue(), "python is the best!")


def _float_sum(test):
    test.float_equals(0.1 + 0.2, 0.3, 1e-9)


def _sleepy():
    time.sleep(0.05)
    return True


all_tests = [
    TestGroup(
        "test group 1",
        make_simple_test("math works", lambda: 2 + 2 == 4),
        make_simple_test("exception", _raises),
    ),
    TestGroup(
        "string tests",
        make_assertion_test("push back and length", _push_back_and_length),
        make_assertion_test("back & front", _back_and_front),
        make_assertion_test("several writes", _several_writes),
    ),
    TestGroup(
        "timing",
        make_timed_test("assertion", "float sum", _float_sum, timedelta(seconds=1)),
        make_timed_test("simple", "too slow", _sleepy, timedelta(milliseconds=1)),
    ),
]
