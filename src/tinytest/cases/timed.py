from __future__ import annotations

import math
import time

from tinytest.cases.base import BaseTest
from tinytest.config import ClockType
from tinytest.console import Console


class TimedTest(BaseTest):
    """Wraps another test and fails it when it runs longer than a budget.

    The wrapped work always runs to completion; the budget is checked
    afterwards. A wrapped test that passes but overruns is reported as
    failed.
    """

    def __init__(self, test: BaseTest, max_runtime_ms: float = math.inf) -> None:
        if max_runtime_ms < 0:
            raise ValueError(f"max_runtime_ms must not be negative, got {max_runtime_ms}")
        super().__init__(test.name)
        self._test = test
        self._max_runtime_ms = float(max_runtime_ms)

    @property
    def test(self) -> BaseTest:
        return self._test

    @property
    def max_runtime_ms(self) -> float:
        return self._max_runtime_ms

    def __repr__(self) -> str:
        return f"TimedTest({self._test!r}, max_runtime_ms={self._max_runtime_ms})"

    def do_test(self, console: Console) -> bool:
        if console.config.clock is ClockType.PROCESS:
            clock = time.process_time
        else:
            clock = time.perf_counter

        start = clock()
        try:
            result = self._test.do_test(console)
        finally:
            elapsed_ms = (clock() - start) * 1000.0
            console.echo(f"finished in {console.format_ms(elapsed_ms)}")
            console.logger.debug(
                f"Test '{self.name}' took {elapsed_ms:.3f}ms "
                f"(limit {self._max_runtime_ms}ms)"
            )

        if elapsed_ms > self._max_runtime_ms:
            console.echo(
                f"SLOWER than given limit: {console.format_ms(self._max_runtime_ms)}"
            )
            return False
        return result
