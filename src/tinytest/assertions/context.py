"""Check recorder handed to assertion-style test bodies."""

from __future__ import annotations

import numbers
from typing import Any

from tinytest.assertions.base import DiagnosticLocation, capture_location
from tinytest.console import Console

_SKIP_MODULES = frozenset({__name__})


class AssertionContext:
    """Accumulates the outcome of every check made during one test execution.

    ``result`` starts out True and is ANDed with each check, so a single false
    check fails the test while later checks still run and report. Every
    method returns the outcome of its own check so the body can branch on it.

    Attributes:
        result: Conjunction of all checks recorded so far.
        checks: Number of checks recorded.
        failures: Number of checks that evaluated to false.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.result = True
        self.checks = 0
        self.failures = 0

    def _locate(self, location: DiagnosticLocation | None) -> DiagnosticLocation | None:
        if location is not None or not self.console.config.capture_locations:
            return location
        return capture_location(_SKIP_MODULES)

    def _record(self, condition: bool, location: DiagnosticLocation | None) -> bool:
        condition = bool(condition)
        self.checks += 1
        self.result = self.result and condition
        if not condition:
            self.failures += 1
            location = self._locate(location)
            if location is not None:
                self.console.echo(f"condition at {location} evaluated to false")
            else:
                self.console.echo("condition evaluated to false")
            self.console.logger.debug(f"Check #{self.checks} failed at {location}")
        return condition

    def check(self, condition: bool, location: DiagnosticLocation | None = None) -> bool:
        """Record ``condition``; print where it failed if it is false."""
        return self._record(condition, location)

    def equals(
        self, first: Any, second: Any, location: DiagnosticLocation | None = None
    ) -> bool:
        """Record ``first == second``, printing both values on mismatch."""
        result = self._record(first == second, location)
        if not result:
            try:
                detail = (
                    f"{first!r} ({type(first).__name__}) != "
                    f"{second!r} ({type(second).__name__})"
                )
            except Exception:
                # Operands that cannot be rendered only lose the detail line.
                return result
            self.console.echo(detail)
        return result

    def float_equals(
        self,
        x: float,
        y: float,
        epsilon: float,
        location: DiagnosticLocation | None = None,
    ) -> bool:
        """Record ``abs(x - y) < epsilon``.

        Raises:
            TypeError: If any operand is not a real number.
        """
        for value in (x, y, epsilon):
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise TypeError(
                    f"float_equals expects real numbers, got {type(value).__name__}"
                )

        result = self._record(abs(x - y) < epsilon, location)
        if not result:
            p = self.console.config.float_precision
            self.console.echo(
                f"{float(x):.{p}g} != {float(y):.{p}g} "
                f"with epsilon {float(epsilon):.{p}g}"
            )
        return result

    def fail(self, location: DiagnosticLocation | None = None) -> bool:
        """Record an unconditional failure, e.g. when an expected error did not occur."""
        return self._record(False, location)
