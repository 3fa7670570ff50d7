from __future__ import annotations

from collections.abc import Iterator

from tinytest.cases.base import BaseTest
from tinytest.console import Console


class TestGroup:
    """Ordered, owning collection of tests that are run and reported together."""

    # Keep pytest from collecting this class when it is imported into test modules.
    __test__ = False

    def __init__(self, name: str, *tests: BaseTest) -> None:
        self.name = name
        self._tests: list[BaseTest] = []
        for test in tests:
            self.add(test)

    def __repr__(self) -> str:
        return f"TestGroup({self.name!r}, {len(self._tests)} tests)"

    def __len__(self) -> int:
        return len(self._tests)

    def __iter__(self) -> Iterator[BaseTest]:
        return iter(self._tests)

    def add(self, test: BaseTest) -> None:
        if not isinstance(test, BaseTest):
            raise TypeError(f"expected a test, got {type(test).__name__}")
        self._tests.append(test)

    def run(self, console: Console | None = None) -> bool:
        """Run every test once, in insertion order.

        Returns True only if all tests passed. Failures are summarized after
        the last test has run.
        """
        console = console or Console()
        console.group_started(self.name)

        failed = 0
        for test in self._tests:
            if not test.run(console):
                failed += 1

        console.logger.debug(
            f"Group '{self.name}': {len(self._tests) - failed}/{len(self._tests)} tests passed"
        )
        if failed:
            console.group_failed(failed, len(self._tests))
            return False
        return True
