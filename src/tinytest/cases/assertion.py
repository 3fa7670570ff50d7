from __future__ import annotations

from collections.abc import Callable
from typing import Any

from tinytest.assertions.context import AssertionContext
from tinytest.cases.base import BaseTest
from tinytest.console import Console


class AssertionTest(BaseTest):
    """Test whose body records checks on an AssertionContext.

    The body receives a fresh context on every execution. The test passes
    when every recorded check passed; a body that records nothing passes.
    """

    def __init__(self, name: str, body: Callable[[AssertionContext], Any]) -> None:
        super().__init__(name)
        self.body = body

    def do_test(self, console: Console) -> bool:
        context = AssertionContext(console)
        self.body(context)
        console.logger.debug(
            f"Test '{self.name}': {context.failures}/{context.checks} checks failed"
        )
        return context.result
