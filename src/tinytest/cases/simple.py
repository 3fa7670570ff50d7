from __future__ import annotations

from collections.abc import Callable

from tinytest.cases.base import BaseTest
from tinytest.console import Console


class SimpleTest(BaseTest):
    """Test made of a zero-argument predicate; passes when it returns true."""

    def __init__(self, name: str, predicate: Callable[[], bool]) -> None:
        super().__init__(name)
        self.predicate = predicate

    def do_test(self, console: Console) -> bool:
        return bool(self.predicate())
