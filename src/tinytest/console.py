"""Human-readable console output for test runs."""

from __future__ import annotations

import logging
from typing import IO

import typer

from tinytest.config import HarnessConfig


class Console:
    """Writes run progress to a text stream and mirrors it to a logger.

    The stream defaults to stdout at write time, so output captured by the
    caller (or by pytest) is picked up even if it is swapped after
    construction.
    """

    def __init__(
        self,
        config: HarnessConfig | None = None,
        logger: logging.Logger | None = None,
        stream: IO[str] | None = None,
    ) -> None:
        self.config = config or HarnessConfig()
        self.logger = logger or logging.getLogger("tinytest")
        self.stream = stream

    def echo(self, message: str) -> None:
        typer.echo(message, file=self.stream, color=self.config.color)

    def status(self, passed: bool) -> None:
        if passed:
            marker = typer.style("OK", fg=typer.colors.GREEN)
        else:
            marker = typer.style("FAIL", fg=typer.colors.RED)
        self.echo(f"[{marker}]")

    def group_started(self, name: str) -> None:
        self.echo(f'Running group "{name}"')
        self.logger.debug(f"Running group '{name}'")

    def group_failed(self, failed: int, total: int) -> None:
        self.echo("Group failed!")
        self.echo(f"Failed {failed}/{total} tests")

    def test_started(self, name: str) -> None:
        self.echo(f'test "{name}"')
        self.logger.debug(f"Running test '{name}'")

    def format_ms(self, milliseconds: float) -> str:
        return f"{milliseconds:.{self.config.timing_precision}f}ms"
