from __future__ import annotations

from abc import ABC, abstractmethod

from tinytest.console import Console


def _describe(error: BaseException) -> str:
    """Message of ``error``, or its type name if the message cannot be rendered."""
    try:
        return str(error)
    except Exception:
        return f"<{type(error).__name__}, message unavailable>"


class BaseTest(ABC):
    """A named unit of verification work that yields a boolean outcome.

    Subclasses implement ``do_test``. ``run`` wraps it with the start and
    result markers and is the one place where exceptions raised by test code
    are caught and turned into a failed outcome.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"

    def __call__(self, console: Console | None = None) -> bool:
        return self.run(console)

    def run(self, console: Console | None = None) -> bool:
        """Execute the test once and report the outcome. Never raises."""
        console = console or Console()
        console.test_started(self.name)

        result = False
        try:
            result = bool(self.do_test(console))
        except KeyboardInterrupt:
            raise
        except Exception as e:
            console.echo(f"caught exception: {_describe(e)}")
            console.logger.debug(
                f"Test '{self.name}' raised {type(e).__name__}", exc_info=True
            )
        except BaseException as e:
            console.echo("caught unknown exception")
            console.logger.debug(
                f"Test '{self.name}' raised {type(e).__name__}", exc_info=True
            )

        console.status(result)
        console.logger.debug(f"Test '{self.name}' {'passed' if result else 'failed'}")
        return result

    @abstractmethod
    def do_test(self, console: Console) -> bool:
        """Perform the test-specific work and return whether it passed."""
        ...
