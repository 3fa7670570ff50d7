from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="tinytest", help="Run groups of tiny tests")

DEFAULT_CONFIG = "tinytest.yaml"


@app.command()
def run(
    target: str = typer.Argument(
        help="Groups to run: module:attribute or path/to/file.py:attribute "
        "(attribute defaults to all_tests)"
    ),
    config: str | None = typer.Option(
        None, "--config", "-c", help=f"Path to config YAML (defaults to ./{DEFAULT_CONFIG})"
    ),
    group: list[str] | None = typer.Option(
        None, "--group", "-g", help="Run only the group with this name (repeatable)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str | None = typer.Option(None, help="Write a debug log to this file"),
    no_locations: bool = typer.Option(
        False, "--no-locations", help="Do not capture call-site locations of checks"
    ),
):
    """Run test groups and exit non-zero if any test failed."""
    from tinytest.config import HarnessConfig, load_config
    from tinytest.console import Console
    from tinytest.runner import load_groups, run_groups
    from tinytest.verbose import setup_logger

    try:
        if config is not None:
            harness_config = load_config(Path(config))
        elif Path(DEFAULT_CONFIG).exists():
            harness_config = load_config(Path(DEFAULT_CONFIG))
        else:
            harness_config = HarnessConfig()

        if no_locations:
            harness_config = harness_config.model_copy(
                update={"capture_locations": False}
            )

        groups = load_groups(target)
        if group:
            wanted = set(group)
            missing = wanted - {g.name for g in groups}
            if missing:
                raise ValueError(f"no group named {', '.join(sorted(missing))}")
            groups = [g for g in groups if g.name in wanted]
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2)

    log_path = debug_log or harness_config.debug_log
    logger = setup_logger(
        Path(log_path) if log_path else None,
        verbose=verbose,
        logger_name="tinytest_cli",
    )
    logger.debug(f"Running {len(groups)} group(s) from {target}")

    console = Console(harness_config, logger=logger)
    try:
        success = run_groups(groups, console)
    except KeyboardInterrupt:
        typer.echo("Run interrupted.", err=True)
        raise typer.Exit(130)
    finally:
        # Release the name so the app can be invoked again in this process.
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    if not success:
        raise typer.Exit(1)


EXAMPLE_TESTS = '''\
from tinytest import TestGroup, make_assertion_test, make_simple_test


def _raises():
    raise RuntimeError("this is expected")


def _push_back(test):
    s = ""
    for i in range(1000):
        test.check(i == len(s))
        s += "a"
    try:
        s[1000]
        test.fail()
    except IndexError:
        pass


def _empty_and_clear(test):
    items = []
    test.check(not items)
    items = ["s"] * 12
    test.check(bool(items))
    items.clear()
    test.equals(len(items), 0)


all_tests = [
    TestGroup(
        "test group 1",
        make_simple_test("math works", lambda: 2 + 2 == 4),
        make_simple_test("exception", _raises),
    ),
    TestGroup(
        "string tests",
        make_assertion_test("push back and length", _push_back),
        make_assertion_test("empty & clear", _empty_and_clear),
    ),
]
'''

EXAMPLE_CONFIG = """\
capture_locations: true
float_precision: 4
timing_precision: 2
clock: wall
"""


@app.command()
def init(
    dir: str = typer.Option(
        "tinytest", "--dir", help="Directory to write the example tests into"
    ),
):
    """Write an example test module and config."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for filename, content in (
        ("test_example.py", EXAMPLE_TESTS),
        (DEFAULT_CONFIG, EXAMPLE_CONFIG),
    ):
        path = project_dir / filename
        if path.exists():
            typer.echo(f"{filename} already exists in {dir}, skipping.")
            continue
        path.write_text(content)
        written.append(filename)

    if written:
        typer.echo(f"Initialized tinytest project in {dir}:")
        for filename in written:
            typer.echo(f"  {filename}")
        typer.echo(f"Run it with: tinytest run {project_dir / 'test_example.py'}")
