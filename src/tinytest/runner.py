"""Top-level driver: load test groups and run them."""

from __future__ import annotations

import hashlib
import importlib
import importlib.util
import sys
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from tinytest.console import Console
from tinytest.group import TestGroup

DEFAULT_ATTRIBUTE = "all_tests"


def run_groups(groups: Iterable[TestGroup], console: Console | None = None) -> bool:
    """Run every group in order and return True only if all of them passed.

    A failing group does not stop the groups after it.
    """
    console = console or Console()
    success = True
    total = 0
    for group in groups:
        total += 1
        success = group.run(console) and success
    console.logger.debug(f"Ran {total} group(s), success={success}")
    return success


def _split_target(target: str) -> tuple[str, str]:
    module_ref, sep, attribute = target.rpartition(":")
    # A drive letter or a bare path has no attribute part.
    if not sep or not module_ref or "/" in attribute or "\\" in attribute:
        return target, DEFAULT_ATTRIBUTE
    return module_ref, attribute or DEFAULT_ATTRIBUTE


def _import_file(path: Path) -> ModuleType:
    digest = hashlib.sha1(str(path).encode()).hexdigest()[:12]
    module_name = f"_tinytest_target_{path.stem}_{digest}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ValueError(f"cannot import {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        del sys.modules[module_name]
        raise ValueError(f"cannot import {path}: {type(e).__name__}: {e}") from e
    return module


def _import_target(module_ref: str) -> ModuleType:
    path = Path(module_ref)
    if module_ref.endswith(".py") or path.is_file():
        if not path.is_file():
            raise ValueError(f"test file not found: {module_ref}")
        return _import_file(path.resolve())
    try:
        return importlib.import_module(module_ref)
    except ModuleNotFoundError as e:
        raise ValueError(f"cannot import module '{module_ref}': {e}") from e
    except Exception as e:
        raise ValueError(
            f"cannot import module '{module_ref}': {type(e).__name__}: {e}"
        ) from e


def load_groups(target: str) -> list[TestGroup]:
    """Resolve ``module:attribute`` or ``path.py:attribute`` to test groups.

    The attribute defaults to ``all_tests`` and must hold a TestGroup or an
    iterable of them.

    Raises:
        ValueError: If the module or attribute cannot be found, or holds
            something other than test groups.
    """
    module_ref, attribute = _split_target(target)
    module = _import_target(module_ref)

    try:
        obj = getattr(module, attribute)
    except AttributeError:
        raise ValueError(f"'{module_ref}' has no attribute '{attribute}'") from None

    if isinstance(obj, TestGroup):
        return [obj]
    if isinstance(obj, (str, bytes)) or not isinstance(obj, Iterable):
        raise ValueError(
            f"'{module_ref}:{attribute}' must be a TestGroup or a list of them, "
            f"got {type(obj).__name__}"
        )

    groups = list(obj)
    for item in groups:
        if not isinstance(item, TestGroup):
            raise ValueError(
                f"'{module_ref}:{attribute}' contains {type(item).__name__}, "
                "expected TestGroup"
            )
    return groups
