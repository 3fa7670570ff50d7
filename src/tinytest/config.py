from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ClockType(str, Enum):
    WALL = "wall"
    PROCESS = "process"


class HarnessConfig(BaseModel):
    """Settings shared by every test and group in a run.

    Attributes:
        color: Force colored status markers on (True) or off (False). None
            lets the output stream decide.
        capture_locations: Record file/line/column of failing checks.
            Turning this off only removes detail from the output, outcomes
            are unaffected.
        float_precision: Significant digits used by float_equals diagnostics.
        timing_precision: Decimal places used for millisecond timings.
        clock: "wall" measures elapsed real time, "process" measures CPU time
            of the current process.
        default_time_limit_ms: Budget applied by make_timed_test when the
            caller does not pass one. None means unbounded.
        debug_log: Path of the debug log written by the CLI.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    color: bool | None = None
    capture_locations: bool = True
    float_precision: int = Field(default=4, ge=1, le=17)
    timing_precision: int = Field(default=2, ge=0, le=9)
    clock: ClockType = ClockType.WALL
    default_time_limit_ms: float | None = None
    debug_log: str | None = None

    @field_validator("default_time_limit_ms")
    @classmethod
    def time_limit_must_not_be_negative(cls, v: float | None) -> float | None:
        if v is not None and v < 0:
            raise ValueError("default_time_limit_ms must not be negative")
        return v


def _expand(value: Any) -> Any:
    if isinstance(value, str):
        return expandvars(value)
    if isinstance(value, dict):
        return {k: _expand(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand(v) for v in value]
    return value


def load_config(path: Path) -> HarnessConfig:
    """Load and validate a harness config from a YAML file."""
    if not path.exists():
        raise ValueError(f"config file not found: {path}")

    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"invalid YAML in {path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping at the top level")

    try:
        return HarnessConfig(**_expand(raw))
    except ValidationError as e:
        raise ValueError(f"invalid config {path}:\n{e}") from e
