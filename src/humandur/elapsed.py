"""Elapsed-time helpers built on format_duration."""

import time
from collections.abc import Callable
from datetime import datetime, timedelta

from humandur.formatting import format_duration
from humandur.types import Unit, UnitLike
from humandur.units import unit_scale

_ONE_MICROSECOND = timedelta(microseconds=1)


def since(
    start: int,
    unit: UnitLike = Unit.MICROSECOND,
    *,
    clock: Callable[[], int] = time.time_ns,
) -> str:
    """Format the time elapsed since `start`, a wall-clock timestamp in `unit`.

    `clock` returns the current Unix time in nanoseconds.

    Example:
        start = time.time_ns() // 1_000_000_000
        since(start, Unit.SECOND)  # "0s"
    """
    now = clock() // 1000 // unit_scale(unit)
    return format_duration(now - start, unit)


def microseconds_between(a: datetime, b: datetime) -> int:
    """Whole microseconds from `b` to `a` (negative if `a` is earlier)."""
    return (a - b) // _ONE_MICROSECOND


def between(
    a: datetime,
    b: datetime,
    *,
    diff: Callable[[datetime, datetime], int] = microseconds_between,
) -> str:
    """Format the duration from `b` to `a`."""
    return format_duration(diff(a, b), Unit.MICROSECOND)
