"""Shared pytest fixtures."""

from collections.abc import Callable

import pytest


@pytest.fixture
def fixed_clock() -> Callable[[int], Callable[[], int]]:
    """Build a nanosecond clock frozen at a given instant."""

    def make_clock(now_ns: int) -> Callable[[], int]:
        return lambda: now_ns

    return make_clock
