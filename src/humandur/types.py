"""Core types for humandur."""

from enum import Enum
from typing import NamedTuple


class Unit(str, Enum):
    """Time unit used to interpret an integer duration."""

    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"


class ParseResult(NamedTuple):
    """Outcome of a non-raising parse."""

    value: int
    ok: bool


# Unit alias - a Unit member or its string value
UnitLike = Unit | str
