"""Unit scale constants and conversions.

Every unit is expressed as a whole number of microseconds, the canonical
unit for all formatting and parsing.
"""

from humandur.errors import UnsupportedUnitError
from humandur.types import Unit, UnitLike

MICROSECOND = 1
MILLISECOND = 1_000
SECOND = 1_000_000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_SCALES: dict[Unit, int] = {
    Unit.MICROSECOND: MICROSECOND,
    Unit.MILLISECOND: MILLISECOND,
    Unit.SECOND: SECOND,
    Unit.MINUTE: MINUTE,
    Unit.HOUR: HOUR,
}


def resolve_unit(unit: UnitLike) -> Unit:
    """Coerce a Unit or its string value to a Unit."""
    if isinstance(unit, Unit):
        return unit
    if isinstance(unit, str):
        try:
            return Unit(unit)
        except ValueError:
            pass
    raise UnsupportedUnitError(unit)


def unit_scale(unit: UnitLike) -> int:
    """Microseconds per one `unit`."""
    return _SCALES[resolve_unit(unit)]


def to_microseconds(value: int, unit: UnitLike) -> int:
    return value * unit_scale(unit)


def from_microseconds(micros: int, unit: UnitLike) -> int:
    """Rescale microseconds to `unit`, flooring any remainder."""
    return micros // unit_scale(unit)
