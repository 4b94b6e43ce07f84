"""Duration parsing utilities."""

import logging
import re

from humandur.errors import InvalidFormatError
from humandur.types import ParseResult, Unit, UnitLike
from humandur.units import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    SECOND,
    from_microseconds,
    resolve_unit,
)

logger = logging.getLogger(__name__)

# "1h2m3.456789s" - hours and minutes must not be zero, seconds may be
_HMS_PATTERN = re.compile(
    r"(?:(?P<hours>[1-9][0-9]*)h)?"
    r"(?:(?P<minutes>[1-9][0-9]*)m)?"
    r"(?:(?P<seconds>[0-9]+)(?:\.(?P<fraction>[0-9]{1,6}))?s)?"
)
# "100ms", "45μs"
_SUBSECOND_PATTERN = re.compile(r"(?P<value>[1-9][0-9]*)(?P<suffix>ms|μs)")
_SUBSECOND_UNITS: dict[str, int] = {
    "ms": MILLISECOND,
    "μs": MICROSECOND,
}


def _hms_micros(match: re.Match[str]) -> int:
    hours = int(match["hours"] or 0)
    minutes = int(match["minutes"] or 0)
    seconds = int(match["seconds"] or 0)
    fraction = int((match["fraction"] or "").ljust(6, "0"))
    return hours * HOUR + minutes * MINUTE + seconds * SECOND + fraction


def _subsecond_micros(match: re.Match[str]) -> int:
    return int(match["value"]) * _SUBSECOND_UNITS[match["suffix"]]


# Tried in order; the first whole-string match wins
_GRAMMARS = (
    (_HMS_PATTERN, _hms_micros),
    (_SUBSECOND_PATTERN, _subsecond_micros),
)


def _to_microseconds(text: str) -> int | None:
    if not isinstance(text, str) or not text:
        return None
    for pattern, evaluate in _GRAMMARS:
        match = pattern.fullmatch(text)
        if match:
            return evaluate(match)
    return None


def parse_duration(text: str, unit: UnitLike = Unit.MICROSECOND) -> ParseResult:
    """Parse a duration string into an integer count of `unit`.

    Accepts the composite form (``1h2m3.5s``, each segment optional) and the
    bare sub-second form (``100ms``, ``45μs``). Negative durations are not
    accepted. The result is floored to whole `unit`s.

    Malformed text never raises; it yields ``ParseResult(0, False)``. An
    unrecognized `unit` raises UnsupportedUnitError.

    Example:
        parse_duration("1h2m3.456789s", Unit.SECOND)  # ParseResult(3723, True)
        parse_duration("5m", "millisecond")           # ParseResult(300000, True)
    """
    target = resolve_unit(unit)
    micros = _to_microseconds(text)
    if micros is None:
        logger.debug("Rejected duration text: %r", text)
        return ParseResult(0, False)
    return ParseResult(from_microseconds(micros, target), True)


def parse_duration_strict(text: str, unit: UnitLike = Unit.MICROSECOND) -> int:
    """Like parse_duration, but raise InvalidFormatError on malformed text."""
    value, ok = parse_duration(text, unit)
    if not ok:
        raise InvalidFormatError(text)
    return value
