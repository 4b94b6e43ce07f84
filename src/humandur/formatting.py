"""Duration formatting.

Turns an integer duration into a compact string such as ``6h12m25.0501s``,
``45μs`` or ``8.9s``. Whole hours and minutes are emitted largest first;
whatever remains is rendered as seconds, or, when the entire value is under
one second, as bare milliseconds or microseconds.

Example:
    >>> format_duration(22345050100)
    '6h12m25.0501s'
    >>> format_duration(50, Unit.MILLISECOND)
    '50ms'
"""

from humandur.errors import InvalidArgumentError
from humandur.types import Unit, UnitLike
from humandur.units import HOUR, MILLISECOND, MINUTE, SECOND, to_microseconds

# Walked largest to smallest
_COMPOSITE_UNITS: tuple[tuple[int, str], ...] = (
    (HOUR, "h"),
    (MINUTE, "m"),
)


def format_duration(duration: int, unit: UnitLike = Unit.MICROSECOND) -> str:
    """Format an integer `duration` measured in `unit`.

    Raises:
        InvalidArgumentError: If `duration` is not an int (bools included).
        UnsupportedUnitError: If `unit` is not a recognized unit.
    """
    if not isinstance(duration, int) or isinstance(duration, bool):
        raise InvalidArgumentError(duration)

    if duration == 0:
        return "0s"

    micros = to_microseconds(duration, unit)
    sign = "-" if micros < 0 else ""
    total = abs(micros)

    parts = [sign]
    remaining = total
    for scale, suffix in _COMPOSITE_UNITS:
        count, rest = divmod(remaining, scale)
        if count > 0:
            parts.append(f"{count}{suffix}")
            remaining = rest

    parts.append(_format_seconds(remaining, allow_subsecond=remaining == total))
    return "".join(parts)


def _format_seconds(micros: int, *, allow_subsecond: bool) -> str:
    """Render the under-a-minute remainder."""
    seconds, subsecond = divmod(micros, SECOND)

    if allow_subsecond and seconds == 0:
        if subsecond < MILLISECOND:
            return f"{subsecond}μs"
        return _format_milliseconds(subsecond)

    if seconds > 0:
        return f"{seconds}{_format_fraction(subsecond)}s"

    # Nothing left after hours/minutes
    return ""


def _format_milliseconds(micros: int) -> str:
    ms, leftover = divmod(micros, MILLISECOND)
    if leftover == 0:
        return f"{ms}ms"
    # Leftover digits are not zero-padded
    return f"{ms}.{str(leftover).rstrip('0')}ms"


def _format_fraction(micros: int) -> str:
    """Six-digit fractional seconds with trailing zeros trimmed, or ''."""
    if micros == 0:
        return ""
    return "." + str(micros).rjust(6, "0").rstrip("0")
