"""humandur - Human-readable integer durations for Python."""

# Errors
from humandur.errors import (
    DurationError,
    InvalidArgumentError,
    InvalidFormatError,
    UnsupportedUnitError,
)

# Parsing
from humandur.duration import parse_duration, parse_duration_strict

# Elapsed-time helpers
from humandur.elapsed import between, microseconds_between, since

# Formatting
from humandur.formatting import format_duration

# Core types
from humandur.types import ParseResult, Unit, UnitLike

# Scale constants (microseconds per unit)
from humandur.units import HOUR, MICROSECOND, MILLISECOND, MINUTE, SECOND

__version__ = "0.1.0"

__all__ = [
    "HOUR",
    "MICROSECOND",
    "MILLISECOND",
    "MINUTE",
    "SECOND",
    "DurationError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "ParseResult",
    "Unit",
    "UnitLike",
    "UnsupportedUnitError",
    "between",
    "format_duration",
    "microseconds_between",
    "parse_duration",
    "parse_duration_strict",
    "since",
]
