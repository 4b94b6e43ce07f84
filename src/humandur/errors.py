"""Exception hierarchy for duration formatting and parsing."""


class DurationError(Exception):
    """Base exception for humandur errors."""


class InvalidArgumentError(DurationError, TypeError):
    """Raised when a duration is not an integer."""

    def __init__(self, value: object) -> None:
        super().__init__("only integer durations are supported")
        self.value = value


class UnsupportedUnitError(DurationError, ValueError):
    """Raised when a unit is not one of the five recognized units."""

    def __init__(self, unit: object) -> None:
        super().__init__(f"unsupported unit {unit!r}")
        self.unit = unit


class InvalidFormatError(DurationError, ValueError):
    """Raised when text matches no duration grammar."""

    def __init__(self, text: object) -> None:
        # Same message for empty and mismatched text
        super().__init__("invalid duration format")
        self.text = text
