"""Tests for the exception hierarchy."""

import pytest

from humandur import (
    DurationError,
    InvalidArgumentError,
    InvalidFormatError,
    UnsupportedUnitError,
)


class TestErrorHierarchy:
    """Tests for error base classes and attributes."""

    @pytest.mark.parametrize(
        ("error_cls", "builtin"),
        [
            (InvalidArgumentError, TypeError),
            (UnsupportedUnitError, ValueError),
            (InvalidFormatError, ValueError),
        ],
    )
    def test_subclasses(self, error_cls: type, builtin: type) -> None:
        """Test that every error is a DurationError and a builtin error."""
        assert issubclass(error_cls, DurationError)
        assert issubclass(error_cls, builtin)

    def test_invalid_argument(self) -> None:
        """Test InvalidArgumentError message and value."""
        error = InvalidArgumentError(1.5)
        assert str(error) == "only integer durations are supported"
        assert error.value == 1.5

    def test_unsupported_unit(self) -> None:
        """Test UnsupportedUnitError message and unit."""
        error = UnsupportedUnitError("millis")
        assert str(error) == "unsupported unit 'millis'"
        assert error.unit == "millis"

    def test_invalid_format(self) -> None:
        """Test that InvalidFormatError keeps a generic message."""
        empty = InvalidFormatError("")
        garbage = InvalidFormatError("10x")
        assert str(empty) == str(garbage) == "invalid duration format"
        assert garbage.text == "10x"
