"""Exceptions raised by appversion."""

from typing import Self


class VersionError(Exception):
    """Base exception for all version errors."""


class InvalidFormatError(VersionError, ValueError):
    """Raised when a version string does not have exactly three segments.

    Attributes:
        text: The string that failed to parse.
    """

    def __init__(self: Self, text: str) -> None:
        """Initialize the error.

        Args:
            text: The string that failed to parse.
        """
        self.text = text
        super().__init__("Invalid version format")


class ParseIntError(VersionError, ValueError):
    """Raised when a version segment is not a valid 16-bit unsigned integer.

    The underlying integer parse failure is kept on ``error`` and chained as the
    exception's ``__cause__``.

    Attributes:
        segment: The segment that failed to parse.
        error: The underlying integer parse error.
    """

    def __init__(self: Self, segment: str, error: ValueError) -> None:
        """Initialize the error.

        Args:
            segment: The segment that failed to parse.
            error: The underlying integer parse error.
        """
        self.segment = segment
        self.error = error
        super().__init__(f"Parse error: {error}")


class VersionOverflowError(VersionError, OverflowError):
    """Raised when incrementing a component that is already at its maximum.

    Attributes:
        component: Name of the component that would overflow.
    """

    def __init__(self: Self, component: str, limit: int) -> None:
        """Initialize the error.

        Args:
            component: Name of the component that would overflow.
            limit: Maximum value of the component.
        """
        self.component = component
        super().__init__(f"Cannot increment {component}: already at {limit}")


class ConfigError(VersionError):
    """Raised when configuration cannot be loaded."""
