"""Semantic version value type."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, fields
from typing import Any, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .exceptions import InvalidFormatError, ParseIntError, VersionOverflowError
from .types import VersionLike, VersionTuple

COMPONENT_MAX = 0xFFFF
VERSION_PATTERN = r"^\d+\.\d+\.\d+$"


def _parse_component(segment: str) -> int:
    """Parse a single version segment as an unsigned 16-bit integer.

    Args:
        segment: One dot-separated piece of a version string.

    Returns:
        The integer value of the segment.

    Raises:
        ParseIntError: If the segment is empty, contains anything but ASCII
            digits, or does not fit in 16 bits.
    """
    if not segment:
        error = ValueError("cannot parse integer from empty string")
    elif not (segment.isascii() and segment.isdigit()):
        error = ValueError("invalid digit found in string")
    else:
        value = int(segment)
        if value <= COMPONENT_MAX:
            return value
        error = ValueError("number too large to fit in target type")
    raise ParseIntError(segment, error) from error


@dataclass(frozen=True, order=True)
class Version:
    """Semantic version representation.

    Components are unsigned 16-bit integers. Versions compare field by field
    in (major, minor, patch) order. Fields cannot be assigned; the increment
    methods are the only way to change a version in place, so versions are
    not hashable.

    Attributes:
        major: Major version number (breaking changes).
        minor: Minor version number (backward-compatible features).
        patch: Patch version number (backward-compatible fixes).

    Example:
        >>> version = Version(1, 0, 0)
        >>> version.increment_minor()
        >>> str(version)
        '1.1.0'
    """

    major: int = 0
    minor: int = 0
    patch: int = 0

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self: Self) -> None:
        """Check that every component is an unsigned 16-bit integer.

        Raises:
            TypeError: If a component is not an int.
            ValueError: If a component is out of range.
        """
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"{field.name} must be an int, got {type(value).__name__}"
                )
            if not 0 <= value <= COMPONENT_MAX:
                raise ValueError(
                    f"{field.name} must be between 0 and {COMPONENT_MAX}, got {value}"
                )

    @classmethod
    def parse(cls, version_str: str) -> Self:
        """Parse a semantic version string.

        Args:
            version_str: Version string in format "major.minor.patch".

        Returns:
            Parsed Version instance.

        Raises:
            InvalidFormatError: If the string does not have three segments.
            ParseIntError: If a segment is not a valid 16-bit unsigned integer.
        """
        parts = version_str.split(".")
        if len(parts) != 3:  # noqa: PLR2004
            raise InvalidFormatError(version_str)

        major, minor, patch = (_parse_component(part) for part in parts)
        return cls(major, minor, patch)

    @classmethod
    def from_tuple(cls, version_tuple: VersionTuple) -> Self:
        """Create a version from a (major, minor, patch) tuple.

        Args:
            version_tuple: Three integer components.

        Returns:
            Version instance with the given components.

        Raises:
            InvalidFormatError: If the tuple does not have three items.
        """
        if len(version_tuple) != 3:  # noqa: PLR2004
            raise InvalidFormatError(str(version_tuple))
        major, minor, patch = version_tuple
        return cls(major, minor, patch)

    @classmethod
    def coerce(cls, value: VersionLike) -> Self:
        """Convert a version-like value into a Version.

        Args:
            value: A Version, a version string, or a three-item sequence.

        Returns:
            The value itself if it already is a Version, otherwise a new one.

        Raises:
            TypeError: If the value has an unsupported type.
            InvalidFormatError: If a string or sequence has the wrong length.
            ParseIntError: If a string segment cannot be parsed.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, Sequence) and not isinstance(value, bytes | bytearray):
            return cls.from_tuple(tuple(value))  # type: ignore[arg-type]
        raise TypeError(f"Cannot convert {type(value).__name__} to Version")

    def to_tuple(self: Self) -> VersionTuple:
        """Return the version as a (major, minor, patch) tuple."""
        return (self.major, self.minor, self.patch)

    def __iter__(self: Self) -> Iterator[int]:
        """Iterate over major, minor and patch."""
        return iter(self.to_tuple())

    def copy(self: Self) -> Self:
        """Return an independent copy of this version."""
        return type(self)(self.major, self.minor, self.patch)

    def is_compatible(self: Self, other: "Version") -> bool:
        """Check whether two versions are API compatible.

        Versions are compatible when their major versions match, regardless of
        minor and patch.

        Args:
            other: Version to compare against.

        Returns:
            True if both versions share the same major version.
        """
        return self.major == other.major

    def increment_patch(self: Self) -> None:
        """Increment the patch version.

        Raises:
            VersionOverflowError: If patch is already at its maximum.
        """
        self._check_increment("patch")
        self._set(patch=self.patch + 1)

    def increment_minor(self: Self) -> None:
        """Increment the minor version and reset patch to 0.

        Raises:
            VersionOverflowError: If minor is already at its maximum.
        """
        self._check_increment("minor")
        self._set(minor=self.minor + 1, patch=0)

    def increment_major(self: Self) -> None:
        """Increment the major version and reset minor and patch to 0.

        Raises:
            VersionOverflowError: If major is already at its maximum.
        """
        self._check_increment("major")
        self._set(major=self.major + 1, minor=0, patch=0)

    def bump(self: Self, part: str) -> Self:
        """Return a new version with one component incremented.

        The receiver is left unchanged.

        Args:
            part: Component to increment: "major", "minor" or "patch".

        Returns:
            The incremented copy.

        Raises:
            ValueError: If part is not a known component.
            VersionOverflowError: If the component is already at its maximum.
        """
        bumped = self.copy()
        if part == "major":
            bumped.increment_major()
        elif part == "minor":
            bumped.increment_minor()
        elif part == "patch":
            bumped.increment_patch()
        else:
            raise ValueError(
                f"Unknown version part '{part}', expected major, minor or patch"
            )
        return bumped

    def _check_increment(self: Self, component: str) -> None:
        if getattr(self, component) >= COMPONENT_MAX:
            raise VersionOverflowError(component, COMPONENT_MAX)

    def _set(self: Self, **components: int) -> None:
        for name, value in components.items():
            object.__setattr__(self, name, value)

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string in format "major.minor.patch".
        """
        return f"{self.major}.{self.minor}.{self.patch}"

    def __format__(self: Self, format_spec: str) -> str:
        """Apply a string format spec to the "major.minor.patch" form."""
        return format(str(self), format_spec)

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        return f"Version({self.major}, {self.minor}, {self.patch})"

    @classmethod
    def _validate(cls, value: Any) -> Self:
        try:
            return cls.coerce(value)
        except TypeError as e:
            raise ValueError(str(e)) from e

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Let Version be used as a pydantic field type.

        Accepts a Version, a version string or a three-item sequence, and
        serializes to the canonical string.
        """
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="always"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe Version as a dotted version string in JSON schema."""
        return handler(core_schema.str_schema(pattern=VERSION_PATTERN))
