"""Tests for the VersionProvider protocol."""

import pytest
from pydantic import BaseModel

from appversion import Version, VersionProvider, check_compatible, provided_version


class MySoftware:
    """Software reporting version 1.0.0."""

    @classmethod
    def version(cls) -> Version:
        """Return the software version."""
        return Version(1, 0, 0)


class BrokenSoftware:
    """Software whose version method returns a string."""

    @classmethod
    def version(cls) -> str:
        """Return the version as text."""
        return "1.0.0"


class Release(BaseModel):
    """Model with a version field rather than a version method."""

    version: Version


def test_provider_version() -> None:
    """Tests calling version on the type and on an instance."""
    assert MySoftware.version() == Version(1, 0, 0)
    assert MySoftware().version() == Version(1, 0, 0)


def test_provider_isinstance() -> None:
    """Tests that providers satisfy the runtime protocol check."""
    assert isinstance(MySoftware, VersionProvider)
    assert isinstance(MySoftware(), VersionProvider)
    assert not isinstance(object(), VersionProvider)
    assert not isinstance(Version(1, 0, 0), VersionProvider)


def test_provided_version() -> None:
    """Tests reading the version of a provider."""
    assert provided_version(MySoftware) == Version(1, 0, 0)
    assert provided_version(MySoftware()) == Version(1, 0, 0)


def test_provided_version_not_a_provider() -> None:
    """Tests that objects without a version method are rejected."""
    with pytest.raises(TypeError, match="does not provide a version"):
        provided_version(object())


def test_provided_version_attribute_not_method() -> None:
    """Tests that a version field is not mistaken for a provider."""
    release = Release(version=Version(1, 0, 0))

    with pytest.raises(TypeError, match="does not provide a version"):
        provided_version(release)


def test_provided_version_wrong_return_type() -> None:
    """Tests that version must return a Version."""
    with pytest.raises(TypeError, match="returned str, expected Version"):
        provided_version(BrokenSoftware)


@pytest.mark.parametrize(
    ("required", "expected"),
    [
        ("1.9.9", True),
        ((1, 0, 0), True),
        (Version(1, 99, 2495), True),
        ("2.0.0", False),
        ("0.9.0", False),
    ],
)
def test_check_compatible(required: object, expected: bool) -> None:
    """Tests checking a provider against a required version."""
    assert check_compatible(MySoftware, required) is expected  # type: ignore[arg-type]
