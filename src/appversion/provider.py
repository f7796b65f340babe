"""Protocol for types that report their own version."""

from typing import Any, Protocol, runtime_checkable

from .types import VersionLike
from .version import Version


@runtime_checkable
class VersionProvider(Protocol):
    """A type that can report the Version describing itself.

    Implementers define ``version`` as a classmethod so it can be called on
    the type itself as well as on instances.

    Example:
        >>> class MySoftware:
        ...     @classmethod
        ...     def version(cls) -> Version:
        ...         return Version(1, 0, 0)
        >>> MySoftware.version()
        Version(1, 0, 0)
    """

    @classmethod
    def version(cls) -> Version:
        """Return the version of the implementing type."""
        ...


def provided_version(provider: Any) -> Version:
    """Get the version reported by a provider type or instance.

    Args:
        provider: A VersionProvider class or instance.

    Returns:
        The provider's version.

    Raises:
        TypeError: If the object has no version method or it does not return a
            Version.
    """
    if not isinstance(provider, VersionProvider) or not callable(provider.version):
        raise TypeError(f"{provider!r} does not provide a version")

    version = provider.version()
    if not isinstance(version, Version):
        raise TypeError(
            f"{provider!r}.version() returned {type(version).__name__}, "
            "expected Version"
        )
    return version


def check_compatible(provider: Any, required: VersionLike) -> bool:
    """Check whether a provider is compatible with a required version.

    Args:
        provider: A VersionProvider class or instance.
        required: The version the caller was built against.

    Returns:
        True if the provider's major version matches the required one.
    """
    return provided_version(provider).is_compatible(Version.coerce(required))
