"""Type aliases needed in the package."""

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from .version import Version

VersionTuple: TypeAlias = tuple[int, int, int]
VersionLike: TypeAlias = "Version | str | VersionTuple"
