"""appversion - a semantic version value type.

Parse, format, compare and bump major.minor.patch versions, and let types
report the version they implement.
"""

from ._version import __version__
from .exceptions import (
    ConfigError,
    InvalidFormatError,
    ParseIntError,
    VersionError,
    VersionOverflowError,
)
from .provider import VersionProvider, check_compatible, provided_version
from .types import VersionLike, VersionTuple
from .version import Version

__all__ = [
    "ConfigError",
    "InvalidFormatError",
    "ParseIntError",
    "Version",
    "VersionError",
    "VersionLike",
    "VersionOverflowError",
    "VersionProvider",
    "VersionTuple",
    "__version__",
    "check_compatible",
    "provided_version",
]
