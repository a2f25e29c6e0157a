"""Version parsing and range matching for package dependencies."""

from .comparable import ComparableVersion, parse_comparable_version
from .specifier import RangeSpecifier
from .version import Version, compare_versions, parse_version

__all__ = [
    "ComparableVersion",
    "RangeSpecifier",
    "Version",
    "compare_versions",
    "parse_comparable_version",
    "parse_version",
]
