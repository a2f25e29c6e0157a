"""Core pieces of EPM: version matching and dependency ordering."""

from .config import Settings, default_config_path
from .constraints import UnsatisfiedConstraint, find_unsatisfied_constraints
from .models import Dependency, DependencyRef, PackageDescriptor, PackageInfo
from .paths import UserDirs
from .sorting import (
    CircularDependencyError,
    DuplicatePackageError,
    MissingDependencyError,
    PackageSorter,
    SortError,
    ordered_package_list,
    print_dependency_tree,
    render_dependency_tree,
)
from .versioning import (
    ComparableVersion,
    RangeSpecifier,
    Version,
    compare_versions,
    parse_comparable_version,
    parse_version,
)

__all__ = [
    "CircularDependencyError",
    "ComparableVersion",
    "Dependency",
    "DependencyRef",
    "DuplicatePackageError",
    "MissingDependencyError",
    "PackageDescriptor",
    "PackageInfo",
    "PackageSorter",
    "RangeSpecifier",
    "Settings",
    "SortError",
    "UnsatisfiedConstraint",
    "UserDirs",
    "Version",
    "compare_versions",
    "default_config_path",
    "find_unsatisfied_constraints",
    "ordered_package_list",
    "parse_comparable_version",
    "parse_version",
    "print_dependency_tree",
    "render_dependency_tree",
]
