"""Dependency ordering and tree rendering."""

from .errors import (
    CircularDependencyError,
    DuplicatePackageError,
    MissingDependencyError,
    SortError,
)
from .sorter import PackageSorter, ordered_package_list
from .tree import print_dependency_tree, render_dependency_tree

__all__ = [
    "CircularDependencyError",
    "DuplicatePackageError",
    "MissingDependencyError",
    "PackageSorter",
    "SortError",
    "ordered_package_list",
    "print_dependency_tree",
    "render_dependency_tree",
]
