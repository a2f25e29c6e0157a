"""Errors raised while ordering packages by their dependencies."""

from __future__ import annotations

from typing import Sequence


class SortError(Exception):
    """Base type for dependency ordering failures."""


class MissingDependencyError(SortError):
    """Raised when a package requires a name absent from the input."""

    def __init__(self, dependency: str, requirer: str) -> None:
        super().__init__(f"Missing dependency: {dependency} required by {requirer}")
        self.dependency = dependency
        self.requirer = requirer


class CircularDependencyError(SortError):
    """Raised when the traversal finds an edge back to a package on its path."""

    def __init__(self, dependency: str, requirer: str, path: Sequence[str]) -> None:
        self.dependency = dependency
        self.requirer = requirer
        self.path = tuple(path)
        super().__init__(
            f"Circular dependency detected: {dependency} → {requirer}\n"
            "Current dependency path:\n"
            f"{render_path(self.path)}"
        )


class DuplicatePackageError(SortError):
    """Raised when two packages in one input share a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate package: {name}")
        self.name = name


def render_path(path: Sequence[str]) -> str:
    """Render a root-first path, one name per line, two spaces per level."""

    return "\n".join(f"{'  ' * depth}{name}" for depth, name in enumerate(path))
