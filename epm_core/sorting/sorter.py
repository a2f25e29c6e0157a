"""Depth-first dependency ordering of package descriptors."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator, Sequence, TypeVar

from epm_core.models import DependencyRef, PackageDescriptor

from .errors import (
    CircularDependencyError,
    DuplicatePackageError,
    MissingDependencyError,
    SortError,
)

__all__ = ["PackageSorter", "ordered_package_list"]

P = TypeVar("P", bound=PackageDescriptor)

_EXHAUSTED = object()


class _State(Enum):
    UNVISITED = "unvisited"
    VISITING = "visiting"
    VISITED = "visited"


class PackageSorter:
    """Order packages so every package follows everything it depends on.

    Packages are visited in input order and their dependencies in declared
    order, so the result is fully determined by the input. The traversal keeps
    an explicit frame stack rather than recursing, which keeps deep chains
    clear of the interpreter recursion limit.
    """

    def __init__(self, packages: Iterable[P]) -> None:
        self.packages: list[P] = list(packages)
        self._logger = logging.getLogger(__name__)

    def ordered(self) -> list[P]:
        """Return the packages in load order or raise a :class:`SortError`."""

        self._logger.debug("ordering %d packages", len(self.packages))
        by_name = self._index(self.packages)
        state = {name: _State.UNVISITED for name in by_name}
        ordered: list[P] = []

        try:
            for package in self.packages:
                if state[package.name] is _State.UNVISITED:
                    self._visit(package, by_name, state, ordered)
        except SortError as exc:
            self._logger.debug("ordering failed: %s", exc)
            raise

        self._logger.debug("ordered %d packages", len(ordered))
        return ordered

    @staticmethod
    def _index(packages: Sequence[P]) -> dict[str, P]:
        by_name: dict[str, P] = {}
        for package in packages:
            if package.name in by_name:
                raise DuplicatePackageError(package.name)
            by_name[package.name] = package
        return by_name

    def _visit(
        self,
        root: P,
        by_name: dict[str, P],
        state: dict[str, _State],
        ordered: list[P],
    ) -> None:
        # path[i] is the package of frames[i]; both hold exactly the VISITING names
        path: list[str] = []
        frames: list[tuple[P, Iterator[DependencyRef]]] = []

        def enter(package: P) -> None:
            state[package.name] = _State.VISITING
            path.append(package.name)
            frames.append((package, iter(package.dependencies)))

        enter(root)
        while frames:
            package, pending = frames[-1]
            dependency = next(pending, _EXHAUSTED)

            if dependency is _EXHAUSTED:
                frames.pop()
                path.pop()
                state[package.name] = _State.VISITED
                ordered.append(package)
                continue

            dep_name = dependency.name
            dep_package = by_name.get(dep_name)
            if dep_package is None:
                raise MissingDependencyError(dep_name, package.name)

            dep_state = state[dep_name]
            if dep_state is _State.VISITING:
                raise CircularDependencyError(dep_name, package.name, path)
            if dep_state is _State.UNVISITED:
                enter(dep_package)


def ordered_package_list(packages: Iterable[P]) -> list[P]:
    """Convenience wrapper around :meth:`PackageSorter.ordered`."""

    return PackageSorter(packages).ordered()
