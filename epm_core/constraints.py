"""Check declared dependency constraints against the packages actually present."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .models import PackageDescriptor
from .versioning import ComparableVersion, Version

__all__ = ["UnsatisfiedConstraint", "find_unsatisfied_constraints"]


@dataclass(frozen=True)
class UnsatisfiedConstraint:
    requirer: str
    dependency: str
    constraint: ComparableVersion
    found: Version

    def __str__(self) -> str:
        return (
            f"{self.requirer} requires {self.dependency} {self.constraint}, "
            f"found {self.found}"
        )


def find_unsatisfied_constraints(
    packages: Iterable[PackageDescriptor],
) -> list[UnsatisfiedConstraint]:
    """List every dependency whose constraint rejects the present package's version.

    Dependencies without a declared constraint, and packages without a
    version, are skipped. Missing packages are left to the sorter to report.
    """

    package_list = list(packages)
    versions: dict[str, Version] = {}
    for package in package_list:
        version = getattr(package, "version", None)
        if isinstance(version, Version):
            versions[package.name] = version

    problems: list[UnsatisfiedConstraint] = []
    for package in package_list:
        for dependency in package.dependencies:
            constraint = getattr(dependency, "version", None)
            if not isinstance(constraint, ComparableVersion):
                continue
            found = versions.get(dependency.name)
            if found is None or constraint.permits(found):
                continue
            problems.append(
                UnsatisfiedConstraint(
                    requirer=package.name,
                    dependency=dependency.name,
                    constraint=constraint,
                    found=found,
                )
            )
    return problems
