"""Package descriptor shapes consumed by the sorter and constraint checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence, runtime_checkable

from .versioning import ComparableVersion, Version

__all__ = [
    "Dependency",
    "DependencyRef",
    "PackageDescriptor",
    "PackageInfo",
]


@runtime_checkable
class DependencyRef(Protocol):
    """Anything naming a required package."""

    @property
    def name(self) -> str: ...


@runtime_checkable
class PackageDescriptor(Protocol):
    """Anything with a unique ``name`` and a sequence of named dependencies."""

    @property
    def name(self) -> str: ...

    @property
    def dependencies(self) -> Sequence[DependencyRef]: ...


@dataclass(frozen=True)
class Dependency:
    name: str
    version: Optional[ComparableVersion] = None

    def __str__(self) -> str:
        if self.version is None:
            return self.name
        return f"{self.name}@{self.version}"


@dataclass(frozen=True)
class PackageInfo:
    """Metadata record describing one installable package."""

    name: str
    version: Version
    author: Optional[str] = None
    description: Optional[str] = None
    source_url: Optional[str] = None
    dependencies: tuple[Dependency, ...] = field(default_factory=tuple)
