"""Versions paired with a range specifier, as written in dependency declarations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .specifier import RangeSpecifier
from .version import Version, parse_version

__all__ = ["ComparableVersion", "parse_comparable_version"]


@dataclass(frozen=True)
class ComparableVersion:
    """A base :class:`Version` plus the :class:`RangeSpecifier` that widens it.

    Ordering only looks at ``base`` so constraint lists can be sorted without
    merging entries that differ by specifier; equality still compares both.
    """

    base: Version
    specifier: RangeSpecifier = RangeSpecifier.EXACT

    @classmethod
    def parse(cls, text: str) -> Optional["ComparableVersion"]:
        return parse_comparable_version(text)

    @property
    def version_string(self) -> str:
        return f"{self.specifier.sigil}{self.base}"

    def permits(self, candidate: Version) -> bool:
        """Return ``True`` when ``candidate`` fits this constraint."""

        return self.specifier.permits(self.base, candidate)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.base < other.base

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.base <= other.base

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.base > other.base

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.base >= other.base

    def __str__(self) -> str:
        return self.version_string


def parse_comparable_version(text: str) -> Optional[ComparableVersion]:
    """Parse ``[^|~]M.m.p``; a missing sigil means :attr:`RangeSpecifier.EXACT`."""

    if not isinstance(text, str) or not text:
        return None

    specifier = RangeSpecifier.from_sigil(text[0])
    remainder = text
    if specifier is None:
        specifier = RangeSpecifier.EXACT
    else:
        remainder = text[1:]

    base = parse_version(remainder)
    if base is None:
        return None
    return ComparableVersion(base, specifier)
