"""Strict ``major.minor.patch`` versions used by package manifests."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "Version",
    "compare_versions",
    "parse_version",
]

_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")


@dataclass(frozen=True, order=True)
class Version:
    """Immutable version triple ordered lexicographically by its components."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for label in ("major", "minor", "patch"):
            value = getattr(self, label)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{label} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{label} cannot be negative, got {value}")

    @classmethod
    def parse(cls, text: str) -> Optional["Version"]:
        return parse_version(text)

    @property
    def version_string(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        return self.version_string


def parse_version(text: str) -> Optional[Version]:
    """Parse ``digits.digits.digits``; anything else yields ``None``."""

    if not isinstance(text, str):
        return None
    match = _VERSION_RE.fullmatch(text)
    if match is None:
        return None
    try:
        major, minor, patch = (int(part) for part in match.groups())
    except ValueError:
        # components beyond the interpreter's int string conversion limit
        return None
    return Version(major, minor, patch)


def compare_versions(a: Version, b: Version) -> int:
    if a == b:
        return 0
    return 1 if a > b else -1
