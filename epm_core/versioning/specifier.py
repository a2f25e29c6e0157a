"""Range specifiers that decide which candidate versions a constraint accepts."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .version import Version

__all__ = ["RangeSpecifier"]


class RangeSpecifier(Enum):
    """How a declared base version may be matched by other versions.

    The enum value is the textual sigil that prefixes a constraint. ``EXACT``
    has no sigil and is assumed whenever a constraint starts with a digit.
    """

    EXACT = ""
    CARET = "^"
    TILDE = "~"

    @property
    def sigil(self) -> str:
        return self.value

    @classmethod
    def from_sigil(cls, char: str) -> Optional["RangeSpecifier"]:
        """Return the specifier for a leading sigil character, if it is one."""

        if not char:
            return None
        for specifier in (cls.CARET, cls.TILDE):
            if specifier.value == char:
                return specifier
        return None

    def permits(self, base: Version, candidate: Version) -> bool:
        """Check whether ``candidate`` satisfies ``base`` under this specifier.

        * ``EXACT``: the candidate must equal the base.
        * ``TILDE``: same major and minor, patch at least the base patch.
        * ``CARET``: same major; a greater minor always passes, an equal minor
          needs a patch at least the base patch. A lower minor never passes.
        """

        if self is RangeSpecifier.EXACT:
            return candidate == base

        if candidate.major != base.major:
            return False

        if self is RangeSpecifier.TILDE:
            return candidate.minor == base.minor and candidate.patch >= base.patch

        if candidate.minor > base.minor:
            return True
        return candidate.minor == base.minor and candidate.patch >= base.patch
