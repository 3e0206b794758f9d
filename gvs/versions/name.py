"""
Version name normalization.

User input may be ``"1.21.0"`` or ``"go1.21.0"``; on disk a release always
lives under the canonical ``go``-prefixed name. No format validation is done
here: an unknown name simply never matches an installed directory.
"""

from dataclasses import dataclass

VERSION_PREFIX = "go"


def normalize_version(version: str) -> str:
    """
    Return the canonical form of ``version``.

    Idempotent: ``normalize_version(normalize_version(x)) == normalize_version(x)``.

    Example:
        >>> normalize_version("1.21.0")
        'go1.21.0'
        >>> normalize_version("go1.21.0")
        'go1.21.0'
    """
    if version.startswith(VERSION_PREFIX):
        return version
    return VERSION_PREFIX + version


@dataclass(frozen=True)
class VersionName:
    """A release identifier compared by its canonical form."""

    canonical: str

    @classmethod
    def parse(cls, version: str) -> "VersionName":
        return cls(normalize_version(version))

    @property
    def bare(self) -> str:
        """Version without the prefix, e.g. ``1.21.0``."""
        return self.canonical[len(VERSION_PREFIX):]

    def __str__(self) -> str:
        return self.canonical
