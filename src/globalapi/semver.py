"""
Version compatibility rules for globally registered APIs.

A global registered by another copy of the library is usable when:
  - it is the exact same version, or
  - neither side is a prerelease, the majors match, and the global copy is
    at least as new as ours (minor for >=1.x, patch within the same minor
    for 0.x).
"""

import re
from dataclasses import dataclass
from typing import Callable

from .version import VERSION


_VERSION_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)(?:-(.+))?")


@dataclass(frozen=True, slots=True)
class ParsedVersion:
    major: int
    minor: int
    patch: int
    prerelease: str | None = None


def parse_version(version: str) -> ParsedVersion | None:
    """Parse MAJOR.MINOR.PATCH[-PRERELEASE]. Returns None if it doesn't match."""
    match = _VERSION_RE.fullmatch(version)
    if match is None:
        return None
    major, minor, patch, prerelease = match.groups()
    return ParsedVersion(int(major), int(minor), int(patch), prerelease)


def make_compatibility_check(own_version: str) -> Callable[[str], bool]:
    """
    Build a predicate telling whether a global at some version may be used
    by code running at `own_version`.

    Verdicts are memoized per predicate.
    """
    accepted: set[str] = {own_version}
    rejected: set[str] = set()

    own = parse_version(own_version)
    if own is None:
        # Can't reason about an unparsable version; refuse everything.
        return lambda _global_version: False

    if own.prerelease is not None:
        def is_exact_match(global_version: str) -> bool:
            return global_version == own_version
        return is_exact_match

    def _reject(version: str) -> bool:
        rejected.add(version)
        return False

    def _accept(version: str) -> bool:
        accepted.add(version)
        return True

    def is_compatible(global_version: str) -> bool:
        if global_version in accepted:
            return True
        if global_version in rejected:
            return False

        other = parse_version(global_version)
        if other is None or other.prerelease is not None:
            return _reject(global_version)

        if own.major != other.major:
            return _reject(global_version)

        if own.major == 0:
            if own.minor == other.minor and own.patch <= other.patch:
                return _accept(global_version)
            return _reject(global_version)

        if own.minor <= other.minor:
            return _accept(global_version)
        return _reject(global_version)

    return is_compatible


is_compatible = make_compatibility_check(VERSION)
