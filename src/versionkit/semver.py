# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and incrementing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1
- Build metadata: +build, +build.123, +20240101
- Prefix: an optional literal such as "v" in front of the version
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from .errors import InvalidVersionError, PrefixMismatchError
from .modifiers import (
    Modifier,
    compare_modifiers,
    increment_modifier,
    modifier_key,
    modifiers_to_string,
    parse_modifiers,
)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)

DEFAULT_PRERELEASE_MODIFIER = "rc"


class SemVerIncrement(str, Enum):
    """Parts of a semantic version that can be incremented."""

    MAJOR = "MAJOR"
    MINOR = "MINOR"
    PATCH = "PATCH"
    PRERELEASE = "PRERELEASE"

    @classmethod
    def _missing_(cls, value: object) -> Optional["SemVerIncrement"]:
        if isinstance(value, str):
            for member in cls:
                if member.value == value.upper():
                    return member
        return None


@dataclass(frozen=True, slots=True, eq=False)
class SemVer:
    """Represents a semantic version.

    Equality, hashing and ordering follow SemVer 2.0.0 precedence: build
    metadata is ignored, and a version without pre-release modifiers is greater
    than the same version with them.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        pre_releases: Pre-release modifier chain (e.g., rc.1)
        build: Optional build metadata (e.g., "build.123", "20240101")
        prefix: Optional literal rendered in front of the version (e.g., "v")
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    pre_releases: tuple[Modifier, ...] = ()
    build: Optional[str] = None
    prefix: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")

        pre_releases: Union[str, Iterable[Modifier]] = self.pre_releases
        if isinstance(pre_releases, str):
            pre_releases = parse_modifiers(pre_releases)
        object.__setattr__(self, "pre_releases", tuple(pre_releases))

    @classmethod
    def from_string(cls, version: str, prefix: Optional[str] = None) -> Optional["SemVer"]:
        """Parse a version string, returning None if it is not valid.

        Examples:
            >>> str(SemVer.from_string("v1.2.3", "v"))
            'v1.2.3'
            >>> SemVer.from_string("2023-02-02") is None
            True
        """
        try:
            return parse_semver(version, prefix)
        except InvalidVersionError:
            return None

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.prefix or ''}{self.major}.{self.minor}.{self.patch}"
        version += modifiers_to_string(self.pre_releases)
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.pre_releases)

    @property
    def base_version(self) -> str:
        """Return the base version without prefix, pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def increment(
        self, kind: Union[str, SemVerIncrement], modifier: Optional[str] = None
    ) -> "SemVer":
        """Return the next version for the given increment.

        - MAJOR: 1.2.3 -> 2.0.0
        - MINOR: 1.2.3 -> 1.3.0
        - PATCH: 1.2.3 -> 1.2.4
        - PRERELEASE: 1.2.3 -> 1.2.3-rc.1, 1.2.3-rc.1 -> 1.2.3-rc.2

        Incrementing a core resets every less significant core and drops
        pre-release and build metadata. The prefix is always kept.

        Args:
            kind: Part to increment
            modifier: Pre-release identifier to bump (PRERELEASE only,
                defaults to "rc")

        Raises:
            ValueError: If kind is not a known increment
        """
        kind = SemVerIncrement(kind)

        if kind is SemVerIncrement.MAJOR:
            return SemVer(self.major + 1, 0, 0, prefix=self.prefix)
        if kind is SemVerIncrement.MINOR:
            return SemVer(self.major, self.minor + 1, 0, prefix=self.prefix)
        if kind is SemVerIncrement.PATCH:
            return SemVer(self.major, self.minor, self.patch + 1, prefix=self.prefix)

        return SemVer(
            self.major,
            self.minor,
            self.patch,
            increment_modifier(self.pre_releases, modifier or DEFAULT_PRERELEASE_MODIFIER),
            prefix=self.prefix,
        )

    def compare_to(self, other: "SemVer") -> int:
        """Compare with another version.

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other

        Resulting in the following ordering:

            0.1.0 < 0.2.0-rc.1 < 0.2.0-rc.2 < 0.2.0 == 0.2.0+build.1 < 1.0.0
        """
        for attr in ("major", "minor", "patch"):
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return -1 if val1 < val2 else 1

        # Build metadata is ignored
        return compare_modifiers(self.pre_releases, other.pre_releases)

    def is_equal_to(self, other: "SemVer") -> bool:
        return self.compare_to(other) == 0

    def is_greater_than(self, other: "SemVer") -> bool:
        return self.compare_to(other) == 1

    def is_less_than(self, other: "SemVer") -> bool:
        return self.compare_to(other) == -1

    def sort_key(self) -> tuple:
        """Return a tuple ordering versions the same way as compare_to."""
        return (self.major, self.minor, self.patch, modifier_key(self.pre_releases))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.compare_to(other) == 0

    def __hash__(self) -> int:
        return hash(self.sort_key())

    def __lt__(self, other: "SemVer") -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "SemVer") -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "SemVer") -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "SemVer") -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.compare_to(other) >= 0


def parse_semver(version_string: str, prefix: Optional[str] = None) -> SemVer:
    """Parse a semantic version string into a SemVer object.

    Args:
        version_string: A string following semantic versioning format
            ([prefix]MAJOR.MINOR.PATCH[-prerelease][+build])
        prefix: Literal the version must start with (e.g., "v")

    Returns:
        A SemVer object with parsed components

    Raises:
        PrefixMismatchError: If prefix is given and the string lacks it
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> str(parse_semver("1.0.0-alpha.1"))
        '1.0.0-alpha.1'

        >>> parse_semver("v2.0.0-rc.1+build.456", "v").build
        'build.456'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    core = version_string
    if prefix is not None:
        if not version_string.startswith(prefix):
            raise PrefixMismatchError(version_string, prefix)
        core = version_string[len(prefix) :]

    match = SEMVER_PATTERN.match(core)
    if not match:
        raise InvalidVersionError(version_string, f"Invalid semantic version: {version_string}")

    return SemVer(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        pre_releases=parse_modifiers(match.group("prerelease")),
        build=match.group("buildmetadata"),
        prefix=prefix,
    )


def is_valid_semver(version_string: str, prefix: Optional[str] = None) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("v1.0.0-alpha", prefix="v")
        True
    """
    return SemVer.from_string(version_string, prefix) is not None
