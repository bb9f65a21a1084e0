# SPDX-License-Identifier: MIT
"""Version comparison helpers for strings and version objects.

Pre-release ordering: fewer modifiers rank higher, then identifiers compare
ordinally and counters numerically (1.0.0-alpha.1 < 1.0.0-alpha.2 < 1.0.0).
Build metadata is ignored in comparisons, as SemVer 2.0.0 requires.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .calver import CalVer
from .semver import SemVer, parse_semver


def _as_semver(version: Union[str, SemVer], prefix: Optional[str]) -> SemVer:
    return parse_semver(version, prefix) if isinstance(version, str) else version


def compare_versions(
    version1: Union[str, SemVer],
    version2: Union[str, SemVer],
    prefix: Optional[str] = None,
) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or SemVer object)
        version2: Second version (string or SemVer object)
        prefix: Prefix required on string arguments (e.g., "v")

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
    """
    return _as_semver(version1, prefix).compare_to(_as_semver(version2, prefix))


def version_key(version: Union[str, SemVer], prefix: Optional[str] = None) -> tuple:
    """Return a sort key for a semantic version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _as_semver(version, prefix).sort_key()


def calver_key(version: CalVer) -> tuple:
    """Return a sort key for calendar versions sharing one format."""
    return version.sort_key()


def sort_versions(
    versions: Iterable[Union[str, SemVer]], prefix: Optional[str] = None
) -> list[SemVer]:
    """Parse and sort semantic versions in ascending order."""
    return sorted((_as_semver(v, prefix) for v in versions), key=SemVer.sort_key)
