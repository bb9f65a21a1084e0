# SPDX-License-Identifier: MIT
"""Semantic and calendar version parsing, comparison and incrementing.

This package provides immutable SemVer and CalVer values that can be parsed
from strings, rendered canonically, ordered and incremented.

Example:
    >>> from versionkit import CalVer, FixedClock, SemVer
    >>> from datetime import date
    >>>
    >>> version = SemVer.from_string("1.2.3-rc.1")
    >>> str(version.increment("PRERELEASE"))
    '1.2.3-rc.2'
    >>> str(version.increment("MINOR"))
    '1.3.0'
    >>>
    >>> release = CalVer.from_string("YYYY.MINOR", "2022.4")
    >>> str(release.increment("CALENDAR", clock=FixedClock(date(2023, 4, 12))))
    '2023.0'
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    InvalidVersionError,
    PrefixMismatchError,
    FormatError,
    DuplicateTokenError,
    UnknownTokenError,
    InvalidArityError,
    TokenNotInFormatError,
    IncompatibleFormatError,
)
from .modifiers import (
    Modifier,
    parse_modifiers,
    increment_modifier,
    compare_modifiers,
    modifiers_to_string,
)
from .clock import Clock, SystemClock, FixedClock
from .semver import (
    SemVer,
    SemVerIncrement,
    parse_semver,
    is_valid_semver,
    SEMVER_PATTERN,
)
from .calver import (
    CalVer,
    CalVerFormat,
    CalVerIncrement,
    FormatToken,
    Slot,
    compile_format,
    parse_calver,
    is_valid_calver,
)
from .compare import (
    compare_versions,
    version_key,
    calver_key,
    sort_versions,
)

__all__ = [
    # Errors
    "VersionError",
    "InvalidVersionError",
    "PrefixMismatchError",
    "FormatError",
    "DuplicateTokenError",
    "UnknownTokenError",
    "InvalidArityError",
    "TokenNotInFormatError",
    "IncompatibleFormatError",
    # Modifier chains
    "Modifier",
    "parse_modifiers",
    "increment_modifier",
    "compare_modifiers",
    "modifiers_to_string",
    # Clocks
    "Clock",
    "SystemClock",
    "FixedClock",
    # Semantic versions
    "SemVer",
    "SemVerIncrement",
    "parse_semver",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Calendar versions
    "CalVer",
    "CalVerFormat",
    "CalVerIncrement",
    "FormatToken",
    "Slot",
    "compile_format",
    "parse_calver",
    "is_valid_calver",
    # Comparison
    "compare_versions",
    "version_key",
    "calver_key",
    "sort_versions",
]
