# SPDX-License-Identifier: MIT
"""Exceptions raised by versionkit.

Parse failures derive from InvalidVersionError so callers can catch a single
type when probing strings. Format, token and compatibility errors signal misuse
of the API rather than bad input.
"""

from __future__ import annotations

from typing import Optional


class VersionError(Exception):
    """Base class for all versionkit errors."""

    pass


class InvalidVersionError(VersionError):
    """Raised when a version string does not match the expected grammar."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version}"
        super().__init__(self.message)


class PrefixMismatchError(InvalidVersionError):
    """Raised when a required version prefix is missing."""

    def __init__(self, version: str, prefix: str):
        self.prefix = prefix
        super().__init__(version, f"Version {version!r} does not start with prefix {prefix!r}")


class FormatError(VersionError):
    """Raised when a CalVer format template is invalid."""

    def __init__(self, template: str, message: str = ""):
        self.template = template
        self.message = message or f"Invalid CalVer format: {template}"
        super().__init__(self.message)


class DuplicateTokenError(FormatError):
    """Raised when a CalVer format uses the same token twice."""

    def __init__(self, template: str, token: str):
        self.token = token
        super().__init__(template, f"Duplicate CalVer format token {token!r} in {template!r}")


class UnknownTokenError(FormatError):
    """Raised when a CalVer format contains an unrecognised token."""

    def __init__(self, template: str, token: str):
        self.token = token
        super().__init__(template, f"Unknown CalVer format token {token!r} in {template!r}")


class InvalidArityError(FormatError):
    """Raised when a CalVer format does not have two or three tokens."""

    def __init__(self, template: str, count: Optional[int] = None):
        self.count = count
        super().__init__(
            template,
            f"CalVer format {template!r} must have 2 or 3 tokens, got {count}",
        )


class TokenNotInFormatError(VersionError):
    """Raised when incrementing a version core the format does not define."""

    def __init__(self, token: str, template: str):
        self.token = token
        self.template = template
        super().__init__(f"Unable to increment {token}: it is not part of the format {template!r}")


class IncompatibleFormatError(VersionError):
    """Raised when comparing CalVer values built from different formats."""

    def __init__(self, left: str, right: str):
        self.left = left
        self.right = right
        super().__init__(f"Unable to compare CalVer with different formats: {left!r} and {right!r}")
