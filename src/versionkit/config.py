# SPDX-License-Identifier: MIT
"""CLI configuration loading from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .calver import CalVerFormat, compile_format
from .errors import FormatError

ENV_PREFIX = "VERSIONKIT_"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class VersionConfig:
    """Settings shared by the versionkit commands.

    Attributes:
        calver_format: CalVer format template, None to use SemVer
        prefix: Literal prefix required on every version (e.g., "v")
        prerelease_modifier: Identifier bumped by SemVer PRERELEASE increments
        build_modifier: Identifier bumped by CalVer MODIFIER increments
    """

    calver_format: Optional[str] = None
    prefix: Optional[str] = None
    prerelease_modifier: str = "rc"
    build_modifier: str = "build"

    @property
    def scheme(self) -> str:
        """Return "calver" or "semver"."""
        return "calver" if self.calver_format else "semver"

    def compiled_format(self) -> Optional[CalVerFormat]:
        """Return the compiled CalVer format, None in SemVer mode."""
        return compile_format(self.calver_format) if self.calver_format else None


def _read(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(f"{ENV_PREFIX}{name}", "")
    return value or None


def load_config(environ: Optional[Mapping[str, str]] = None, **overrides: Optional[str]) -> VersionConfig:
    """Build the configuration from environment variables and overrides.

    Reads VERSIONKIT_CALVER_FORMAT, VERSIONKIT_PREFIX,
    VERSIONKIT_PRERELEASE_MODIFIER and VERSIONKIT_BUILD_MODIFIER. Overrides
    that are None (or empty) leave the environment value in place.

    Args:
        environ: Environment mapping, os.environ if None
        **overrides: Field values taking precedence over the environment

    Returns:
        Validated VersionConfig

    Raises:
        ConfigError: If a setting is unknown or the CalVer format is invalid
    """
    if environ is None:
        environ = os.environ

    unknown = set(overrides) - {"calver_format", "prefix", "prerelease_modifier", "build_modifier"}
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    config = VersionConfig()
    for name in ("calver_format", "prefix", "prerelease_modifier", "build_modifier"):
        value = overrides.get(name) or _read(environ, name.upper())
        if value is not None:
            setattr(config, name, value)

    if config.calver_format:
        try:
            compile_format(config.calver_format)
        except FormatError as e:
            raise ConfigError(str(e)) from e

    return config
