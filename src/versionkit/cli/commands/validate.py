# SPDX-License-Identifier: MIT
"""Validate a version string."""

from __future__ import annotations

import click

from ...errors import VersionError
from ..main import Context, echo_success, fail, pass_context


@click.command()
@click.argument("version")
@pass_context
def validate(ctx: Context, version: str) -> None:
    """Check that VERSION follows the configured scheme.

    Prints the canonical form of the version on success.

    \b
    Examples:
        versionkit validate 1.0.0-alpha.1
        versionkit --calver YYYY.0M validate 2023.04
    """
    try:
        parsed = ctx.parse(version)
    except VersionError as e:
        fail(e)

    echo_success(f"Valid {ctx.config.scheme} version: {parsed}")
