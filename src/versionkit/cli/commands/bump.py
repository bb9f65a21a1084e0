# SPDX-License-Identifier: MIT
"""Increment a version."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import click

from ...calver import CalVer, CalVerIncrement
from ...clock import FixedClock, SystemClock
from ...errors import VersionError
from ...semver import SemVerIncrement
from ..main import Context, echo_info, fail, pass_context

KINDS = sorted({kind.value for kind in SemVerIncrement} | {kind.value for kind in CalVerIncrement})


@click.command()
@click.argument("version")
@click.argument("kind", type=click.Choice(KINDS, case_sensitive=False))
@click.option(
    "--modifier",
    "-m",
    help="Modifier identifier to increment (defaults to rc for SemVer pre-releases, "
    "build for CalVer modifiers).",
)
@click.option(
    "--rebuild",
    is_flag=True,
    help="CalVer calendar increments: bump the build modifier when the date is unchanged.",
)
@click.option(
    "--date",
    "on_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Date used for CalVer calendar increments instead of today.",
)
@pass_context
def bump(
    ctx: Context,
    version: str,
    kind: str,
    modifier: Optional[str],
    rebuild: bool,
    on_date: Optional[datetime],
) -> None:
    """Print VERSION incremented by KIND.

    \b
    SemVer kinds: MAJOR, MINOR, PATCH, PRERELEASE
    CalVer kinds: CALENDAR, MAJOR, MINOR, MICRO, MODIFIER

    \b
    Examples:
        versionkit bump 1.2.3 patch
        versionkit bump 1.2.3-rc.1 prerelease
        versionkit --calver YYYY.0M.MICRO bump 2023.04.2 calendar --date 2023-05-01
    """
    config = ctx.config
    try:
        current = ctx.parse(version)
        if isinstance(current, CalVer):
            increment = CalVerIncrement(kind)
            if increment is CalVerIncrement.CALENDAR:
                name = modifier or (config.build_modifier if rebuild else None)
            else:
                name = modifier or config.build_modifier
            clock = FixedClock(on_date.date()) if on_date else SystemClock()
            result = current.increment(increment, name, clock=clock)
        else:
            result = current.increment(SemVerIncrement(kind), modifier or config.prerelease_modifier)
    except (VersionError, ValueError) as e:
        fail(e)

    echo_info(str(result))
