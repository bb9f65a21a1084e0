# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

import click

from ...errors import VersionError
from ..main import Context, echo_info, fail, pass_context


@click.command()
@click.argument("first")
@click.argument("second")
@pass_context
def compare(ctx: Context, first: str, second: str) -> None:
    """Print -1, 0 or 1 as FIRST is lower, equal or greater than SECOND."""
    try:
        result = ctx.parse(first).compare_to(ctx.parse(second))
    except VersionError as e:
        fail(e)

    echo_info(str(result))
