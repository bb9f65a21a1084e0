# SPDX-License-Identifier: MIT
"""Sort versions."""

from __future__ import annotations

import click

from ...errors import VersionError
from ..main import Context, echo_info, fail, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Sort from highest to lowest.")
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in ascending order, one per line."""
    try:
        parsed = [ctx.parse(version) for version in versions]
    except VersionError as e:
        fail(e)

    for version in sorted(parsed, key=lambda v: v.sort_key(), reverse=reverse):
        echo_info(str(version))
