# SPDX-License-Identifier: MIT
"""CLI entry point for the versionkit command."""

from __future__ import annotations

import logging
import sys
from typing import NoReturn, Optional, Union

import click

from ..calver import CalVer, parse_calver
from ..config import ConfigError, VersionConfig, load_config
from ..errors import VersionError
from ..semver import SemVer, parse_semver

Version = Union[SemVer, CalVer]


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: VersionConfig = VersionConfig()
        self.verbose: bool = False

    def parse(self, text: str) -> Version:
        """Parse ``text`` with the configured scheme, format and prefix.

        Raises:
            InvalidVersionError: If the text is not a valid version
        """
        if self.config.calver_format:
            return parse_calver(self.config.calver_format, text, self.config.prefix)
        return parse_semver(text, self.config.prefix)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def fail(error: Union[VersionError, ValueError]) -> NoReturn:
    """Report a version error and exit with status 1."""
    echo_error(str(error))
    raise SystemExit(1)


@click.group()
@click.version_option(package_name="versionkit")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--calver",
    "calver_format",
    metavar="FORMAT",
    help="Use calendar versioning with this format (e.g. YYYY.0M.MICRO). "
    "Defaults to $VERSIONKIT_CALVER_FORMAT, semantic versioning if unset.",
)
@click.option(
    "--prefix",
    help="Literal prefix every version carries (e.g. v). Defaults to $VERSIONKIT_PREFIX.",
)
@pass_context
def cli(ctx: Context, verbose: bool, calver_format: Optional[str], prefix: Optional[str]) -> None:
    """Parse, compare and increment version strings.

    \b
    Examples:
        versionkit validate 1.2.3-rc.1
        versionkit bump 1.2.3 minor
        versionkit --calver YYYY.0M.MICRO bump 2023.04.2 calendar
        versionkit compare v1.0.0 v1.0.0-rc.1 --prefix v
        versionkit sort 1.0.0 1.0.0-rc.1 0.9.0
    """
    ctx.verbose = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        ctx.config = load_config(calver_format=calver_format, prefix=prefix)
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)


# Import and register commands
from .commands import validate, bump, compare, sort

cli.add_command(validate.validate)
cli.add_command(bump.bump)
cli.add_command(compare.compare)
cli.add_command(sort.sort)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
