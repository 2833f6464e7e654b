# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from .compare import version_key
from .config import ConfigError, ParserConfig
from .errors import InvalidVersionError
from .semver import Version, parse_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[ParserConfig] = None
        self.verbose: bool = False
        self.partial: bool = False

    def load_config(self) -> ParserConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            if self.partial:
                self.config = ParserConfig(allow_partial=True)
            else:
                self.config = ParserConfig.from_env()
        return self.config


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


def _parse_all(ctx: Context, versions: tuple[str, ...]) -> list[Version]:
    """Parse every argument, reporting all failures before exiting."""
    config = ctx.load_config()
    parsed = []
    failed = False
    for text in versions:
        try:
            parsed.append(parse_version(text, config))
        except InvalidVersionError as e:
            echo_error(str(e))
            failed = True
    if failed:
        sys.exit(1)
    return parsed


@click.group()
@click.version_option(package_name="strict-semver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--partial",
    is_flag=True,
    help="Accept MAJOR and MAJOR.MINOR versions, defaulting missing parts to 0.",
)
@pass_context
def cli(ctx: Context, verbose: bool, partial: bool) -> None:
    """Parse and compare Semantic Versioning 2.0.0 strings.

    \b
    Examples:
        semver check 1.2.3-rc.1+build.5
        semver compare 1.0.0-alpha 1.0.0
        semver sort 1.0.0 1.0.0-beta.11 1.0.0-beta.2
    """
    ctx.verbose = verbose
    ctx.partial = partial
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def check(ctx: Context, versions: tuple[str, ...]) -> None:
    """Validate one or more version strings."""
    for version in _parse_all(ctx, versions):
        echo_success(f"{version.original_text}: valid")


@cli.command()
@click.argument("version")
@pass_context
def show(ctx: Context, version: str) -> None:
    """Print the components of a version."""
    (parsed,) = _parse_all(ctx, (version,))
    echo_info(f"major: {parsed.major}")
    echo_info(f"minor: {parsed.minor}")
    echo_info(f"patch: {parsed.patch}")
    echo_info(f"prerelease: {'.'.join(parsed.prerelease_identifiers)}")
    echo_info(f"build: {'.'.join(parsed.build_identifiers)}")
    echo_info(f"canonical: {parsed}")


@cli.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower, equal or higher than VERSION2."""
    left, right = _parse_all(ctx, (version1, version2))
    echo_info(str(left.compare(right)))


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("-r", "--reverse", is_flag=True, help="Print the highest version first.")
@pass_context
def sort_versions(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print versions in precedence order, one per line."""
    for version in sorted(_parse_all(ctx, versions), key=version_key, reverse=reverse):
        echo_info(version.original_text)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
