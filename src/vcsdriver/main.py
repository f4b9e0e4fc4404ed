"""CLI entry point for vcsdriver.

This module defines the Click-based command-line interface. Each command
prints its result on stdout; diagnostics go to stderr through structlog.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import click

from vcsdriver import __version__
from vcsdriver.cli.context import CLIContext, ExitCode
from vcsdriver.config import load_config
from vcsdriver.constants import GIT_DRIVER_NAME
from vcsdriver.exceptions import ConfigError, ProcessError, VcsDriverError
from vcsdriver.logging import configure_logging
from vcsdriver.vcs import create_default_registry

_VERBOSITY_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_driver_option = click.option(
    "--driver",
    "driver_name",
    default=GIT_DRIVER_NAME,
    show_default=True,
    help="Registered VCS driver to use.",
)


def _fail(error: VcsDriverError) -> NoReturn:
    click.echo(f"Error: {error.message}", err=True)
    if isinstance(error, ProcessError) and error.output:
        click.echo(error.output.rstrip(), err=True)
    raise SystemExit(ExitCode.FAILURE)


@click.group()
@click.version_option(version=__version__, prog_name="vcsdriver")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=False, path_type=str),
    default=None,
    help="Path to config file (overrides ./vcsdriver.yaml).",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Suppress non-essential output (ERROR level only).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: str | None,
    verbose: int,
    quiet: bool,
) -> None:
    """vcsdriver - materialize working copies at a requested revision."""
    config_path = Path(config_file) if config_file else None
    try:
        config = load_config(config_path)
    except ConfigError as e:
        error_parts = [f"Error: {e.message}"]
        if e.field:
            error_parts.append(f"  Field: {e.field}")
        if e.value is not None:
            error_parts.append(f"  Value: {e.value}")
        click.echo("\n".join(error_parts), err=True)
        ctx.exit(ExitCode.FAILURE)

    # Priority: quiet > verbose > config
    if quiet:
        level = logging.ERROR
    elif verbose > 0:
        level = logging.INFO if verbose == 1 else logging.DEBUG
    else:
        level = _VERBOSITY_LEVELS[config.verbosity]
    configure_logging(level=level)

    ctx.obj = CLIContext(
        config=config,
        registry=create_default_registry(),
        config_path=config_path,
        verbosity=verbose,
        quiet=quiet,
    )


@cli.command()
@click.argument("directory", type=click.Path(path_type=Path))
@click.argument("url")
@click.argument("ref")
@_driver_option
@click.pass_obj
def clone(
    cli_ctx: CLIContext, directory: Path, url: str, ref: str, driver_name: str
) -> None:
    """Clone URL at REF into DIRECTORY and print the checked out revision."""
    try:
        click.echo(cli_ctx.driver(driver_name).clone(directory, url, ref))
    except VcsDriverError as e:
        _fail(e)


@cli.command()
@click.argument("directory", type=click.Path(path_type=Path))
@click.argument("url")
@click.argument("ref")
@_driver_option
@click.pass_obj
def pull(
    cli_ctx: CLIContext, directory: Path, url: str, ref: str, driver_name: str
) -> None:
    """Update the working copy in DIRECTORY to REF and print the revision."""
    try:
        click.echo(cli_ctx.driver(driver_name).pull(directory, url, ref))
    except VcsDriverError as e:
        _fail(e)


@cli.command("head-rev")
@click.argument("directory", type=click.Path(path_type=Path))
@_driver_option
@click.pass_obj
def head_rev(cli_ctx: CLIContext, directory: Path, driver_name: str) -> None:
    """Print the revision checked out in DIRECTORY."""
    try:
        click.echo(cli_ctx.driver(driver_name).head_rev(directory))
    except VcsDriverError as e:
        _fail(e)


@cli.command("special-files")
@_driver_option
@click.pass_obj
def special_files(cli_ctx: CLIContext, driver_name: str) -> None:
    """List the driver's bookkeeping entries, one per line."""
    try:
        names = cli_ctx.driver(driver_name).special_files()
    except VcsDriverError as e:
        _fail(e)
    for name in names:
        click.echo(name)


@cli.command()
@click.pass_obj
def drivers(cli_ctx: CLIContext) -> None:
    """List registered driver names."""
    for name in cli_ctx.registry.names():
        click.echo(name)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
