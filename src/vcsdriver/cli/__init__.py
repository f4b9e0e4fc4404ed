"""Command-line interface support for vcsdriver."""

from __future__ import annotations

from vcsdriver.cli.context import CLIContext, ExitCode

__all__ = ["CLIContext", "ExitCode"]
