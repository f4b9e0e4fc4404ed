"""CLI context and exit codes for vcsdriver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

import yaml
from pydantic import BaseModel

from vcsdriver.config import VcsDriverSettings
from vcsdriver.vcs import DriverRegistry, VcsDriver

__all__ = ["CLIContext", "ExitCode"]


class ExitCode(IntEnum):
    """Standard exit codes for the vcsdriver CLI.

    - 0 for success
    - 1 for failure
    - 130 for keyboard interrupt (128 + SIGINT=2)
    """

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Type-safe CLI context containing global options and configuration.

    Attributes:
        config: Loaded settings.
        registry: Driver registry used for lookups.
        config_path: Path to config file (if specified via --config).
        verbosity: Verbosity level (0=default, 1=INFO, 2+=DEBUG).
        quiet: Suppress non-essential output.
    """

    config: VcsDriverSettings
    registry: DriverRegistry
    config_path: Path | None = None
    verbosity: int = 0
    quiet: bool = False

    def driver(self, name: str) -> VcsDriver:
        """Build driver *name*, handing it its section of the settings."""
        section = getattr(self.config, name, None)
        payload = b""
        if isinstance(section, BaseModel):
            payload = yaml.safe_dump(section.model_dump()).encode("utf-8")
        return self.registry.new(name, payload)
