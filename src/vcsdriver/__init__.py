"""vcsdriver - pluggable version control drivers for materializing working copies."""

from __future__ import annotations

from vcsdriver.exceptions import (
    ConfigError,
    DriverConfigError,
    OutputReadError,
    ProcessError,
    RevisionMismatchError,
    UnknownDriverError,
    VcsDriverError,
)
from vcsdriver.git import AsyncGitDriver, GitDriver, is_pinned_revision
from vcsdriver.vcs import (
    DriverRegistry,
    VcsDriver,
    create_default_registry,
    create_driver,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AsyncGitDriver",
    "ConfigError",
    "DriverConfigError",
    "DriverRegistry",
    "GitDriver",
    "OutputReadError",
    "ProcessError",
    "RevisionMismatchError",
    "UnknownDriverError",
    "VcsDriver",
    "VcsDriverError",
    "create_default_registry",
    "create_driver",
    "is_pinned_revision",
]
