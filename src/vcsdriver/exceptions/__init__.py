"""vcsdriver exception hierarchy.

All exceptions can be imported from this package:
    from vcsdriver.exceptions import ProcessError, UnknownDriverError
"""

from __future__ import annotations

# Base exception
from vcsdriver.exceptions.base import VcsDriverError

# Configuration exceptions
from vcsdriver.exceptions.config import ConfigError, DriverConfigError

# External process exceptions
from vcsdriver.exceptions.process import (
    OutputReadError,
    ProcessError,
    RevisionMismatchError,
)

# Registry exceptions
from vcsdriver.exceptions.registry import RegistryError, UnknownDriverError

__all__ = [
    # Base
    "VcsDriverError",
    # Config
    "ConfigError",
    "DriverConfigError",
    # Process
    "OutputReadError",
    "ProcessError",
    "RevisionMismatchError",
    # Registry
    "RegistryError",
    "UnknownDriverError",
]
