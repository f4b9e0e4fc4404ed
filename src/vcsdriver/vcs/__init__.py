"""VCS abstraction layer.

Provides the :class:`VcsDriver` protocol, the :class:`DriverRegistry` that
maps names to driver factories, and helpers to build the default registry.
"""

from __future__ import annotations

from vcsdriver.vcs.factory import create_default_registry, create_driver
from vcsdriver.vcs.protocol import DriverFactory, VcsDriver
from vcsdriver.vcs.registry import DriverRegistry

__all__ = [
    "DriverFactory",
    "DriverRegistry",
    "VcsDriver",
    "create_default_registry",
    "create_driver",
]
