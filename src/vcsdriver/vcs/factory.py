"""Default driver registry construction."""

from __future__ import annotations

from vcsdriver.constants import GIT_DRIVER_NAME
from vcsdriver.vcs.protocol import VcsDriver
from vcsdriver.vcs.registry import DriverRegistry


def create_default_registry() -> DriverRegistry:
    """Return a registry with every built-in backend registered."""
    from vcsdriver.git.driver import new_git_driver

    registry = DriverRegistry()
    registry.register(new_git_driver, GIT_DRIVER_NAME)
    return registry


def create_driver(
    name: str = GIT_DRIVER_NAME,
    config: bytes = b"",
    registry: DriverRegistry | None = None,
) -> VcsDriver:
    """Create a driver by name.

    Args:
        name: Driver name, e.g. ``"git"``.
        config: Opaque payload for the driver factory.
        registry: Registry to look *name* up in. A fresh default registry is
            used when omitted.

    Raises:
        UnknownDriverError: If *name* is not registered.
        DriverConfigError: If the factory rejects *config*.
    """
    if registry is None:
        registry = create_default_registry()
    return registry.new(name, config)
