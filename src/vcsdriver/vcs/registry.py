"""Name-keyed registry of VCS driver factories.

A :class:`DriverRegistry` is an ordinary object: build one at startup
(usually with :func:`~vcsdriver.vcs.factory.create_default_registry`) and
pass it to whatever needs driver lookup.
"""

from __future__ import annotations

from vcsdriver.exceptions import UnknownDriverError
from vcsdriver.logging import get_logger
from vcsdriver.vcs.protocol import DriverFactory, VcsDriver

logger = get_logger(__name__)

__all__ = ["DriverRegistry"]


class DriverRegistry:
    """Map driver names to factories.

    Example:
        ```python
        registry = DriverRegistry()
        registry.register(new_git_driver, "git")
        driver = registry.new("git")
        ```
    """

    def __init__(self) -> None:
        self._factories: dict[str, DriverFactory] = {}

    def register(self, factory: DriverFactory, name: str) -> None:
        """Register *factory* under *name*; a later registration replaces it."""
        if name in self._factories:
            logger.debug("driver_replaced", driver=name)
        else:
            logger.debug("driver_registered", driver=name)
        self._factories[name] = factory

    def new(self, name: str, config: bytes = b"") -> VcsDriver:
        """Construct the driver registered under *name*.

        Args:
            name: Registered driver name.
            config: Opaque payload handed to the factory.

        Returns:
            A new driver instance.

        Raises:
            UnknownDriverError: If no factory is registered under *name*.
            DriverConfigError: If the factory rejects *config*.
        """
        factory = self._factories.get(name)
        if factory is None:
            raise UnknownDriverError(name)
        return factory(config)

    def names(self) -> list[str]:
        """Registered driver names, sorted."""
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)
