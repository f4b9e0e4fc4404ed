from __future__ import annotations

from vcsdriver.exceptions.base import VcsDriverError


class RegistryError(VcsDriverError):
    """Base exception for driver registry failures.

    Attributes:
        message: Human-readable error message.
    """

    pass


class UnknownDriverError(RegistryError):
    """No driver factory is registered under the requested name.

    Attributes:
        message: Human-readable error message.
        name: The driver name that was looked up.
    """

    def __init__(self, name: str, message: str | None = None) -> None:
        """Initialize the UnknownDriverError.

        Args:
            name: The driver name that was not found.
            message: Optional override for the error message.
        """
        self.name = name
        super().__init__(message or f"Unknown VCS driver: {name!r}")
