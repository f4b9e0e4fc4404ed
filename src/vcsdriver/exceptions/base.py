from __future__ import annotations


class VcsDriverError(Exception):
    """Base exception class for all vcsdriver errors.

    Every error raised by a driver, the registry, or the configuration layer
    inherits from this class, so callers can catch driver failures at their
    own boundary while letting system exceptions propagate.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            revision = driver.clone(path, url, "main")
        except VcsDriverError as e:
            logger.error("checkout_failed", error=e.message)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the VcsDriverError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
