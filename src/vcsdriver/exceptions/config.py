from __future__ import annotations

from typing import Any

from vcsdriver.exceptions.base import VcsDriverError


class ConfigError(VcsDriverError):
    """Exception for configuration loading, parsing, and validation errors.

    Raised when configuration cannot be loaded, parsed, or validated. This
    includes YAML parsing failures, Pydantic validation errors, and invalid
    environment variable values.

    Attributes:
        message: Human-readable error message describing the configuration issue.
        field: Optional field name that caused the error (e.g., "git.executable").
        value: Optional value that failed validation (for debugging).

    Examples:
        ```python
        # YAML parsing failure
        raise ConfigError("Invalid YAML in vcsdriver.yaml: line 3")

        # Pydantic validation failure
        raise ConfigError(
            "Invalid configuration value",
            field="git.network_retries",
            value=-1,
        )
        ```
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize the ConfigError.

        Args:
            message: Human-readable error message.
            field: Optional field name that caused the error.
            value: Optional value that failed validation.
        """
        self.field = field
        self.value = value
        super().__init__(message)


class DriverConfigError(ConfigError):
    """A driver factory rejected its configuration payload.

    Attributes:
        message: Human-readable error message.
        driver: Name of the driver whose payload was rejected.
    """

    def __init__(
        self,
        message: str,
        driver: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        self.driver = driver
        super().__init__(message, field=field, value=value)
