from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from vcsdriver.constants import (
    DEFAULT_GIT_EXECUTABLE,
    ENV_PREFIX,
    GIT_DRIVER_NAME,
    PROJECT_CONFIG_FILENAME,
)
from vcsdriver.exceptions import ConfigError, DriverConfigError
from vcsdriver.logging import get_logger

__all__ = [
    "GitDriverConfig",
    "VcsDriverSettings",
    "load_config",
    "parse_git_driver_payload",
    "get_user_config_path",
]

logger = get_logger(__name__)

_project_config_path: ContextVar[Path | None] = ContextVar(
    "vcsdriver_project_config_path", default=None
)


class GitDriverConfig(BaseModel):
    """Settings for the git backend.

    Attributes:
        executable: Git executable to invoke (default: git).
        command_timeout: Seconds before a single git command is killed.
            None (default) means no timeout.
        network_retries: Extra attempts for fetch steps that fail with a
            network error (default: 0, no retries).
        verify_pinned_revision: After checking out a pinned revision, confirm
            that HEAD resolves to it (default: False).
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    executable: str = DEFAULT_GIT_EXECUTABLE
    command_timeout: float | None = Field(default=None, gt=0)
    network_retries: int = Field(default=0, ge=0, le=5)
    verify_pinned_revision: bool = False


class YamlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from YAML files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(
                    message=f"Invalid YAML in {yaml_file}: {e}",
                    field=None,
                    value=None,
                ) from e
            if loaded is None:
                logger.warning(f"Config file {yaml_file} is empty, using defaults.")
            elif not isinstance(loaded, dict):
                raise ConfigError(
                    message=f"Config file {yaml_file} must contain a mapping",
                    value=loaded,
                )
            else:
                self._config_data = loaded

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get value for a specific field from the YAML config."""
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the complete config data."""
        return self._config_data


class VcsDriverSettings(BaseSettings):
    """Root configuration object containing all vcsdriver settings."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
    )

    git: GitDriverConfig = Field(default_factory=GitDriverConfig)
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Explicit keyword arguments
        2. Environment variables (VCSDRIVER_*)
        3. Project YAML config (./vcsdriver.yaml or the path given to load_config)
        4. User YAML config (~/.config/vcsdriver/config.yaml)
        """
        project_config_path = _project_config_path.get() or (
            Path.cwd() / PROJECT_CONFIG_FILENAME
        )
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, project_config_path),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/vcsdriver/config.yaml
    """
    return Path.home() / ".config" / "vcsdriver" / "config.yaml"


def _first_error(e: ValidationError) -> tuple[str, str, Any]:
    first_error = e.errors()[0]
    field = ".".join(str(loc) for loc in first_error["loc"])
    return first_error["msg"], field, first_error.get("input")


def load_config(config_path: Path | None = None) -> VcsDriverSettings:
    """Load configuration with hierarchy: defaults -> user -> project -> env.

    Args:
        config_path: Optional path to project config file.
            Defaults to ./vcsdriver.yaml

    Returns:
        VcsDriverSettings instance with merged configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if config_path is None:
        config_path = Path.cwd() / PROJECT_CONFIG_FILENAME

    if not config_path.exists():
        logger.info("No project configuration found, using defaults.")

    token = _project_config_path.set(config_path)
    try:
        return VcsDriverSettings()
    except ValidationError as e:
        msg, field, value = _first_error(e)
        raise ConfigError(
            message=f"Invalid configuration: {msg}",
            field=field,
            value=value,
        ) from e
    finally:
        _project_config_path.reset(token)


def parse_git_driver_payload(payload: bytes) -> GitDriverConfig:
    """Build a GitDriverConfig from a driver construction payload.

    An empty payload yields the defaults. Otherwise the payload must be a
    YAML (or JSON) mapping of GitDriverConfig fields; unknown keys are ignored.

    Args:
        payload: Raw configuration bytes handed to the driver factory.

    Returns:
        Parsed git driver configuration.

    Raises:
        DriverConfigError: If the payload is not a mapping or has invalid values.
    """
    if not payload.strip():
        return GitDriverConfig()

    try:
        loaded = yaml.safe_load(payload.decode("utf-8"))
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        raise DriverConfigError(
            f"Unreadable {GIT_DRIVER_NAME} driver config: {e}",
            driver=GIT_DRIVER_NAME,
        ) from e

    if loaded is None:
        return GitDriverConfig()
    if not isinstance(loaded, dict):
        raise DriverConfigError(
            f"{GIT_DRIVER_NAME} driver config must be a mapping",
            driver=GIT_DRIVER_NAME,
            value=loaded,
        )

    try:
        return GitDriverConfig.model_validate(loaded)
    except ValidationError as e:
        msg, field, value = _first_error(e)
        raise DriverConfigError(
            f"Invalid {GIT_DRIVER_NAME} driver config: {msg}",
            driver=GIT_DRIVER_NAME,
            field=field,
            value=value,
        ) from e
