"""
Configuration loader for YAML chart configurations.

Series, theme, sizing and viewport settings can be kept in a YAML file and
validated into a :class:`~chartsync.config.models.Configuration`. Event
handlers are callables and must be attached in code.
"""

from pathlib import Path
from typing import Any, Optional, Union

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from chartsync.config.models import Configuration
from chartsync.errors import (
    ConfigurationFileError,
    ErrorCodes,
    InvalidConfigurationError,
)
from chartsync.logging import get_logger, log_entry_exit

logger = get_logger(__name__)


class ConfigLoader:
    """Loads and validates chart configurations from YAML files."""

    @log_entry_exit(logger=logger)
    def load(
        self,
        config_path: Union[str, Path],
        overrides: Optional[dict[str, Any]] = None,
    ) -> Configuration:
        """
        Load a YAML chart configuration file.

        Args:
            config_path: Path to the YAML configuration file
            overrides: Extra fields merged over the file content, typically
                event handlers such as ``on_click``

        Returns:
            A validated Configuration

        Raises:
            ConfigurationFileError: If the file cannot be found or read
            InvalidConfigurationError: If the YAML is invalid or validation fails
        """
        config_path = Path(config_path)
        if not config_path.is_absolute():
            config_path = Path.cwd() / config_path

        if not config_path.exists():
            raise ConfigurationFileError(
                message=f"Configuration file not found: {config_path}",
                error_code=ErrorCodes.CONFIG_FILE_NOT_FOUND,
                details={"path": str(config_path)},
            )

        try:
            with open(config_path) as file:
                config_dict = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise InvalidConfigurationError(
                message=f"Invalid YAML format in {config_path}: {e}",
                error_code=ErrorCodes.CONFIG_INVALID_YAML,
                details={"yaml_error": str(e)},
            ) from e
        except OSError as e:
            raise ConfigurationFileError(
                message=f"Cannot read configuration file {config_path}: {e}",
                error_code=ErrorCodes.CONFIG_FILE_NOT_FOUND,
                details={"path": str(config_path)},
            ) from e

        if config_dict is None:
            logger.warning(f"Empty configuration file: {config_path}")
            config_dict = {}

        if not isinstance(config_dict, dict):
            raise InvalidConfigurationError(
                message=f"Configuration root must be a mapping in {config_path}",
                error_code=ErrorCodes.CONFIG_VALIDATION_FAILED,
                details={"root_type": type(config_dict).__name__},
            )

        return self.load_dict({**config_dict, **(overrides or {})}, source=str(config_path))

    def load_dict(
        self, config_dict: dict[str, Any], source: str = "<dict>"
    ) -> Configuration:
        """
        Validate a configuration mapping.

        Raises:
            InvalidConfigurationError: If validation fails
        """
        try:
            config = Configuration.model_validate(config_dict)
        except ValidationError as e:
            raise InvalidConfigurationError(
                message=f"Configuration validation failed for {source}: {e}",
                error_code=ErrorCodes.CONFIG_VALIDATION_FAILED,
                details={"validation_errors": e.errors(include_url=False)},
            ) from e

        logger.info(f"Successfully loaded chart configuration from {source}")
        return config
