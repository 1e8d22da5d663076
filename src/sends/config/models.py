# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration models and validation for sends.

Pydantic models validate the TOML payload; the dataclasses below are what the
rest of the package consumes at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from sends._internal.logging_utils import LOG_FORMATS, LOG_LEVELS
from sends.core.model_types import LogFormat
from sends.exceptions import SendsValidationError

from .constants import CONFIG_VERSION, DEFAULT_CONTENT_TYPE

if TYPE_CHECKING:
    from pathlib import Path


class ConfigValidationError(SendsValidationError):
    """Raised when configuration data contains invalid values."""


class ConfigFieldChoiceError(ConfigValidationError):
    """Raised when a configuration field is provided with an unsupported value."""

    def __init__(self, field: str, allowed: tuple[str, ...]) -> None:
        """Initialize the exception with the field name and allowed values.

        Args:
            field: The name of the configuration field with an invalid value.
            allowed: Tuple of allowed values for this field.
        """
        self.field = field
        self.allowed = allowed
        allowed_text = ", ".join(sorted(allowed))
        super().__init__(f"{field} must be one of: {allowed_text}")


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read or is not valid TOML."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when the configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with the config path and validation error.

        Args:
            path: The configuration file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid sends configuration in {path}: {error}")


@dataclass(slots=True)
class LoggingConfig:
    """Logging preferences from the configuration file.

    ``None`` means "not configured"; environment variables and built-in
    defaults apply instead.
    """

    format: LogFormat | None = None
    level: str | None = None


@dataclass(slots=True)
class Config:
    """Top-level runtime configuration for sends.

    Attributes:
        content_type: Subdirectory of ``<site>/content`` scanned by default.
        logging: Logging preferences.
    """

    content_type: str = DEFAULT_CONTENT_TYPE
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[logging]`` table."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    format: str | None = None
    level: str | None = None

    @field_validator("format", mode="before")
    @classmethod
    def _validate_format(cls, value: object) -> object:
        if value is None:
            return None
        token = str(value).strip().lower()
        if token not in LOG_FORMATS:
            raise ConfigFieldChoiceError("logging.format", tuple(LOG_FORMATS))
        return token

    @field_validator("level", mode="before")
    @classmethod
    def _validate_level(cls, value: object) -> object:
        if value is None:
            return None
        token = str(value).strip().lower()
        if token not in LOG_LEVELS:
            raise ConfigFieldChoiceError("logging.level", tuple(LOG_LEVELS))
        return token


class ConfigModel(BaseModel):
    """Pydantic model validating a sends configuration file.

    Attributes:
        config_version: Schema version number for the configuration file.
        content_type: Default content subdirectory to scan.
        logging: Logging preferences.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    config_version: int = Field(default=CONFIG_VERSION)
    content_type: str = Field(default=DEFAULT_CONTENT_TYPE, min_length=1)
    logging: LoggingConfigModel = Field(default_factory=LoggingConfigModel)

    @model_validator(mode="after")
    def _check_version(self) -> ConfigModel:
        if self.config_version != CONFIG_VERSION:
            raise UnsupportedConfigVersionError(self.config_version, CONFIG_VERSION)
        return self


def config_from_model(model: ConfigModel) -> Config:
    """Convert a validated ``ConfigModel`` into the runtime ``Config``."""
    log_format = LogFormat.from_str(model.logging.format) if model.logging.format else None
    return Config(
        content_type=model.content_type,
        logging=LoggingConfig(format=log_format, level=model.logging.level),
    )


__all__ = [
    "Config",
    "ConfigFieldChoiceError",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "LoggingConfig",
    "LoggingConfigModel",
    "UnsupportedConfigVersionError",
    "config_from_model",
]
