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

"""Configuration loading for sends.

Looks for ``sends.toml`` or ``.sends.toml`` in the working directory, then for
a ``[tool.sends]`` table in ``pyproject.toml``. An explicit path replaces the
search entirely.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from pydantic import ValidationError

from sends.compat import tomllib
from sends.core.model_types import LogComponent
from sends.logging import structured_extra

from .constants import CONFIG_FILENAMES, PYPROJECT_FILENAME, TOOL_SECTION
from .models import (
    Config,
    ConfigModel,
    ConfigReadError,
    InvalidConfigFileError,
    config_from_model,
)

logger: logging.Logger = logging.getLogger("sends.config")


@dataclass(slots=True, frozen=True)
class LoadedConfig:
    """Container for a loaded configuration and its source path.

    Attributes:
        config: Parsed configuration instance.
        path: Filesystem path the configuration was loaded from, or None when
            defaults are used.
    """

    config: Config
    path: Path | None


def _read_toml(path: Path) -> dict[str, object]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(path, exc) from exc


def _tool_section(raw_map: dict[str, object]) -> dict[str, object] | None:
    tool_obj = raw_map.get("tool")
    if isinstance(tool_obj, dict):
        section = cast("dict[str, object]", tool_obj).get(TOOL_SECTION)
        if isinstance(section, dict):
            return cast("dict[str, object]", section)
    return None


def _validate(path: Path, raw_map: dict[str, object]) -> Config:
    try:
        model = ConfigModel.model_validate(raw_map)
    except ValidationError as exc:
        raise InvalidConfigFileError(path, exc) from exc
    return config_from_model(model)


def _load_file(path: Path) -> Config:
    raw_map = _read_toml(path)
    section = _tool_section(raw_map)
    return _validate(path, section if section is not None else raw_map)


def load_config_with_metadata(explicit_path: Path | None = None, *, cwd: Path | None = None) -> LoadedConfig:
    """Load configuration and report which file it came from.

    Args:
        explicit_path: Configuration file to use instead of searching.
        cwd: Directory searched for configuration files (defaults to the
            current working directory).

    Returns:
        The loaded configuration with its source path, or defaults with
        ``path=None`` when no configuration file applies.

    Raises:
        ConfigReadError: If ``explicit_path``, ``sends.toml`` or ``.sends.toml``
            cannot be read or parsed as TOML. An unreadable ``pyproject.toml``
            is ignored.
        InvalidConfigFileError: If a candidate file fails schema validation.
    """
    if explicit_path is not None:
        return LoadedConfig(_load_file(explicit_path), explicit_path)

    base = cwd or Path.cwd()
    for filename in CONFIG_FILENAMES:
        candidate = base / filename
        if not candidate.is_file():
            continue
        config = _load_file(candidate)
        logger.debug(
            "Loaded configuration from %s",
            candidate,
            extra=structured_extra(LogComponent.CONFIG, path=candidate),
        )
        return LoadedConfig(config, candidate)

    pyproject = base / PYPROJECT_FILENAME
    if pyproject.is_file():
        try:
            raw_map = _read_toml(pyproject)
        except ConfigReadError as exc:
            logger.debug(
                "Ignoring unreadable %s: %s",
                pyproject,
                exc.error,
                extra=structured_extra(
                    LogComponent.CONFIG,
                    path=pyproject,
                    details={"error": type(exc.error).__name__},
                ),
            )
            return LoadedConfig(Config(), None)
        section = _tool_section(raw_map)
        if section is not None:
            logger.debug(
                "Loaded configuration from [tool.%s] in %s",
                TOOL_SECTION,
                pyproject,
                extra=structured_extra(LogComponent.CONFIG, path=pyproject),
            )
            return LoadedConfig(_validate(pyproject, section), pyproject)

    return LoadedConfig(Config(), None)


def load_config(explicit_path: Path | None = None) -> Config:
    """Load sends configuration from a TOML file or fall back to defaults."""
    return load_config_with_metadata(explicit_path).config


__all__ = ["LoadedConfig", "load_config", "load_config_with_metadata"]
