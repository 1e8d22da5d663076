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

"""Shared configuration defaults for sends."""

from __future__ import annotations

from typing import Final

CONFIG_VERSION: Final[int] = 0
DEFAULT_CONTENT_TYPE: Final[str] = "posts"
CONTENT_DIRNAME: Final[str] = "content"
CONFIG_FILENAMES: Final[tuple[str, ...]] = ("sends.toml", ".sends.toml")
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
TOOL_SECTION: Final[str] = "sends"

__all__ = [
    "CONFIG_FILENAMES",
    "CONFIG_VERSION",
    "CONTENT_DIRNAME",
    "DEFAULT_CONTENT_TYPE",
    "PYPROJECT_FILENAME",
    "TOOL_SECTION",
]
