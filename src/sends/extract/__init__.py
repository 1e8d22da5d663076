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

"""Record extraction: document frontmatter to send records."""

from __future__ import annotations

from .frontmatter import (
    FRONTMATTER_DELIMITER,
    FrontmatterError,
    FrontmatterFieldError,
    FrontmatterModel,
    FrontmatterNotFoundError,
    FrontmatterReadError,
    FrontmatterSyntaxError,
    parse_frontmatter,
    read_frontmatter,
    split_frontmatter,
)
from .records import SEND_PATTERN, extract_records, parse_send

__all__ = [
    "FRONTMATTER_DELIMITER",
    "SEND_PATTERN",
    "FrontmatterError",
    "FrontmatterFieldError",
    "FrontmatterModel",
    "FrontmatterNotFoundError",
    "FrontmatterReadError",
    "FrontmatterSyntaxError",
    "extract_records",
    "parse_frontmatter",
    "parse_send",
    "read_frontmatter",
    "split_frontmatter",
]
