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

"""Core enums shared across sends layers."""

from __future__ import annotations

from sends.compat import StrEnum


class ReportMode(StrEnum):
    """Output modes supported by the reporter.

    Attributes:
        LIST: Every send, one per line, in sorted order.
        COUNT: Histogram of exact grade strings.
        DATES: Unique chronological dates for a single grade.
    """

    LIST = "list"
    COUNT = "count"
    DATES = "dates"

    @classmethod
    def from_str(cls, raw: str) -> ReportMode:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown report mode '{raw}'") from exc


class GradeBand(StrEnum):
    """Sort bands produced by the grade parser, lowest to highest."""

    POINT = "point"
    UNKNOWN = "unknown"
    ROPE = "rope"
    BOULDER = "boulder"
    UNRECOGNISED = "unrecognised"


class LogFormat(StrEnum):
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log format '{raw}'") from exc


class LogComponent(StrEnum):
    """Enumeration of loggable components.

    Attributes:
        CLI: Command-line interface.
        CONFIG: Configuration loading.
        COLLECT: Content tree traversal.
        EXTRACT: Frontmatter and send parsing.
        REPORT: Sorting and rendering.
        SERVICES: Service layer orchestration.
    """

    CLI = "cli"
    CONFIG = "config"
    COLLECT = "collect"
    EXTRACT = "extract"
    REPORT = "report"
    SERVICES = "services"


__all__ = ["GradeBand", "LogComponent", "LogFormat", "ReportMode"]
