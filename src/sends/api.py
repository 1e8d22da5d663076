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

"""Programmatic API for producing send reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sends.config.constants import DEFAULT_CONTENT_TYPE
from sends.core.model_types import ReportMode
from sends.report import ReportRequest
from sends.services.report import ReportResult, build_report

if TYPE_CHECKING:
    from pathlib import Path


def run_report(
    site_path: Path,
    *,
    content_type: str = DEFAULT_CONTENT_TYPE,
    mode: ReportMode | str = ReportMode.LIST,
    grade: str | None = None,
) -> ReportResult:
    """Scan ``site_path`` and render the selected report.

    Args:
        site_path: Root of the static site (the directory holding ``content/``).
        content_type: Subdirectory of ``content/`` to scan.
        mode: ``list``, ``count`` or ``dates``.
        grade: Exact grade to filter on; required for ``dates``.

    Returns:
        ReportResult with the output lines and traversal statistics.
    """
    request = ReportRequest(mode=ReportMode.from_str(str(mode)), grade=grade)
    return build_report(site_path, content_type=content_type, request=request)


__all__ = ["ReportResult", "run_report"]
