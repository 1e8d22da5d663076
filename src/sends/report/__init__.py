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

"""Sorting and rendering of send reports."""

from __future__ import annotations

from .render import (
    COUNT_WIDTH,
    ReportRequest,
    ReportRequestError,
    count_bands,
    count_grades,
    parse_iso_date,
    render_count,
    render_dates,
    render_list,
    render_report,
    render_sorted,
    unique_dates,
)
from .sorting import sort_sends

__all__ = [
    "COUNT_WIDTH",
    "ReportRequest",
    "ReportRequestError",
    "count_bands",
    "count_grades",
    "parse_iso_date",
    "render_count",
    "render_dates",
    "render_list",
    "render_report",
    "render_sorted",
    "sort_sends",
    "unique_dates",
]
