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

"""sends - climbing send reports for static-site content trees.

Scans page frontmatter for ``sends`` entries, orders them by a banded grade
scale (point, unknown, rope, boulder) and renders a list, a per-grade count or
the dates a grade was climbed.
"""

from __future__ import annotations

from sends.exceptions import SendsError, SendsValidationError

from .api import run_report
from .collect import ContentPathNotFoundError, ContentWalkError, collect_sends
from .config import Config, load_config
from .core.model_types import GradeBand, ReportMode
from .core.types import Frontmatter, SendRecord
from .extract import parse_send, read_frontmatter
from .grades import grade_band, parse_grade
from .report import ReportRequest, render_report, sort_sends
from .services.report import ReportResult

__all__ = [
    "__version__",
    "Config",
    "ContentPathNotFoundError",
    "ContentWalkError",
    "Frontmatter",
    "GradeBand",
    "ReportMode",
    "ReportRequest",
    "ReportResult",
    "SendRecord",
    "SendsError",
    "SendsValidationError",
    "collect_sends",
    "grade_band",
    "load_config",
    "parse_grade",
    "parse_send",
    "read_frontmatter",
    "render_report",
    "run_report",
    "sort_sends",
]

__version__ = "0.1.0"
