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

"""Service layer that turns a site path into report lines."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from sends.collect import ContentPathNotFoundError, ContentWalkError, collect_with_stats
from sends.config.constants import CONTENT_DIRNAME, DEFAULT_CONTENT_TYPE
from sends.core.model_types import LogComponent
from sends.logging import structured_extra
from sends.report import ReportRequest, render_report
from sends.runtime import consume

if TYPE_CHECKING:
    from sends.collect import CollectionStats

logger: logging.Logger = logging.getLogger("sends.services")


@dataclass(slots=True, frozen=True)
class ReportResult:
    """Outcome of a report run.

    Attributes:
        content_path: Directory that was scanned.
        lines: Rendered output lines, without trailing newlines.
        stats: Traversal counters.
    """

    content_path: Path
    lines: list[str]
    stats: CollectionStats


def content_path_for(site_path: Path, content_type: str = DEFAULT_CONTENT_TYPE) -> Path:
    """Return ``<site_path>/content/<content_type>``."""
    return Path(site_path) / CONTENT_DIRNAME / content_type


def build_report(
    site_path: Path,
    *,
    content_type: str = DEFAULT_CONTENT_TYPE,
    request: ReportRequest | None = None,
) -> ReportResult:
    """Collect sends under a site's content directory and render a report.

    Args:
        site_path: Root of the static site.
        content_type: Subdirectory of ``content/`` to scan.
        request: Report selection; list mode when omitted.

    Returns:
        The rendered lines together with traversal statistics.

    Raises:
        ContentPathNotFoundError: If the content directory does not exist.
        ContentWalkError: If the content directory cannot be inspected or a
            directory in the tree cannot be traversed.
    """
    content_path = content_path_for(site_path, content_type)
    try:
        consume(content_path.stat())
    except FileNotFoundError as exc:
        raise ContentPathNotFoundError(content_path) from exc
    except OSError as exc:
        raise ContentWalkError(content_path, exc) from exc
    started = time.perf_counter()
    collection = collect_with_stats(content_path)
    lines = render_report(collection.records, request)
    duration_ms = (time.perf_counter() - started) * 1000
    logger.debug(
        "Scanned %d document(s), skipped %d, found %d send(s)",
        collection.stats.documents,
        collection.stats.skipped,
        collection.stats.records,
        extra=structured_extra(
            LogComponent.SERVICES,
            path=content_path,
            duration_ms=duration_ms,
            counts={
                "documents": collection.stats.documents,
                "skipped": collection.stats.skipped,
                "records": collection.stats.records,
            },
        ),
    )
    return ReportResult(content_path=content_path, lines=lines, stats=collection.stats)


__all__ = ["ReportResult", "build_report", "content_path_for"]
