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

"""Rendering of sorted send records into report lines.

Each mode is a pure function over an already sorted sequence;
:func:`render_report` performs the shared sort and dispatches on the
request's mode.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from functools import cmp_to_key
from typing import TYPE_CHECKING, Final

from sends.compat import assert_never
from sends.core.model_types import GradeBand, LogComponent, ReportMode
from sends.exceptions import SendsValidationError
from sends.grades import grade_band
from sends.logging import structured_extra

from .sorting import sort_sends

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sends.core.types import SendRecord

logger: logging.Logger = logging.getLogger("sends.report")

COUNT_WIDTH: Final[int] = 7
_ISO_DATE: Final[re.Pattern[str]] = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


class ReportRequestError(SendsValidationError):
    """Raised when a report request is inconsistent (e.g. dates mode without a grade)."""


@dataclass(slots=True, frozen=True)
class ReportRequest:
    """Tagged report selection.

    Attributes:
        mode: Which report to render.
        grade: Exact grade string to filter on; required for ``dates`` mode and
            ignored otherwise.
    """

    mode: ReportMode = ReportMode.LIST
    grade: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.mode, ReportMode):
            object.__setattr__(self, "mode", ReportMode.from_str(str(self.mode)))
        if self.mode is ReportMode.DATES and not self.grade:
            message = "dates report requires a non-empty grade"
            raise ReportRequestError(message)

    @classmethod
    def from_flags(cls, *, count: bool = False, dates: str | None = None) -> ReportRequest:
        """Build a request from CLI-style flags; a dates grade wins over ``count``."""
        if dates:
            return cls(ReportMode.DATES, dates)
        if count:
            return cls(ReportMode.COUNT)
        return cls(ReportMode.LIST)


def render_list(records: Sequence[SendRecord]) -> list[str]:
    return [record.text for record in records]


def count_grades(records: Sequence[SendRecord]) -> list[tuple[str, int]]:
    """Count records per exact grade string, in first-seen order."""
    counts: dict[str, int] = {}
    for record in records:
        counts[record.grade] = counts.get(record.grade, 0) + 1
    return list(counts.items())


def count_bands(records: Sequence[SendRecord]) -> dict[str, int]:
    """Count records per grade band, in band order, omitting empty bands."""
    counts = {band.value: 0 for band in GradeBand}
    for record in records:
        counts[grade_band(record.grade).value] += 1
    return {band: count for band, count in counts.items() if count}


def render_count(records: Sequence[SendRecord]) -> list[str]:
    return [f"{count:>{COUNT_WIDTH}} {grade}" for grade, count in count_grades(records)]


def parse_iso_date(value: str) -> date | None:
    """Parse a strict ``YYYY-MM-DD`` string, returning ``None`` on failure."""
    match = _ISO_DATE.fullmatch(value)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _compare_dates(left: str, right: str) -> int:
    left_date = parse_iso_date(left)
    right_date = parse_iso_date(right)
    if left_date is None or right_date is None:
        return (left > right) - (left < right)
    return (left_date > right_date) - (left_date < right_date)


def unique_dates(records: Sequence[SendRecord], grade: str) -> list[str]:
    """Return the distinct non-empty dates of records with exactly ``grade``.

    Dates are ordered chronologically; a pair where either side is not a valid
    ``YYYY-MM-DD`` date is compared as plain strings instead.
    """
    seen: dict[str, None] = {}
    for record in records:
        if record.grade == grade and record.date:
            seen.setdefault(record.date, None)
    return sorted(seen, key=cmp_to_key(_compare_dates))


def render_dates(records: Sequence[SendRecord], grade: str) -> list[str]:
    return unique_dates(records, grade)


def render_sorted(records: Sequence[SendRecord], request: ReportRequest) -> list[str]:
    """Render already sorted records according to ``request``."""
    match request.mode:
        case ReportMode.LIST:
            return render_list(records)
        case ReportMode.COUNT:
            return render_count(records)
        case ReportMode.DATES:
            return render_dates(records, request.grade or "")
        case _:  # pragma: no cover - exhaustive
            assert_never(request.mode)


def render_report(records: Sequence[SendRecord], request: ReportRequest | None = None) -> list[str]:
    """Sort ``records`` and render them for ``request`` (list mode by default)."""
    selected = request or ReportRequest()
    ordered = sort_sends(records)
    lines = render_sorted(ordered, selected)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Rendered %s report",
            selected.mode,
            extra=structured_extra(
                LogComponent.REPORT,
                counts={"records": len(ordered), "lines": len(lines)},
                details={"mode": selected.mode.value, "bands": count_bands(ordered)},
            ),
        )
    return lines


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
    "unique_dates",
]
