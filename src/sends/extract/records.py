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

"""Split free-text send strings into color, grade and meta."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Final

from sends.core.model_types import LogComponent
from sends.core.types import SendRecord
from sends.logging import structured_extra

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sends.core.types import Frontmatter

logger: logging.Logger = logging.getLogger("sends.extract")

# color: reluctant run of word chars, whitespace and apostrophes, plus one optional space
# grade: optional "V" then digits, ".", "+", "?", "-"
# meta:  optional space then the rest of the line
SEND_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<color>[\w\s']*?\s?)(?P<grade>V?[\d.+?-]+)(?P<meta>\s?.*)",
    re.ASCII,
)


def parse_send(text: str, *, date: str = "") -> SendRecord | None:
    """Return the record described by ``text``, or ``None`` when no grade is found.

    The first match anywhere in the string is used, so leading characters that
    fall outside the color class are dropped from the record.
    """
    match = SEND_PATTERN.search(text)
    if match is None:
        return None
    return SendRecord(
        color=match.group("color"),
        grade=match.group("grade"),
        meta=match.group("meta"),
        date=date,
    )


def extract_records(frontmatter: Frontmatter) -> list[SendRecord]:
    """Build records for every matching send string in ``frontmatter``."""
    return list(_iter_records(frontmatter.sends, frontmatter.date))


def _iter_records(sends: Iterable[str], date: str) -> Iterable[SendRecord]:
    for text in sends:
        record = parse_send(text, date=date)
        if record is None:
            logger.debug(
                "Discarding send without a grade: %r",
                text,
                extra=structured_extra(LogComponent.EXTRACT, details={"send": text}),
            )
            continue
        yield record


__all__ = ["SEND_PATTERN", "extract_records", "parse_send"]
