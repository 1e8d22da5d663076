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

"""Grade parsing for send ordering.

Free-text grades are mapped onto a single numeric scale used as a sort key.
Bands, lowest to highest:

- point grades (``900``, ``1000``): the number itself
- unknown grades (anything containing ``?``) and malformed rope grades: ``10000``
- rope grades (``5.10``, ``5.11+``): ``20000 + value``
- boulder grades (``V4``, ``V6-``): ``100000 + value``
- malformed boulder grades and anything else: ``1000000``

A trailing ``+`` adds ``0.1`` and a trailing ``-`` subtracts ``0.1`` for rope
and boulder grades. The two ties (unknown/malformed rope, malformed
boulder/unrecognised) are part of the ordering and must not be split.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Final

from sends.core.model_types import GradeBand

if TYPE_CHECKING:
    from sends.core.types import SendRecord

UNKNOWN_GRADE_KEY: Final[float] = 10000.0
ROPE_GRADE_BASE: Final[float] = 20000.0
BOULDER_GRADE_BASE: Final[float] = 100000.0
UNRECOGNISED_GRADE_KEY: Final[float] = 1000000.0
MODIFIER_STEP: Final[float] = 0.1

ROPE_PREFIX: Final[str] = "5."
BOULDER_PREFIX: Final[str] = "V"
UNKNOWN_MARKER: Final[str] = "?"


def _parse_number(raw: str) -> float | None:
    # float() is looser than a decimal literal (padding, separators, non-ASCII digits).
    # NaN has no place in an ordering.
    if not raw or not raw.isascii() or raw != raw.strip() or "_" in raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return None if math.isnan(value) else value


def _split_modifier(body: str) -> tuple[str, float]:
    if body.endswith("+"):
        adjustment = MODIFIER_STEP
    elif body.endswith("-"):
        adjustment = -MODIFIER_STEP
    else:
        adjustment = 0.0
    return body.removesuffix("+").removesuffix("-"), adjustment


def _prefixed_key(body: str, base: float, fallback: float) -> float:
    number, adjustment = _split_modifier(body)
    value = _parse_number(number)
    if value is None:
        return fallback
    return base + value + adjustment


def parse_grade(grade: str) -> float:
    """Return the numeric sort key for a raw grade token.

    The function is total: every string maps to a key. It is used only for
    ordering and the result is never displayed.

    Args:
        grade: Grade token exactly as written in the send string.

    Returns:
        Sort key on the banded scale described in the module docstring.
    """
    if UNKNOWN_MARKER in grade:
        return UNKNOWN_GRADE_KEY
    if grade.startswith(BOULDER_PREFIX):
        return _prefixed_key(
            grade.removeprefix(BOULDER_PREFIX),
            BOULDER_GRADE_BASE,
            UNRECOGNISED_GRADE_KEY,
        )
    if grade.startswith(ROPE_PREFIX):
        return _prefixed_key(
            grade.removeprefix(ROPE_PREFIX),
            ROPE_GRADE_BASE,
            UNKNOWN_GRADE_KEY,
        )
    value = _parse_number(grade)
    return UNRECOGNISED_GRADE_KEY if value is None else value


def grade_band(grade: str) -> GradeBand:
    """Classify a grade token into the band its sort key falls in."""
    if UNKNOWN_MARKER in grade:
        return GradeBand.UNKNOWN
    if grade.startswith(BOULDER_PREFIX):
        number, _ = _split_modifier(grade.removeprefix(BOULDER_PREFIX))
        return GradeBand.UNRECOGNISED if _parse_number(number) is None else GradeBand.BOULDER
    if grade.startswith(ROPE_PREFIX):
        number, _ = _split_modifier(grade.removeprefix(ROPE_PREFIX))
        return GradeBand.UNKNOWN if _parse_number(number) is None else GradeBand.ROPE
    value = _parse_number(grade)
    if value is None:
        return GradeBand.UNRECOGNISED
    return GradeBand.POINT


def sort_key(record: SendRecord) -> tuple[float, str]:
    """Return the ``(grade key, color)`` pair records are ordered by."""
    return parse_grade(record.grade), record.color


__all__ = [
    "BOULDER_GRADE_BASE",
    "MODIFIER_STEP",
    "ROPE_GRADE_BASE",
    "UNKNOWN_GRADE_KEY",
    "UNRECOGNISED_GRADE_KEY",
    "grade_band",
    "parse_grade",
    "sort_key",
]
