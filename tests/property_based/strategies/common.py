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

"""Hypothesis strategies for grades and send records."""

from __future__ import annotations

from hypothesis import strategies as st

from sends.core.types import SendRecord

_MODIFIERS = st.sampled_from(("", "+", "-"))
_COLORS = st.sampled_from(("Red", "Blue", "Green", "Gray", "Hot Pink", "O'Brien", ""))
_DATES = st.sampled_from(("2024-01-05", "2024-1-5", "2023-12-31", "", "someday"))


def rope_grades() -> st.SearchStrategy[str]:
    """Return a strategy yielding well-formed ``5.<n>[+|-]`` grades."""
    return st.builds(lambda n, mod: f"5.{n}{mod}", st.integers(min_value=0, max_value=15), _MODIFIERS)


def boulder_grades() -> st.SearchStrategy[str]:
    """Return a strategy yielding well-formed ``V<n>[+|-]`` grades."""
    return st.builds(lambda n, mod: f"V{n}{mod}", st.integers(min_value=0, max_value=17), _MODIFIERS)


def point_grades(max_value: int = 9999) -> st.SearchStrategy[str]:
    """Return a strategy yielding integer point grades."""
    return st.integers(min_value=0, max_value=max_value).map(str)


def send_records(max_size: int = 25) -> st.SearchStrategy[list[SendRecord]]:
    """Strategy for lists of records drawn from a small pool of grades.

    A small pool keeps duplicate grades and dates frequent so that counting
    and deduplication are exercised.
    """
    grades = st.one_of(st.just("?"), rope_grades(), boulder_grades(), point_grades(max_value=50))
    record = st.builds(
        lambda color, grade, date: SendRecord(color=color, grade=grade, meta="", date=date),
        _COLORS,
        grades,
        _DATES,
    )
    return st.lists(record, max_size=max_size)
