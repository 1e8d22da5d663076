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

"""Unit tests for Extract Records."""

from __future__ import annotations

import logging

import pytest

from sends.core.types import Frontmatter, SendRecord
from sends.extract import extract_records, parse_send

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("text", "color", "grade", "meta"),
    [
        ("Red V4", "Red ", "V4", ""),
        ("Blue V4+", "Blue ", "V4+", ""),
        ("Gray ?", "Gray ", "?", ""),
        ("900", "", "900", ""),
        ("Yellow V3 flash", "Yellow ", "V3", " flash"),
        ("Mike's project 5.11- second go", "Mike's project ", "5.11-", " second go"),
        ("Green 2 V5", "Green ", "2", " V5"),
        ("(warmup) V2", " ", "V2", ""),
    ],
)
def test_parse_send_splits_color_grade_meta(text: str, color: str, grade: str, meta: str) -> None:
    record = parse_send(text, date="2024-03-15")
    assert record == SendRecord(color=color, grade=grade, meta=meta, date="2024-03-15")


@pytest.mark.parametrize("text", ["", "flash", "Very hard", "yes"])
def test_parse_send_without_grade_returns_none(text: str) -> None:
    assert parse_send(text) is None


def test_record_text_reassembles_send() -> None:
    record = parse_send("Yellow V3 flash")
    assert record is not None
    assert record.text == "Yellow V3 flash"


def test_extract_records_copies_date_and_drops_unmatched() -> None:
    frontmatter = Frontmatter(date="2024-03-15", sends=("Red V4", "nothing here", "", "Gray ?"))
    records = extract_records(frontmatter)
    assert [record.grade for record in records] == ["V4", "?"]
    assert {record.date for record in records} == {"2024-03-15"}


def test_extract_records_logs_discarded_sends(caplog: pytest.LogCaptureFixture) -> None:
    frontmatter = Frontmatter(date="2024-01-01", sends=("no grade here",))
    with caplog.at_level(logging.DEBUG, logger="sends.extract"):
        assert extract_records(frontmatter) == []
    assert [record.message for record in caplog.records] == ["Discarding send without a grade: 'no grade here'"]
    assert caplog.records[0].component == "extract"
