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

"""Unit tests for Collect."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import pytest

from sends.collect import (
    ContentWalkError,
    collect_sends,
    collect_with_stats,
    is_document,
    iter_documents,
)

if TYPE_CHECKING:
    from pathlib import Path

    from tests.fixtures.site import SiteBuilder

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("name", "expected"),
    [("index.md", True), ("INDEX.MD", True), ("Index.md", True), ("_index.md", False), ("index.markdown", False)],
)
def test_is_document(name: str, *, expected: bool) -> None:
    assert is_document(name) is expected


def test_iter_documents_walks_recursively_in_lexical_order(site: SiteBuilder) -> None:
    _ = site.post("b-second", date="2024-01-02", sends=["V1"])
    _ = site.post("a-first", date="2024-01-01", sends=["V1"])
    _ = site.post("a-first/nested", date="2024-01-03", sends=["V1"], filename="INDEX.MD")
    _ = site.write_raw("a-first/notes.md", "---\nsends: [V9]\n---\n")
    root = site.content_dir()
    found = [path.relative_to(root).as_posix() for path in iter_documents(root)]
    assert found == ["a-first/index.md", "a-first/nested/INDEX.MD", "b-second/index.md"]


def test_collect_sends_copies_document_date(site: SiteBuilder) -> None:
    _ = site.post("climb", date="2024-03-15", sends=["Red V4", "Blue V4+", "Gray ?"])
    records = collect_sends(site.content_dir())
    assert [(record.color, record.grade, record.date) for record in records] == [
        ("Red ", "V4", "2024-03-15"),
        ("Blue ", "V4+", "2024-03-15"),
        ("Gray ", "?", "2024-03-15"),
    ]


def test_collect_skips_unparseable_documents(site: SiteBuilder) -> None:
    _ = site.post("good", date="2024-03-15", sends=["Red V4"])
    _ = site.write_raw("no-header/index.md", "# nothing here\n")
    _ = site.write_raw("bad-yaml/index.md", "---\nsends: [unclosed\n---\n")
    _ = site.write_raw("bad-type/index.md", "---\nsends: Red V4\n---\n")
    result = collect_with_stats(site.content_dir())
    assert [record.grade for record in result.records] == ["V4"]
    assert result.stats.documents == 4
    assert result.stats.skipped == 3
    assert result.stats.records == 1
    assert sorted(path.parent.name for path in result.stats.skipped_paths) == ["bad-type", "bad-yaml", "no-header"]


def test_collect_accepts_single_document_root(site: SiteBuilder) -> None:
    path = site.post("solo", date="2024-05-01", sends=["900"])
    records = collect_sends(path)
    assert [record.grade for record in records] == ["900"]


def test_missing_root_raises_walk_error(tmp_path: Path) -> None:
    with pytest.raises(ContentWalkError):
        _ = collect_sends(tmp_path / "missing")


@pytest.mark.skipif(sys.platform == "win32" or os.geteuid() == 0, reason="requires POSIX permissions as non-root")
def test_unreadable_directory_aborts_walk(site: SiteBuilder) -> None:
    _ = site.post("open", date="2024-03-15", sends=["V1"])
    locked = site.content_dir() / "locked"
    locked.mkdir()
    locked.chmod(0)
    try:
        with pytest.raises(ContentWalkError) as excinfo:
            _ = collect_sends(site.content_dir())
        assert excinfo.value.path == locked
    finally:
        locked.chmod(0o755)
