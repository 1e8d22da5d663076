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

"""Unit tests for CLI App."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sends import __version__
from sends._internal.logging_utils import LOG_LEVEL_ENV
from sends.cli.app import _resolve_setting, main

if TYPE_CHECKING:
    from pathlib import Path

    from tests.fixtures.site import SiteBuilder

pytestmark = [pytest.mark.unit, pytest.mark.cli]


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SENDS_LOG_FORMAT", raising=False)
    monkeypatch.delenv("SENDS_LOG_LEVEL", raising=False)


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"sends {__version__}"


def test_missing_site_path_prints_usage(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage: sends [options] <site-path>" in captured.err


def test_missing_content_path(site: SiteBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    site.root.mkdir(parents=True)
    assert main([str(site.root)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    expected = site.root / "content" / "posts"
    assert captured.err.strip() == f"Error: content path does not exist: {expected}"


def test_type_flag_selects_content_directory(site: SiteBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    _ = site.post("gym", date="2024-01-01", sends=["Red V2"], content_type="climbs")
    _ = site.post("other", date="2024-01-01", sends=["Blue V9"])
    assert main(["--type", "climbs", str(site.root)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Red V2"]


def test_last_type_flag_wins(site: SiteBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    _ = site.post("gym", date="2024-01-01", sends=["Red V2"], content_type="climbs")
    _ = site.post("other", date="2024-01-01", sends=["Blue V9"])
    assert main(["-t", "climbs", "--type", "posts", str(site.root)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Blue V9"]


def test_count_flag(site: SiteBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    _ = site.post("a", date="2024-01-01", sends=["Red V2", "Blue V2", "Gray ?"])
    assert main(["-c", str(site.root)]) == 0
    assert capsys.readouterr().out.splitlines() == ["      1 ?", "      2 V2"]


def test_dates_flag_takes_precedence_over_count(site: SiteBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    _ = site.post("a", date="2024-02-01", sends=["Red V2"])
    _ = site.post("b", date="2024-01-01", sends=["Blue V2", "Pink V3"])
    assert main(["--count", "--dates", "V2", str(site.root)]) == 0
    assert capsys.readouterr().out.splitlines() == ["2024-01-01", "2024-02-01"]


def test_empty_dates_value_falls_back_to_list(site: SiteBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    _ = site.post("a", date="2024-02-01", sends=["Red V2"])
    assert main(["-d", "", str(site.root)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Red V2"]


def test_config_file_sets_default_content_type(
    site: SiteBuilder,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _ = (tmp_path / "sends.toml").write_text('content_type = "climbs"\n', encoding="utf-8")
    _ = site.post("gym", date="2024-01-01", sends=["Red V2"], content_type="climbs")
    assert main([str(site.root)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Red V2"]


def test_invalid_config_file_exits_with_error(
    site: SiteBuilder,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    config_path = tmp_path / "broken.toml"
    _ = config_path.write_text("config_version = 9\n", encoding="utf-8")
    _ = site.post("a", date="2024-01-01", sends=["Red V2"])
    assert main(["--config", str(config_path), str(site.root)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: Invalid sends configuration")


def test_debug_logging_reports_skipped_documents(site: SiteBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    _ = site.write_raw("broken/index.md", "no header\n")
    assert main(["--log-level", "debug", str(site.root)]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Skipping" in captured.err


def test_skipped_documents_are_silent_by_default(site: SiteBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    _ = site.write_raw("broken/index.md", "no header\n")
    assert main([str(site.root)]) == 0
    assert capsys.readouterr().err == ""


def test_resolve_setting_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    assert _resolve_setting("debug", LOG_LEVEL_ENV, "error") == "debug"
    assert _resolve_setting(None, LOG_LEVEL_ENV, "error") == "error"
    monkeypatch.setenv(LOG_LEVEL_ENV, "warning")
    assert _resolve_setting(None, LOG_LEVEL_ENV, "error") is None


def test_empty_type_scans_content_root(site: SiteBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    _ = site.post("gym", date="2024-01-01", sends=["Red V4"], content_type="notes")
    assert main(["-t", "", str(site.root)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Red V4"]


def test_empty_type_overrides_config_content_type(
    site: SiteBuilder,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _ = (tmp_path / "sends.toml").write_text('content_type = "climbs"\n', encoding="utf-8")
    _ = site.post("gym", date="2024-01-01", sends=["Red V4"], content_type="notes")
    assert main(["--type", "", str(site.root)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Red V4"]


def test_uninspectable_content_path_exits_with_walk_error(
    site: SiteBuilder,
    capsys: pytest.CaptureFixture[str],
) -> None:
    site.root.mkdir(parents=True)
    assert main(["-t", "a" * 300, str(site.root)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error walking directory: ")
    assert "File name too long" in captured.err


def test_unrelated_broken_pyproject_does_not_abort(
    site: SiteBuilder,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _ = (tmp_path / "pyproject.toml").write_text("[project\n", encoding="utf-8")
    _ = site.post("a", date="2024-01-01", sends=["Red V2"])
    assert main([str(site.root)]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["Red V2"]
    assert captured.err == ""
