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

"""Unit tests for Utilities Logging."""

from __future__ import annotations

import json
import logging

import pytest

from sends._internal.logging_utils import LOG_FORMAT_ENV, LOG_LEVEL_ENV, LOG_LEVELS
from sends.core.model_types import LogComponent, LogFormat
from sends.logging import configure_logging, structured_extra

pytestmark = pytest.mark.unit


def test_configure_logging_json_emits_structured_logs(capsys: pytest.CaptureFixture[str]) -> None:
    config = configure_logging("json", log_level="debug")
    assert config.format is LogFormat.JSON
    logger = logging.getLogger("sends.collect")
    logger.debug(
        "collected",
        extra=structured_extra(
            LogComponent.COLLECT,
            path="content/posts/a/index.md",
            counts={"records": 3},
            duration_ms=1.5,
        ),
    )
    captured = capsys.readouterr()
    payload = json.loads(captured.err.strip().splitlines()[-1])
    assert payload["message"] == "collected"
    assert payload["level"] == "debug"
    assert payload["logger"] == "sends.collect"
    assert payload["component"] == "collect"
    assert payload["path"] == "content/posts/a/index.md"
    assert payload["counts"] == {"records": 3}
    assert payload["duration_ms"] == 1.5


def test_configure_logging_respects_level(capsys: pytest.CaptureFixture[str]) -> None:
    assert LOG_LEVELS == ("debug", "info", "warning", "error")
    config = configure_logging("text", log_level="warning")
    assert config.level == logging.WARNING
    logger = logging.getLogger("sends.report")
    logger.info("hidden")
    logger.warning("shown")
    captured = capsys.readouterr()
    assert "hidden" not in captured.err
    assert "[WARNING] shown" in captured.err


def test_configure_logging_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_FORMAT_ENV, "json")
    monkeypatch.setenv(LOG_LEVEL_ENV, "error")
    config = configure_logging()
    assert config.format is LogFormat.JSON
    assert config.level_name == "error"


def test_unknown_level_falls_back_to_info() -> None:
    assert configure_logging("text", log_level="chatty").level == logging.INFO


def test_structured_extra_drops_empty_values() -> None:
    extra = structured_extra(LogComponent.CLI, counts={}, details={}, exit_code=1)
    assert extra == {"component": LogComponent.CLI, "exit_code": 1}
