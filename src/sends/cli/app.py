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

"""CLI entry point for sends."""

from __future__ import annotations

import argparse
import logging
import os
import pathlib
from contextlib import suppress
from typing import TYPE_CHECKING, Final

from sends import __version__
from sends._infra.error_codes import error_code_for
from sends._internal.logging_utils import LOG_FORMAT_ENV, LOG_LEVEL_ENV
from sends.cli.helpers import echo as _echo
from sends.cli.helpers import optional_text
from sends.cli.helpers import register_argument as _register_argument
from sends.collect import ContentPathNotFoundError, ContentWalkError
from sends.config import DEFAULT_CONTENT_TYPE, load_config_with_metadata
from sends.core.model_types import LogComponent
from sends.exceptions import SendsError
from sends.logging import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra
from sends.report import ReportRequest
from sends.services.report import build_report

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sends.config import Config

logger: logging.Logger = logging.getLogger("sends.cli")

SENDS_VERSION: Final[str] = __version__
EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the sends command-line interface.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code (0 for success, 1 for usage, path, traversal or
            configuration errors).
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        _echo(f"sends {SENDS_VERSION}")
        return EXIT_OK
    if args.site_path is None:
        _echo(parser.format_help(), newline=False, err=True)
        return EXIT_FAILURE

    try:
        loaded = load_config_with_metadata(args.config)
    except SendsError as exc:
        _echo(f"Error: {exc}", err=True)
        return EXIT_FAILURE
    config = loaded.config
    _initialize_logging(args.log_format, args.log_level, config)

    content_type = args.content_type if args.content_type is not None else config.content_type
    request = ReportRequest.from_flags(count=args.count, dates=optional_text(args.dates))
    try:
        result = build_report(pathlib.Path(args.site_path), content_type=content_type, request=request)
    except ContentPathNotFoundError as exc:
        return _fail(f"Error: {exc}", exc)
    except ContentWalkError as exc:
        return _fail(f"Error walking directory: {exc}", exc)
    except SendsError as exc:
        return _fail(f"Error: {exc}", exc)

    for line in result.lines:
        _echo(line)
    return EXIT_OK


def _fail(message: str, exc: SendsError) -> int:
    _echo(message, err=True)
    logger.debug(
        "Aborting: %s",
        type(exc).__name__,
        extra=structured_extra(LogComponent.CLI, exit_code=EXIT_FAILURE, error_code=error_code_for(exc)),
    )
    return EXIT_FAILURE


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the sends CLI.

    Returns:
        argparse.ArgumentParser: Parser for ``sends [options] <site-path>``.
    """
    parser = argparse.ArgumentParser(
        prog="sends",
        usage="%(prog)s [options] <site-path>",
        description="List, count or date climbing sends recorded in static-site frontmatter.",
    )
    _register_argument(
        parser,
        "site_path",
        nargs="?",
        metavar="site-path",
        help="Root of the static site (the directory containing content/).",
    )
    _register_argument(
        parser,
        "-t",
        "--type",
        dest="content_type",
        default=None,
        help=f'Content type to parse (default "{DEFAULT_CONTENT_TYPE}", or content_type from the config file).',
    )
    _register_argument(
        parser,
        "-c",
        "--count",
        action="store_true",
        help="Output counts per grade instead of the list.",
    )
    _register_argument(
        parser,
        "-d",
        "--dates",
        metavar="GRADE",
        default=None,
        help="Output unique dates of posts with this exact grade (overrides --count).",
    )
    _register_argument(
        parser,
        "--config",
        type=pathlib.Path,
        default=None,
        help="Configuration file to use instead of sends.toml / pyproject.toml discovery.",
    )
    _register_argument(
        parser,
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Select logging output format (human-readable text or structured JSON).",
    )
    _register_argument(
        parser,
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Set verbosity of logged events.",
    )
    _register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the sends version and exit.",
    )
    return parser


def _resolve_setting(cli_value: str | None, env_name: str, config_value: str | None) -> str | None:
    """Return the setting to pass to ``configure_logging``.

    A CLI value wins; otherwise ``None`` defers to the environment variable
    when it is set, and the configuration file value applies last.
    """
    if cli_value is not None:
        return cli_value
    if os.getenv(env_name):
        return None
    return config_value


def _initialize_logging(log_format: str | None, log_level: str | None, config: Config) -> None:
    """Initialize logging for the CLI (best-effort)."""
    configured_format = config.logging.format.value if config.logging.format else None
    with suppress(Exception):  # best-effort logger init
        _ = configure_logging(
            _resolve_setting(log_format, LOG_FORMAT_ENV, configured_format),
            log_level=_resolve_setting(log_level, LOG_LEVEL_ENV, config.logging.level),
        )


__all__ = ["main"]
