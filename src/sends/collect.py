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

"""Content tree traversal and record accumulation."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Final

from sends.core.model_types import LogComponent
from sends.exceptions import SendsError
from sends.extract import FrontmatterError, extract_records, read_frontmatter
from sends.logging import structured_extra

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sends.core.types import SendRecord

logger: logging.Logger = logging.getLogger("sends.collect")

DOCUMENT_FILENAME: Final[str] = "index.md"


class ContentPathNotFoundError(SendsError):
    """Raised when the content directory to scan does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"content path does not exist: {path}")


class ContentWalkError(SendsError):
    """Raised when a directory in the content tree cannot be traversed."""

    def __init__(self, path: Path, error: OSError) -> None:
        self.path = path
        self.error = error
        super().__init__(str(error))


@dataclass(slots=True)
class CollectionStats:
    """Counters describing one traversal."""

    documents: int = 0
    skipped: int = 0
    records: int = 0
    skipped_paths: list[Path] = field(default_factory=list)


@dataclass(slots=True)
class CollectionResult:
    """Records gathered from a content tree, in traversal order."""

    records: list[SendRecord]
    stats: CollectionStats


def is_document(name: str) -> bool:
    """Return True when ``name`` is a content document (``index.md``, any case)."""
    return name.lower() == DOCUMENT_FILENAME


def iter_documents(root: Path) -> Iterator[Path]:
    """Yield every document under ``root`` in lexical order per directory.

    Symlinked directories below ``root`` are not followed; ``root`` itself may
    be a symlink. A ``root`` that is a document file is yielded on its own.

    Raises:
        ContentWalkError: If ``root`` or any directory below it cannot be read.
    """
    try:
        info = root.stat()
    except OSError as exc:
        raise ContentWalkError(root, exc) from exc
    if not stat.S_ISDIR(info.st_mode):
        if is_document(root.name):
            yield root
        return
    yield from _walk(root)


def _walk(directory: Path) -> Iterator[Path]:
    try:
        with os.scandir(directory) as scanner:
            entries = sorted(scanner, key=lambda entry: entry.name)
    except OSError as exc:
        raise ContentWalkError(directory, exc) from exc
    for entry in entries:
        path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(path)
        elif is_document(entry.name):
            yield path


def collect_with_stats(root: Path) -> CollectionResult:
    """Walk ``root`` and extract send records from every document.

    Documents whose frontmatter cannot be read or parsed contribute no records
    and are counted in ``stats.skipped``; they never abort the walk.

    Raises:
        ContentWalkError: If a directory cannot be traversed.
    """
    records: list[SendRecord] = []
    stats = CollectionStats()
    for document in iter_documents(root):
        stats.documents += 1
        try:
            frontmatter = read_frontmatter(document)
        except FrontmatterError as exc:
            stats.skipped += 1
            stats.skipped_paths.append(document)
            logger.debug(
                "Skipping %s: %s",
                document,
                exc.reason,
                extra=structured_extra(
                    LogComponent.COLLECT,
                    path=document,
                    details={"error": type(exc).__name__},
                ),
            )
            continue
        found = extract_records(frontmatter)
        records.extend(found)
        logger.debug(
            "Collected %d send(s) from %s",
            len(found),
            document,
            extra=structured_extra(LogComponent.COLLECT, path=document, counts={"records": len(found)}),
        )
    stats.records = len(records)
    return CollectionResult(records=records, stats=stats)


def collect_sends(root: Path) -> list[SendRecord]:
    """Return every send record under ``root`` in traversal order."""
    return collect_with_stats(root).records


__all__ = [
    "DOCUMENT_FILENAME",
    "CollectionResult",
    "CollectionStats",
    "ContentPathNotFoundError",
    "ContentWalkError",
    "collect_sends",
    "collect_with_stats",
    "is_document",
    "iter_documents",
]
