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

"""Frontmatter extraction for content documents.

A document's header is the text between the first two lines consisting solely
of ``---``. It is parsed as YAML with plain scalars kept as their source text,
then validated into a :class:`~sends.core.types.Frontmatter`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Final

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sends.core.types import Frontmatter
from sends.exceptions import SendsValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable

FRONTMATTER_DELIMITER: Final[str] = "---"


class FrontmatterError(SendsValidationError):
    """Raised when a document's frontmatter cannot be used."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        location = f"{path}: " if path is not None else ""
        super().__init__(f"{location}{reason}")


class FrontmatterReadError(FrontmatterError):
    """Raised when a document cannot be opened or decoded."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.error = error
        super().__init__(path, f"unable to read document ({error})")


class FrontmatterNotFoundError(FrontmatterError):
    """Raised when a document lacks the two ``---`` delimiter lines."""

    def __init__(self, path: Path | None) -> None:
        super().__init__(path, "frontmatter delimiters not found")


class FrontmatterSyntaxError(FrontmatterError):
    """Raised when the header text is not valid YAML."""

    def __init__(self, path: Path | None, error: yaml.YAMLError) -> None:
        self.error = error
        super().__init__(path, f"invalid YAML frontmatter ({error})")


class FrontmatterFieldError(FrontmatterError):
    """Raised when header fields have the wrong shape (e.g. ``sends`` is not a list)."""

    def __init__(self, path: Path | None, error: ValidationError) -> None:
        self.error = error
        locations = {".".join(str(part) for part in item["loc"]) or "<root>" for item in error.errors()}
        fields = ", ".join(sorted(locations))
        super().__init__(path, f"invalid frontmatter fields: {fields}")


class _RawScalarLoader(yaml.SafeLoader):
    """Safe loader that leaves plain scalars as the text they were written as."""


def _construct_raw_scalar(loader: yaml.SafeLoader, node: yaml.Node) -> str:
    return str(loader.construct_scalar(node))  # type: ignore[arg-type]


for _tag in ("bool", "int", "float", "timestamp"):
    _RawScalarLoader.add_constructor(f"tag:yaml.org,2002:{_tag}", _construct_raw_scalar)


class FrontmatterModel(BaseModel):
    """Pydantic model validating the header fields sends cares about.

    Attributes:
        date: Document date, verbatim; ``""`` when absent or null.
        sends: Send strings in document order; null items become ``""``.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    date: str = ""
    sends: list[str] = Field(default_factory=list)

    @field_validator("date", mode="before")
    @classmethod
    def _null_date(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("sends", mode="before")
    @classmethod
    def _null_sends(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, list):
            return ["" if item is None else item for item in value]
        return value


def split_frontmatter(lines: Iterable[str]) -> str | None:
    """Return the text between the first two delimiter lines.

    Lines before the first delimiter are ignored. Returns ``None`` when fewer
    than two delimiters are present.
    """
    collected: list[str] = []
    inside = False
    for raw_line in lines:
        line = raw_line.rstrip("\n")
        if line == FRONTMATTER_DELIMITER:
            if inside:
                return "\n".join(collected)
            inside = True
            continue
        if inside:
            collected.append(line)
    return None


def parse_frontmatter(text: str, *, path: Path | None = None) -> Frontmatter:
    """Parse header YAML into a :class:`Frontmatter`.

    Raises:
        FrontmatterSyntaxError: If the YAML cannot be parsed.
        FrontmatterFieldError: If ``date`` or ``sends`` have the wrong type.
    """
    try:
        raw = yaml.load(text, Loader=_RawScalarLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        raise FrontmatterSyntaxError(path, exc) from exc
    try:
        model = FrontmatterModel.model_validate({} if raw is None else raw)
    except ValidationError as exc:
        raise FrontmatterFieldError(path, exc) from exc
    return Frontmatter(date=model.date, sends=tuple(model.sends))


def read_frontmatter(path: Path) -> Frontmatter:
    """Read and parse the frontmatter of the document at ``path``.

    Raises:
        FrontmatterReadError: If the file cannot be opened or decoded.
        FrontmatterNotFoundError: If the header delimiters are missing.
        FrontmatterSyntaxError: If the header is not valid YAML.
        FrontmatterFieldError: If header fields have the wrong type.
    """
    try:
        with Path(path).open(encoding="utf-8") as handle:
            header = split_frontmatter(handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise FrontmatterReadError(path, exc) from exc
    if header is None:
        raise FrontmatterNotFoundError(path)
    return parse_frontmatter(header, path=path)


__all__ = [
    "FRONTMATTER_DELIMITER",
    "FrontmatterError",
    "FrontmatterFieldError",
    "FrontmatterModel",
    "FrontmatterNotFoundError",
    "FrontmatterReadError",
    "FrontmatterSyntaxError",
    "parse_frontmatter",
    "read_frontmatter",
    "split_frontmatter",
]
