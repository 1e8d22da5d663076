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

"""Record types passed between the extractor, collector and reporter."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class SendRecord:
    """A single logged send.

    Attributes:
        color: Free text before the grade token (name or attempt notes); may be empty.
        grade: Raw grade token as written; never empty.
        meta: Free text after the grade token; may be empty.
        date: Date string of the owning document, kept verbatim.
    """

    color: str
    grade: str
    meta: str = ""
    date: str = ""

    @property
    def text(self) -> str:
        """Return the send as it is printed in list mode."""
        return f"{self.color}{self.grade}{self.meta}"


@dataclass(slots=True, frozen=True)
class Frontmatter:
    """Fields read from a document's frontmatter header."""

    date: str = ""
    sends: tuple[str, ...] = field(default_factory=tuple)


__all__ = ["Frontmatter", "SendRecord"]
