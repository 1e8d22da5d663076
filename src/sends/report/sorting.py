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

"""Shared ordering applied to records before any report is rendered."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sends.grades import sort_key

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sends.core.types import SendRecord


def sort_sends(records: Iterable[SendRecord]) -> list[SendRecord]:
    """Return records ordered by grade key, then color.

    The sort is stable: records with equal keys keep their traversal order.
    """
    return sorted(records, key=sort_key)


__all__ = ["sort_sends"]
