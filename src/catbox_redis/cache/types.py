# Copyright 2026 Firefly Software Solutions Inc.
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
"""Value types shared by the cache adapter and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ConnectionStatus(str, Enum):
    """Status values reported by a connection handle.

    Members compare equal to their plain string values, so handles that
    report bare strings are understood as well.
    """

    WAIT = "wait"
    CONNECTING = "connecting"
    READY = "ready"
    CLOSE = "close"
    END = "end"


@dataclass(frozen=True)
class CacheKey:
    """Caller-supplied key identifying a cached value within a segment."""

    segment: str
    id: str


@dataclass(frozen=True)
class Envelope:
    """Stored record wrapping a cached value.

    Attributes:
        item: The cached value. May legitimately be ``0``, ``False`` or ``""``.
        stored: Write time in epoch milliseconds.
        ttl: Time-to-live in milliseconds as requested by the caller.
    """

    item: Any
    stored: Any
    ttl: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"item": self.item, "stored": self.stored, "ttl": self.ttl}
