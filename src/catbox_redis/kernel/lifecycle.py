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
"""Lifecycle protocol for cache adapters.

The owner of an adapter calls start() before the first cache operation and
stop() at shutdown. Adapters that own their connection release it in stop();
adapters handed a caller-owned connection leave it alone.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Lifecycle(Protocol):
    """Standard start/stop lifecycle."""

    async def start(self) -> None:
        """Establish the connection.

        Must be safe to call repeatedly and concurrently. If the connection
        fails, the exception propagates to every caller awaiting it.
        """
        ...

    async def stop(self) -> None:
        """Release resources owned by the adapter."""
        ...
