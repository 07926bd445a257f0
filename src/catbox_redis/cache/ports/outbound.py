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
"""Cache ports — the storage client the adapter drives and the contract it offers."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from catbox_redis.cache.types import Envelope


@runtime_checkable
class StorageClient(Protocol):
    """Connection handle to the remote key-value store.

    ``status`` reports a ConnectionStatus value (or its plain string):
    ``wait`` before connecting, ``ready`` once connected.
    """

    status: Any

    async def connect(self) -> None: ...

    async def get(self, key: str) -> str | bytes | None: ...

    async def set(self, key: str, value: str, ex: int | None = None) -> Any: ...

    async def delete(self, key: str) -> int | None: ...


@runtime_checkable
class CacheStore(Protocol):
    """Storage contract offered to a caching façade.

    The façade computes expiration and segment policy; the store only
    persists envelopes under flat keys.
    """

    async def start(self) -> None: ...

    async def stop(self) -> None: ...

    def is_ready(self) -> bool: ...

    def validate_segment_name(self, name: str) -> Exception | None: ...

    async def get(self, key: Any) -> Envelope | None: ...

    async def set(self, key: Any, value: Any, ttl: int) -> None: ...

    async def drop(self, key: Any) -> None: ...
