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
"""Redis connection handle exposing a status observable."""

from __future__ import annotations

import logging
from typing import Any

import redis.asyncio as aioredis

from catbox_redis.cache.types import ConnectionStatus
from catbox_redis.kernel.exceptions import ConnectionStateException

_logger = logging.getLogger(__name__)


class RedisConnection:
    """Wraps a ``redis.asyncio.Redis`` client and tracks its connection status.

    The underlying client connects lazily; ``connect()`` forces the first
    round trip with a PING so that ``status`` only reports ``ready`` once the
    server has answered. A failed connect returns the handle to ``wait``.
    """

    def __init__(self, client: Any) -> None:
        self._client = client
        self._status = ConnectionStatus.WAIT

    @classmethod
    def from_url(cls, url: str, **options: Any) -> RedisConnection:
        return cls(aioredis.from_url(url, **options))

    @property
    def status(self) -> ConnectionStatus:
        return self._status

    @property
    def client(self) -> Any:
        return self._client

    async def connect(self) -> None:
        if self._status is not ConnectionStatus.WAIT:
            raise ConnectionStateException(
                f"Redis is already {self._status.value}",
                context={"status": self._status.value},
            )
        self._status = ConnectionStatus.CONNECTING
        try:
            await self._client.ping()
        except Exception:
            self._status = ConnectionStatus.WAIT
            raise
        self._status = ConnectionStatus.READY

    async def close(self) -> None:
        """Close the underlying client. Safe to call more than once."""
        if self._status is ConnectionStatus.END:
            return
        self._status = ConnectionStatus.CLOSE
        try:
            await self._client.aclose()
        finally:
            self._status = ConnectionStatus.END

    async def get(self, key: str) -> str | bytes | None:
        return await self._client.get(key)

    async def set(self, key: str, value: str, ex: int | None = None) -> Any:
        return await self._client.set(key, value, ex=ex)

    async def delete(self, key: str) -> int | None:
        return await self._client.delete(key)
