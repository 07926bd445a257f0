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
"""Redis-backed cache adapter."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from catbox_redis.cache.adapters.connection import RedisConnection
from catbox_redis.cache.envelope import decode_envelope, encode_envelope
from catbox_redis.cache.keys import ensure_cache_key, generate_key, validate_segment_name
from catbox_redis.cache.ports.outbound import StorageClient
from catbox_redis.cache.types import CacheKey, ConnectionStatus, Envelope
from catbox_redis.kernel.exceptions import NotConnectedException

_logger = logging.getLogger(__name__)

DEFAULT_URL = "redis://localhost:6379/0"


class RedisCacheAdapter:
    """Cache store that persists envelopes in Redis.

    Two ownership modes:

    * ``client`` given: the connection belongs to the caller. ``start()``
      connects it if it is still waiting, ``stop()`` leaves it open.
    * no ``client``: ``start()`` creates one through ``client_factory``
      (by default a :class:`RedisConnection` for ``url``) and ``stop()``
      closes it and clears :attr:`client`.

    Concurrent ``start()`` calls share a single connect attempt.
    """

    def __init__(
        self,
        client: StorageClient | None = None,
        partition: str | None = None,
        *,
        url: str = DEFAULT_URL,
        client_factory: Callable[[], StorageClient] | None = None,
    ) -> None:
        self._client = client
        self._owns_client = client is None
        self._partition = partition
        self._client_factory = client_factory or (lambda: RedisConnection.from_url(url))
        self._connecting: asyncio.Future[None] | None = None

    @property
    def client(self) -> StorageClient | None:
        return self._client

    @property
    def partition(self) -> str | None:
        return self._partition

    @property
    def owns_client(self) -> bool:
        return self._owns_client

    # -- lifecycle -----------------------------------------------------------

    async def start(self) -> None:
        """Connect the handle if it has not been connected yet."""
        pending = self._connecting
        if pending is None or pending.done():
            if self._client is None:
                self._client = self._client_factory()
            if self._client.status != ConnectionStatus.WAIT:
                return
            pending = self._connecting = asyncio.ensure_future(self._connect(self._client))
        await asyncio.shield(pending)

    async def _connect(self, client: StorageClient) -> None:
        try:
            await client.connect()
        except Exception as exc:
            _logger.warning("Cache connection failed: %s", exc)
            raise
        _logger.info("Cache connection ready (partition=%s)", self._partition)

    async def stop(self) -> None:
        """Close and release the connection if this adapter created it."""
        if not self._owns_client or self._client is None:
            return
        pending, self._connecting = self._connecting, None
        if pending is not None and not pending.done():
            # Let an in-flight start() finish before its handle is closed.
            await asyncio.wait([pending])
        client, self._client = self._client, None
        await client.close()  # type: ignore[attr-defined]
        _logger.info("Cache connection closed")

    def is_ready(self) -> bool:
        return self._client is not None and self._client.status == ConnectionStatus.READY

    # -- keys ----------------------------------------------------------------

    def validate_segment_name(self, name: str) -> Exception | None:
        return validate_segment_name(name)

    def generate_key(self, key: CacheKey) -> str:
        return generate_key(key, self._partition)

    # -- operations ----------------------------------------------------------

    async def get(self, key: CacheKey | None) -> Envelope | None:
        """Fetch and decode the envelope stored for *key*.

        Returns None for a None key or when nothing is stored. Malformed
        stored data raises EnvelopeException.
        """
        if key is None:
            return None
        storage_key = self._storage_key(key)
        raw = await self._client.get(storage_key)  # type: ignore[union-attr]
        envelope = decode_envelope(raw)
        if envelope is None:
            _logger.debug("Cache miss for '%s'", storage_key)
        return envelope

    async def set(self, key: CacheKey, value: Any, ttl: int) -> None:
        """Store *value* for *ttl* milliseconds. A non-positive ttl stores nothing."""
        storage_key = self._storage_key(key)
        if ttl <= 0:
            _logger.debug("Skipping set for '%s' with non-positive ttl %s", storage_key, ttl)
            return
        payload = encode_envelope(value, ttl)
        await self._client.set(storage_key, payload, ex=max(1, int(ttl // 1000)))  # type: ignore[union-attr]

    async def drop(self, key: CacheKey) -> None:
        """Delete *key*. Dropping a missing key is not an error."""
        storage_key = self._storage_key(key)
        await self._client.delete(storage_key)  # type: ignore[union-attr]

    def _storage_key(self, key: Any) -> str:
        """Check readiness, then validate *key* and build its storage key."""
        if not self.is_ready():
            raise NotConnectedException()
        return self.generate_key(ensure_cache_key(key))
