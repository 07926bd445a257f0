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
"""Tests for building a cache adapter from configuration."""

from __future__ import annotations

import logging
import os

from catbox_redis.cache.adapters.connection import RedisConnection
from catbox_redis.cache.factory import create_cache_adapter
from catbox_redis.cache.types import CacheKey
from catbox_redis.core.config import Config
from catbox_redis.logging.port import LoggingPort
from catbox_redis.logging.structlog_adapter import StructlogAdapter


class StubConnection:
    status = "ready"

    async def connect(self) -> None:
        pass

    async def get(self, key: str) -> str | None:
        return None

    async def set(self, key: str, value: str, ex: int | None = None) -> None:
        pass

    async def delete(self, key: str) -> int:
        return 0


class TestCreateCacheAdapter:
    def test_defaults(self):
        adapter = create_cache_adapter(Config({}))
        assert adapter.owns_client is True
        assert adapter.partition is None
        assert adapter.client is None

    def test_partition_from_config(self):
        adapter = create_cache_adapter(Config({"catbox": {"cache": {"partition": "foo"}}}))
        assert adapter.partition == "foo"
        assert adapter.generate_key(CacheKey(segment="baz", id="bar")) == "foo:baz:bar"

    def test_injected_client_is_not_owned(self):
        client = StubConnection()
        adapter = create_cache_adapter(Config({}), client=client)
        assert adapter.client is client
        assert adapter.owns_client is False
        assert adapter.is_ready() is True

    def test_owned_connection_uses_configured_url(self):
        adapter = create_cache_adapter(Config({"catbox": {"cache": {"url": "redis://cache.internal:6390/3"}}}))
        conn = adapter._client_factory()
        assert isinstance(conn, RedisConnection)
        kwargs = conn.client.connection_pool.connection_kwargs
        assert kwargs["host"] == "cache.internal"
        assert kwargs["port"] == 6390

    def test_env_var_overrides_partition(self):
        os.environ["CATBOX_CACHE_PARTITION"] = "from-env"
        try:
            adapter = create_cache_adapter(Config({"catbox": {"cache": {"partition": "from-file"}}}))
            assert adapter.partition == "from-env"
        finally:
            del os.environ["CATBOX_CACHE_PARTITION"]


class RecordingLogging:
    def __init__(self) -> None:
        self.configured: list[Config] = []
        self.levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        self.configured.append(config)

    def set_level(self, name: str, level: str) -> None:
        self.levels[name] = level


class TestCreateCacheAdapterLogging:
    def test_recording_port_satisfies_logging_port(self):
        assert isinstance(RecordingLogging(), LoggingPort)

    def test_logging_port_configured_from_same_config(self):
        port = RecordingLogging()
        config = Config({"catbox": {"logging": {"format": "json"}}})
        create_cache_adapter(config, logging_port=port)
        assert port.configured == [config]

    def test_structlog_adapter_applies_cache_logger_level(self):
        config = Config({"catbox": {"logging": {"level": {"catbox_redis.cache.factory_test": "error"}}}})
        create_cache_adapter(config, logging_port=StructlogAdapter())
        assert logging.getLogger("catbox_redis.cache.factory_test").level == logging.ERROR

    def test_logging_port_is_optional(self):
        adapter = create_cache_adapter(Config({}))
        assert adapter.owns_client is True
