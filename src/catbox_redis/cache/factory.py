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
"""Build a cache adapter from configuration."""

from __future__ import annotations

from catbox_redis.cache.adapters.connection import RedisConnection
from catbox_redis.cache.adapters.redis import RedisCacheAdapter
from catbox_redis.cache.ports.outbound import StorageClient
from catbox_redis.config.properties.cache import CacheProperties
from catbox_redis.core.config import Config
from catbox_redis.logging.port import LoggingPort


def create_cache_adapter(
    config: Config,
    client: StorageClient | None = None,
    logging_port: LoggingPort | None = None,
) -> RedisCacheAdapter:
    """Create a RedisCacheAdapter configured from ``catbox.cache.*``.

    With *client* the adapter uses the caller's connection and never closes
    it. Without one, the adapter opens its own connection to
    ``catbox.cache.url`` on start() and closes it on stop().

    If *logging_port* is given it is configured from ``catbox.logging.*``
    first.
    """
    if logging_port is not None:
        logging_port.configure(config)

    props = config.bind(CacheProperties)
    partition = props.partition or None

    if client is not None:
        return RedisCacheAdapter(client=client, partition=partition)

    url = props.url
    return RedisCacheAdapter(partition=partition, client_factory=lambda: RedisConnection.from_url(url))
