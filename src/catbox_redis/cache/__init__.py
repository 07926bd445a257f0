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
"""catbox-redis cache — Redis storage adapter for a caching façade."""

from catbox_redis.cache.adapters.connection import RedisConnection
from catbox_redis.cache.adapters.redis import RedisCacheAdapter
from catbox_redis.cache.envelope import decode_envelope, encode_envelope
from catbox_redis.cache.factory import create_cache_adapter
from catbox_redis.cache.keys import ensure_cache_key, generate_key, validate_segment_name
from catbox_redis.cache.ports.outbound import CacheStore, StorageClient
from catbox_redis.cache.types import CacheKey, ConnectionStatus, Envelope

__all__ = [
    "CacheKey",
    "CacheStore",
    "ConnectionStatus",
    "Envelope",
    "RedisCacheAdapter",
    "RedisConnection",
    "StorageClient",
    "create_cache_adapter",
    "decode_envelope",
    "encode_envelope",
    "ensure_cache_key",
    "generate_key",
    "validate_segment_name",
]
