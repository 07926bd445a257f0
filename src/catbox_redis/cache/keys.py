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
"""Storage key generation and key/segment validation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from catbox_redis.cache.types import CacheKey
from catbox_redis.kernel.exceptions import InvalidKeyException, SegmentNameException

KEY_DELIMITER = ":"

# Characters left unescaped, matching JavaScript's encodeURIComponent.
_SAFE_CHARS = "!*'()"


def encode_component(value: str) -> str:
    """Percent-encode one key component so it can never contain the delimiter."""
    return quote(value, safe=_SAFE_CHARS)


def generate_key(key: CacheKey, partition: str | None = None) -> str:
    """Build the flat storage key ``[partition:]segment:id``.

    >>> generate_key(CacheKey(segment="baz", id="bar"), partition="foo")
    'foo:baz:bar'
    """
    parts: list[str] = []
    if partition:
        parts.append(encode_component(partition))
    parts.append(encode_component(key.segment))
    parts.append(encode_component(key.id))
    return KEY_DELIMITER.join(parts)


def ensure_cache_key(key: Any) -> CacheKey:
    """Coerce *key* to a CacheKey, raising InvalidKeyException if it is malformed.

    Accepts a CacheKey or any mapping with ``segment`` and ``id`` entries.
    Both parts must be non-empty strings.
    """
    if isinstance(key, CacheKey):
        segment, key_id = key.segment, key.id
    elif isinstance(key, Mapping):
        segment, key_id = key.get("segment"), key.get("id")
    else:
        raise InvalidKeyException(context={"key": key})

    if not isinstance(segment, str) or not segment:
        raise InvalidKeyException("Invalid key segment", context={"key": key})
    if not isinstance(key_id, str) or not key_id:
        raise InvalidKeyException("Invalid key id", context={"key": key})

    return key if isinstance(key, CacheKey) else CacheKey(segment=segment, id=key_id)


def validate_segment_name(name: Any) -> SegmentNameException | None:
    """Return an error describing why *name* is unusable, or None if it is valid.

    The error is returned, not raised, so the caller decides how to report it.
    """
    if not name:
        return SegmentNameException("Empty string")
    if not isinstance(name, str):
        return SegmentNameException("Not a string")
    if "\0" in name:
        return SegmentNameException("Includes null character")
    return None
