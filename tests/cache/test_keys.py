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
"""Tests for storage key generation and validation."""

from __future__ import annotations

import pytest

from catbox_redis.cache.keys import ensure_cache_key, generate_key, validate_segment_name
from catbox_redis.cache.types import CacheKey
from catbox_redis.kernel.exceptions import InvalidKeyException, SegmentNameException


class TestGenerateKey:
    def test_with_partition(self):
        assert generate_key(CacheKey(segment="baz", id="bar"), partition="foo") == "foo:baz:bar"

    def test_without_partition(self):
        assert generate_key(CacheKey(segment="baz", id="bar")) == "baz:bar"

    def test_empty_partition_is_ignored(self):
        assert generate_key(CacheKey(segment="baz", id="bar"), partition="") == "baz:bar"

    def test_components_are_percent_encoded(self):
        key = CacheKey(segment="a b", id="x/y?z")
        assert generate_key(key, partition="p:1") == "p%3A1:a%20b:x%2Fy%3Fz"

    def test_unreserved_characters_kept(self):
        assert generate_key(CacheKey(segment="a-b_c.d", id="!~*'()")) == "a-b_c.d:!~*'()"

    def test_delimiter_in_parts_does_not_collide(self):
        first = generate_key(CacheKey(segment="a:b", id="c"))
        second = generate_key(CacheKey(segment="a", id="b:c"))
        assert first != second

    def test_non_ascii_encoded_as_utf8(self):
        assert generate_key(CacheKey(segment="s", id="é")) == "s:%C3%A9"


class TestEnsureCacheKey:
    def test_cache_key_passes_through(self):
        key = CacheKey(segment="s", id="i")
        assert ensure_cache_key(key) is key

    def test_mapping_coerced(self):
        assert ensure_cache_key({"segment": "s", "id": "i"}) == CacheKey(segment="s", id="i")

    @pytest.mark.parametrize(
        "key",
        [
            None,
            "s:i",
            {},
            {"segment": "s"},
            {"id": "i"},
            {"segment": "", "id": "i"},
            {"segment": "s", "id": ""},
            {"segment": "s", "id": 1},
            CacheKey(segment="s", id=""),
        ],
    )
    def test_invalid_keys_rejected(self, key):
        with pytest.raises(InvalidKeyException) as exc_info:
            ensure_cache_key(key)
        assert exc_info.value.code == "INVALID_KEY"


class TestValidateSegmentName:
    def test_empty_string(self):
        error = validate_segment_name("")
        assert isinstance(error, SegmentNameException)
        assert str(error) == "Empty string"

    def test_null_character(self):
        error = validate_segment_name("a\0b")
        assert isinstance(error, SegmentNameException)
        assert str(error) == "Includes null character"

    def test_non_string(self):
        error = validate_segment_name(42)
        assert isinstance(error, SegmentNameException)
        assert str(error) == "Not a string"

    def test_valid_name(self):
        assert validate_segment_name("valid") is None
