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
"""Envelope codec: the JSON record stored for every cached value.

Wire format::

    {"item": <value>, "stored": <epoch ms>, "ttl": <ms>}
"""

from __future__ import annotations

import json
import time
from typing import Any

from catbox_redis.cache.types import Envelope
from catbox_redis.kernel.exceptions import EnvelopeException

BAD_CONTENT = "Bad envelope content"
BAD_STRUCTURE = "Incorrect envelope structure"


def now_millis() -> int:
    return int(time.time() * 1000)


def encode_envelope(value: Any, ttl: int, stored: int | None = None) -> str:
    """Serialize *value* with its write timestamp and TTL.

    Errors from the JSON encoder (circular references, unsupported types)
    propagate unchanged. Values come back as JSON types: tuples are read
    back as lists and non-string dict keys as strings.
    """
    envelope = Envelope(item=value, stored=stored if stored is not None else now_millis(), ttl=ttl)
    return json.dumps(envelope.to_dict())


def decode_envelope(raw: str | bytes | None) -> Envelope | None:
    """Parse a stored envelope.

    Returns None when nothing is stored. Raises EnvelopeException when the
    stored text is not JSON, or when it lacks an ``item`` field or a truthy
    ``stored`` timestamp. ``item`` is checked by presence, so falsy values
    such as ``0``, ``False`` and ``""`` are valid.
    """
    if not raw:
        return None

    try:
        parsed = json.loads(raw)
    except (ValueError, TypeError):
        parsed = None

    if not parsed:
        raise EnvelopeException(BAD_CONTENT, code="BAD_ENVELOPE")

    if not isinstance(parsed, dict) or "item" not in parsed or not parsed.get("stored"):
        raise EnvelopeException(BAD_STRUCTURE, code="ENVELOPE_STRUCTURE")

    return Envelope(item=parsed["item"], stored=parsed["stored"], ttl=parsed.get("ttl"))
