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
"""catbox-redis kernel — exceptions and lifecycle protocol."""

from catbox_redis.kernel.exceptions import (
    CatboxException,
    ConnectionStateException,
    DataIntegrityException,
    EnvelopeException,
    InfrastructureException,
    InvalidKeyException,
    NotConnectedException,
    SegmentNameException,
    ValidationException,
)
from catbox_redis.kernel.lifecycle import Lifecycle

__all__ = [
    "CatboxException",
    "ConnectionStateException",
    "DataIntegrityException",
    "EnvelopeException",
    "InfrastructureException",
    "InvalidKeyException",
    "Lifecycle",
    "NotConnectedException",
    "SegmentNameException",
    "ValidationException",
]
