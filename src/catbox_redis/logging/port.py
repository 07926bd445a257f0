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
"""LoggingPort — how a cache adapter's log output gets configured.

create_cache_adapter() hands the ``catbox.logging`` settings to a
LoggingPort before the adapter is built, so connection and cache-miss
records from ``catbox_redis.*`` loggers follow the configured levels
and format.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from catbox_redis.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """Configures log output for the ``catbox_redis`` loggers."""

    def configure(self, config: Config) -> None:
        """Apply ``catbox.logging.level.*`` and ``catbox.logging.format``."""
        ...

    def set_level(self, name: str, level: str) -> None: ...
