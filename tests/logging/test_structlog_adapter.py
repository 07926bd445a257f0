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
"""Tests for StructlogAdapter."""

import logging

from catbox_redis.core.config import Config
from catbox_redis.logging.structlog_adapter import StructlogAdapter


class TestStructlogAdapter:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"

    def test_configure_reads_levels_and_format(self):
        adapter = StructlogAdapter()
        config = Config(
            {
                "catbox": {
                    "logging": {
                        "level": {"root": "debug", "catbox_redis.cache": "warning"},
                        "format": "JSON",
                    }
                }
            }
        )
        adapter.configure(config)
        assert adapter._root_level == "DEBUG"
        assert adapter._format == "json"
        assert logging.getLogger("catbox_redis.cache").level == logging.WARNING

    def test_set_level(self):
        adapter = StructlogAdapter()
        adapter.set_level("catbox_redis.test", "ERROR")
        assert logging.getLogger("catbox_redis.test").level == logging.ERROR

    def test_get_logger(self):
        logger = StructlogAdapter().get_logger("catbox_redis.test")
        assert logger is not None

    def test_stdlib_records_are_rendered(self, capsys):
        adapter = StructlogAdapter()
        adapter.configure(Config({"catbox": {"logging": {"format": "json"}}}))
        logging.getLogger("catbox_redis.rendering").info("Cache connection ready")
        out = capsys.readouterr().out
        assert "Cache connection ready" in out
