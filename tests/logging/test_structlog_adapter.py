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
"""Tests for StructlogAdapter — structlog rendering of pyfetch log records."""

import io
import json
import logging

import httpx
import pytest
import structlog

from pyfetch.core.config import Config
from pyfetch.logging.structlog_adapter import StructlogAdapter
from pyfetch.transport.adapters.httpx_adapter import HttpxTransportAdapter
from pyfetch.transport.types import TransportRequest


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def adapter(stream: io.StringIO):
    root = logging.getLogger()
    root_level = root.level
    adapter = StructlogAdapter(stream=stream)
    yield adapter
    adapter.close()
    root.setLevel(root_level)
    for name in ("pyfetch", "pyfetch.transport"):
        logging.getLogger(name).setLevel(logging.NOTSET)
    structlog.reset_defaults()


def _json_lines(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


def _pyfetch_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h.get_name() == "pyfetch"]


class TestStructlogAdapterConfigure:
    def test_defaults(self, adapter: StructlogAdapter):
        adapter.configure(Config({}))
        assert adapter.properties.format == "console"
        assert logging.getLogger().level == logging.INFO

    def test_root_level_and_per_logger_levels(self, adapter: StructlogAdapter):
        adapter.configure(
            Config({"pyfetch": {"logging": {"level": {"root": "warning", "pyfetch.transport": "debug"}}}})
        )
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("pyfetch.transport").level == logging.DEBUG

    def test_reconfigure_keeps_a_single_handler(self, adapter: StructlogAdapter, stream: io.StringIO):
        adapter.configure(Config({}))
        StructlogAdapter(stream=stream).configure(Config({}))
        adapter.configure(Config({}))
        assert len(_pyfetch_handlers()) == 1

    def test_close_detaches_handler(self, adapter: StructlogAdapter):
        adapter.configure(Config({}))
        adapter.close()
        assert _pyfetch_handlers() == []


class TestStructlogAdapterRendering:
    def test_structlog_events_render_as_json(self, adapter: StructlogAdapter, stream: io.StringIO):
        adapter.configure(Config({"pyfetch": {"logging": {"format": "json"}}}))
        adapter.get_logger("pyfetch.test").warning("cache_miss", key="users")

        [line] = [entry for entry in _json_lines(stream) if entry.get("event") == "cache_miss"]
        assert line["key"] == "users"
        assert line["level"] == "warning"
        assert line["logger"] == "pyfetch.test"

    def test_structlog_events_below_level_are_dropped(self, adapter: StructlogAdapter, stream: io.StringIO):
        adapter.configure(Config({"pyfetch": {"logging": {"format": "json", "level": {"root": "ERROR"}}}}))
        adapter.get_logger("pyfetch.test").info("quiet")
        assert all(entry.get("event") != "quiet" for entry in _json_lines(stream))

    @pytest.mark.asyncio
    async def test_transport_records_render_through_structlog(self, adapter: StructlogAdapter, stream: io.StringIO):
        adapter.configure(
            Config({"pyfetch": {"logging": {"format": "json", "level": {"root": "WARNING", "pyfetch": "DEBUG"}}}})
        )
        transport = HttpxTransportAdapter(transport=httpx.MockTransport(lambda request: httpx.Response(204)))

        reply = await transport.send(TransportRequest(method="GET", url="http://localhost/items"))
        async for _ in reply.stream:
            pass

        events = {
            entry["event"]: entry
            for entry in _json_lines(stream)
            if entry.get("logger") == "pyfetch.transport.adapters.httpx_adapter"
        }
        assert events["Sending GET http://localhost/items"]["level"] == "debug"
        assert "Received 204 for GET http://localhost/items" in events

    def test_console_format_writes_plain_lines(self, adapter: StructlogAdapter, stream: io.StringIO):
        adapter.configure(Config({}))
        logging.getLogger("pyfetch.test").warning("disk %s", "full")
        assert "disk full" in stream.getvalue()


class TestStructlogAdapterSetLevel:
    def test_set_level_updates_stdlib_logger(self, adapter: StructlogAdapter):
        adapter.set_level("pyfetch", "WARNING")
        assert logging.getLogger("pyfetch").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, adapter: StructlogAdapter):
        adapter.set_level("pyfetch", "chatty")
        assert logging.getLogger("pyfetch").level == logging.INFO
