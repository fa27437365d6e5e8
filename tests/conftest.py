# Copyright 2025 iGenius S.p.A
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

import threading
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from dependency_gate.config.gate import (
    CORE_DATA_SERVICE_KEY,
    CORE_METADATA_SERVICE_KEY,
    ClientEndpointConfig,
    GateConfig,
)
from dependency_gate.platform.protocols import AvailabilityOutcome


class FakeTimer:
    """Virtual-time timer: sleeping advances the clock instantly."""

    def __init__(self, duration: float, interval: float):
        self.duration = duration
        self.interval = interval
        self.t = 0.0
        self.sleep_calls = 0

    def has_not_elapsed(self) -> bool:
        return self.t < self.duration

    def sleep_for_interval(self) -> None:
        self.sleep_calls += 1
        self.t += self.interval


class FakeTimerConfig:
    """Hands out one FakeTimer per prober and keeps them for inspection."""

    def __init__(self, duration: float = 5, interval: float = 1):
        self.duration = duration
        self.interval = interval
        self.timers: list[FakeTimer] = []
        self._lock = threading.Lock()

    def new_timer(self) -> FakeTimer:
        timer = FakeTimer(self.duration, self.interval)
        with self._lock:
            self.timers.append(timer)
        return timer


class ScriptedStrategy:
    """Returns outcomes from a per-service script; the last item repeats."""

    def __init__(self, scripts: dict[str, list]):
        self.scripts = {k: list(v) for k, v in scripts.items()}
        self.calls: dict[str, int] = {k: 0 for k in scripts}
        self._lock = threading.Lock()

    def check(self, service_key: str) -> AvailabilityOutcome:
        with self._lock:
            n = self.calls.get(service_key, 0)
            self.calls[service_key] = n + 1
        script = self.scripts[service_key]
        item = script[min(n, len(script) - 1)]
        if isinstance(item, Exception):
            raise item
        return item


class CountingHttpGet:
    """Thread-safe http_get fake keyed by URL prefix.

    Each route maps to a sequence of status codes or exceptions; the last
    item repeats once the sequence is exhausted.
    """

    def __init__(self, routes: dict[str, list]):
        self.routes = routes
        self.calls: list[tuple[str, float]] = []
        self._counts: dict[str, int] = {}
        self._lock = threading.Lock()

    def __call__(self, url, timeout=None, headers=None):
        prefix = next(p for p in self.routes if url.startswith(p))
        with self._lock:
            self.calls.append((url, timeout))
            n = self._counts.get(prefix, 0)
            self._counts[prefix] = n + 1
        seq = self.routes[prefix]
        item = seq[min(n, len(seq) - 1)]
        if isinstance(item, Exception):
            raise item
        return SimpleNamespace(status_code=int(item))

    def count(self, prefix: str) -> int:
        return self._counts.get(prefix, 0)


@pytest.fixture
def fake_timer_config():
    return FakeTimerConfig(duration=5, interval=1)


@pytest.fixture
def mock_logger():
    return MagicMock()


@pytest.fixture
def gate_config() -> GateConfig:
    return GateConfig(
        clients={
            CORE_METADATA_SERVICE_KEY: ClientEndpointConfig(host="meta.local", port=59881),
            CORE_DATA_SERVICE_KEY: ClientEndpointConfig(host="data.local", port=59880),
        }
    )


@pytest.fixture(autouse=True)
def clear_settings_cache_between_tests():
    from dependency_gate.config.settings import reload_settings_cache

    # before each test
    reload_settings_cache()
    yield
    # after each test (optional)
    reload_settings_cache()


@pytest.fixture
def make_strategy():
    return ScriptedStrategy


@pytest.fixture
def make_http_get():
    return CountingHttpGet


@pytest.fixture
def make_timer_config():
    return FakeTimerConfig
