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

from dataclasses import dataclass, field
import time
from typing import Callable

from dependency_gate.config.gate import GateConfig


class StartupTimer:
    """Deadline and poll interval for one prober.

    The start time is captured at construction from a monotonic clock, so a
    timer must not be shared between probers: build one per worker through
    ``TimerConfig.new_timer``.
    """

    def __init__(
        self,
        duration_s: float,
        interval_s: float,
        *,
        now: Callable[[], float] = time.monotonic,  # injectable clock
        sleep: Callable[[float], None] = time.sleep,  # injectable sleeper
    ):
        self.duration_s = duration_s
        self.interval_s = interval_s
        self._now = now
        self._sleep = sleep
        self._start = now()

    def remaining(self) -> float:
        return max(0.0, self._start + self.duration_s - self._now())

    def has_not_elapsed(self) -> bool:
        return self._now() < self._start + self.duration_s

    def sleep_for_interval(self) -> None:
        self._sleep(self.interval_s)

    def __repr__(self) -> str:
        return (
            f"StartupTimer(duration_s={self.duration_s}, interval_s={self.interval_s}, "
            f"remaining={self.remaining():.1f})"
        )


@dataclass(frozen=True)
class TimerConfig:
    duration_s: float
    interval_s: float
    now: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False, compare=False)

    def __post_init__(self):
        if self.duration_s <= 0:
            raise ValueError("duration_s must be > 0")
        if self.interval_s <= 0:
            raise ValueError("interval_s must be > 0")

    def new_timer(self) -> StartupTimer:
        return StartupTimer(self.duration_s, self.interval_s, now=self.now, sleep=self.sleep)

    @classmethod
    def from_config(cls, config: GateConfig) -> "TimerConfig":
        """Build from the YAML startup section, falling back to EDGEX_STARTUP_*."""
        return cls(duration_s=config.startup_duration(), interval_s=config.startup_interval())
