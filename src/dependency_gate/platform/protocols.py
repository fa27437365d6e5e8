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

from enum import Enum
from typing import Protocol, runtime_checkable


class AvailabilityOutcome(str, Enum):
    """Result of a single availability check for one service."""

    AVAILABLE = "AVAILABLE"
    UNAVAILABLE = "UNAVAILABLE"  # transient, keep polling
    CONFIG_ERROR = "CONFIG_ERROR"  # fatal, do not retry


class ProbeOutcome(str, Enum):
    """Terminal state of a service prober."""

    AVAILABLE = "AVAILABLE"
    CANCELLED = "CANCELLED"
    TIMED_OUT = "TIMED_OUT"
    MISCONFIGURED = "MISCONFIGURED"
    FAILED = "FAILED"  # the strategy raised


@runtime_checkable
class RegistryClient(Protocol):
    """Read-only view of a service registry.

    ``is_service_available`` returns ``True`` when the service is registered
    and healthy and raises ``RegistryError`` otherwise.
    """

    def is_alive(self) -> bool: ...

    def is_service_available(self, service_key: str) -> bool: ...


@runtime_checkable
class AvailabilityStrategy(Protocol):
    """Checks once whether a service is reachable."""

    def check(self, service_key: str) -> AvailabilityOutcome: ...


@runtime_checkable
class Timer(Protocol):
    """Deadline plus poll interval, queried by a single prober."""

    def has_not_elapsed(self) -> bool: ...

    def sleep_for_interval(self) -> None: ...


class TimerFactory(Protocol):
    def new_timer(self) -> Timer: ...
