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

import logging
import threading

from dependency_gate.helpers.logger import setup_logger
from dependency_gate.platform.protocols import (
    AvailabilityOutcome,
    AvailabilityStrategy,
    ProbeOutcome,
    Timer,
)

_logger = setup_logger(__name__)


def probe_service(
    service_key: str,
    cancel: threading.Event,
    timer: Timer,
    strategy: AvailabilityStrategy,
    *,
    logger: logging.Logger | None = None,
) -> ProbeOutcome:
    """Poll *strategy* for *service_key* until it succeeds, the timer elapses
    or *cancel* is set.

    Cancellation is observed before each attempt; an attempt already in flight
    runs to its own timeout.
    """
    logger = logger or _logger

    while timer.has_not_elapsed():
        if cancel.is_set():
            logger.warning(f"dependency {service_key} service checking cancelled")
            return ProbeOutcome.CANCELLED

        outcome = strategy.check(service_key)
        if outcome is AvailabilityOutcome.AVAILABLE:
            return ProbeOutcome.AVAILABLE
        if outcome is AvailabilityOutcome.CONFIG_ERROR:
            logger.error(f"dependency {service_key} service is misconfigured, giving up")
            return ProbeOutcome.MISCONFIGURED

        timer.sleep_for_interval()

    logger.error(f"dependency {service_key} service checking time out")
    return ProbeOutcome.TIMED_OUT
