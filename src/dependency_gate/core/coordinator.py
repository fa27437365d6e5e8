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

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
import logging
import threading

from dependency_gate.core.prober import probe_service
from dependency_gate.helpers.logger import setup_logger
from dependency_gate.platform.protocols import AvailabilityStrategy, ProbeOutcome, TimerFactory

_logger = setup_logger(__name__)


def check_all(
    cancel: threading.Event,
    service_keys: Iterable[str],
    timer_config: TimerFactory,
    strategy: AvailabilityStrategy,
    *,
    logger: logging.Logger | None = None,
) -> bool:
    """Probe every service concurrently and return True only if all are available.

    One worker per service, each with its own timer built from *timer_config*.
    The join waits for every worker: a failing service does not stop the
    others from polling until their own deadline.
    """
    logger = logger or _logger
    keys = list(dict.fromkeys(service_keys))
    if not keys:
        return True

    def _worker(service_key: str) -> ProbeOutcome:
        return probe_service(
            service_key, cancel, timer_config.new_timer(), strategy, logger=logger
        )

    outcomes: dict[str, ProbeOutcome] = {}
    with ThreadPoolExecutor(max_workers=len(keys), thread_name_prefix="dependency-probe") as exe:
        futures = {exe.submit(_worker, key): key for key in keys}
        for future in as_completed(futures):
            key = futures[future]
            try:
                outcomes[key] = future.result()
            except Exception as e:
                logger.error(f"dependency {key} service checking failed: {e}")
                outcomes[key] = ProbeOutcome.FAILED

    logger.debug(
        "dependency check outcomes: "
        + ", ".join(f"{key}={outcomes[key].value}" for key in keys)
    )
    return all(outcome is ProbeOutcome.AVAILABLE for outcome in outcomes.values())
