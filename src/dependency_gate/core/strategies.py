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

"""The two ways of telling whether an upstream service is up.

``RegistryCheck`` asks the service registry, ``PingCheck`` calls the service
ping route directly. ``select_strategy`` picks one for a whole readiness
check; strategies are never mixed within a check.
"""

from dataclasses import dataclass, field
import logging
from typing import Callable

import requests

from dependency_gate.config.gate import GateConfig
from dependency_gate.helpers.logger import setup_logger
from dependency_gate.platform.http_probe import is_success, ping
from dependency_gate.platform.protocols import (
    AvailabilityOutcome,
    AvailabilityStrategy,
    RegistryClient,
)

_logger = setup_logger(__name__)


@dataclass(frozen=True)
class RegistryCheck:
    registry: RegistryClient
    logger: logging.Logger = field(default=_logger, repr=False, compare=False)

    def check(self, service_key: str) -> AvailabilityOutcome:
        self.logger.info(f"Check {service_key} service's status via Registry...")

        try:
            alive = self.registry.is_alive()
        except Exception as e:
            self.logger.error(f"unable to check status of {service_key} service: {e}")
            return AvailabilityOutcome.UNAVAILABLE
        if not alive:
            self.logger.error(
                f"unable to check status of {service_key} service: Registry not running"
            )
            return AvailabilityOutcome.UNAVAILABLE

        # any query error is transient
        try:
            available = self.registry.is_service_available(service_key)
        except Exception as e:
            self.logger.error(str(e) or repr(e))
            return AvailabilityOutcome.UNAVAILABLE
        if not available:
            self.logger.error(f"{service_key} service is not available in the registry")
            return AvailabilityOutcome.UNAVAILABLE

        return AvailabilityOutcome.AVAILABLE


@dataclass(frozen=True)
class PingCheck:
    config: GateConfig
    http_get: Callable = field(default=requests.get, repr=False, compare=False)
    logger: logging.Logger = field(default=_logger, repr=False, compare=False)

    @property
    def timeout_s(self) -> float:
        return self.config.service.timeout / 1000

    def check(self, service_key: str) -> AvailabilityOutcome:
        self.logger.info(f"Check {service_key} service's status by ping...")

        endpoint = self.config.clients.get(service_key)
        if endpoint is None:
            self.logger.error(f"no client endpoint configured for {service_key} service")
            return AvailabilityOutcome.CONFIG_ERROR

        try:
            status_code = ping(endpoint.url, timeout_s=self.timeout_s, http_get=self.http_get)
        except requests.RequestException as e:
            self.logger.error(str(e))
            return AvailabilityOutcome.UNAVAILABLE

        if not is_success(status_code):
            self.logger.error(f"{service_key} service ping responded {status_code}")
            return AvailabilityOutcome.UNAVAILABLE

        return AvailabilityOutcome.AVAILABLE


def select_strategy(
    registry: RegistryClient | None,
    config: GateConfig,
    *,
    http_get: Callable = requests.get,
    logger: logging.Logger | None = None,
) -> AvailabilityStrategy:
    """Registry lookups when a registry client is given, direct pings otherwise."""
    logger = logger or _logger
    if registry is not None:
        return RegistryCheck(registry, logger=logger)
    return PingCheck(config, http_get=http_get, logger=logger)
