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

"""Startup gate: wait for core-metadata and core-data, then publish their clients."""

from collections.abc import Sequence
import logging
import threading
from typing import Callable

import requests

from dependency_gate.clients.registry import ClientRegistry, initialize_clients
from dependency_gate.config.gate import REQUIRED_SERVICE_KEYS, GateConfig
from dependency_gate.core.coordinator import check_all
from dependency_gate.core.strategies import select_strategy
from dependency_gate.exceptions import ClientConfigError
from dependency_gate.helpers.logger import setup_logger
from dependency_gate.platform.protocols import RegistryClient, TimerFactory

_logger = setup_logger(__name__)


def validate_client_config(
    config: GateConfig, required: Sequence[str] = REQUIRED_SERVICE_KEYS
) -> None:
    """Raise ClientConfigError for the first required client missing host or port."""
    for service_key in required:
        endpoint = config.client(service_key)
        if not endpoint.host:
            raise ClientConfigError(service_key, "Host")
        if endpoint.port == 0:
            raise ClientConfigError(service_key, "Port")


def check_readiness(
    cancel: threading.Event,
    timer_config: TimerFactory,
    config: GateConfig,
    registry: RegistryClient | None,
    clients: ClientRegistry,
    *,
    logger: logging.Logger | None = None,
    http_get: Callable = requests.get,
) -> bool:
    """Return True once every required dependency is available.

    Configuration problems fail fast without probing. On success the client
    handles are published into *clients*; on failure nothing is published.
    """
    logger = logger or _logger

    try:
        validate_client_config(config)
    except ClientConfigError as e:
        logger.error(str(e))
        return False

    strategy = select_strategy(registry, config, http_get=http_get, logger=logger)
    if not check_all(cancel, REQUIRED_SERVICE_KEYS, timer_config, strategy, logger=logger):
        return False

    initialize_clients(config, clients)

    logger.info("Service clients initialize successful.")
    return True
