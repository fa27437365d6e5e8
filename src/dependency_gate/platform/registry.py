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

from typing import Any, Callable

import requests

from dependency_gate.config.gate import RegistryInfo
from dependency_gate.exceptions import RegistryError
from dependency_gate.helpers.logger import setup_logger

logger = setup_logger(__name__)

HEALTH_PASSING = "passing"
HEALTH_WARNING = "warning"
HEALTH_CRITICAL = "critical"
HEALTH_MAINTENANCE = "maintenance"


def aggregated_status(checks: list[dict[str, Any]]) -> str:
    """Reduce a list of Consul health checks to a single status.

    critical wins over warning, warning over maintenance, anything else is
    passing. An empty list is passing, matching Consul's own aggregation.
    """
    statuses = {c.get("Status") for c in checks}
    for status in (HEALTH_CRITICAL, HEALTH_WARNING, HEALTH_MAINTENANCE):
        if status in statuses:
            return status
    return HEALTH_PASSING


class ConsulRegistryClient:
    """Minimal Consul client covering what the readiness checks need.

    Only the read side of the HTTP API is used: leader status, the service
    catalog and service health checks.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout_s: float = 5.0,
        http_get: Callable = requests.get,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.headers = {"X-Consul-Token": token} if token else {}
        self._http_get = http_get

    @classmethod
    def from_config(cls, info: RegistryInfo, *, timeout_ms: int = 5000) -> "ConsulRegistryClient":
        token = info.token.get_secret_value() if info.token else None
        return cls(info.url, token=token, timeout_s=timeout_ms / 1000)

    def _get(self, path: str) -> requests.Response:
        return self._http_get(
            f"{self.base_url}{path}", timeout=self.timeout_s, headers=self.headers
        )

    def is_alive(self) -> bool:
        try:
            r = self._get("/v1/status/leader")
        except requests.RequestException as e:
            logger.debug(f"Consul not reachable at {self.base_url}: {e}")
            return False
        # a cluster without leader answers 200 with an empty string
        return r.status_code == 200 and bool(r.text.strip().strip('"'))

    def is_service_available(self, service_key: str) -> bool:
        services = self._get("/v1/catalog/services")
        if services.status_code != 200:
            raise RegistryError(
                f"unable to list services from registry: HTTP {services.status_code}"
            )
        if service_key not in (services.json() or {}):
            raise RegistryError(
                f"{service_key} service is not registered. Might not have started... "
            )

        checks = self._get(f"/v1/health/checks/{service_key}")
        if checks.status_code != 200:
            raise RegistryError(
                f"unable to get health checks of {service_key} service: HTTP {checks.status_code}"
            )
        status = aggregated_status(checks.json() or [])
        if status != HEALTH_PASSING:
            raise RegistryError(f"{service_key} service is not healthy (status: {status})")
        return True
