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

import io
from pathlib import Path

from pydantic import BaseModel, Field, SecretStr, field_validator
import yaml

from dependency_gate.config.settings import get_settings

CORE_METADATA_SERVICE_KEY = "core-metadata"
CORE_DATA_SERVICE_KEY = "core-data"

# Order matters: validation reports the first missing setting in this order.
REQUIRED_SERVICE_KEYS: tuple[str, ...] = (CORE_METADATA_SERVICE_KEY, CORE_DATA_SERVICE_KEY)


class ClientEndpointConfig(BaseModel):
    """Where to reach one upstream service.

    Empty host and zero port are accepted here on purpose so that the
    readiness gate can report them as a fatal configuration error.
    """

    host: str = ""
    port: int = Field(default=0, ge=0)
    protocol: str = "http"

    @property
    def url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"


class ServiceInfo(BaseModel):
    timeout: int = Field(
        default=5000,
        ge=1,
        description="Timeout in milliseconds applied to each outgoing request",
    )


class RegistryInfo(BaseModel):
    host: str = "localhost"
    port: int = 8500
    type: str = "consul"
    scheme: str = "http"
    token: SecretStr | None = None

    @field_validator("type")
    @classmethod
    def supported_type(cls, v: str) -> str:
        if v.lower() != "consul":
            raise ValueError(f"Unsupported registry type: {v}")
        return v.lower()

    @property
    def url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"


class StartupInfo(BaseModel):
    duration: int | None = Field(default=None, ge=1, description="Seconds to wait in total")
    interval: int | None = Field(default=None, ge=1, description="Seconds between checks")


class GateConfig(BaseModel):
    service: ServiceInfo = Field(default_factory=ServiceInfo)
    clients: dict[str, ClientEndpointConfig] = Field(default_factory=dict)
    registry: RegistryInfo | None = None
    startup: StartupInfo = Field(default_factory=StartupInfo)

    def client(self, service_key: str) -> ClientEndpointConfig:
        """Return the endpoint for *service_key*, empty when not configured."""
        return self.clients.get(service_key) or ClientEndpointConfig()

    def startup_duration(self) -> int:
        return self.startup.duration or get_settings().startup_duration

    def startup_interval(self) -> int:
        return self.startup.interval or get_settings().startup_interval

    @classmethod
    def read(cls, path: str | Path) -> "GateConfig":
        with Path(path).expanduser().open() as f:
            return load_gate_config(f)


def load_gate_config(config_file: io.TextIOWrapper) -> GateConfig:
    """Load YAML into a GateConfig; an empty file yields the defaults."""
    cfg_dict = yaml.safe_load(config_file) or {}
    return GateConfig.model_validate(cfg_dict)
