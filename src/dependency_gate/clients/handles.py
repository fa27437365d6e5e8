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

from dataclasses import dataclass
from typing import ClassVar

API_VERSION_PREFIX = "/api/v2"


@dataclass(frozen=True)
class BaseClient:
    """Handle bound to the base URL of one upstream service.

    Handles only know where to send requests; building one never performs I/O.
    """

    base_url: str

    route: ClassVar[str] = ""

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}{API_VERSION_PREFIX}{self.route}"


@dataclass(frozen=True)
class DeviceClient(BaseClient):
    route: ClassVar[str] = "/device"


@dataclass(frozen=True)
class DeviceServiceClient(BaseClient):
    route: ClassVar[str] = "/deviceservice"


@dataclass(frozen=True)
class DeviceProfileClient(BaseClient):
    route: ClassVar[str] = "/deviceprofile"


@dataclass(frozen=True)
class ProvisionWatcherClient(BaseClient):
    route: ClassVar[str] = "/provisionwatcher"


@dataclass(frozen=True)
class EventClient(BaseClient):
    route: ClassVar[str] = "/event"
