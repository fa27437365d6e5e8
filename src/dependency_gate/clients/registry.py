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

from collections.abc import Iterator, Mapping
import threading

from dependency_gate.clients.handles import (
    BaseClient,
    DeviceClient,
    DeviceProfileClient,
    DeviceServiceClient,
    EventClient,
    ProvisionWatcherClient,
)
from dependency_gate.config.gate import (
    CORE_DATA_SERVICE_KEY,
    CORE_METADATA_SERVICE_KEY,
    GateConfig,
)

METADATA_DEVICE_CLIENT_NAME = "MetadataDeviceClient"
METADATA_DEVICE_SERVICE_CLIENT_NAME = "MetadataDeviceServiceClient"
METADATA_DEVICE_PROFILE_CLIENT_NAME = "MetadataDeviceProfileClient"
METADATA_PROVISION_WATCHER_CLIENT_NAME = "MetadataProvisionWatcherClient"
COREDATA_EVENT_CLIENT_NAME = "CoredataEventClient"


class ClientRegistry(Mapping[str, BaseClient]):
    """Keyed lookup of initialized client handles.

    Built once at startup and handed by reference to whatever needs a client.
    Readers get a ``Mapping``; only ``update`` writes, and it replaces any
    existing entry with the same name.
    """

    def __init__(self, handles: Mapping[str, BaseClient] | None = None):
        self._handles: dict[str, BaseClient] = dict(handles or {})
        self._lock = threading.Lock()

    def update(self, handles: Mapping[str, BaseClient]) -> None:
        with self._lock:
            self._handles = {**self._handles, **handles}

    def __getitem__(self, name: str) -> BaseClient:
        return self._handles[name]

    def __iter__(self) -> Iterator[str]:
        return iter(dict(self._handles))

    def __len__(self) -> int:
        return len(self._handles)

    def __repr__(self) -> str:
        return f"ClientRegistry({sorted(self._handles)})"


def build_clients(config: GateConfig) -> dict[str, BaseClient]:
    metadata_url = config.client(CORE_METADATA_SERVICE_KEY).url
    data_url = config.client(CORE_DATA_SERVICE_KEY).url
    return {
        METADATA_DEVICE_CLIENT_NAME: DeviceClient(metadata_url),
        METADATA_DEVICE_SERVICE_CLIENT_NAME: DeviceServiceClient(metadata_url),
        METADATA_DEVICE_PROFILE_CLIENT_NAME: DeviceProfileClient(metadata_url),
        METADATA_PROVISION_WATCHER_CLIENT_NAME: ProvisionWatcherClient(metadata_url),
        COREDATA_EVENT_CLIENT_NAME: EventClient(data_url),
    }


def initialize_clients(config: GateConfig, clients: ClientRegistry) -> ClientRegistry:
    """Build the metadata and core-data handles and publish them into *clients*."""
    clients.update(build_clients(config))
    return clients
