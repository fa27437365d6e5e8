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

from .handles import (
    BaseClient,
    DeviceClient,
    DeviceProfileClient,
    DeviceServiceClient,
    EventClient,
    ProvisionWatcherClient,
)
from .registry import (
    COREDATA_EVENT_CLIENT_NAME,
    METADATA_DEVICE_CLIENT_NAME,
    METADATA_DEVICE_PROFILE_CLIENT_NAME,
    METADATA_DEVICE_SERVICE_CLIENT_NAME,
    METADATA_PROVISION_WATCHER_CLIENT_NAME,
    ClientRegistry,
    build_clients,
    initialize_clients,
)

__all__ = [
    "BaseClient",
    "COREDATA_EVENT_CLIENT_NAME",
    "ClientRegistry",
    "DeviceClient",
    "DeviceProfileClient",
    "DeviceServiceClient",
    "EventClient",
    "METADATA_DEVICE_CLIENT_NAME",
    "METADATA_DEVICE_PROFILE_CLIENT_NAME",
    "METADATA_DEVICE_SERVICE_CLIENT_NAME",
    "METADATA_PROVISION_WATCHER_CLIENT_NAME",
    "ProvisionWatcherClient",
    "build_clients",
    "initialize_clients",
]
