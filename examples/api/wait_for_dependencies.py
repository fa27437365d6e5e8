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

"""Wait for core-metadata and core-data, then look up a published client."""

import signal
import sys
import threading

from dependency_gate import ClientRegistry, GateConfig, TimerConfig, check_readiness
from dependency_gate.clients import METADATA_DEVICE_CLIENT_NAME


def main(path: str = "examples/configs/configuration.yaml") -> int:
    cfg = GateConfig.read(path)
    clients = ClientRegistry()
    cancel = threading.Event()
    signal.signal(signal.SIGINT, lambda *_: cancel.set())

    if not check_readiness(cancel, TimerConfig.from_config(cfg), cfg, None, clients):
        return 1

    print(f"device client ready at {clients[METADATA_DEVICE_CLIENT_NAME].endpoint}")
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:]))
