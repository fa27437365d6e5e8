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

from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

try:
    __version__ = version("dependency-gate")
except PackageNotFoundError:  # during dev
    __version__ = "0.0.0"

__all__ = ["ClientRegistry", "GateConfig", "TimerConfig", "check_all", "check_readiness"]


def __getattr__(name: str):
    if name == "check_readiness":
        from .core.gate import check_readiness

        return check_readiness
    if name == "check_all":
        from .core.coordinator import check_all

        return check_all
    if name == "GateConfig":
        from .config.gate import GateConfig

        return GateConfig
    if name == "TimerConfig":
        from .core.timer import TimerConfig

        return TimerConfig
    if name == "ClientRegistry":
        from .clients.registry import ClientRegistry

        return ClientRegistry
    raise AttributeError(name)


if TYPE_CHECKING:
    from .clients.registry import ClientRegistry
    from .config.gate import GateConfig
    from .core.coordinator import check_all
    from .core.gate import check_readiness
    from .core.timer import TimerConfig
