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

from typing import Callable

import requests

API_PING_ROUTE = "/api/v2/ping"


def ping_url(base_url: str) -> str:
    return base_url.rstrip("/") + API_PING_ROUTE


def ping(
    base_url: str,
    *,
    timeout_s: float,
    http_get: Callable = requests.get,
) -> int:
    """Issue one GET against the service ping route and return the status code.

    Network errors are not caught: ``requests.RequestException`` propagates so
    that the caller can report it.
    """
    r = http_get(ping_url(base_url), timeout=timeout_s)
    return r.status_code


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300
