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

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized environment configuration for dependency-gate.

    Env var naming: DEPENDENCY_GATE_<FIELD_NAME>, except for the startup
    timer which keeps the EDGEX_STARTUP_* names used by the other services
    of a deployment. A .env file in CWD is read automatically.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEPENDENCY_GATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # --- General -------------------------------------------------------------
    log_level: str = "INFO"
    config_file: Path | None = Field(
        default=None,
        description="Path to the YAML configuration read by the CLI when -c is omitted",
    )  # DEPENDENCY_GATE_CONFIG_FILE

    # --- Startup timer -------------------------------------------------------
    startup_duration: int = Field(
        default=60,
        ge=1,
        alias="EDGEX_STARTUP_DURATION",
        description="Total number of seconds to wait for dependencies",
    )
    startup_interval: int = Field(
        default=1,
        ge=1,
        alias="EDGEX_STARTUP_INTERVAL",
        description="Number of seconds between two availability checks",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Cached accessor. Call this wherever you need settings.
    Tests can `cache_clear()` before reading to pick up monkeypatched env.
    """
    return Settings()


def reload_settings_cache() -> None:
    get_settings.cache_clear()  # type: ignore[attr-defined]
