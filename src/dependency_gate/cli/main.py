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

from collections.abc import Iterator
from contextlib import contextmanager
import signal
import threading
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from typing_extensions import Annotated

from ..clients.registry import ClientRegistry
from ..config.gate import GateConfig, load_gate_config
from ..config.settings import get_settings
from ..core.gate import check_readiness
from ..core.timer import TimerConfig
from ..helpers.logger import setup_logger
from ..platform.registry import ConsulRegistryClient
from ..utils.version import get_version

app = typer.Typer(name="dependency-gate CLI", no_args_is_help=True)

console = Console()
logger = setup_logger("dependency_gate.cli", level=get_settings().log_level, console=console)


@contextmanager
def _cancel_on_signals(cancel: threading.Event) -> Iterator[None]:
    """Set *cancel* on SIGINT/SIGTERM for the duration of the block."""

    def _handler(signum, _frame):
        logger.warning(f"Received {signal.Signals(signum).name}, cancelling dependency checks")
        cancel.set()

    previous = {sig: signal.signal(sig, _handler) for sig in (signal.SIGINT, signal.SIGTERM)}
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


def _load_config(config: Optional[typer.FileText]) -> GateConfig:
    if config is not None:
        return load_gate_config(config)
    path = get_settings().config_file
    if path is None:
        raise typer.BadParameter(
            "No configuration given; pass -c/--config or set DEPENDENCY_GATE_CONFIG_FILE"
        )
    return GateConfig.read(path)


def _render_clients(clients: ClientRegistry) -> None:
    table = Table(title="Published clients")
    table.add_column("Name", style="cyan")
    table.add_column("Endpoint")
    for name, client in sorted(clients.items()):
        table.add_row(name, client.endpoint)
    console.print(table)


@app.command("version", short_help="Show the version of the dependency-gate CLI")
def version(short: bool = False):
    v = get_version()
    print(v if short else f"dependency-gate CLI Version: {v}")
    raise typer.Exit()


@app.command("check", short_help="Wait for core-metadata and core-data to be available")
def check(
    config: Annotated[
        Optional[typer.FileText],
        typer.Option("-c", "--config", help="Path to the YAML configuration"),
    ] = None,
    duration: Annotated[
        Optional[int],
        typer.Option("--duration", "-d", min=1, help="Seconds to wait in total"),
    ] = None,
    interval: Annotated[
        Optional[int],
        typer.Option("--interval", "-i", min=1, help="Seconds between two checks"),
    ] = None,
) -> None:
    """
    Check that the dependencies of the device service are reachable.

    Uses the registry when one is configured, otherwise pings each service.
    Exits with 0 when every dependency is available and 1 otherwise.
    """
    cfg = _load_config(config)
    if duration:
        cfg.startup.duration = duration
    if interval:
        cfg.startup.interval = interval

    registry = None
    if cfg.registry is not None:
        registry = ConsulRegistryClient.from_config(cfg.registry, timeout_ms=cfg.service.timeout)

    clients = ClientRegistry()
    cancel = threading.Event()
    with _cancel_on_signals(cancel):
        ready = check_readiness(
            cancel, TimerConfig.from_config(cfg), cfg, registry, clients, logger=logger
        )

    if not ready:
        raise typer.Exit(code=1)
    _render_clients(clients)


if __name__ == "__main__":
    app()
