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

import signal
import threading

import pytest
from typer.testing import CliRunner
import yaml

from dependency_gate.cli.main import _cancel_on_signals, app
from dependency_gate.clients.registry import build_clients
from dependency_gate.platform.registry import ConsulRegistryClient

CLI_MODPATH = "dependency_gate.cli.main"

runner = CliRunner()


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "configuration.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "clients": {
                    "core-metadata": {"host": "meta.local", "port": 59881},
                    "core-data": {"host": "data.local", "port": 59880},
                },
                "startup": {"duration": 10, "interval": 2},
            }
        )
    )
    return path


@pytest.fixture
def fake_check(monkeypatch):
    """Replace the gate with a recorder returning ``result['ready']``."""
    seen: dict = {"ready": True}

    def _check(cancel, timer_config, config, registry, clients, **kwargs):
        seen.update(
            cancel=cancel, timer_config=timer_config, config=config, registry=registry
        )
        if seen["ready"]:
            clients.update(build_clients(config))
        return seen["ready"]

    monkeypatch.setattr(f"{CLI_MODPATH}.check_readiness", _check)
    return seen


def test_cli_version(mocker):
    mocker.patch(f"{CLI_MODPATH}.get_version", return_value="1.2.3")

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "dependency-gate CLI Version: 1.2.3" in result.stdout


def test_check_ready_exits_zero(config_path, fake_check):
    result = runner.invoke(app, ["check", "-c", str(config_path)])

    assert result.exit_code == 0, result.output
    assert "Published clients" in result.stdout
    assert fake_check["registry"] is None
    assert fake_check["timer_config"].duration_s == 10
    assert fake_check["timer_config"].interval_s == 2
    assert isinstance(fake_check["cancel"], threading.Event)


def test_check_not_ready_exits_one(config_path, fake_check):
    fake_check["ready"] = False

    result = runner.invoke(app, ["check", "-c", str(config_path)])

    assert result.exit_code == 1


def test_check_duration_and_interval_override(config_path, fake_check):
    result = runner.invoke(app, ["check", "-c", str(config_path), "-d", "42", "-i", "7"])

    assert result.exit_code == 0, result.output
    assert fake_check["timer_config"].duration_s == 42
    assert fake_check["timer_config"].interval_s == 7


def test_check_with_registry_builds_consul_client(tmp_path, fake_check):
    path = tmp_path / "registry.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "service": {"timeout": 3000},
                "clients": {
                    "core-metadata": {"host": "m", "port": 1},
                    "core-data": {"host": "d", "port": 2},
                },
                "registry": {"host": "consul", "port": 8500},
            }
        )
    )

    result = runner.invoke(app, ["check", "-c", str(path)])

    assert result.exit_code == 0, result.output
    registry = fake_check["registry"]
    assert isinstance(registry, ConsulRegistryClient)
    assert registry.base_url == "http://consul:8500"
    assert registry.timeout_s == 3.0


def test_check_reads_config_file_from_settings(monkeypatch, config_path, fake_check):
    monkeypatch.setenv("DEPENDENCY_GATE_CONFIG_FILE", str(config_path))

    result = runner.invoke(app, ["check"])

    assert result.exit_code == 0, result.output
    assert fake_check["config"].client("core-data").port == 59880


def test_check_without_config_is_usage_error(monkeypatch, fake_check):
    monkeypatch.delenv("DEPENDENCY_GATE_CONFIG_FILE", raising=False)

    result = runner.invoke(app, ["check"])

    assert result.exit_code == 2
    assert "cancel" not in fake_check


def test_cancel_on_signals_sets_event_and_restores_handlers():
    cancel = threading.Event()
    before = signal.getsignal(signal.SIGTERM)

    with _cancel_on_signals(cancel):
        handler = signal.getsignal(signal.SIGTERM)
        handler(signal.SIGTERM, None)

    assert cancel.is_set()
    assert signal.getsignal(signal.SIGTERM) is before
