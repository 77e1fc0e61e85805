from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from toastcall import cli as cli_module
from toastcall.channels.events import Severity
from toastcall.channels.memory import MemoryChannel
from toastcall.clipboard import MemoryClipboard
from toastcall.config import Settings
from toastcall.toast import Toaster

runner = CliRunner()


@pytest.fixture
def cli_toaster(monkeypatch) -> Toaster:
    toaster = Toaster(MemoryChannel(), clipboard=MemoryClipboard(), settings=Settings(_env_file=None))
    monkeypatch.setattr(cli_module, "_build_toaster", lambda: toaster)
    return toaster


def test_invoke_prints_json_result_and_notifies(cli_toaster: Toaster) -> None:
    result = runner.invoke(cli_module.app, ["invoke", "ping", "--loading", "Pinging", "--success", "Pong!"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == "pong"
    channel = cli_toaster.channel
    assert channel.messages(Severity.LOADING) == ["Pinging"]
    assert channel.messages(Severity.SUCCESS) == ["Pong!"]
    assert channel.active == set()


def test_invoke_passes_json_args(cli_toaster: Toaster) -> None:
    result = runner.invoke(cli_module.app, ["invoke", "echo", "--args", '{"message": "hi"}', "--silent"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == "hi"
    assert cli_toaster.channel.shown == []


def test_invoke_failure_shows_error_and_exits_one(cli_toaster: Toaster) -> None:
    result = runner.invoke(cli_module.app, ["invoke", "fail", "--args", '{"message": "boom"}'])

    assert result.exit_code == 1
    (error,) = cli_toaster.channel.notifications(Severity.ERROR)
    assert error.message == "Operation failed"
    assert error.description == "CommandFailedError: boom"


def test_invoke_unknown_command_fails(cli_toaster: Toaster) -> None:
    result = runner.invoke(cli_module.app, ["invoke", "nope", "--error", "No such command"])

    assert result.exit_code == 1
    assert cli_toaster.channel.messages(Severity.ERROR) == ["No such command"]


def test_invoke_rejects_non_object_args(cli_toaster: Toaster) -> None:
    result = runner.invoke(cli_module.app, ["invoke", "echo", "--args", "[1, 2]"])

    assert result.exit_code == 2
    assert cli_toaster.channel.shown == []


def test_notify_error_with_copy(cli_toaster: Toaster) -> None:
    result = runner.invoke(cli_module.app, ["notify", "error", "Sync failed", "--detail", "timeout", "--copy"])

    assert result.exit_code == 0
    assert cli_toaster.clipboard.contents == "timeout"
    assert cli_toaster.channel.messages(Severity.SUCCESS) == ["Error copied to clipboard"]


def test_notify_copy_requires_error_detail(cli_toaster: Toaster) -> None:
    result = runner.invoke(cli_module.app, ["notify", "info", "hello", "--copy"])

    assert result.exit_code == 2
    assert cli_toaster.channel.messages(Severity.INFO) == ["hello"]


def test_commands_lists_builtins() -> None:
    result = runner.invoke(cli_module.app, ["commands"])

    assert result.exit_code == 0
    for name in ("echo", "fail", "ping", "sleep"):
        assert name in result.stdout
