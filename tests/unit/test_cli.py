"""Tests for the desknotify CLI."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from desknotify import notifications
from desknotify.cli.main import cli

ALL_PARAMS = [
    "--title", "TEST NOTIFICATION",
    "--subtitle", "Subtitle",
    "--message", "This is the message.",
    "--sound", "Pop",
    "--open", "https://google.com",
]


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def executed(monkeypatch) -> list[list[str]]:
    calls: list[list[str]] = []
    monkeypatch.setattr(notifications, "command_exists", lambda command_line: True)
    monkeypatch.setattr(
        notifications, "execute_command", lambda command, wait=True: calls.append(command)
    )
    return calls


def test_preview_macos(runner, monkeypatch):
    monkeypatch.setenv("DESKNOTIFY_PLATFORM", "darwin")
    result = runner.invoke(cli, ["preview", *ALL_PARAMS])
    assert result.exit_code == 0
    assert result.output.strip() == (
        'terminal-notifier -title "TEST NOTIFICATION" -subtitle "Subtitle" '
        '-message "This is the message." -sound "Pop" -open "https://google.com"'
    )


def test_preview_linux(runner, monkeypatch):
    monkeypatch.setenv("DESKNOTIFY_PLATFORM", "linux")
    result = runner.invoke(cli, ["preview", *ALL_PARAMS])
    assert result.exit_code == 0
    assert result.output.strip() == 'notify-send "TEST NOTIFICATION (Subtitle)" "This is the message."'


def test_send_executes(runner, monkeypatch, executed):
    monkeypatch.setenv("DESKNOTIFY_PLATFORM", "darwin")
    result = runner.invoke(cli, ["send", "--title", "t", "--subtitle", "s", "--message", "[m]"])
    assert result.exit_code == 0
    assert executed == [
        ["terminal-notifier", "-title", "t", "-subtitle", "s", "-message", "m", "-sound", "default"]
    ]


def test_send_missing_message_is_usage_error(runner, executed):
    result = runner.invoke(cli, ["send", "--title", "t", "--subtitle", "s"])
    assert result.exit_code == 2
    assert "`message` must be initialized" in result.output
    assert executed == []


def test_send_missing_tool_exits_1(runner, monkeypatch):
    monkeypatch.setenv("DESKNOTIFY_PLATFORM", "linux")
    monkeypatch.setattr(notifications, "command_exists", lambda command_line: False)
    sent: list[str] = []
    monkeypatch.setattr(
        notifications, "execute_command", lambda command, wait=True: sent.append(command)
    )
    result = runner.invoke(cli, ["send", *ALL_PARAMS])
    assert result.exit_code == 1
    assert "notify-send is not available. Is it installed?" in result.output
    assert sent == []


@pytest.mark.parametrize("available", [True, False])
def test_status(runner, monkeypatch, available):
    monkeypatch.setenv("DESKNOTIFY_PLATFORM", "darwin")
    monkeypatch.setattr(notifications, "command_exists", lambda command_line: available)
    result = runner.invoke(cli, ["status"])
    assert result.exit_code == 0
    assert "terminal-notifier" in result.output
    assert ("yes" in result.output) is available


def test_send_message_with_quote_and_backslash(runner, monkeypatch, executed):
    monkeypatch.setenv("DESKNOTIFY_PLATFORM", "linux")
    result = runner.invoke(
        cli, ["send", "--title", "t", "--subtitle", "s", "--message", 'saved "C:\\temp\\'],
    )
    assert result.exit_code == 0
    assert executed == [["notify-send", "t (s)", 'saved "C:\\temp\\']]


def test_invalid_log_level_is_usage_error(runner, monkeypatch, executed):
    monkeypatch.setenv("DESKNOTIFY_LOG_LEVEL", "loud")
    result = runner.invoke(cli, ["send", "--title", "t", "--subtitle", "s", "--message", "m"])
    assert result.exit_code == 2
    assert "DESKNOTIFY_LOG_LEVEL" in result.output
    assert executed == []
