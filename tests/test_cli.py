"""Tests for the CLI."""

import importlib
import json

import pytest
from conftest import FakeProber, lsof_line, wait_for
from typer.testing import CliRunner

from devports import __version__, system
from devports import console as console_module
from devports.cli import app
from devports.commands import common

runner = CliRunner()


@pytest.fixture
def prober(monkeypatch):
    """Route every CLI scan to one fake prober."""
    fake = FakeProber([lsof_line("node", 1234, "*:3000"), lsof_line("vite", 99, "*:5173")])
    monkeypatch.setattr(common, "LsofProber", lambda *args, **kwargs: fake)
    monkeypatch.setattr(console_module, "setup_logging", lambda **kwargs: None)
    return fake


def test_version(prober):
    """Test --version prints the version."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_list_table(prober):
    """Test the default table output."""
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "localhost:3000" in result.stdout
    assert "Node.js" in result.stdout
    assert "Vite" in result.stdout


def test_list_plain(prober):
    """Test --plain prints one summary line per server."""
    result = runner.invoke(app, ["list", "--plain"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "localhost:3000 - Node.js (node)",
        "localhost:5173 - Vite (vite)",
    ]


def test_list_json(prober):
    """Test --json output."""
    result = runner.invoke(app, ["list", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [d["port"] for d in data] == [3000, 5173]
    assert data[0]["url"] == "http://localhost:3000"
    assert data[0]["custom"] is False


def test_list_empty(prober):
    """Test the empty state message."""
    prober.lines = []

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "No dev servers running" in result.stdout


def test_rename_and_reset(prober):
    """Test custom names persist between invocations."""
    result = runner.invoke(app, ["rename", "3000", "Marketing"])
    assert result.exit_code == 0

    result = runner.invoke(app, ["list", "--plain"])
    assert "localhost:3000 - Marketing (node)" in result.stdout

    result = runner.invoke(app, ["names"])
    assert "Marketing" in result.stdout

    result = runner.invoke(app, ["reset", "3000"])
    assert result.exit_code == 0

    result = runner.invoke(app, ["list", "--plain"])
    assert "localhost:3000 - Node.js (node)" in result.stdout


def test_rename_rejects_blank_name(prober):
    """Test a blank name is an error."""
    result = runner.invoke(app, ["rename", "3000", "   "])

    assert result.exit_code == 1


def test_rename_rejects_bad_port(prober):
    """Test ports outside 1-65535 are rejected."""
    result = runner.invoke(app, ["rename", "70000", "Nope"])

    assert result.exit_code != 0


def test_reset_without_name(prober):
    """Test resetting a port with no custom name."""
    result = runner.invoke(app, ["reset", "3000"])

    assert result.exit_code == 0
    assert "No custom name" in result.stdout


def test_kill(prober, monkeypatch):
    """Test kill signals the pid and reports success once the port is gone."""
    killed = []

    def fake_terminate(pid):
        killed.append(pid)
        prober.lines = [lsof_line("vite", 99, "*:5173")]

    monkeypatch.setattr(system, "terminate_process", fake_terminate)

    result = runner.invoke(app, ["kill", "3000", "--force"])

    assert result.exit_code == 0
    assert killed == [1234]
    assert "Killed" in result.stdout


def test_kill_unknown_port(prober, monkeypatch):
    """Test killing a port with no dev server."""
    killed = []
    monkeypatch.setattr(system, "terminate_process", killed.append)

    result = runner.invoke(app, ["kill", "8080", "--force"])

    assert result.exit_code == 1
    assert killed == []


def test_kill_cancelled(prober, monkeypatch):
    """Test declining the confirmation leaves the process alone."""
    killed = []
    monkeypatch.setattr(system, "terminate_process", killed.append)

    result = runner.invoke(app, ["kill", "3000"], input="n\n")

    assert result.exit_code == 0
    assert killed == []
    assert "Cancelled" in result.stdout


def test_open(prober, monkeypatch):
    """Test open hands the URL to the browser."""
    opened = []
    monkeypatch.setattr(system, "open_url", opened.append)

    result = runner.invoke(app, ["open", "5173"])

    assert result.exit_code == 0
    assert opened == ["http://localhost:5173"]


def test_config(prober):
    """Test the configuration summary."""
    result = runner.invoke(app, ["config"])

    assert result.exit_code == 0
    assert "Watched ports" in result.stdout
    assert "5173" in result.stdout
    assert "launchd" in result.stdout


def test_watch_until_interrupted(prober, monkeypatch):
    """Test watch renders scans and exits cleanly on Ctrl-C."""
    watch_module = importlib.import_module("devports.commands.watch")

    def interrupt_after_first_scan():
        assert wait_for(lambda: prober.calls >= 1)
        raise KeyboardInterrupt

    monkeypatch.setattr(watch_module, "wait_for_interrupt", interrupt_after_first_scan)

    result = runner.invoke(app, ["watch", "--interval", "0.5"])

    assert result.exit_code == 0
    assert prober.calls >= 1
    assert "localhost:3000" in result.stdout
    assert "Vite" in result.stdout
