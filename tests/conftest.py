"""Test fixtures and configuration."""

import tempfile
import time
from pathlib import Path

import pytest

from devports.config import Settings
from devports.controller import RefreshController
from devports.db import NameStore

LSOF_HEADER = "COMMAND     PID   USER   FD   TYPE             DEVICE SIZE/OFF NODE NAME"


def lsof_line(process: str, pid: int, address: str) -> str:
    """Build an lsof output line for a listening socket."""
    return f"{process:<10} {pid:>5} dev   23u  IPv4 0x1a2b3c4d5e6f7a8b      0t0  TCP {address} (LISTEN)"


def wait_for(predicate, timeout=2.0):
    """Poll until predicate() is true or the timeout passes."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return False


class FakeProber:
    """Prober returning canned lsof output."""

    def __init__(self, lines: list[str] | None = None, error: Exception | None = None) -> None:
        self.lines = lines or []
        self.error = error
        self.calls = 0

    def probe(self) -> list[str]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.lines)


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Keep platformdirs lookups out of the real home directory."""
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))


@pytest.fixture
def temp_dir():
    """Temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def store(temp_dir):
    """NameStore instance for tests."""
    return NameStore(temp_dir / "overrides.db")


@pytest.fixture
def sample_lines():
    """A realistic lsof listing."""
    return [
        LSOF_HEADER,
        lsof_line("launchd", 1, "*:5000"),
        lsof_line("ControlCe", 512, "*:5000"),
        lsof_line("rapportd", 530, "*:49152"),
        lsof_line("node", 1234, "*:3000"),
        lsof_line("node", 1234, "[::1]:3000"),
        lsof_line("postgres", 88, "127.0.0.1:5432"),
        lsof_line("Python", 4321, "127.0.0.1:8000"),
        lsof_line("Spotify", 777, "*:57621"),
    ]


@pytest.fixture
def fast_settings():
    """Settings with short delays."""
    return Settings(refresh_interval=0.05, kill_rescan_delay=0.01)


@pytest.fixture
def make_controller(store, fast_settings):
    """Factory for controllers over a fake prober; stopped after the test."""
    controllers: list[RefreshController] = []

    def factory(lines=None, error=None):
        prober = FakeProber(lines, error)
        controller = RefreshController(prober, store=store, settings=fast_settings)
        controllers.append(controller)
        return controller

    yield factory

    for controller in controllers:
        controller.stop()

