"""Common utilities for CLI commands."""

from collections.abc import Sequence

from rich.table import Table

from ..config import Settings, get_db_path, load_settings
from ..console import console, debug, error, success, warning
from ..controller import PortEntry, RefreshController
from ..db import NameStore
from ..system import LsofProber

# Re-export console utilities
__all__ = [
    "console",
    "debug",
    "success",
    "warning",
    "error",
    "get_settings",
    "get_store",
    "get_controller",
    "entries_table",
]


def get_settings() -> Settings:
    """Get settings from the user config file."""
    return load_settings()


def get_store() -> NameStore:
    """Get the custom name store."""
    return NameStore(get_db_path())


def get_controller(settings: Settings | None = None) -> RefreshController:
    """Get a refresh controller wired to lsof and the name store."""
    settings = settings or get_settings()
    prober = LsofProber(settings.lsof_path, timeout=settings.probe_timeout)
    return RefreshController(prober, store=get_store(), settings=settings)


def entries_table(entries: Sequence[PortEntry], title: str = "Dev Servers") -> Table:
    """Build a rich table of listeners."""
    table = Table(title=title)
    table.add_column("", no_wrap=True)
    table.add_column("Port", style="yellow")
    table.add_column("Name", style="green")
    table.add_column("Process", style="blue")
    table.add_column("PID", style="dim")

    for entry in entries:
        name = f"{entry.display_name} [dim]*[/dim]" if entry.custom else entry.display_name
        table.add_row(
            entry.icon,
            f"localhost:{entry.port}",
            name,
            entry.process_name,
            str(entry.pid),
        )

    return table
