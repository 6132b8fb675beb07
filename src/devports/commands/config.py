"""Config command - show scan configuration and settings."""

from rich.table import Table

from ..config import DEFAULT_SCAN_CONFIG, get_settings_path
from ..filters import INIT_PROCESSES
from .common import console, get_settings


def config() -> None:
    """Show which ports are watched, which processes are hidden, and settings.

    Settings are read from settings.yml in the user config directory.
    """
    settings = get_settings()

    ports = ", ".join(str(p) for p in sorted(DEFAULT_SCAN_CONFIG.allowed_ports))
    hidden = sorted(DEFAULT_SCAN_CONFIG.excluded_process_names | INIT_PROCESSES)

    console.print(f"[bold]Watched ports:[/bold] {ports}")
    console.print(f"[bold]Hidden processes:[/bold] {', '.join(hidden)}\n")

    table = Table(title="Settings")
    table.add_column("Setting", style="green")
    table.add_column("Value", style="yellow")
    table.add_row("refresh_interval", f"{settings.refresh_interval:g}s")
    table.add_row("kill_rescan_delay", f"{settings.kill_rescan_delay:g}s")
    table.add_row("lsof_path", settings.lsof_path)
    table.add_row("probe_timeout", f"{settings.probe_timeout:g}s")
    console.print(table)

    source = settings.source or f"defaults ({get_settings_path()} not found or invalid)"
    console.print(f"[dim]Source: {source}[/dim]")
