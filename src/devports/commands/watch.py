"""Watch command - live, auto-refreshing view of dev servers."""

import threading

import typer
from rich.console import RenderableType
from rich.live import Live

from .common import console, entries_table, get_controller, get_settings


def wait_for_interrupt() -> None:
    """Block until Ctrl-C."""
    threading.Event().wait()


def watch(
    interval: float | None = typer.Option(
        None, "-i", "--interval", min=0.5, help="Seconds between scans (default from settings)"
    ),
) -> None:
    """Keep a table of dev servers up to date until Ctrl-C.

    Examples:
        devports watch
        devports watch --interval 2
    """
    settings = get_settings()
    interval = interval or settings.refresh_interval

    with get_controller(settings) as controller:

        def render() -> RenderableType:
            entries = controller.entries()
            title = f"Dev Servers (every {interval:g}s, Ctrl-C to quit)"
            if not entries:
                return f"[yellow]No dev servers running[/yellow] [dim]({title})[/dim]"
            return entries_table(entries, title=title)

        with Live(render(), console=console, auto_refresh=False) as live:
            unsubscribe = controller.subscribe(lambda records: live.update(render(), refresh=True))
            try:
                controller.start(interval)
                wait_for_interrupt()
            except KeyboardInterrupt:
                pass
            finally:
                # In-flight scans must finish while the Live display is still up
                controller.stop()
                unsubscribe()
