"""Kill command - stop the process behind a dev server."""

import time

import typer

from .common import get_controller, success, warning


def kill(
    port: int = typer.Argument(..., min=1, max=65535, help="Port whose process to kill"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Kill (SIGKILL) the process listening on a dev port.

    Examples:
        devports kill 3000
        devports kill 5173 --force
    """
    with get_controller() as controller:
        controller.scan_now()
        entry = next((e for e in controller.entries() if e.port == port), None)

        if entry is None:
            warning(f"No dev server on port {port}")
            raise typer.Exit(1)

        label = f"{entry.display_name} ({entry.process_name}, pid {entry.pid})"
        if not force:
            confirm = typer.confirm(f"Kill {label}?")
            if not confirm:
                warning("Cancelled")
                return

        controller.kill_listener(port)
        time.sleep(controller.settings.kill_rescan_delay)
        controller.scan_now()
        still_there = controller.find(port) is not None

    if still_there:
        warning(f"{label} is still listening on {port}")
        raise typer.Exit(1)
    success(f"Killed {label}")
