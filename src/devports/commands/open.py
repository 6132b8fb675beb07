"""Open command - open a dev server in the browser."""

import typer

from .common import console, get_controller


def open_cmd(
    port: int = typer.Argument(..., min=1, max=65535, help="Port to open"),
) -> None:
    """Open http://localhost:PORT in the default browser.

    Examples:
        devports open 5173
    """
    with get_controller() as controller:
        url = controller.open_listener(port)
    console.print(f"Opened [link={url}]{url}[/link]")
