"""Rename and reset commands - manage custom port names."""

import typer

from .common import console, error, get_store, success, warning


def rename(
    port: int = typer.Argument(..., min=1, max=65535, help="Port to name"),
    name: str = typer.Argument(..., help="Display name"),
) -> None:
    """Give a port a custom display name.

    The name sticks to the port, whatever process listens on it.

    Examples:
        devports rename 3000 "Marketing site"
    """
    name = name.strip()
    if not name:
        error("Name must not be empty (use 'devports reset')")
        raise typer.Exit(1)

    store = get_store()
    store.set(port, name)
    console.print(f"[green]{port}[/green] is now [bold]{name}[/bold]")


def reset(
    port: int = typer.Argument(..., min=1, max=65535, help="Port to reset"),
) -> None:
    """Remove a custom name, going back to the detected framework.

    Examples:
        devports reset 3000
    """
    store = get_store()
    if store.get(port) is None:
        warning(f"No custom name for {port}")
        return

    store.clear(port)
    success(f"Reset name for {port}")
