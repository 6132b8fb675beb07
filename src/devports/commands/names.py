"""Names command - show stored custom names."""

from rich.table import Table

from .common import console, get_store, warning


def names() -> None:
    """Show all custom names, including ports not currently listening."""
    stored = get_store().names

    if not stored:
        warning("No custom names")
        return

    table = Table(title="Custom Names")
    table.add_column("Port", style="yellow")
    table.add_column("Name", style="green")
    for port in sorted(stored):
        table.add_row(str(port), stored[port])

    console.print(table)
