"""List command - show running dev servers."""

import json

import typer

from .common import console, debug, entries_table, get_controller, warning


def list_cmd(
    as_json: bool = typer.Option(False, "--json", help="Output JSON"),
    plain: bool = typer.Option(False, "--plain", help="One 'localhost:PORT - NAME (PROCESS)' line each"),
) -> None:
    """List dev servers listening on well-known ports.

    Names marked with * are custom names.

    Examples:
        devports list
        devports list --plain
        devports list --json
    """
    with get_controller() as controller:
        controller.scan_now()
        entries = controller.entries()
    debug(f"{len(entries)} dev server(s) found")

    if as_json:
        print(json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False))
        return

    if not entries:
        warning("No dev servers running")
        return

    if plain:
        for entry in entries:
            print(entry.summary())
        return

    console.print(entries_table(entries))
