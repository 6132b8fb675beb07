"""Typer CLI for devports - Main entry point."""

import typer

from . import __version__
from . import console as console_module
from .commands import config, kill, list_cmd, names, open_cmd, rename, reset, watch
from .config import get_log_path

app = typer.Typer(
    name="devports",
    help="See, name, open and kill local development servers",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"devports version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    debug: bool = typer.Option(False, "--debug", help="Verbose logging to stderr"),
) -> None:
    """See, name, open and kill local development servers."""
    if debug:
        console_module.DEBUG = True
    console_module.setup_logging(debug=console_module.DEBUG, log_path=get_log_path())


# Register all commands
app.command(name="list")(list_cmd)
app.command()(rename)
app.command()(reset)
app.command()(names)
app.command()(kill)
app.command(name="open")(open_cmd)
app.command()(watch)
app.command()(config)


def main() -> None:
    """Main entry point."""
    app()
