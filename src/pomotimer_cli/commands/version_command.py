"""Command 'version' of pomotimer-cli"""

import typer

from pomotimer_cli import __version__
from pomotimer_cli.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command()
def version() -> None:
    """Show version information"""
    console.print(__version__)
