"""Main entry point for Pomotimer CLI."""

import typer

from pomotimer_cli.commands import config, start_command, version_command
from pomotimer_cli.commands.decorators import command_wrapper
from pomotimer_cli.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="pomotimer",
    cls=SuggestingGroup,
    help="A terminal work/break interval timer",
    invoke_without_command=True,
)

# Add subcommands
app.add_typer(config.app, name="config", help="Configuration management")

# Add top-level commands
app.command("start")(start_command.start)
app.command("version")(version_command.version)


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """Run the timer menu when no command is given."""
    if ctx.invoked_subcommand is None:
        _run_menu()


@command_wrapper
def _run_menu() -> None:
    start_command.run_timer()


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
