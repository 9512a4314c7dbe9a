"""Commands that run the interactive timer."""

import typer

from pomotimer_cli.models.timer import Event, Select, SelectAuto, SessionKind
from pomotimer_cli.services.config_service import get_config_service
from pomotimer_cli.utils.exit_codes import ERROR_GENERAL, ERROR_INVALID_ARGS
from pomotimer_cli.utils.ui.timer_app import build_timer_app

from .decorators import AppError, command_wrapper

START_EVENTS: dict[str, Event] = {
    "work": Select(SessionKind.WORK),
    "break": Select(SessionKind.BREAK),
    "auto": SelectAuto(),
}


def run_timer(initial_event: Event | None = None, sound: bool = True) -> None:
    """Run the timer UI until the user quits.

    Raises:
        AppError: If the UI exits with a non-zero return code.
    """
    config = get_config_service().config
    timer_app = build_timer_app(config, initial_event=initial_event, sound=sound)
    timer_app.run()

    return_code = timer_app.return_code or 0
    if return_code != 0:
        raise AppError(
            f"Timer exited unexpectedly (code {return_code})", exit_code=ERROR_GENERAL
        )


@command_wrapper
def start(
    kind: str | None = typer.Argument(
        None, help="Session to start right away: work, break or auto"
    ),
    no_sound: bool = typer.Option(
        False, "--no-sound", help="Disable the completion sound for this run"
    ),
) -> None:
    """Start the timer, optionally skipping the menu."""
    initial_event = None
    if kind is not None:
        initial_event = START_EVENTS.get(kind.lower())
        if initial_event is None:
            raise AppError(
                f"Invalid session '{kind}'. Must be: work, break, or auto",
                exit_code=ERROR_INVALID_ARGS,
            )

    run_timer(initial_event=initial_event, sound=not no_sound)
