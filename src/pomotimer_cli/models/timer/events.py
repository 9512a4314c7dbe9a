"""Events delivered to the timer state machine and effects it requests."""

from dataclasses import dataclass

from .session import SessionKind

TICK_INTERVAL_SECONDS = 1.0
TRANSITION_DELAY_SECONDS = 2.0


# Events


@dataclass(frozen=True)
class Select:
    """Start a session of the given kind from the menu."""

    kind: SessionKind


@dataclass(frozen=True)
class SelectAuto:
    """Start an auto-cycling run beginning with Work."""


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class TogglePause:
    pass


@dataclass(frozen=True)
class Skip:
    """Force-complete the current session."""


@dataclass(frozen=True)
class ReturnToMenu:
    pass


@dataclass(frozen=True)
class ClockTick:
    """One second of wall time has passed."""


@dataclass(frozen=True)
class TransitionReady:
    """The completion sound has (approximately) finished."""


Event = (
    Select
    | SelectAuto
    | Quit
    | TogglePause
    | Skip
    | ReturnToMenu
    | ClockTick
    | TransitionReady
)


# Effects


@dataclass(frozen=True)
class ScheduleTick:
    delay: float = TICK_INTERVAL_SECONDS


@dataclass(frozen=True)
class ScheduleTransition:
    """Deliver TransitionReady after ``delay`` seconds."""

    delay: float = TRANSITION_DELAY_SECONDS


@dataclass(frozen=True)
class PlaySound:
    pass


@dataclass(frozen=True)
class ClearScreen:
    pass


@dataclass(frozen=True)
class Terminate:
    pass


Effect = ScheduleTick | ScheduleTransition | PlaySound | ClearScreen | Terminate
