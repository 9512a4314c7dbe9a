"""Session state machine.

``update`` is a pure function of (state, event) returning the next state and
the effects the event loop driver must carry out. It never raises: an event
that has no meaning in the current phase leaves the state untouched and
requests nothing.
"""

from dataclasses import replace

from .events import (
    TRANSITION_DELAY_SECONDS,
    ClearScreen,
    ClockTick,
    Effect,
    Event,
    PlaySound,
    Quit,
    ReturnToMenu,
    ScheduleTick,
    ScheduleTransition,
    Select,
    SelectAuto,
    Skip,
    Terminate,
    TogglePause,
    TransitionReady,
)
from .session import SessionKind, next_kind
from .state import TimerState, initial_state, start_session

Transition = tuple[TimerState, list[Effect]]

_QUIT_EFFECTS: tuple[Effect, ...] = (ClearScreen(), Terminate())


def update(
    state: TimerState,
    event: Event,
    *,
    transition_delay: float = TRANSITION_DELAY_SECONDS,
) -> Transition:
    """Compute the next state and follow-up effects for one event."""
    if state.phase == "menu":
        return _update_menu(state, event)
    if state.phase == "running":
        return _update_running(state, event, transition_delay)
    if state.phase == "paused":
        return _update_paused(state, event, transition_delay)
    if state.phase == "complete":
        return _update_complete(state, event)
    if state.phase == "awaiting_transition":
        return _update_awaiting(state, event)
    return state, []


def _update_menu(state: TimerState, event: Event) -> Transition:
    if isinstance(event, Select):
        if event.kind is SessionKind.NONE:
            return state, []
        return start_session(event.kind), [ScheduleTick()]
    if isinstance(event, SelectAuto):
        return start_session(SessionKind.WORK, auto_transition=True), [ScheduleTick()]
    if isinstance(event, Quit):
        return state, [Terminate()]
    return state, []


def _update_running(
    state: TimerState, event: Event, transition_delay: float
) -> Transition:
    if isinstance(event, ClockTick):
        ticked = replace(state, elapsed_seconds=state.elapsed_seconds + 1)
        if ticked.elapsed_seconds >= ticked.total_seconds:
            return finish(ticked, transition_delay)
        return ticked, [ScheduleTick()]
    if isinstance(event, TogglePause):
        return state.with_phase("paused"), []
    if isinstance(event, Skip):
        return finish(state, transition_delay)
    if isinstance(event, Quit):
        return state, list(_QUIT_EFFECTS)
    return state, []


def _update_paused(
    state: TimerState, event: Event, transition_delay: float
) -> Transition:
    # A tick armed before the pause lands here and is dropped.
    if isinstance(event, TogglePause):
        return state.with_phase("running"), [ScheduleTick()]
    if isinstance(event, Skip):
        return finish(state, transition_delay)
    if isinstance(event, Quit):
        return state, list(_QUIT_EFFECTS)
    return state, []


def _update_complete(state: TimerState, event: Event) -> Transition:
    if isinstance(event, ReturnToMenu):
        return initial_state(), [ClearScreen()]
    if isinstance(event, Quit):
        return state, list(_QUIT_EFFECTS)
    return state, []


def _update_awaiting(state: TimerState, event: Event) -> Transition:
    if isinstance(event, TransitionReady):
        upcoming = next_kind(state.session)
        if upcoming is SessionKind.NONE:
            return state.with_phase("complete"), []
        return start_session(upcoming, auto_transition=True), [ScheduleTick()]
    if isinstance(event, Quit):
        return state, list(_QUIT_EFFECTS)
    return state, []


def finish(
    state: TimerState, transition_delay: float = TRANSITION_DELAY_SECONDS
) -> Transition:
    """Complete the current session, whether by reaching zero or by skip."""
    if state.auto_transition:
        return (
            state.with_phase("awaiting_transition"),
            [PlaySound(), ScheduleTransition(delay=transition_delay)],
        )
    return state.with_phase("complete"), [PlaySound(), ClearScreen()]
