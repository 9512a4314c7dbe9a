"""Timer core - session kinds, state, events and the state machine."""

from .events import (
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
from .keyboard import resolve_key
from .machine import finish, update
from .session import SessionKind, duration, next_kind
from .state import TimerPhase, TimerState, initial_state, start_session

__all__ = [
    "SessionKind",
    "duration",
    "next_kind",
    "TimerPhase",
    "TimerState",
    "initial_state",
    "start_session",
    "Event",
    "Select",
    "SelectAuto",
    "Quit",
    "TogglePause",
    "Skip",
    "ReturnToMenu",
    "ClockTick",
    "TransitionReady",
    "Effect",
    "ScheduleTick",
    "ScheduleTransition",
    "PlaySound",
    "ClearScreen",
    "Terminate",
    "update",
    "finish",
    "resolve_key",
]
