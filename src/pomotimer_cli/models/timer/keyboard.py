"""Key-to-event mapping for timer controls."""

from typing import Optional

from .events import (
    Event,
    Quit,
    ReturnToMenu,
    Select,
    SelectAuto,
    Skip,
    TogglePause,
)
from .session import SessionKind
from .state import TimerState

QUIT_KEYS = frozenset({"q", "quit", "ctrl+c"})

MENU_KEYS: dict[str, Event] = {
    "1": Select(SessionKind.WORK),
    "w": Select(SessionKind.WORK),
    "work": Select(SessionKind.WORK),
    "2": Select(SessionKind.BREAK),
    "b": Select(SessionKind.BREAK),
    "break": Select(SessionKind.BREAK),
    "3": SelectAuto(),
    "a": SelectAuto(),
    "auto": SelectAuto(),
}

SESSION_KEYS: dict[str, Event] = {
    "space": TogglePause(),
    " ": TogglePause(),
    "s": Skip(),
    "skip": Skip(),
    "r": ReturnToMenu(),
    "return": ReturnToMenu(),
}


def normalize_key(key: str) -> str:
    """Lower-case a key name, keeping a bare space intact."""
    if key == " ":
        return key
    return key.strip().lower()


def resolve_key(key: str, state: TimerState) -> Optional[Event]:
    """
    Translate a key press into a timer event.

    Returns None for keys that mean nothing in the current display mode.
    Whether the event is honoured is left to the state machine.
    """
    key = normalize_key(key)
    if key in QUIT_KEYS:
        return Quit()

    if state.mode == "menu":
        return MENU_KEYS.get(key)
    return SESSION_KEYS.get(key)
