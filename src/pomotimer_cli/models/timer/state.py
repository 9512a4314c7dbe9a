"""Timer state as an explicit tagged variant."""

from dataclasses import dataclass, replace
from typing import Literal

from .session import SessionKind, duration

TimerPhase = Literal["menu", "running", "paused", "complete", "awaiting_transition"]
DisplayMode = Literal["menu", "session"]


@dataclass(frozen=True)
class TimerState:
    """Snapshot of the timer.

    ``phase`` is the single source of truth; the boolean views below are
    derived from it so that illegal flag combinations cannot be built.
    """

    phase: TimerPhase = "menu"
    session: SessionKind = SessionKind.NONE
    total_seconds: int = 0
    elapsed_seconds: int = 0
    auto_transition: bool = False

    @property
    def mode(self) -> DisplayMode:
        return "menu" if self.phase == "menu" else "session"

    @property
    def running(self) -> bool:
        return self.phase == "running"

    @property
    def paused(self) -> bool:
        return self.phase == "paused"

    @property
    def complete(self) -> bool:
        return self.phase in ("complete", "awaiting_transition")

    @property
    def awaiting_transition_signal(self) -> bool:
        return self.phase == "awaiting_transition"

    @property
    def display_elapsed(self) -> int:
        """Elapsed seconds clamped to the session duration."""
        return max(0, min(self.elapsed_seconds, self.total_seconds))

    @property
    def remaining_seconds(self) -> int:
        return self.total_seconds - self.display_elapsed

    @property
    def progress(self) -> float:
        """Fraction of the session elapsed, in [0, 1]."""
        if self.total_seconds <= 0:
            return 0.0
        return self.display_elapsed / self.total_seconds

    def with_phase(self, phase: TimerPhase) -> "TimerState":
        return replace(self, phase=phase)


def initial_state() -> TimerState:
    """Menu state the program starts in and returns to."""
    return TimerState()


def start_session(kind: SessionKind, auto_transition: bool = False) -> TimerState:
    """Fresh running session of ``kind``."""
    return TimerState(
        phase="running",
        session=kind,
        total_seconds=duration(kind),
        elapsed_seconds=0,
        auto_transition=auto_transition,
    )
