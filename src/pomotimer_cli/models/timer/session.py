"""Session kinds and their fixed durations."""

from enum import Enum

WORK_DURATION_SECONDS = 30 * 60
BREAK_DURATION_SECONDS = 10 * 60


class SessionKind(Enum):
    """Kind of timed interval."""

    NONE = "none"
    WORK = "work"
    BREAK = "break"

    @property
    def label(self) -> str:
        """Human-readable name, empty for NONE."""
        if self is SessionKind.WORK:
            return "Work"
        if self is SessionKind.BREAK:
            return "Break"
        return ""

    @property
    def duration(self) -> int:
        """Target duration in seconds."""
        return duration(self)

    @property
    def next(self) -> "SessionKind":
        """Kind that follows this one in an auto cycle."""
        return next_kind(self)


def duration(kind: SessionKind) -> int:
    """Get the duration in seconds for a session kind."""
    if kind is SessionKind.WORK:
        return WORK_DURATION_SECONDS
    if kind is SessionKind.BREAK:
        return BREAK_DURATION_SECONDS
    return 0


def next_kind(kind: SessionKind) -> SessionKind:
    """Work is followed by Break and Break by Work."""
    if kind is SessionKind.WORK:
        return SessionKind.BREAK
    if kind is SessionKind.BREAK:
        return SessionKind.WORK
    return SessionKind.NONE
