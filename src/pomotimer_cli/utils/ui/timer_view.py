"""Rich renderables for the timer screen.

The view holds no timer logic: it turns a ``TimerState`` snapshot into text.
"""

from rich.console import Group
from rich.padding import Padding
from rich.progress_bar import ProgressBar
from rich.text import Text

from pomotimer_cli.models.timer import SessionKind, TimerState

from .formatters import format_clock

PROGRESS_WIDTH = 40

STYLES = {
    "title": "bold color(205)",
    "menu": "color(86)",
    "session": "bold color(212)",
    "time": "bold color(39)",
    "complete": "bold color(46)",
    "paused": "bold yellow",
    "instruction": "color(241)",
}


class TimerView:
    """Builds the menu and session screens."""

    def __init__(self, color: bool = True):
        self.color = color

    def style(self, name: str) -> str:
        return STYLES[name] if self.color else ""

    def render(self, state: TimerState) -> Group:
        if state.mode == "menu":
            return self.render_menu()
        return self.render_session(state)

    def render_menu(self) -> Group:
        work = SessionKind.WORK.duration // 60
        rest = SessionKind.BREAK.duration // 60
        options = [
            f"  1 / w  →  Work session ({work} minutes)",
            f"  2 / b  →  Break session ({rest} minutes)",
            "  3 / a  →  Auto cycle (work and break, repeating)",
            "  q      →  Quit",
        ]
        lines = [Text("Choose an option:", style=self.style("menu"))]
        lines.extend(Text(option, style=self.style("menu")) for option in options)
        return Group(
            Padding(Text("Timer", style=self.style("title")), (1, 2)),
            Padding(Group(*lines), (0, 2)),
        )

    def render_session(self, state: TimerState) -> Group:
        title = f"{state.session.label} Session"
        if state.auto_transition:
            title += "  (auto)"

        status = Text()
        status.append(f"{state.session.label} Session", style=self.style("session"))
        status.append(" - ")
        status.append(
            f"Time Left: {format_clock(state.remaining_seconds)}",
            style=self.style("time"),
        )

        bar = ProgressBar(
            total=max(state.total_seconds, 1),
            completed=state.display_elapsed,
            width=PROGRESS_WIDTH,
        )
        percent = Text(f"{int(state.progress * 100)}%", style=self.style("instruction"))

        return Group(
            Padding(Text(title, style=self.style("title")), (1, 2)),
            status,
            Text(""),
            bar,
            percent,
            *self.footer_lines(state),
        )

    def footer_lines(self, state: TimerState) -> list[Text]:
        """Phase-specific status and keyboard hints."""
        hint = self.style("instruction")
        if state.awaiting_transition_signal:
            upcoming = state.session.next.label
            return [
                Text("Session complete!", style=self.style("complete")),
                Text(""),
                Text(f"{upcoming} session starting shortly, 'q' to quit", style=hint),
            ]
        if state.complete:
            return [
                Text("Session complete!", style=self.style("complete")),
                Text(""),
                Text("Press 'r' to return to menu, 'q' to quit", style=hint),
            ]
        if state.running:
            return [Text("Press 'space' to pause, 's' to skip, 'q' to quit", style=hint)]
        return [
            Text(
                "Paused - Press 'space' to resume, 's' to skip, 'q' to quit",
                style=self.style("paused") if self.color else hint,
            )
        ]
