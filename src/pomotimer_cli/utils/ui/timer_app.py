"""Textual application driving the timer state machine.

The app is the event loop: it turns key presses and timer callbacks into
events, feeds them to ``update`` one at a time, renders the resulting state
and carries out the requested effects.
"""

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.timer import Timer
from textual.widgets import Static

from pomotimer_cli.models.config_models import AppConfig
from pomotimer_cli.models.timer import (
    ClearScreen,
    ClockTick,
    Effect,
    Event,
    PlaySound,
    Quit,
    ScheduleTick,
    ScheduleTransition,
    Terminate,
    TimerState,
    TransitionReady,
    initial_state,
    resolve_key,
    update,
)
from pomotimer_cli.models.timer.events import (
    TICK_INTERVAL_SECONDS,
    TRANSITION_DELAY_SECONDS,
)
from pomotimer_cli.services.sound_service import SoundPlayer
from pomotimer_cli.utils.logger import get_logger

from .timer_view import TimerView


class TimerApp(App):
    """Full-screen interval timer."""

    CSS = """
    Screen {
        background: $background;
        padding: 0;
    }

    #timer-view {
        width: 100%;
        height: auto;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit_timer", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        sound_player: SoundPlayer | None = None,
        view: TimerView | None = None,
        initial_event: Event | None = None,
        transition_delay: float = TRANSITION_DELAY_SECONDS,
        tick_interval: float = TICK_INTERVAL_SECONDS,
    ):
        super().__init__()
        self.timer_state: TimerState = initial_state()
        self.sound_player = sound_player or SoundPlayer()
        self.timer_view = view or TimerView()
        self.initial_event = initial_event
        self.transition_delay = transition_delay
        self.tick_interval = tick_interval
        self._tick_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        with Vertical():
            yield Static(self.timer_view.render(self.timer_state), id="timer-view")

    def on_mount(self) -> None:
        if self.initial_event is not None:
            self.handle_timer_event(self.initial_event)

    def on_key(self, event: events.Key) -> None:
        """Translate key presses into timer events."""
        timer_event = resolve_key(event.key, self.timer_state)
        if timer_event is None:
            return
        event.stop()
        self.handle_timer_event(timer_event)

    def action_quit_timer(self) -> None:
        self.handle_timer_event(Quit())

    def handle_timer_event(self, event: Event) -> None:
        """Feed one event through the state machine and apply its effects."""
        logger = get_logger()
        previous = self.timer_state
        self.timer_state, effects = update(
            previous, event, transition_delay=self.transition_delay
        )
        if self.timer_state.phase != previous.phase:
            logger.debug(
                "%s: %s -> %s (%s)",
                type(event).__name__,
                previous.phase,
                self.timer_state.phase,
                self.timer_state.session.label or "menu",
            )
        self.refresh_view()
        for effect in effects:
            self.apply_effect(effect)

    def apply_effect(self, effect: Effect) -> None:
        if isinstance(effect, ScheduleTick):
            # At most one tick in flight, even after a quick pause and resume.
            if self._tick_timer is not None:
                self._tick_timer.stop()
            self._tick_timer = self.set_timer(self.tick_interval, self._deliver_tick)
        elif isinstance(effect, ScheduleTransition):
            self.set_timer(effect.delay, self._deliver_transition)
        elif isinstance(effect, PlaySound):
            get_logger().info(
                "%s session complete (elapsed %ss of %ss)",
                self.timer_state.session.label,
                self.timer_state.elapsed_seconds,
                self.timer_state.total_seconds,
            )
            self.sound_player.play()
        elif isinstance(effect, ClearScreen):
            self.refresh(repaint=True, layout=True)
        elif isinstance(effect, Terminate):
            self.exit(return_code=0)

    def refresh_view(self) -> None:
        rendered = self.timer_view.render(self.timer_state)
        self.query_one("#timer-view", Static).update(rendered)

    def _deliver_tick(self) -> None:
        self._tick_timer = None
        self.handle_timer_event(ClockTick())

    def _deliver_transition(self) -> None:
        self.handle_timer_event(TransitionReady())


def build_timer_app(
    config: AppConfig, initial_event: Event | None = None, sound: bool = True
) -> TimerApp:
    """Create a TimerApp wired to the user's configuration."""
    sound_config = config.sound
    if not sound:
        sound_config = sound_config.model_copy(update={"enabled": False})
    return TimerApp(
        sound_player=SoundPlayer(sound_config),
        view=TimerView(color=config.ui.color),
        initial_event=initial_event,
        transition_delay=config.timer.transition_delay,
    )
