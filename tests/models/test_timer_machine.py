"""Unit tests for pomotimer_cli.models.timer.machine.

Coverage strategy
-----------------
* ``update`` is driven through every phase with every event type.
* Property-style checks (tick monotonicity, pause freezing time, skip
  equivalence, auto-cycle alternation, double-transition guard) run over
  generated event sequences rather than single transitions.
"""

from __future__ import annotations

import pytest

from pomotimer_cli.models.timer import (
    ClearScreen,
    ClockTick,
    PlaySound,
    Quit,
    ReturnToMenu,
    ScheduleTick,
    ScheduleTransition,
    Select,
    SelectAuto,
    SessionKind,
    Skip,
    Terminate,
    TimerState,
    TogglePause,
    TransitionReady,
    initial_state,
    start_session,
    update,
)

ALL_EVENTS = [
    Select(SessionKind.WORK),
    Select(SessionKind.BREAK),
    Select(SessionKind.NONE),
    SelectAuto(),
    Quit(),
    TogglePause(),
    Skip(),
    ReturnToMenu(),
    ClockTick(),
    TransitionReady(),
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _run(state: TimerState, *events) -> tuple[TimerState, list]:
    """Apply events in order, returning the final state and all effects."""
    effects: list = []
    for event in events:
        state, produced = update(state, event)
        effects.extend(produced)
    return state, effects


def _tick(state: TimerState, count: int) -> TimerState:
    for _ in range(count):
        state, _ = update(state, ClockTick())
    return state


def _check_invariants(state: TimerState) -> None:
    assert state.display_elapsed <= state.total_seconds
    if state.complete:
        assert not state.running
    if state.mode == "menu":
        assert state.session is SessionKind.NONE
        assert state.elapsed_seconds == 0
        assert state.auto_transition is False
    else:
        flags = [state.running, state.complete, state.paused]
        assert flags.count(True) == 1
    if state.awaiting_transition_signal:
        assert state.auto_transition and state.complete


# ---------------------------------------------------------------------------
# Menu phase
# ---------------------------------------------------------------------------


class TestMenu:
    def test_select_work_starts_running_session(self):
        state, effects = update(initial_state(), Select(SessionKind.WORK))
        assert state.phase == "running"
        assert state.session is SessionKind.WORK
        assert state.total_seconds == 1800
        assert state.elapsed_seconds == 0
        assert state.auto_transition is False
        assert effects == [ScheduleTick()]

    def test_select_break_starts_running_session(self):
        state, effects = update(initial_state(), Select(SessionKind.BREAK))
        assert state.session is SessionKind.BREAK
        assert state.total_seconds == 600
        assert effects == [ScheduleTick()]

    def test_select_auto_starts_work_with_auto_transition(self):
        state, effects = update(initial_state(), SelectAuto())
        assert state.phase == "running"
        assert state.session is SessionKind.WORK
        assert state.auto_transition is True
        assert effects == [ScheduleTick()]

    def test_select_none_is_noop(self):
        state, effects = update(initial_state(), Select(SessionKind.NONE))
        assert state == initial_state()
        assert effects == []

    def test_quit_terminates_without_changing_state(self):
        state, effects = update(initial_state(), Quit())
        assert state == initial_state()
        assert effects == [Terminate()]

    @pytest.mark.parametrize(
        "event",
        [TogglePause(), Skip(), ReturnToMenu(), ClockTick(), TransitionReady()],
    )
    def test_other_events_are_noops(self, event):
        state, effects = update(initial_state(), event)
        assert state == initial_state()
        assert effects == []


# ---------------------------------------------------------------------------
# Running phase
# ---------------------------------------------------------------------------


class TestRunning:
    def test_tick_advances_elapsed_and_rearms(self):
        state, effects = update(start_session(SessionKind.WORK), ClockTick())
        assert state.elapsed_seconds == 1
        assert state.running
        assert effects == [ScheduleTick()]

    def test_tick_monotonicity(self):
        state = start_session(SessionKind.BREAK)
        previous = state.elapsed_seconds
        for _ in range(599):
            state, effects = update(state, ClockTick())
            assert state.elapsed_seconds == previous + 1
            assert effects == [ScheduleTick()]
            previous = state.elapsed_seconds
        assert not state.complete

    def test_final_tick_completes_non_auto_session(self):
        state = _tick(start_session(SessionKind.BREAK), 599)
        state, effects = update(state, ClockTick())
        assert state.phase == "complete"
        assert state.complete and not state.running
        assert state.elapsed_seconds == 600
        assert effects == [PlaySound(), ClearScreen()]

    def test_final_tick_arms_transition_under_auto(self):
        state = _tick(start_session(SessionKind.WORK, auto_transition=True), 1799)
        state, effects = update(state, ClockTick())
        assert state.phase == "awaiting_transition"
        assert state.awaiting_transition_signal
        assert effects == [PlaySound(), ScheduleTransition(delay=2.0)]

    def test_transition_delay_is_passed_through(self):
        state = _tick(start_session(SessionKind.WORK, auto_transition=True), 1799)
        _, effects = update(state, ClockTick(), transition_delay=0.5)
        assert ScheduleTransition(delay=0.5) in effects

    def test_completion_threshold_not_reached_early(self):
        state = start_session(SessionKind.BREAK)
        for _ in range(599):
            state, _ = update(state, ClockTick())
            assert not state.complete

    def test_toggle_pause_pauses_without_effects(self):
        state, effects = update(start_session(SessionKind.WORK), TogglePause())
        assert state.phase == "paused"
        assert effects == []

    def test_quit_clears_then_terminates(self):
        _, effects = update(start_session(SessionKind.WORK), Quit())
        assert effects == [ClearScreen(), Terminate()]

    @pytest.mark.parametrize(
        "event",
        [ReturnToMenu(), TransitionReady(), Select(SessionKind.BREAK), SelectAuto()],
    )
    def test_irrelevant_events_are_noops(self, event):
        running = start_session(SessionKind.WORK)
        state, effects = update(running, event)
        assert state == running
        assert effects == []


# ---------------------------------------------------------------------------
# Paused phase
# ---------------------------------------------------------------------------


class TestPaused:
    def test_pause_freezes_time(self):
        state = _tick(start_session(SessionKind.WORK), 10)
        state, _ = update(state, TogglePause())
        for _ in range(50):
            state, effects = update(state, ClockTick())
            assert state.elapsed_seconds == 10
            assert effects == []

    def test_resume_rearms_tick(self):
        paused = start_session(SessionKind.WORK).with_phase("paused")
        state, effects = update(paused, TogglePause())
        assert state.running
        assert effects == [ScheduleTick()]

    def test_resume_continues_from_frozen_elapsed(self):
        state = _tick(start_session(SessionKind.WORK), 5)
        state, _ = _run(state, TogglePause(), ClockTick(), ClockTick(), TogglePause())
        state = _tick(state, 2)
        assert state.elapsed_seconds == 7

    def test_skip_while_paused_finishes(self):
        paused = start_session(SessionKind.BREAK).with_phase("paused")
        state, effects = update(paused, Skip())
        assert state.phase == "complete"
        assert effects == [PlaySound(), ClearScreen()]

    def test_quit_while_paused(self):
        paused = start_session(SessionKind.BREAK).with_phase("paused")
        _, effects = update(paused, Quit())
        assert effects == [ClearScreen(), Terminate()]

    @pytest.mark.parametrize("event", [ReturnToMenu(), TransitionReady()])
    def test_irrelevant_events_are_noops(self, event):
        paused = start_session(SessionKind.BREAK).with_phase("paused")
        assert update(paused, event) == (paused, [])


# ---------------------------------------------------------------------------
# Skip
# ---------------------------------------------------------------------------


class TestSkip:
    @pytest.mark.parametrize("elapsed", [0, 1, 299, 1799])
    def test_skip_matches_natural_completion(self, elapsed):
        base = start_session(SessionKind.WORK)
        skipped, skip_effects = update(_tick(base, elapsed), Skip())
        natural = _tick(base, 1800)
        assert skipped.phase == natural.phase == "complete"
        assert skipped.running is natural.running is False
        assert skip_effects == [PlaySound(), ClearScreen()]

    @pytest.mark.parametrize("elapsed", [0, 42, 1799])
    def test_skip_under_auto_arms_transition(self, elapsed):
        base = start_session(SessionKind.WORK, auto_transition=True)
        state, effects = update(_tick(base, elapsed), Skip())
        assert state.awaiting_transition_signal
        assert effects == [PlaySound(), ScheduleTransition(delay=2.0)]

    def test_skip_keeps_real_elapsed(self):
        state, _ = update(_tick(start_session(SessionKind.WORK), 30), Skip())
        assert state.elapsed_seconds == 30


# ---------------------------------------------------------------------------
# Complete phase
# ---------------------------------------------------------------------------


class TestComplete:
    @pytest.mark.parametrize("kind", [SessionKind.WORK, SessionKind.BREAK])
    def test_return_to_menu_resets(self, kind):
        complete, _ = update(start_session(kind), Skip())
        state, effects = update(complete, ReturnToMenu())
        assert state == initial_state()
        assert state.mode == "menu"
        assert state.session is SessionKind.NONE
        assert state.elapsed_seconds == 0
        assert state.auto_transition is False
        assert effects == [ClearScreen()]

    def test_quit(self):
        complete, _ = update(start_session(SessionKind.WORK), Skip())
        _, effects = update(complete, Quit())
        assert effects == [ClearScreen(), Terminate()]

    @pytest.mark.parametrize(
        "event", [ClockTick(), TogglePause(), Skip(), TransitionReady(), SelectAuto()]
    )
    def test_other_events_are_noops(self, event):
        complete, _ = update(start_session(SessionKind.WORK), Skip())
        assert update(complete, event) == (complete, [])


# ---------------------------------------------------------------------------
# Awaiting transition phase
# ---------------------------------------------------------------------------


class TestAwaitingTransition:
    def _awaiting(self, kind=SessionKind.WORK) -> TimerState:
        state, _ = update(start_session(kind, auto_transition=True), Skip())
        return state

    def test_transition_ready_starts_next_session(self):
        state, effects = update(self._awaiting(), TransitionReady())
        assert state.session is SessionKind.BREAK
        assert state.elapsed_seconds == 0
        assert state.total_seconds == 600
        assert state.running
        assert state.auto_transition is True
        assert not state.awaiting_transition_signal
        assert effects == [ScheduleTick()]

    def test_break_is_followed_by_work(self):
        state, _ = update(self._awaiting(SessionKind.BREAK), TransitionReady())
        assert state.session is SessionKind.WORK
        assert state.total_seconds == 1800

    @pytest.mark.parametrize(
        "event", [ClockTick(), ReturnToMenu(), Skip(), TogglePause(), SelectAuto()]
    )
    def test_stray_events_are_noops(self, event):
        awaiting = self._awaiting()
        assert update(awaiting, event) == (awaiting, [])

    def test_quit(self):
        _, effects = update(self._awaiting(), Quit())
        assert effects == [ClearScreen(), Terminate()]

    def test_none_session_falls_back_to_complete(self):
        odd = TimerState(phase="awaiting_transition", auto_transition=True)
        state, effects = update(odd, TransitionReady())
        assert state.phase == "complete"
        assert effects == []

    def test_guard_against_double_transition(self):
        state = self._awaiting()
        state, _ = _run(state, ClockTick(), ClockTick())
        state, first = update(state, TransitionReady())
        state, second = update(state, TransitionReady())
        assert state.session is SessionKind.BREAK
        assert state.elapsed_seconds == 0
        assert first == [ScheduleTick()]
        assert second == []


# ---------------------------------------------------------------------------
# Sequences and scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_work_session_then_return_to_menu(self):
        state, _ = update(initial_state(), Select(SessionKind.WORK))
        state = _tick(state, 1800)
        assert state.complete and not state.running
        assert state.display_elapsed == 1800
        state, _ = update(state, ReturnToMenu())
        assert state == initial_state()

    def test_auto_work_completes_into_break(self):
        state, _ = update(initial_state(), SelectAuto())
        state = _tick(state, 1800)
        state, _ = update(state, TransitionReady())
        assert state.session is SessionKind.BREAK
        assert state.elapsed_seconds == 0
        assert state.total_seconds == 600
        assert state.running
        assert state.auto_transition

    def test_auto_cycle_alternates(self):
        state, _ = update(initial_state(), SelectAuto())
        visited = [state.session]
        for _ in range(6):
            state, _ = _run(state, Skip(), TransitionReady())
            visited.append(state.session)
        assert visited == [
            SessionKind.WORK,
            SessionKind.BREAK,
            SessionKind.WORK,
            SessionKind.BREAK,
            SessionKind.WORK,
            SessionKind.BREAK,
            SessionKind.WORK,
        ]

    def test_invariants_hold_over_every_event_sequence(self):
        states = [initial_state()]
        seen = set(states)
        # Breadth-first over three events from the start plus a near-complete run
        states.append(_tick(start_session(SessionKind.BREAK, auto_transition=True), 599))
        states.append(_tick(start_session(SessionKind.BREAK), 599))
        for _ in range(3):
            frontier = []
            for state in states:
                for event in ALL_EVENTS:
                    nxt, _ = update(state, event)
                    _check_invariants(nxt)
                    if nxt not in seen:
                        seen.add(nxt)
                        frontier.append(nxt)
            states = frontier
        assert seen
