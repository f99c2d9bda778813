"""Tests for the Pomodoro timer engine.

Covers: initial state, start/pause/reset transitions, countdown and
session switching, defensive no-ops, duration adjustment, and the
MM:SS formatter.
"""

import pytest

from pomodoro.timer.engine import (
    TimerEngine, TimerState, SessionType, TimerStatus, Direction,
    DEFAULT_WORK_DURATION, DEFAULT_BREAK_DURATION, MIN_DURATION,
    format_time,
)

from helpers import run_ticks


# ═══════════════════════════════════════════════════════════════════════════
#  INITIAL STATE
# ═══════════════════════════════════════════════════════════════════════════


class TestInitialState:

    def test_defaults(self, engine):
        s = engine.state
        assert s.work_duration == 1500
        assert s.break_duration == 300
        assert s.current_time == 1500
        assert s.current_session == SessionType.WORK
        assert s.timer_status == TimerStatus.IDLE

    def test_injected_state_is_used(self):
        state = TimerState.initial(work_duration=600, break_duration=120)
        engine = TimerEngine(state)
        assert engine.state is state
        assert engine.state.current_time == 600

    def test_direct_construction_clamps_durations(self):
        state = TimerState(work_duration=10, break_duration=59, current_time=-5)
        assert state.work_duration == MIN_DURATION
        assert state.break_duration == MIN_DURATION
        assert state.current_time == 0

    def test_injected_short_break_never_used(self):
        state = TimerState(
            work_duration=0, break_duration=0, current_time=1,
            timer_status=TimerStatus.RUNNING,
        )
        engine = TimerEngine(state)
        engine.tick()
        assert state.current_session == SessionType.BREAK
        assert state.current_time == MIN_DURATION

    def test_initial_clamps_short_durations(self):
        state = TimerState.initial(work_duration=10, break_duration=0)
        assert state.work_duration == MIN_DURATION
        assert state.break_duration == MIN_DURATION
        assert state.current_time == MIN_DURATION


# ═══════════════════════════════════════════════════════════════════════════
#  STATE TRANSITIONS
# ═══════════════════════════════════════════════════════════════════════════


class TestStateTransitions:

    def test_start_from_idle(self, engine):
        engine.start()
        assert engine.state.timer_status == TimerStatus.RUNNING
        assert engine.state.current_time == DEFAULT_WORK_DURATION

    def test_start_returns_state(self, engine):
        assert engine.start() is engine.state

    def test_start_is_noop_when_running(self, engine):
        engine.start()
        engine.tick()
        engine.start()
        assert engine.state.timer_status == TimerStatus.RUNNING
        assert engine.state.current_time == DEFAULT_WORK_DURATION - 1

    def test_pause_from_running(self, engine):
        engine.start()
        engine.pause()
        assert engine.state.timer_status == TimerStatus.PAUSED

    def test_pause_is_noop_when_idle(self, engine):
        engine.pause()
        assert engine.state.timer_status == TimerStatus.IDLE

    def test_pause_is_noop_when_paused(self, engine):
        engine.start()
        engine.pause()
        engine.pause()
        assert engine.state.timer_status == TimerStatus.PAUSED

    def test_pause_then_start_keeps_remaining(self, engine):
        engine.start()
        run_ticks(engine, 42)
        before = engine.state.current_time
        engine.pause()
        engine.start()
        assert engine.state.timer_status == TimerStatus.RUNNING
        assert engine.state.current_time == before

    @pytest.mark.parametrize("setup", ["idle", "running", "paused", "break"])
    def test_reset_from_any_state(self, engine, setup):
        engine.adjust_duration(SessionType.WORK, Direction.INCREASE)
        engine.adjust_duration(SessionType.BREAK, Direction.INCREASE)
        if setup in ("running", "paused", "break"):
            engine.start()
            run_ticks(engine, 10)
        if setup == "paused":
            engine.pause()
        if setup == "break":
            run_ticks(engine, engine.state.current_time)
            assert engine.state.current_session == SessionType.BREAK

        engine.reset()

        s = engine.state
        assert s.timer_status == TimerStatus.IDLE
        assert s.current_session == SessionType.WORK
        assert s.current_time == s.work_duration
        assert s.work_duration == 1560
        assert s.break_duration == 360


# ═══════════════════════════════════════════════════════════════════════════
#  COUNTDOWN / SESSION SWITCH
# ═══════════════════════════════════════════════════════════════════════════


class TestCountdown:

    def test_tick_decrements(self, engine):
        engine.start()
        engine.tick()
        assert engine.state.current_time == DEFAULT_WORK_DURATION - 1

    @pytest.mark.parametrize("status", ["idle", "paused"])
    def test_tick_ignored_when_not_running(self, engine, status):
        if status == "paused":
            engine.start()
            engine.tick()
            engine.pause()
        before = engine.state.current_time
        run_ticks(engine, 5)
        assert engine.state.current_time == before

    def test_full_work_interval_switches_to_break(self, engine):
        engine.start()
        run_ticks(engine, 1500)
        s = engine.state
        assert s.current_session == SessionType.BREAK
        assert s.current_time == DEFAULT_BREAK_DURATION
        assert s.timer_status == TimerStatus.RUNNING

    def test_last_second_scenario(self, engine):
        engine.start()
        run_ticks(engine, 1499)
        s = engine.state
        assert s.current_time == 1
        assert s.current_session == SessionType.WORK
        assert s.timer_status == TimerStatus.RUNNING

        engine.tick()
        assert s.current_session == SessionType.BREAK
        assert s.current_time == 300
        assert s.timer_status == TimerStatus.RUNNING

    def test_break_switches_back_to_work(self, engine):
        engine.start()
        run_ticks(engine, 1500 + 300)
        assert engine.state.current_session == SessionType.WORK
        assert engine.state.current_time == 1500
        assert engine.state.timer_status == TimerStatus.RUNNING

    def test_tick_at_zero_expires_without_going_negative(self):
        state = TimerState(
            work_duration=120, break_duration=60, current_time=0,
            timer_status=TimerStatus.RUNNING,
        )
        engine = TimerEngine(state)
        engine.tick()
        assert state.current_session == SessionType.BREAK
        assert state.current_time == 60

    def test_expiry_happens_once_per_interval(self, engine):
        engine.start()
        run_ticks(engine, 1500)
        assert engine.state.current_session == SessionType.BREAK
        engine.on_interval_expired()  # stale: remaining is not zero
        assert engine.state.current_session == SessionType.BREAK
        assert engine.state.current_time == 300

    def test_expiry_ignored_when_not_running(self):
        state = TimerState(work_duration=120, break_duration=60, current_time=0)
        engine = TimerEngine(state)
        engine.on_interval_expired()
        assert state.current_session == SessionType.WORK
        assert state.current_time == 0

    def test_remaining_never_negative(self, engine):
        engine.start()
        for _ in range(5000):
            engine.tick()
            assert engine.state.current_time > 0

    def test_percent_complete(self):
        engine = TimerEngine(TimerState.initial(work_duration=100 * 60))
        assert engine.percent_complete == pytest.approx(0.0)
        engine.start()
        run_ticks(engine, 3000)
        assert engine.percent_complete == pytest.approx(0.5)

    def test_total_duration_follows_session(self, engine):
        assert engine.total_duration == 1500
        engine.start()
        run_ticks(engine, 1500)
        assert engine.total_duration == 300


# ═══════════════════════════════════════════════════════════════════════════
#  DURATION ADJUSTMENT
# ═══════════════════════════════════════════════════════════════════════════


class TestAdjustDuration:

    def test_increase_work_while_idle(self, engine):
        engine.adjust_duration(SessionType.WORK, Direction.INCREASE)
        assert engine.state.work_duration == 1560
        assert engine.state.current_time == 1560

    def test_decrease_work_while_idle(self, engine):
        engine.adjust_duration(SessionType.WORK, Direction.DECREASE)
        assert engine.state.work_duration == 1440
        assert engine.state.current_time == 1440

    def test_floor_holds_for_any_number_of_decreases(self, engine):
        for _ in range(100):
            engine.adjust_duration(SessionType.WORK, Direction.DECREASE)
            engine.adjust_duration(SessionType.BREAK, Direction.DECREASE)
            assert engine.duration_for(SessionType.WORK) >= MIN_DURATION
            assert engine.duration_for(SessionType.BREAK) >= MIN_DURATION
        assert engine.state.work_duration == 60
        assert engine.state.break_duration == 60
        assert engine.state.current_time == 60

    def test_increase_active_session_while_running_overwrites_countdown(self, engine):
        engine.start()
        run_ticks(engine, 100)
        engine.adjust_duration(SessionType.WORK, Direction.INCREASE)
        assert engine.state.work_duration == 1560
        assert engine.state.current_time == 1560
        assert engine.state.timer_status == TimerStatus.RUNNING

    def test_adjust_inactive_session_leaves_countdown(self, engine):
        engine.start()
        run_ticks(engine, 1500)  # now in break
        run_ticks(engine, 10)
        engine.adjust_duration(SessionType.WORK, Direction.INCREASE)
        assert engine.state.work_duration == 1560
        assert engine.state.current_time == 290

    def test_adjust_break_while_in_work(self, engine):
        engine.adjust_duration(SessionType.BREAK, Direction.INCREASE)
        assert engine.state.break_duration == 360
        assert engine.state.current_time == 1500

    def test_adjust_break_while_in_break(self, engine):
        engine.start()
        run_ticks(engine, 1500)
        engine.adjust_duration(SessionType.BREAK, Direction.DECREASE)
        assert engine.state.break_duration == 240
        assert engine.state.current_time == 240

    def test_adjusted_break_used_at_next_switch(self, engine):
        engine.adjust_duration(SessionType.BREAK, Direction.INCREASE)
        engine.start()
        run_ticks(engine, 1500)
        assert engine.state.current_time == 360

    def test_adjust_while_paused_keeps_paused(self, engine):
        engine.start()
        engine.pause()
        engine.adjust_duration(SessionType.WORK, Direction.DECREASE)
        assert engine.state.timer_status == TimerStatus.PAUSED
        assert engine.state.current_time == 1440


# ═══════════════════════════════════════════════════════════════════════════
#  FORMATTING
# ═══════════════════════════════════════════════════════════════════════════


class TestFormatTime:

    @pytest.mark.parametrize("seconds, expected", [
        (0, "00:00"),
        (5, "00:05"),
        (65, "01:05"),
        (300, "05:00"),
        (1500, "25:00"),
        (3599, "59:59"),
    ])
    def test_format(self, seconds, expected):
        assert format_time(seconds) == expected

    def test_negative_treated_as_zero(self):
        assert format_time(-3) == "00:00"
