"""
Tests for GameSession: the single-slot state holder and its tick timer.
"""

from retro_snake.config import Config, UP, LEFT, RIGHT
from retro_snake.game import GameState
from retro_snake.session import TICK_EVENT, GameSession, PygameTimer


def doomed(score=2):
    """A running state one step from the left wall."""
    return GameState(
        snake=((0, 10), (1, 10), (2, 10)),
        direction=LEFT,
        pending=LEFT,
        food=(5, 5),
        score=score,
        running=True,
    )


class TestTimer:
    """The timer runs exactly while the game is running and not over."""

    def test_new_session_is_idle(self, session, timer):
        assert session.state.running is False
        assert session.ticking is False
        assert timer.calls == []

    def test_start_arms_with_interval(self, session, timer):
        session.start()
        assert timer.calls == [("arm", 110)]
        assert session.ticking is True

    def test_custom_interval(self, timer):
        session = GameSession(timer, Config(seed=1, move_interval_ms=75))
        session.start()
        assert timer.calls == [("arm", 75)]

    def test_repeated_start_does_not_rearm(self, session, timer):
        session.start()
        session.start()
        assert timer.calls == [("arm", 110)]

    def test_pause_cancels(self, session, timer):
        session.start()
        session.pause()
        assert timer.calls == [("arm", 110), ("cancel", None)]
        assert session.ticking is False

    def test_repeated_pause_is_noop(self, session, timer):
        session.pause()
        session.start()
        session.pause()
        session.pause()
        assert timer.calls == [("arm", 110), ("cancel", None)]

    def test_direction_change_keeps_timer(self, session, timer):
        session.start()
        session.request_direction(UP)
        session.request_direction(RIGHT)
        assert timer.calls == [("arm", 110)]

    def test_reset_while_running_cancels(self, session, timer):
        session.start()
        session.reset()
        assert session.state.running is False
        assert timer.calls[-1] == ("cancel", None)

    def test_death_cancels(self, session, timer):
        session.start()
        session.state = doomed()
        state = session.tick()
        assert state.game_over is True
        assert state.reason == "wall"
        assert timer.calls == [("arm", 110), ("cancel", None)]
        assert session.ticking is False


class TestTick:
    """tick() always works from the current state."""

    def test_tick_reads_latest_pending_direction(self, session):
        session.start()
        head = session.state.snake[0]
        session.request_direction(UP)
        state = session.tick()
        assert state.snake[0] == (head[0], head[1] - 1)
        assert state.direction == UP

    def test_tick_while_paused_is_noop(self, session):
        before = session.state
        assert session.tick() is before

    def test_stray_tick_after_game_over_is_noop(self, session):
        session.start()
        session.state = doomed()
        over = session.tick()
        assert session.tick() is over

    def test_reversal_rejected_through_session(self, session):
        session.start()
        session.request_direction(LEFT)
        assert session.state.pending == RIGHT


class TestControls:
    """Start, pause, toggle and reset through the session."""

    def test_start_after_game_over_resets_then_runs(self, session, timer):
        session.start()
        session.state = doomed(score=5)
        session.tick()
        session.start()

        state = session.state
        assert state.running is True
        assert state.game_over is False
        assert state.score == 0
        assert state.snake == ((8, 10), (7, 10), (6, 10))
        assert timer.calls[-1] == ("arm", 110)

    def test_reset_after_game_over_restores_initial_state(self, session):
        session.start()
        session.state = doomed(score=5)
        session.tick()
        session.reset()

        state = session.state
        assert state.snake == ((8, 10), (7, 10), (6, 10))
        assert state.direction == RIGHT
        assert state.pending == RIGHT
        assert state.score == 0
        assert state.game_over is False
        assert state.running is False
        assert state.food not in state.snake

    def test_toggle(self, session):
        session.toggle()
        assert session.state.running is True
        session.toggle()
        assert session.state.running is False

    def test_seeded_sessions_place_food_identically(self, timer):
        a = GameSession(timer, Config(seed=3))
        b = GameSession(timer, Config(seed=3))
        assert a.state.food == b.state.food


class TestPygameTimer:
    """PygameTimer drives pygame.time.set_timer."""

    def test_arm_and_cancel(self, monkeypatch):
        calls = []
        monkeypatch.setattr("pygame.time.set_timer", lambda event, ms: calls.append((event, ms)))
        timer = PygameTimer()
        timer.arm(110)
        timer.cancel()
        assert calls == [(TICK_EVENT, 110), (TICK_EVENT, 0)]
