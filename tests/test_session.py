"""Tests for the SessionController state machine."""

import pytest

from models import Difficulty, EventType, Point2D, SessionState
from aimrush.input.input_event import InputEvent
from aimrush.random_source import RandomNumberSource
from aimrush.session import SessionController, VALID_DURATIONS
from aimrush.spawn import SpawnEngine


def run_ticks(scheduler, count):
    for _ in range(count):
        scheduler.advance(1.0)


def hit_live_target(controller):
    return controller.pointer_down_on_surface(controller.live_target.center)


MISS_POINT = Point2D(x=0.0, y=0.0)  # targets keep one diameter from the edges


class TestInitialState:
    """A fresh controller is idle with nothing on the board."""

    def test_starts_idle(self, controller):
        assert controller.state == SessionState.IDLE
        assert controller.score == 0
        assert controller.remaining_seconds == 0
        assert controller.live_target is None
        assert not controller.is_running

    def test_default_difficulty_is_medium(self, controller):
        assert controller.difficulty == Difficulty.MEDIUM

    def test_initial_difficulty_argument(self, presentation):
        controller = SessionController(presentation, difficulty='hard')
        assert controller.difficulty == Difficulty.HARD

    def test_unknown_initial_difficulty_uses_medium(self, presentation):
        controller = SessionController(presentation, difficulty='nightmare')
        assert controller.difficulty == Difficulty.MEDIUM

    def test_no_outbound_calls_on_construction(self, controller, presentation):
        assert presentation.calls == []


class TestChooseDuration:
    """Starting a session."""

    def test_idle_to_running(self, controller, presentation):
        """choose_duration(20) starts a 20 second session with one live target."""
        controller.choose_duration(20)

        assert controller.state == SessionState.RUNNING
        assert controller.remaining_seconds == 20
        assert controller.session.duration_seconds == 20
        assert controller.score == 0
        assert controller.live_target is not None
        assert presentation.count('on_target_spawned') == 1
        assert presentation.spawned()[0] == controller.live_target

    def test_start_call_order(self, controller, presentation):
        controller.choose_duration(30)

        assert presentation.names() == ['on_session_started', 'on_timer_update', 'on_target_spawned']
        assert presentation.args_of('on_timer_update') == [(30,)]

    def test_starts_one_countdown(self, controller, scheduler):
        controller.choose_duration(20)
        assert scheduler.pending == 1
        assert controller.countdown_active

    @pytest.mark.parametrize('seconds', VALID_DURATIONS)
    def test_all_allowed_durations(self, controller, seconds):
        controller.choose_duration(seconds)
        assert controller.remaining_seconds == seconds

    @pytest.mark.parametrize('seconds', [0, -5, 1, 10, 60])
    def test_invalid_duration_ignored(self, controller, presentation, scheduler, seconds):
        controller.choose_duration(seconds)

        assert controller.state == SessionState.IDLE
        assert presentation.calls == []
        assert scheduler.pending == 0

    def test_ignored_while_running(self, controller, presentation, scheduler):
        """A second choose_duration cannot start an overlapping countdown."""
        controller.choose_duration(20)
        presentation.clear()

        controller.choose_duration(5)

        assert controller.remaining_seconds == 20
        assert presentation.calls == []
        assert scheduler.pending == 1

    def test_ignored_while_finished(self, controller, presentation, scheduler):
        controller.choose_duration(5)
        run_ticks(scheduler, 5)
        presentation.clear()

        controller.choose_duration(20)

        assert controller.state == SessionState.FINISHED
        assert presentation.calls == []


class TestCountdown:
    """Ticks, finish, and tick-count semantics."""

    def test_tick_decrements_and_reports(self, controller, presentation, scheduler):
        controller.choose_duration(20)
        presentation.clear()

        scheduler.advance(1.0)

        assert controller.remaining_seconds == 19
        assert presentation.args_of('on_timer_update') == [(19,)]

    def test_no_tick_before_interval(self, controller, scheduler):
        controller.choose_duration(20)
        scheduler.advance(0.99)
        assert controller.remaining_seconds == 20

    def test_finishes_after_exactly_duration_ticks(self, controller, presentation, scheduler):
        """A 20 second session ends on the 20th tick."""
        controller.choose_duration(20)

        run_ticks(scheduler, 19)
        assert controller.state == SessionState.RUNNING
        assert controller.remaining_seconds == 1

        run_ticks(scheduler, 1)
        assert controller.state == SessionState.FINISHED
        assert controller.remaining_seconds == 0
        assert controller.live_target is None
        assert presentation.count('on_session_finished') == 1

    def test_finish_emitted_once(self, controller, presentation, scheduler):
        controller.choose_duration(5)
        run_ticks(scheduler, 15)
        assert presentation.count('on_session_finished') == 1
        assert scheduler.pending == 0

    def test_finish_discards_live_target(self, controller, presentation, scheduler):
        controller.choose_duration(5)
        target_id = controller.live_target.id

        run_ticks(scheduler, 5)

        assert presentation.args_of('on_target_removed') == [(target_id,)]
        assert presentation.names()[-2:] == ['on_target_removed', 'on_session_finished']

    def test_timer_updates_reach_zero(self, controller, presentation, scheduler):
        controller.choose_duration(5)
        run_ticks(scheduler, 5)
        assert [args[0] for args in presentation.args_of('on_timer_update')] == [5, 4, 3, 2, 1, 0]

    def test_catch_up_on_long_frame(self, controller, presentation, scheduler):
        controller.choose_duration(5)
        scheduler.advance(10.0)
        assert controller.state == SessionState.FINISHED
        assert presentation.count('on_session_finished') == 1

    def test_tick_ignored_while_idle(self, controller, presentation):
        controller.tick()
        assert controller.state == SessionState.IDLE
        assert presentation.calls == []

    def test_tick_ignored_while_finished(self, controller, presentation, scheduler):
        controller.choose_duration(5)
        run_ticks(scheduler, 5)
        presentation.clear()

        controller.tick()

        assert presentation.calls == []

    def test_custom_tick_interval(self, presentation, scheduler, rng):
        controller = SessionController(
            presentation, scheduler, spawn_engine=SpawnEngine(rng=rng), tick_interval=0.5
        )
        controller.choose_duration(5)
        scheduler.advance(2.5)
        assert controller.state == SessionState.FINISHED


class TestPointerDown:
    """Hit and miss evaluation."""

    def test_hit_scores_and_respawns(self, controller, presentation):
        controller.choose_duration(20)
        old_target = controller.live_target
        presentation.clear()

        result = hit_live_target(controller)

        assert result == EventType.HIT
        assert controller.score == 1
        assert controller.live_target is not None
        assert controller.live_target.id != old_target.id
        assert presentation.names() == ['on_target_removed', 'on_target_spawned', 'on_hit']
        assert presentation.args_of('on_target_removed') == [(old_target.id,)]

    def test_hit_on_circle_edge(self, controller):
        controller.choose_duration(20)
        target = controller.live_target
        edge = Point2D(x=target.center.x + target.radius, y=target.center.y)

        assert controller.pointer_down_on_surface(edge) == EventType.HIT

    def test_bounding_box_corner_is_a_miss(self, controller):
        controller.choose_duration(20)
        target = controller.live_target
        corner = Point2D(x=target.x + 0.5, y=target.y + 0.5)

        assert controller.pointer_down_on_surface(corner) == EventType.MISS
        assert controller.score == 0

    def test_miss_keeps_score_and_target(self, controller, presentation):
        controller.choose_duration(20)
        target = controller.live_target
        presentation.clear()

        result = controller.pointer_down_on_surface(MISS_POINT)

        assert result == EventType.MISS
        assert controller.score == 0
        assert controller.live_target == target
        assert presentation.names() == ['on_miss']

    def test_ignored_while_idle(self, controller, presentation):
        assert controller.pointer_down_on_surface(MISS_POINT) is None
        assert presentation.calls == []

    def test_ignored_while_finished(self, controller, presentation, scheduler):
        controller.choose_duration(5)
        run_ticks(scheduler, 5)
        presentation.clear()

        assert controller.pointer_down_on_surface(MISS_POINT) is None
        assert presentation.calls == []

    def test_accepts_tuple(self, controller):
        controller.choose_duration(20)
        center = controller.live_target.center
        assert controller.pointer_down_on_surface((center.x, center.y)) == EventType.HIT

    def test_accepts_input_event(self, controller):
        controller.choose_duration(20)
        event = InputEvent(position=controller.live_target.center, timestamp=1.0)
        assert controller.pointer_down_on_surface(event) == EventType.HIT

    def test_statistics(self, controller):
        controller.choose_duration(20)
        hit_live_target(controller)
        hit_live_target(controller)
        hit_live_target(controller)
        controller.pointer_down_on_surface(MISS_POINT)

        session = controller.session
        assert session.hits == 3
        assert session.misses == 1
        assert session.total_clicks == 4
        assert session.accuracy == pytest.approx(0.75)
        assert session.score == session.hits

    def test_one_live_target_at_a_time(self, controller, presentation):
        controller.choose_duration(20)
        for _ in range(10):
            hit_live_target(controller)

        spawned = presentation.count('on_target_spawned')
        removed = presentation.count('on_target_removed')
        assert spawned - removed == 1

    def test_score_never_decreases(self, controller):
        controller.choose_duration(20)
        scores = []
        for index in range(12):
            if index % 3 == 0:
                controller.pointer_down_on_surface(MISS_POINT)
            else:
                hit_live_target(controller)
            scores.append(controller.score)
        assert scores == sorted(scores)


class TestChooseDifficulty:
    """Difficulty selection."""

    def test_sets_difficulty_while_idle(self, controller):
        controller.choose_difficulty('hard')
        assert controller.difficulty == Difficulty.HARD

    def test_accepts_enum_and_any_case(self, controller):
        controller.choose_difficulty(Difficulty.EASY)
        assert controller.difficulty == Difficulty.EASY
        controller.choose_difficulty('HARD')
        assert controller.difficulty == Difficulty.HARD

    def test_unknown_id_keeps_previous(self, controller):
        controller.choose_difficulty('hard')
        controller.choose_difficulty('nightmare')
        assert controller.difficulty == Difficulty.HARD

    def test_ignored_while_running(self, controller):
        controller.choose_duration(20)
        controller.choose_difficulty('easy')
        assert controller.difficulty == Difficulty.MEDIUM

    def test_no_outbound_calls(self, controller, presentation):
        controller.choose_difficulty('easy')
        assert presentation.calls == []


class TestReset:
    """Returning to idle."""

    def test_reset_while_running(self, controller, presentation, scheduler):
        controller.choose_duration(20)
        hit_live_target(controller)
        live_id = controller.live_target.id
        presentation.clear()

        controller.reset()

        assert controller.state == SessionState.IDLE
        assert controller.score == 0
        assert controller.remaining_seconds == 0
        assert controller.session.duration_seconds == 0
        assert controller.live_target is None
        assert scheduler.pending == 0
        assert presentation.args_of('on_target_removed') == [(live_id,)]

    def test_no_ticks_after_reset(self, controller, presentation, scheduler):
        controller.choose_duration(20)
        controller.reset()
        presentation.clear()

        run_ticks(scheduler, 25)

        assert presentation.calls == []

    def test_reset_after_finish(self, controller, scheduler):
        controller.choose_duration(5)
        hit_live_target(controller)
        run_ticks(scheduler, 5)

        controller.reset()

        assert controller.state == SessionState.IDLE
        assert controller.score == 0
        assert controller.session.hits == 0

    def test_reset_while_idle_is_harmless(self, controller, presentation):
        controller.reset()
        controller.reset()
        assert controller.state == SessionState.IDLE
        assert presentation.calls == []

    def test_keeps_difficulty(self, controller, scheduler):
        controller.choose_difficulty('easy')
        controller.choose_duration(5)
        run_ticks(scheduler, 5)

        controller.reset()

        assert controller.difficulty == Difficulty.EASY

    def test_new_session_after_reset(self, controller, presentation, scheduler):
        """A restarted session has a single countdown and ticks once per second."""
        controller.choose_duration(20)
        run_ticks(scheduler, 3)
        controller.reset()

        controller.choose_duration(5)
        assert scheduler.pending == 1

        scheduler.advance(1.0)
        assert controller.remaining_seconds == 4


class TestScenarios:
    """End-to-end sessions."""

    def test_five_second_easy_session(self, controller, presentation, scheduler):
        """Easy, five seconds: targets come from the easy range and the session ends after 5 ticks."""
        controller.choose_difficulty('easy')
        controller.choose_duration(5)

        for _ in range(4):
            hit_live_target(controller)
        run_ticks(scheduler, 4)
        assert controller.state == SessionState.RUNNING

        run_ticks(scheduler, 1)
        assert controller.state == SessionState.FINISHED
        assert presentation.args_of('on_session_finished') == [(4,)]
        for target in presentation.spawned():
            assert 35 <= target.diameter < 80

    def test_three_hits_final_score(self, controller, presentation, scheduler):
        controller.choose_duration(20)
        for _ in range(3):
            hit_live_target(controller)
            scheduler.advance(1.0)
        run_ticks(scheduler, 17)

        assert presentation.args_of('on_session_finished') == [(3,)]
        assert presentation.count('on_hit') == 3

    def test_surface_size_read_at_every_spawn(self, controller, presentation):
        """Targets follow the current surface, e.g. after the window was resized."""
        controller.choose_duration(20)
        queries = presentation.surface_queries

        presentation.surface = presentation.surface.model_copy(update={'width': 400, 'height': 500})
        hit_live_target(controller)

        assert presentation.surface_queries == queries + 1
        target = controller.live_target
        assert target.x + target.diameter <= 400
        assert target.y + target.diameter <= 500
        # narrow viewport enlarges medium targets to 40..85
        assert 40 <= target.diameter < 85

    def test_tiny_surface_never_raises(self, presentation, scheduler):
        presentation.surface = presentation.surface.model_copy(update={'width': 40, 'height': 30})
        controller = SessionController(presentation, scheduler, rng=RandomNumberSource(seed=3))

        controller.choose_duration(5)
        for _ in range(5):
            hit_live_target(controller)

        assert controller.score == 5

    def test_seeded_sessions_are_reproducible(self, make_presentation):
        def play(seed):
            presentation = make_presentation()
            controller = SessionController(presentation, rng=RandomNumberSource(seed=seed))
            controller.choose_duration(20)
            for _ in range(5):
                hit_live_target(controller)
            return presentation.spawned()

        assert [t.model_dump(exclude={'id'}) for t in play(99)] == \
            [t.model_dump(exclude={'id'}) for t in play(99)]

    def test_independent_controllers(self, scheduler, make_presentation):
        first = SessionController(make_presentation(), scheduler, rng=RandomNumberSource(seed=1))
        second = SessionController(make_presentation(), scheduler, rng=RandomNumberSource(seed=2))

        first.choose_duration(5)
        second.choose_duration(20)
        run_ticks(scheduler, 5)

        assert first.state == SessionState.FINISHED
        assert second.state == SessionState.RUNNING
        assert second.remaining_seconds == 15
