"""
Tests for the game state machine, scoring and lives.

Run with: pytest tests/test_manager.py -v
"""
from unittest.mock import Mock

import pytest

from engine.api import Cue, Point
from games.reflex_shooter.manager import GameManager, GameStatus, TRANSITIONS, is_paused
from games.reflex_shooter.targets import Target, TargetOptions


@pytest.fixture
def feedback():
    return Mock()


@pytest.fixture
def manager(feedback, rng):
    options = TargetOptions(radius=25, padding=1, limit=1, start_ticks=10, min_ticks=5, decay_per_tick=0.1)
    return GameManager(bounds=(500, 500), feedback=feedback, options=options, start_lives=3, rng=rng)


def only_target(manager) -> Target:
    (t,) = manager.controller.targets
    return t


def play_until_miss(manager):
    misses = manager.misses
    for _ in range(100):
        manager.tick()
        if manager.misses != misses or manager.status is GameStatus.GameOver:
            return
    raise AssertionError("no miss happened")


class TestTransitions:
    def test_starts_in_new_game(self, manager):
        assert manager.status is GameStatus.NewGame
        assert manager.paused
        assert (manager.score, manager.misses, manager.lives) == (0, 0, 3)

    @pytest.mark.parametrize("status", list(GameStatus))
    def test_is_paused_only_false_while_playing(self, status):
        assert is_paused(status) is (status is not GameStatus.Playing)

    def test_transition_table_shape(self):
        assert TRANSITIONS["start"][1] is GameStatus.Playing
        assert TRANSITIONS["pause"][0] == frozenset({GameStatus.Playing})

    def test_start_plays_start_cue(self, manager, feedback):
        assert manager.start() is True
        assert manager.status is GameStatus.Playing
        feedback.play.assert_called_once_with(Cue.START)

    def test_start_while_playing_is_ignored(self, manager, feedback):
        manager.start()
        assert manager.start() is False
        assert feedback.play.call_count == 1

    def test_pause_only_from_playing(self, manager):
        assert manager.pause() is False
        assert manager.status is GameStatus.NewGame
        manager.start()
        assert manager.pause() is True
        assert manager.status is GameStatus.Paused

    def test_toggle(self, manager):
        manager.toggle()
        assert manager.status is GameStatus.Playing
        manager.toggle()
        assert manager.status is GameStatus.Paused
        manager.toggle()
        assert manager.status is GameStatus.Playing


class TestGameplay:
    def test_controller_frozen_unless_playing(self, manager):
        manager.tick()
        assert manager.controller.targets == ()

    def test_clicking_live_target_scores(self, manager, feedback):
        manager.start()
        manager.tick()
        t = only_target(manager)
        manager.record_shot(Point(t.x, t.y))
        manager.tick()
        assert manager.score == 1
        assert manager.lives == 3
        assert manager.misses == 0
        feedback.play.assert_called_with(Cue.HIT)
        new = only_target(manager)
        assert new is not t

    def test_shots_ignored_when_not_playing(self, manager):
        manager.record_shot(Point(1, 1))
        assert manager.controller.shoot_at is None

    def test_expiry_costs_a_life(self, manager, feedback):
        manager.start()
        play_until_miss(manager)
        assert manager.misses == 1
        assert manager.lives == 2
        assert manager.status is GameStatus.Playing
        feedback.play.assert_called_with(Cue.MISS)

    def test_missed_shot_costs_a_life(self, manager):
        manager.start()
        manager.tick()
        t = only_target(manager)
        manager.record_shot(Point(t.x + 200 if t.x < 250 else t.x - 200, t.y))
        manager.tick()
        assert (manager.score, manager.misses, manager.lives) == (0, 1, 2)

    def test_losing_last_life_resets_to_game_over(self, manager, feedback):
        manager.start()
        manager.tick()
        t = only_target(manager)
        manager.record_shot(Point(t.x, t.y))
        manager.tick()
        assert manager.score == 1

        old_controller = manager.controller
        for _ in range(3):
            play_until_miss(manager)

        assert manager.status is GameStatus.GameOver
        assert (manager.score, manager.misses, manager.lives) == (0, 0, 3)
        assert manager.controller is not old_controller
        assert manager.controller.targets == ()
        assert manager.controller.max_ticks == 10

        cues = [c.args[0] for c in feedback.play.call_args_list]
        assert cues[-1] is Cue.OVER
        assert cues.count(Cue.MISS) == 2

    def test_restart_after_game_over(self, manager, feedback):
        manager.start()
        for _ in range(3):
            play_until_miss(manager)
        assert manager.status is GameStatus.GameOver
        manager.tick()
        assert manager.controller.targets == ()
        assert manager.start() is True
        feedback.play.assert_called_with(Cue.START)
        manager.tick()
        assert len(manager.controller.targets) == 1

    def test_pause_freezes_countdown_and_resume_continues(self, manager):
        manager.start()
        manager.tick()
        manager.tick()
        t = only_target(manager)
        before = t.ticks_left
        difficulty = manager.controller.max_ticks

        manager.pause()
        for _ in range(5):
            manager.tick()
        assert t.ticks_left == before
        assert manager.controller.max_ticks == difficulty

        manager.start()
        manager.tick()
        assert t.ticks_left == before - 1

    def test_difficulty_non_increasing_while_playing(self, manager):
        manager.start()
        values = []
        for _ in range(30):
            manager.tick()
            if manager.status is not GameStatus.Playing:
                break
            values.append(manager.controller.max_ticks)
        assert all(a >= b for a, b in zip(values, values[1:]))
        assert min(values) >= 5


def test_pause_drops_pending_shot(manager):
    manager.start()
    manager.tick()
    manager.record_shot(Point(1, 1))
    manager.pause()
    assert manager.controller.shoot_at is None
    manager.start()
    manager.tick()
    assert manager.misses == 0
