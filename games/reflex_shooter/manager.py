from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from engine.api import Cue, Feedback, Point, SilentFeedback

from .const import START_LIVES
from .targets import TargetController, TargetOptions

log = logging.getLogger(__name__)


class GameStatus(Enum):
    NewGame = 1
    Playing = 2
    Paused = 3
    GameOver = 4


# action -> (statuses it is legal from, resulting status)
TRANSITIONS: Dict[str, Tuple[FrozenSet[GameStatus], GameStatus]] = {
    "start": (frozenset({GameStatus.NewGame, GameStatus.Paused, GameStatus.GameOver}), GameStatus.Playing),
    "pause": (frozenset({GameStatus.Playing}), GameStatus.Paused),
}


def is_paused(status: GameStatus) -> bool:
    return status is not GameStatus.Playing


class GameManager:
    """
    Score, misses, lives and the play/pause/game-over state machine.

    Owns the TargetController and only lets it tick while playing. When
    the last life is lost everything is reset, a fresh controller is
    built and the game lands in GameOver, waiting for the next start.
    """

    def __init__(self, bounds: Tuple[int, int], feedback: Optional[Feedback] = None,
                 options: Optional[TargetOptions] = None, start_lives: int = START_LIVES,
                 rng=None):
        self.bounds = bounds
        self.feedback = feedback or SilentFeedback()
        self.options = options or TargetOptions()
        self.start_lives = start_lives
        self.rng = rng

        self.status = GameStatus.NewGame
        self._reset_counters()
        self.controller = self._new_controller()

    def _reset_counters(self) -> None:
        self.score = 0
        self.misses = 0
        self.lives = self.start_lives

    def _new_controller(self) -> TargetController:
        return TargetController(bounds=self.bounds, on_hit=self.on_hit, on_miss=self.on_miss,
                                options=self.options, rng=self.rng)

    @property
    def paused(self) -> bool:
        return is_paused(self.status)

    def _transition(self, action: str) -> bool:
        legal_from, target = TRANSITIONS[action]
        if self.status not in legal_from:
            return False
        self.status = target
        return True

    # ------------- lifecycle -------------
    def start(self) -> bool:
        if not self._transition("start"):
            return False
        log.info("game started")
        self.feedback.play(Cue.START)
        return True

    def pause(self) -> bool:
        if not self._transition("pause"):
            return False
        # a click made just before pausing must not land after resuming
        self.controller.clear_shot()
        log.info("game paused")
        return True

    def toggle(self) -> bool:
        return self.pause() if self.status is GameStatus.Playing else self.start()

    # ------------- gameplay -------------
    def record_shot(self, p: Point) -> None:
        if self.status is GameStatus.Playing:
            self.controller.record_shot(p)

    def tick(self) -> None:
        if self.status is GameStatus.Playing:
            self.controller.tick()

    def on_hit(self) -> None:
        self.score += 1
        log.debug("hit, score: %d", self.score)
        self.feedback.play(Cue.HIT)

    def on_miss(self) -> None:
        self.misses += 1
        self.lives -= 1
        log.debug("miss, misses: %d, lives: %d", self.misses, self.lives)
        if self.lives <= 0:
            self._game_over()
            return
        self.feedback.play(Cue.MISS)

    def _game_over(self) -> None:
        log.info("game over, final score: %d", self.score)
        self._reset_counters()
        self.controller = self._new_controller()
        self.status = GameStatus.GameOver
        self.feedback.play(Cue.OVER)
