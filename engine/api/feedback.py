from __future__ import annotations
from enum import Enum


class Cue(Enum):
    START = "start"
    HIT = "hit"
    MISS = "miss"
    OVER = "over"


class Feedback:
    """
    Receives gameplay cues. The only argument is the cue kind.
    """

    def play(self, cue: Cue) -> None:
        ...


class SilentFeedback(Feedback):
    def play(self, cue: Cue) -> None:
        pass
