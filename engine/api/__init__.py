from .game_base import Game
from .point import Point
from .config import EngineConfig
from .feedback import Cue, Feedback, SilentFeedback

__all__ = ["Game", "Point", "EngineConfig",
           "Cue", "Feedback", "SilentFeedback"]
