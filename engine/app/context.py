from __future__ import annotations
from dataclasses import dataclass
import pygame
from pathlib import Path
from typing import Tuple
from engine.api.config import EngineConfig
from engine.api.feedback import Feedback


@dataclass
class Context:
    screen: pygame.Surface
    cfg: EngineConfig
    feedback: Feedback
    game_root: Path
    screen_size: Tuple[int, int]
