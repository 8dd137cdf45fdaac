from __future__ import annotations
import pygame
from typing import Optional, Tuple

from engine.api.config import EngineConfig
from engine.api.point import Point

LEFT_BUTTON = 1


class MouseShotInput:
    """
    Left-click shot source:
    - Only left-button presses become shots; other buttons and events are ignored.
    - Respects --mirror by converting window coords -> logical coords.
    """

    def __init__(self, cfg: EngineConfig):
        self.mirror = cfg.mirror

    def _to_logical(self, x: int, y: int, w: int, h: int) -> Tuple[float, float]:
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def shot_from_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> Optional[Point]:
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != LEFT_BUTTON:
            return None
        w, h = screen_size
        lx, ly = self._to_logical(*event.pos, w, h)
        return Point(lx, ly)
