import math
import pygame
from typing import Tuple


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    font = pygame.font.SysFont(None, size)
    surface.blit(font.render(text, True, color), pos)


def draw_progress_ring(surface: pygame.Surface, center: Tuple[float, float], radius: int,
                       pct: float, color=(235, 235, 235), width=2):
    # Start at the top and sweep counter-clockwise by pct of a full turn
    pct = max(0.0, min(1.0, pct))
    if pct <= 0:
        return
    cx, cy = center
    rect = pygame.Rect(cx - radius, cy - radius, radius * 2, radius * 2)
    start_angle = 0.5 * math.pi
    end_angle = start_angle + 2 * math.pi * pct
    pygame.draw.arc(surface, color, rect, start_angle, end_angle, width)


def draw_heart(surface: pygame.Surface, center: Tuple[int, int], size: int, color):
    cx, cy = center
    r = max(2, size // 4)
    pygame.draw.circle(surface, color, (cx - r, cy - r // 2), r)
    pygame.draw.circle(surface, color, (cx + r, cy - r // 2), r)
    pygame.draw.polygon(surface, color, [(cx - 2 * r, cy - r // 4),
                                         (cx + 2 * r, cy - r // 4),
                                         (cx, cy + 2 * r)])


def draw_cross(surface: pygame.Surface, center: Tuple[int, int], size: int, color, width=3):
    cx, cy = center
    h = size // 2
    pygame.draw.line(surface, color, (cx - h, cy - h), (cx + h, cy + h), width)
    pygame.draw.line(surface, color, (cx - h, cy + h), (cx + h, cy - h), width)
