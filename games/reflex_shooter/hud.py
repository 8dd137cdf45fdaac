from __future__ import annotations
import pygame

from engine.render.shapes import draw_cross, draw_heart, draw_text

from .const import BIG_FONT_SIZE, DEAD_COLOR, HEART_COLOR, HUD_COLOR, HUD_FONT_SIZE
from .manager import GameManager, GameStatus

ICON_SIZE = 22
ICON_GAP = 8


def status_message(status: GameStatus, key_label: str) -> str:
    if status is GameStatus.NewGame:
        return f"Press {key_label} to start"
    if status is GameStatus.Paused:
        return f"Paused - press {key_label} to resume"
    if status is GameStatus.GameOver:
        return f"Game over - press {key_label} to play again"
    return ""


def draw_lives(surface: pygame.Surface, lives: int, dead: bool) -> None:
    w = surface.get_width()
    y = 16 + ICON_SIZE // 2
    if dead:
        draw_cross(surface, (w - 20 - ICON_SIZE // 2, y), ICON_SIZE, DEAD_COLOR)
        return
    for i in range(max(0, lives)):
        x = w - 20 - ICON_SIZE // 2 - i * (ICON_SIZE + ICON_GAP)
        draw_heart(surface, (x, y), ICON_SIZE, HEART_COLOR)


def draw_hud(surface: pygame.Surface, manager: GameManager, key_label: str) -> None:
    draw_text(surface, f"Score: {manager.score} | Misses: {manager.misses}",
              (20, 16), HUD_COLOR, size=HUD_FONT_SIZE)
    draw_lives(surface, manager.lives, dead=manager.status is GameStatus.GameOver)

    msg = status_message(manager.status, key_label)
    if msg:
        w, h = surface.get_size()
        # center text roughly
        draw_text(surface, msg, (w // 2 - len(msg) * BIG_FONT_SIZE // 5, h // 2 - BIG_FONT_SIZE // 2),
                  HUD_COLOR, size=BIG_FONT_SIZE)
