from __future__ import annotations
import logging
from typing import Optional

import pygame

from engine.api import Game, Point
from engine.app.context import Context
from engine.render.shapes import draw_progress_ring

from .const import PAUSE_KEY, RING_COLOR, START_LIVES, TARGET_COLOR
from .hud import draw_hud
from .manager import GameManager
from .targets import Target, TargetOptions

log = logging.getLogger(__name__)


class ReflexShooter(Game):
    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest
        options = manifest.get("options", {}) or {}

        key_name = str(options.get("pause_key", PAUSE_KEY))
        self.pause_key = pygame.key.key_code(key_name)
        self.key_label = key_name.upper()

        self.manager = GameManager(
            bounds=ctx.screen_size,
            feedback=ctx.feedback,
            options=TargetOptions.from_manifest(options),
            start_lives=int(options.get("lives", START_LIVES)),
        )

        self.sprite: Optional[pygame.Surface] = None
        sprite_path = options.get("target_sprite")
        if sprite_path:
            self.sprite = pygame.image.load(str(ctx.game_root / sprite_path))

    # ------------- loop hooks -------------
    def on_update(self, dt_ms: float) -> None:
        self.manager.tick()

    def on_shot(self, p: Point) -> None:
        # gated on the status at click time
        self.manager.record_shot(p)

    def on_draw(self, surface: pygame.Surface) -> None:
        for t in self.manager.controller.targets:
            self._draw_target(surface, t)
        draw_hud(surface, self.manager, self.key_label)

    def _draw_target(self, surface: pygame.Surface, t: Target) -> None:
        pygame.draw.circle(surface, TARGET_COLOR, (int(t.x), int(t.y)), int(t.r))
        if self.sprite is not None:
            d = int(t.r * 2)
            img = pygame.transform.scale(self.sprite, (d, d))
            surface.blit(img, (int(t.x - t.r), int(t.y - t.r)))

        # countdown ring
        pct = t.ticks_left / t.spawn_ticks if t.spawn_ticks > 0 else 0.0
        draw_progress_ring(surface, (t.x, t.y), int(t.r + 8), pct, RING_COLOR)

    def on_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == self.pause_key:
            self.manager.toggle()

    def on_unload(self) -> None:
        log.info("final score: %d", self.manager.score)


def get_game():
    return ReflexShooter()
