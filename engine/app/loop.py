from __future__ import annotations
import logging
import pygame

from engine.api.config import EngineConfig
from engine.app.context import Context
from engine.app.driver import FrameDriver
from engine.app.loader import load_game_manifest, load_game_module, resolve_game_root
from engine.audio.mixer_feedback import MixerFeedback
from engine.audio.synth import SAMPLE_RATE
from engine.input.mouse_input import MouseShotInput

log = logging.getLogger(__name__)

BACKGROUND = (12, 14, 18)
DEFAULT_TICK_RATE = 10


def run_game(
    game_id: str,
    screen_size: tuple[int, int],
    mirror: bool = False,
    mute: bool = False,
    display_fps: int = 60,
):
    cfg = EngineConfig(
        screen_size=screen_size,
        display_fps=display_fps,
        mirror=mirror,
        mute=mute,
    )

    # load game
    game_root = resolve_game_root(game_id)
    manifest = load_game_manifest(game_root)
    module = load_game_module(game_root)
    game = module.get_game()

    pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 512)
    pygame.init()
    pygame.display.set_caption(manifest.get("name", game_id))
    screen = pygame.display.set_mode(screen_size)
    clock = pygame.time.Clock()

    feedback = MixerFeedback(enabled=not mute and bool(manifest.get("audio", True)))
    input_layer = MouseShotInput(cfg)

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not mirror else pygame.Surface(
        screen_size).convert()

    ctx = Context(
        screen=render_surface,
        cfg=cfg,
        feedback=feedback,
        game_root=game_root,
        screen_size=screen_size,
    )

    game.on_load(ctx, manifest)

    def step(elapsed_ms: float) -> None:
        game.on_update(elapsed_ms)

        # ---- draw to render_surface ----
        render_surface.fill(BACKGROUND)
        game.on_draw(render_surface)

        # ---- present to window ----
        if mirror:
            flipped = pygame.transform.flip(render_surface, True, False)
            screen.blit(flipped, (0, 0))

    tick_rate = manifest.get("fps", DEFAULT_TICK_RATE)
    driver = FrameDriver(fps=tick_rate, step=step)
    log.info("running %s at %s ticks/s", game_id, tick_rate)

    try:
        while driver.running:
            clock.tick(cfg.display_fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    driver.stop()
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    driver.stop()
                shot = input_layer.shot_from_event(event, screen_size)
                if shot is not None:
                    game.on_shot(shot)
                game.on_event(event)

            if driver.frame():
                pygame.display.flip()

    finally:
        game.on_unload()
        pygame.quit()
