from __future__ import annotations

import pygame

from engine.app.context import Context

from .point import Point


class Game:
    """
    Base interface games should implement.

    The host pumps events every display frame but only runs
    on_update followed by on_draw once per logical tick, at the
    rate given by the manifest's `fps`.
    """

    def on_load(self, ctx: Context, manifest: dict) -> None:
        """Called once after the game module loads."""
        ...

    def on_update(self, dt_ms: float) -> None:
        """Called once per tick; dt_ms is the wall-clock time since the previous tick."""
        ...

    def on_draw(self, surface: pygame.Surface) -> None:
        """Draw the current state onto an already cleared surface."""
        ...

    def on_shot(self, p: Point) -> None:
        """A left click, in logical coords, delivered as soon as it arrives."""
        ...

    def on_event(self, event: pygame.event.Event) -> None:
        """Optional: pygame events, delivered as they arrive (keyboard, etc.)."""
        ...

    def on_unload(self) -> None:
        """Optional: cleanup when the game exits."""
        ...
