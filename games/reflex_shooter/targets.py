from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from engine.api import Point

from .const import EDGE_PADDING, MIN_TICKS, START_TICKS, TARGET_RADIUS, TARGETS_LIMIT, TICKS_DECAY_PER_TICK

log = logging.getLogger(__name__)


class Outcome(Enum):
    Alive = 1
    Killed = 2   # shot by the player
    Expired = 3  # countdown ran out


@dataclass
class Target:
    x: float
    y: float
    r: float
    ticks_left: int
    spawn_ticks: Optional[int] = None
    outcome: Outcome = Outcome.Alive

    def __post_init__(self):
        assert self.r > 0, "target radius must be positive"
        assert self.ticks_left > 0, "a new target must have ticks left"
        if self.spawn_ticks is None:
            self.spawn_ticks = self.ticks_left

    @classmethod
    def spawn_random(cls, bounds: Tuple[int, int], radius: float, padding: float, ticks: int,
                     rng: Optional[random.Random] = None) -> "Target":
        rng = rng or random
        w, h = bounds
        margin = radius + padding
        x = rng.uniform(margin, max(margin, w - margin))
        y = rng.uniform(margin, max(margin, h - margin))
        return cls(x=x, y=y, r=radius, ticks_left=ticks)

    @property
    def alive(self) -> bool:
        return self.outcome is Outcome.Alive

    def tick(self) -> bool:
        """Count down one tick. Returns True if the target expired on this tick."""
        self.ticks_left -= 1
        if self.ticks_left <= 0 and self.alive:
            self.outcome = Outcome.Expired
            log.debug("target expired at (%.0f, %.0f)", self.x, self.y)
            return True
        return False

    def kill(self) -> None:
        self.outcome = Outcome.Killed

    def collides_with(self, p: Point) -> bool:
        dx = self.x - p.x
        dy = self.y - p.y
        return dx * dx + dy * dy < self.r * self.r


@dataclass
class TargetOptions:
    radius: float = TARGET_RADIUS
    padding: float = EDGE_PADDING
    limit: int = TARGETS_LIMIT
    start_ticks: float = START_TICKS
    min_ticks: int = MIN_TICKS
    decay_per_tick: float = TICKS_DECAY_PER_TICK

    def __post_init__(self):
        assert self.limit >= 1, "targets_limit must be at least 1"
        assert self.min_ticks >= 1, "min_ticks must be at least 1"

    @classmethod
    def from_manifest(cls, options: dict) -> "TargetOptions":
        return cls(
            radius=float(options.get("target_radius", TARGET_RADIUS)),
            padding=float(options.get("edge_padding", EDGE_PADDING)),
            limit=max(1, int(options.get("targets_limit", TARGETS_LIMIT))),
            start_ticks=float(options.get("start_ticks", START_TICKS)),
            min_ticks=max(1, int(options.get("min_ticks", MIN_TICKS))),
            decay_per_tick=float(options.get("ticks_decay_per_tick", TICKS_DECAY_PER_TICK)),
        )


@dataclass
class TargetController:
    """
    Owns the live targets and the pending shot.

    A tick runs in a fixed order: resolve the shot against every live
    target (a hit target is killed instead of counting down), report at
    most one miss, drop dead targets, top the set back up to the limit,
    clear the shot, then make future targets a little shorter-lived.
    """
    bounds: Tuple[int, int]
    on_hit: Callable[[], None]
    on_miss: Callable[[], None]
    options: TargetOptions = field(default_factory=TargetOptions)
    rng: Optional[random.Random] = None

    def __post_init__(self):
        self._targets: List[Target] = []
        self.shoot_at: Optional[Point] = None
        self.max_ticks: float = max(float(self.options.min_ticks), self.options.start_ticks)

    @property
    def targets(self) -> Tuple[Target, ...]:
        return tuple(self._targets)

    def record_shot(self, p: Point) -> None:
        # single slot: a newer click replaces an unconsumed one
        self.shoot_at = p

    def clear_shot(self) -> None:
        self.shoot_at = None

    def spawn_ticks(self) -> int:
        return max(self.options.min_ticks, int(self.max_ticks))

    def tick(self) -> None:
        shot = self.shoot_at
        hits = 0
        expired = False

        for t in self._targets:
            if shot is not None and t.collides_with(shot):
                hits += 1
                t.kill()
                self.on_hit()
            elif t.tick():
                expired = True

        if (shot is not None and hits == 0) or expired:
            self.on_miss()

        self._targets = [t for t in self._targets if t.alive]

        while len(self._targets) < self.options.limit:
            self._spawn()

        self.clear_shot()
        self.max_ticks = max(float(self.options.min_ticks), self.max_ticks - self.options.decay_per_tick)

    def _spawn(self) -> None:
        assert len(self._targets) < self.options.limit, "targets overflowing"
        t = Target.spawn_random(self.bounds, self.options.radius, self.options.padding,
                                self.spawn_ticks(), self.rng)
        self._targets.append(t)
        log.debug("spawned target at (%.0f, %.0f) for %d ticks", t.x, t.y, t.ticks_left)
