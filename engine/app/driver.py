from __future__ import annotations
import logging
import time
from typing import Callable, Optional

log = logging.getLogger(__name__)


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class FrameDriver:
    """
    Fixed-interval gate on top of the host's per-frame callback.

    The host calls frame() once per display frame. When more than one
    interval has elapsed since the last executed tick, exactly one
    step(elapsed_ms) runs and the reference time is moved to
    now - (elapsed % interval), so the phase error does not accumulate.
    Missed intervals are never replayed.
    """

    def __init__(self, fps: float, step: Callable[[float], None],
                 clock: Callable[[], float] = monotonic_ms):
        assert fps > 0, "fps must be positive"
        self.fps = fps
        self.interval_ms = 1000.0 / fps
        self.step = step
        self.clock = clock
        self.then = clock()
        self.running = True
        self.ticks = 0

    def stop(self) -> None:
        self.running = False

    def frame(self, now: Optional[float] = None) -> bool:
        """Returns True if a tick was executed during this frame."""
        if now is None:
            now = self.clock()
        elapsed = now - self.then
        if elapsed <= self.interval_ms:
            return False

        self.then = now - (elapsed % self.interval_ms)
        self.ticks += 1
        self.step(elapsed)
        return True
