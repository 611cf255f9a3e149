"""Engine - ordered system pipeline, frame pacing and lifecycle hooks."""

import logging
import os
import random
import time
from typing import Callable

from tick_shooter.arena import Arena
from tick_shooter.clock import Clock
from tick_shooter.types import EngineStoppedError, System, TickContext

logger = logging.getLogger(__name__)

Hook = Callable[[Arena, TickContext], None]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Engine:
    """Runs every registered system once per tick, in registration order.

    The host drives it: ``step(now_ms)`` once per frame with a monotonic
    timestamp. ``stop()`` runs the stop hooks exactly once (hosts release
    their input listeners there); a stopped engine refuses further ticks.
    """

    def __init__(self, arena: Arena, seed: int | None = None) -> None:
        self._arena = arena
        self._clock = Clock()
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested: bool = False
        self._stopped: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def arena(self) -> Arena:
        return self._arena

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def _context(self) -> TickContext:
        return self._clock.context(self.request_stop, self._rng)

    def step(self, now_ms: float) -> None:
        """Advance the clock and run the whole pipeline once."""
        if self._stopped:
            raise EngineStoppedError("Engine has been stopped")
        self._stop_requested = False
        self._clock.advance(now_ms)
        ctx = self._context()
        for system in self._systems:
            system(self._arena, ctx)
            if self._stop_requested:
                break

    def idle(self, now_ms: float) -> None:
        """Advance the clock without running any system."""
        if self._stopped:
            raise EngineStoppedError("Engine has been stopped")
        self._clock.advance(now_ms)

    def start(self) -> None:
        ctx = self._context()
        for hook in self._start_hooks:
            hook(self._arena, ctx)

    def stop(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        ctx = self._context()
        for hook in self._stop_hooks:
            hook(self._arena, ctx)
        logger.debug("Engine stopped after %d ticks", self._clock.tick_number)

    def run_forever(
        self,
        frame: Callable[[float], object] | None = None,
        fps: int = 60,
        now_fn: Callable[[], float] = monotonic_ms,
    ) -> None:
        """Pace ``frame(now_ms)`` (default: ``step``) at ``fps`` until a stop is requested."""
        if fps <= 0:
            raise ValueError("fps must be positive")
        tick = frame if frame is not None else self.step
        self._stop_requested = False
        self.start()

        frame_s = 1.0 / fps
        while not self._stop_requested and not self._stopped:
            start = time.monotonic()
            tick(now_fn())
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = frame_s - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        self.stop()
