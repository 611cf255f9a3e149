"""Clock and TickContext for a wall-clock driven engine."""

import random
from typing import Callable

from tick_shooter.types import TickContext


class Clock:
    """Tracks tick count and wall-clock deltas supplied by the host.

    The host passes a monotonic timestamp in milliseconds on every tick.
    A timestamp older than the previous one yields a zero delta rather
    than a negative one.
    """

    def __init__(self) -> None:
        self._tick_number = 0
        self._now_ms: float | None = None
        self._dt_ms = 0.0
        self._started_ms: float | None = None

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def now_ms(self) -> float | None:
        return self._now_ms

    @property
    def dt_ms(self) -> float:
        return self._dt_ms

    @property
    def elapsed_ms(self) -> float:
        if self._now_ms is None or self._started_ms is None:
            return 0.0
        return self._now_ms - self._started_ms

    def advance(self, now_ms: float) -> int:
        if self._now_ms is None:
            self._started_ms = now_ms
            self._dt_ms = 0.0
        else:
            self._dt_ms = max(0.0, now_ms - self._now_ms)
        self._now_ms = now_ms
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            now_ms=self._now_ms if self._now_ms is not None else 0.0,
            dt_ms=self._dt_ms,
            elapsed_ms=self.elapsed_ms,
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self) -> None:
        self._tick_number = 0
        self._now_ms = None
        self._dt_ms = 0.0
        self._started_ms = None
