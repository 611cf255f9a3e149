"""ShooterGame - the facade hosts talk to: input events in, snapshots out."""
from __future__ import annotations

import logging
import math
from typing import Any, Callable, Hashable

from tick_shooter import signals
from tick_shooter.arena import Arena
from tick_shooter.config import ShooterConfig
from tick_shooter.engine import Engine, monotonic_ms
from tick_shooter.input import Action
from tick_shooter.persistence import HighScoreStore, MemoryHighScoreStore
from tick_shooter.session import Session
from tick_shooter.signals import SignalBus
from tick_shooter.snapshot import FrameSnapshot
from tick_shooter.spawner import make_spawn_system
from tick_shooter.systems import (
    make_collision_system,
    make_difficulty_system,
    make_enemy_system,
    make_fire_system,
    make_movement_system,
    make_projectile_system,
    make_signal_system,
)

logger = logging.getLogger(__name__)


class ShooterGame:
    """One simulation core: owns the arena, the engine and the signal bus.

    Input handlers call :meth:`press` / :meth:`release` whenever events
    arrive; the frame callback calls :meth:`tick` with a monotonic
    millisecond timestamp and renders the returned snapshot. While the
    session is over, ticks change nothing except to honour a held restart
    input.

    ``now_ms`` is the start time of the first run. When it is omitted the
    run starts at the first finite timestamp passed to :meth:`tick`.
    """

    def __init__(
        self,
        config: ShooterConfig | None = None,
        store: HighScoreStore | None = None,
        *,
        now_ms: float | None = None,
        seed: int | None = None,
    ) -> None:
        self._config = config if config is not None else ShooterConfig()
        self._bus = SignalBus()
        self._arena = Arena(
            self._config,
            store if store is not None else MemoryHighScoreStore(),
            self._bus,
            now_ms if now_ms is not None else 0.0,
        )
        # Without an explicit start time the run begins at the first tick.
        self._run_started = now_ms is not None
        self._engine = Engine(self._arena, seed=seed)

        # Order matters.
        self._engine.add_system(make_movement_system())
        self._engine.add_system(make_fire_system())
        self._engine.add_system(make_projectile_system())
        self._engine.add_system(make_difficulty_system())
        self._engine.add_system(make_spawn_system())
        self._engine.add_system(make_enemy_system())
        self._engine.add_system(make_collision_system())
        self._engine.add_system(make_signal_system(self._bus))

    @property
    def config(self) -> ShooterConfig:
        return self._config

    @property
    def arena(self) -> Arena:
        return self._arena

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def session(self) -> Session:
        return self._arena.session

    @property
    def seed(self) -> int:
        return self._engine.seed

    # -- Input collaborator --

    def press(self, input_id: Hashable) -> None:
        self._arena.input.press(input_id)

    def release(self, input_id: Hashable) -> None:
        self._arena.input.release(input_id)

    # -- Signals --

    def subscribe(self, signal_name: str, handler: Callable[[str, dict[str, Any]], None]) -> None:
        self._bus.subscribe(signal_name, handler)

    def unsubscribe(self, signal_name: str, handler: Callable[[str, dict[str, Any]], None]) -> None:
        self._bus.unsubscribe(signal_name, handler)

    # -- Tick driver --

    def tick(self, now_ms: float) -> FrameSnapshot:
        """Advance the simulation once and return the resulting frame."""
        if not math.isfinite(now_ms):
            logger.warning("Skipping tick with non-finite timestamp %r", now_ms)
            return self.snapshot()

        if not self._run_started:
            self._arena.start_run(now_ms)
            self._run_started = True

        if self.session.playing:
            self._engine.step(now_ms)
        else:
            self._engine.idle(now_ms)
            restart_ids = self._config.bindings[Action.RESTART]
            if self._arena.input.any_held(*restart_ids):
                self.restart(now_ms)
            self._bus.flush()
        return self.snapshot()

    def restart(self, now_ms: float) -> None:
        """GameOver -> Playing. Raises SessionError while still playing."""
        self._arena.reset(now_ms)
        self._engine.clock.reset()
        self._run_started = True
        self._bus.publish(signals.RESTARTED)

    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot.capture(self._arena, self._engine.clock.tick_number)

    def on_stop(self, callback: Callable[[], None]) -> None:
        """Register teardown work (e.g. removing input listeners) for :meth:`stop`."""
        self._engine.on_stop(lambda arena, ctx: callback())

    def stop(self) -> None:
        self._engine.stop()

    def run_forever(
        self,
        fps: int = 60,
        now_fn: Callable[[], float] = monotonic_ms,
    ) -> None:
        """Headless paced loop; ends when a stop is requested or :meth:`stop` is called."""
        self._engine.run_forever(frame=self.tick, fps=fps, now_fn=now_fn)
