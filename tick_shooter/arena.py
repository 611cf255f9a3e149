"""Arena - the single owned simulation context every system reads and mutates."""
from __future__ import annotations

import logging

from tick_shooter import signals
from tick_shooter.components import Enemy, EnemyKind, Player, Projectile
from tick_shooter.config import ShooterConfig
from tick_shooter.input import InputState
from tick_shooter.persistence import HighScoreStore
from tick_shooter.session import Session
from tick_shooter.signals import SignalBus
from tick_shooter.spawner import speed_multiplier
from tick_shooter.store import EntityStore

logger = logging.getLogger(__name__)


class Arena:
    """Player, entity stores, input, session and timers for one game.

    Nothing here is global: the host's input handlers and the tick entry
    point both reach the same Arena through the owning ShooterGame.
    """

    def __init__(
        self,
        config: ShooterConfig,
        store: HighScoreStore,
        bus: SignalBus,
        now_ms: float,
    ) -> None:
        self.config = config
        self.bus = bus
        self.input = InputState()
        self.projectiles: EntityStore[Projectile] = EntityStore()
        self.enemies: EntityStore[Enemy] = EntityStore()
        self.player = self._new_player()
        self.session = Session(store, bus, now_ms)
        self.last_shot_ms: float | None = None
        self.last_spawn_ms: float = now_ms

    def _new_player(self) -> Player:
        cfg = self.config
        x, y = cfg.start_position
        return Player(
            x=x,
            y=y,
            width=cfg.player_width,
            height=cfg.player_height,
            speed=cfg.player_speed,
        )

    def reset_player(self) -> None:
        self.player = self._new_player()

    def add_projectile(self, x: float, y: float) -> Projectile:
        cfg = self.config
        proj = self.projectiles.spawn(
            lambda eid: Projectile(
                id=eid,
                x=x,
                y=y,
                width=cfg.projectile_width,
                height=cfg.projectile_height,
            )
        )
        self.bus.publish(signals.SHOT_FIRED, projectile_id=proj.id)
        return proj

    def add_enemy(
        self,
        kind: EnemyKind,
        x: float,
        y: float | None = None,
        speed: float | None = None,
    ) -> Enemy:
        """Create an enemy. Defaults: just above the field, speed from kind and difficulty."""
        cfg = self.config
        if y is None:
            y = -cfg.enemy_height
        if speed is None:
            ramp = speed_multiplier(self.session.difficulty, cfg.speed_ramp)
            speed = cfg.kinds[kind].base_speed * ramp
        anchor = x if kind is EnemyKind.ZIGZAG else None
        enemy = self.enemies.spawn(
            lambda eid: Enemy(
                id=eid,
                x=x,
                y=y,
                width=cfg.enemy_width,
                height=cfg.enemy_height,
                speed=speed,
                kind=kind,
                anchor_x=anchor,
            )
        )
        logger.debug("Spawned %s enemy %d at x=%.1f speed=%.2f", kind.value, enemy.id, x, speed)
        self.bus.publish(signals.ENEMY_SPAWNED, enemy_id=enemy.id, kind=kind)
        return enemy

    def start_run(self, now_ms: float) -> None:
        """Move the start of the current run to ``now_ms``."""
        self.session.run_start_ms = now_ms
        self.last_spawn_ms = now_ms

    def reset(self, now_ms: float) -> None:
        """Full restart: everything back to a fresh run except the high score."""
        self.session.restart(now_ms)
        self.reset_player()
        self.projectiles.clear()
        self.enemies.clear()
        self.input.clear()
        self.bus.clear()
        self.last_shot_ms = None
        self.last_spawn_ms = now_ms
