"""System factories for the per-tick movement, firing, lifecycle and collision steps.

Each factory returns a ``(arena, ctx)`` callable. The engine runs them in
registration order; ShooterGame wires them as: movement, fire, projectiles,
difficulty, spawn, enemies, collision, signals.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable

from tick_shooter import signals
from tick_shooter.collision import find_player_hits, find_projectile_hits
from tick_shooter.components import EnemyKind
from tick_shooter.input import Action
from tick_shooter.signals import SignalBus
from tick_shooter.spawner import difficulty_at

if TYPE_CHECKING:
    from tick_shooter.arena import Arena
    from tick_shooter.types import TickContext

logger = logging.getLogger(__name__)

_SystemFn = Callable[["Arena", "TickContext"], None]


def _clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value


def make_movement_system() -> _SystemFn:
    """Move the player one step per held direction, clamping after each step.

    Directions are applied in the order up, down, left, right. Opposing
    directions held together are two sequential clamped moves, not a
    cancelled vector.
    """

    def movement_system(arena: "Arena", ctx: "TickContext") -> None:
        cfg = arena.config
        p = arena.player
        held = arena.input.any_held
        min_x, max_x = p.width / 2, cfg.width - p.width / 2
        min_y, max_y = p.height / 2, cfg.height - p.height / 2

        if held(*cfg.bindings[Action.MOVE_UP]):
            p.y = _clamp(p.y - p.speed, min_y, max_y)
        if held(*cfg.bindings[Action.MOVE_DOWN]):
            p.y = _clamp(p.y + p.speed, min_y, max_y)
        if held(*cfg.bindings[Action.MOVE_LEFT]):
            p.x = _clamp(p.x - p.speed, min_x, max_x)
        if held(*cfg.bindings[Action.MOVE_RIGHT]):
            p.x = _clamp(p.x + p.speed, min_x, max_x)

        if not p.is_finite():
            logger.warning("Player position (%r, %r) is not finite; resetting", p.x, p.y)
            arena.reset_player()

    return movement_system


def make_fire_system() -> _SystemFn:
    """Spawn a projectile at the ship's nose, at most once per cooldown window.

    The cooldown is measured in wall-clock milliseconds so the fire rate
    does not depend on the frame rate.
    """

    def fire_system(arena: "Arena", ctx: "TickContext") -> None:
        cfg = arena.config
        if not arena.input.any_held(*cfg.bindings[Action.FIRE]):
            return
        last = arena.last_shot_ms
        if last is not None and ctx.now_ms - last < cfg.fire_cooldown_ms:
            return
        x, y = arena.player.nose
        arena.add_projectile(x, y)
        arena.last_shot_ms = ctx.now_ms

    return fire_system


def make_projectile_system() -> _SystemFn:
    """Advance projectiles upward and prune those at or past the top edge."""

    def projectile_system(arena: "Arena", ctx: "TickContext") -> None:
        step = arena.config.projectile_speed
        for proj in arena.projectiles:
            proj.y -= step
        pruned = arena.projectiles.retain(lambda p: p.is_finite() and p.y > 0)
        for proj in pruned:
            if not proj.is_finite():
                logger.warning("Pruned projectile %d with non-finite position", proj.id)

    return projectile_system


def make_difficulty_system() -> _SystemFn:
    def difficulty_system(arena: "Arena", ctx: "TickContext") -> None:
        session = arena.session
        elapsed = session.elapsed_ms(ctx.now_ms)
        session.set_difficulty(difficulty_at(elapsed, arena.config.difficulty_ramp_s))

    return difficulty_system


def make_enemy_system() -> _SystemFn:
    """Move enemies down by their own speed; zigzags also sway around their anchor.

    Enemies at or below the bottom edge are pruned without scoring.
    """

    def enemy_system(arena: "Arena", ctx: "TickContext") -> None:
        cfg = arena.config
        max_x = cfg.width - cfg.enemy_width
        for enemy in arena.enemies:
            enemy.y += enemy.speed
            if enemy.kind is EnemyKind.ZIGZAG and enemy.anchor_x is not None:
                sway = math.sin(enemy.y * cfg.zigzag_frequency) * cfg.zigzag_amplitude
                enemy.x = _clamp(enemy.anchor_x + sway, 0.0, max_x)
        pruned = arena.enemies.retain(lambda e: e.is_finite() and e.y < cfg.height)
        for enemy in pruned:
            if not enemy.is_finite():
                logger.warning("Pruned enemy %d with non-finite state", enemy.id)

    return enemy_system


def make_collision_system() -> _SystemFn:
    """Resolve projectile/enemy hits, then player/enemy contact.

    Hits are computed first and the stores rebuilt afterwards. Enemies are
    scanned newest first. A player hit ends the session; the enemies that
    touched the player are removed along with it.
    """

    def collision_system(arena: "Arena", ctx: "TickContext") -> None:
        session = arena.session
        cfg = arena.config

        hits = find_projectile_hits(arena.projectiles, arena.enemies.newest_first())
        if hits:
            kinds = {e.id: e.kind for e in arena.enemies}
            arena.projectiles.discard(h.projectile_id for h in hits)
            arena.enemies.discard(h.enemy_id for h in hits)
            for hit in hits:
                kind = kinds[hit.enemy_id]
                points = cfg.kinds[kind].points
                session.award(points)
                logger.debug(
                    "Projectile %d destroyed %s enemy %d (+%d)",
                    hit.projectile_id,
                    kind.value,
                    hit.enemy_id,
                    points,
                )
                arena.bus.publish(
                    signals.ENEMY_DESTROYED,
                    enemy_id=hit.enemy_id,
                    projectile_id=hit.projectile_id,
                    kind=kind,
                    points=points,
                )

        touching = find_player_hits(arena.player, arena.enemies)
        if touching:
            arena.enemies.discard(touching)
            session.end()

    return collision_system


def make_signal_system(bus: SignalBus) -> _SystemFn:
    def signal_system(arena: "Arena", ctx: "TickContext") -> None:
        bus.flush()

    return signal_system
