"""AABB overlap tests and the projectile/enemy/player collision resolver."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from tick_shooter.components import Enemy, Player, Projectile, Rect
from tick_shooter.types import EntityId


def aabb_overlap(a: Rect, b: Rect) -> bool:
    """True iff the rectangles overlap on both axes. Touching edges do not count."""
    return (
        a.left < b.right
        and b.left < a.right
        and a.top < b.bottom
        and b.top < a.bottom
    )


@dataclass(frozen=True)
class Hit:
    """A projectile/enemy pair that collided this tick. Not an entity."""

    projectile_id: EntityId
    enemy_id: EntityId


def find_projectile_hits(
    projectiles: Iterable[Projectile],
    enemies: Iterable[Enemy],
) -> list[Hit]:
    """Pair each projectile with at most one enemy.

    ``enemies`` is scanned in the order given (callers pass newest first).
    An enemy already claimed by an earlier projectile cannot be hit again,
    so every hit removes exactly one projectile and one enemy.
    """
    candidates = list(enemies)
    claimed: set[EntityId] = set()
    hits: list[Hit] = []
    for proj in projectiles:
        box = proj.bounds
        for enemy in candidates:
            if enemy.id in claimed:
                continue
            if aabb_overlap(box, enemy.bounds):
                claimed.add(enemy.id)
                hits.append(Hit(proj.id, enemy.id))
                break
    return hits


def find_player_hits(player: Player, enemies: Iterable[Enemy]) -> list[EntityId]:
    """Return the ids of every enemy overlapping the player."""
    box = player.bounds
    return [e.id for e in enemies if aabb_overlap(box, e.bounds)]
