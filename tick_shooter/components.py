"""Entity dataclasses for the player, projectiles and enemies."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from tick_shooter.types import EntityId


class EnemyKind(str, Enum):
    REGULAR = "regular"
    ZIGZAG = "zigzag"
    FAST = "fast"


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle. Origin top-left, y grows downward."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass
class Player:
    """The player ship. (x, y) is the centre of the ship."""

    x: float
    y: float
    width: float
    height: float
    speed: float

    @property
    def bounds(self) -> Rect:
        return Rect(self.x - self.width / 2, self.y - self.height / 2, self.width, self.height)

    @property
    def nose(self) -> tuple[float, float]:
        return self.x, self.y - self.height / 2

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass
class Projectile:
    """A shot travelling upward. (x, y) is the centre of the projectile."""

    id: EntityId
    x: float
    y: float
    width: float
    height: float

    @property
    def bounds(self) -> Rect:
        return Rect(self.x - self.width / 2, self.y - self.height / 2, self.width, self.height)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass
class Enemy:
    """A descending enemy. (x, y) is the top-left corner.

    ``anchor_x`` is only meaningful for zigzag enemies: it is the spawn x the
    lateral oscillation is centred on.
    """

    id: EntityId
    x: float
    y: float
    width: float
    height: float
    speed: float
    kind: EnemyKind
    anchor_x: float | None = None

    @property
    def bounds(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.speed)
