"""Read-only per-frame view handed to the rendering collaborator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tick_shooter.components import EnemyKind

if TYPE_CHECKING:
    from tick_shooter.arena import Arena


@dataclass(frozen=True, slots=True)
class PlayerView:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class ProjectileView:
    id: int
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class EnemyView:
    id: int
    x: float
    y: float
    width: float
    height: float
    kind: EnemyKind


@dataclass(frozen=True, slots=True)
class FrameSnapshot:
    """Everything a renderer needs for one frame, detached from live state.

    Player and projectile coordinates are centres; enemy coordinates are
    top-left corners.
    """

    tick_number: int
    player: PlayerView
    projectiles: tuple[ProjectileView, ...]
    enemies: tuple[EnemyView, ...]
    score: int
    high_score: int
    difficulty: float
    game_over: bool
    new_high_score: bool = False

    @classmethod
    def capture(cls, arena: Arena, tick_number: int) -> FrameSnapshot:
        p = arena.player
        session = arena.session
        return cls(
            tick_number=tick_number,
            player=PlayerView(p.x, p.y, p.width, p.height),
            projectiles=tuple(
                ProjectileView(b.id, b.x, b.y, b.width, b.height) for b in arena.projectiles
            ),
            enemies=tuple(
                EnemyView(e.id, e.x, e.y, e.width, e.height, e.kind) for e in arena.enemies
            ),
            score=session.score,
            high_score=session.high_score,
            difficulty=session.difficulty,
            game_over=session.game_over,
            new_high_score=session.new_high_score,
        )

    def as_dict(self) -> dict[str, Any]:
        """JSON-compatible dict, with enemy kinds as their string values."""
        return {
            "tick_number": self.tick_number,
            "player": {
                "x": self.player.x,
                "y": self.player.y,
                "width": self.player.width,
                "height": self.player.height,
            },
            "projectiles": [
                {"id": b.id, "x": b.x, "y": b.y, "width": b.width, "height": b.height}
                for b in self.projectiles
            ],
            "enemies": [
                {
                    "id": e.id,
                    "x": e.x,
                    "y": e.y,
                    "width": e.width,
                    "height": e.height,
                    "kind": e.kind.value,
                }
                for e in self.enemies
            ],
            "score": self.score,
            "high_score": self.high_score,
            "difficulty": self.difficulty,
            "game_over": self.game_over,
            "new_high_score": self.new_high_score,
        }
