"""Difficulty curve and enemy spawning policy."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Mapping

from tick_shooter.components import EnemyKind

if TYPE_CHECKING:
    from tick_shooter.arena import Arena
    from tick_shooter.config import KindProfile
    from tick_shooter.types import TickContext


def difficulty_at(elapsed_ms: float, ramp_s: float = 30.0) -> float:
    """Linear and unbounded: 1.0 at start, +1.0 every ``ramp_s`` seconds."""
    return 1.0 + (elapsed_ms / 1000.0) / ramp_s


def spawn_interval_ms(difficulty: float, base_ms: float = 1000.0) -> float:
    return base_ms / difficulty


def speed_multiplier(difficulty: float, ramp: float = 0.5) -> float:
    """Enemy speed grows at ``ramp`` times the rate of spawn frequency."""
    return 1.0 + (difficulty - 1.0) * ramp


def choose_kind(sample: float, kinds: Mapping[EnemyKind, KindProfile]) -> EnemyKind:
    """Map a uniform sample in [0, 1) onto a kind by cumulative weight.

    Kinds are walked in mapping order; the last kind absorbs any rounding
    slack at the top of the range.
    """
    cumulative = 0.0
    last = EnemyKind.REGULAR
    for kind, profile in kinds.items():
        cumulative += profile.weight
        last = kind
        if sample < cumulative:
            return kind
    return last


def make_spawn_system() -> Callable[["Arena", "TickContext"], None]:
    """Return a system that spawns one enemy whenever the spawn interval has passed.

    The interval shrinks as difficulty grows. Kind and horizontal position
    are drawn from the engine's seeded RNG, so a seed replays a run.
    """

    def spawn_system(arena: "Arena", ctx: "TickContext") -> None:
        cfg = arena.config
        interval = spawn_interval_ms(arena.session.difficulty, cfg.spawn_interval_ms)
        if ctx.now_ms - arena.last_spawn_ms <= interval:
            return
        arena.last_spawn_ms = ctx.now_ms
        kind = choose_kind(ctx.random.random(), cfg.kinds)
        x = ctx.random.uniform(0.0, cfg.width - cfg.enemy_width)
        arena.add_enemy(kind, x)

    return spawn_system
