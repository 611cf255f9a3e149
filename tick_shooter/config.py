"""Simulation configuration dataclasses."""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Any, Hashable, Mapping

from tick_shooter.components import EnemyKind
from tick_shooter.input import Action
from tick_shooter.types import ConfigError


@dataclass(frozen=True)
class KindProfile:
    """Per-kind enemy tuning.

    Attributes:
        base_speed: Downward distance per tick at difficulty 1.
        points: Score awarded when a projectile destroys this kind.
        weight: Probability of this kind being chosen at spawn time.
    """

    base_speed: float
    points: int
    weight: float


# Order matters: spawn sampling walks the kinds in this order, accumulating
# weights, so the cumulative thresholds are 0.2 (fast) and 0.5 (zigzag).
def _default_kinds() -> dict[EnemyKind, KindProfile]:
    return {
        EnemyKind.FAST: KindProfile(base_speed=7.0, points=20, weight=0.2),
        EnemyKind.ZIGZAG: KindProfile(base_speed=3.0, points=10, weight=0.3),
        EnemyKind.REGULAR: KindProfile(base_speed=3.0, points=10, weight=0.5),
    }


def _default_bindings() -> dict[Action, tuple[Hashable, ...]]:
    return {action: (action,) for action in Action}


@dataclass(frozen=True)
class ShooterConfig:
    """Immutable configuration for a shooter session.

    Distances are playfield units, speeds are units per tick and durations
    are wall-clock milliseconds unless the name says otherwise.
    ``player_start`` defaults to ``(width / 2, height - 50)``.
    """

    width: float = 800.0
    height: float = 600.0

    player_width: float = 40.0
    player_height: float = 40.0
    player_speed: float = 5.0
    player_start: tuple[float, float] | None = None

    projectile_width: float = 6.0
    projectile_height: float = 20.0
    projectile_speed: float = 10.0

    enemy_width: float = 40.0
    enemy_height: float = 40.0

    fire_cooldown_ms: float = 200.0
    spawn_interval_ms: float = 1000.0
    difficulty_ramp_s: float = 30.0
    speed_ramp: float = 0.5

    zigzag_amplitude: float = 50.0
    zigzag_frequency: float = 0.05

    kinds: dict[EnemyKind, KindProfile] = field(default_factory=_default_kinds)
    bindings: dict[Action, tuple[Hashable, ...]] = field(default_factory=_default_bindings)

    def __post_init__(self) -> None:
        for name in (
            "width",
            "height",
            "player_width",
            "player_height",
            "player_speed",
            "projectile_width",
            "projectile_height",
            "projectile_speed",
            "enemy_width",
            "enemy_height",
            "fire_cooldown_ms",
            "spawn_interval_ms",
            "difficulty_ramp_s",
        ):
            _require_positive(name, getattr(self, name))
        for name in ("speed_ramp", "zigzag_amplitude", "zigzag_frequency"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ConfigError(f"{name} must be a finite non-negative number, got {value!r}")

        if self.player_width > self.width or self.player_height > self.height:
            raise ConfigError("player does not fit inside the playfield")
        if self.enemy_width > self.width:
            raise ConfigError("enemy_width must not exceed the playfield width")

        sx, sy = self.start_position
        if not (
            self.player_width / 2 <= sx <= self.width - self.player_width / 2
            and self.player_height / 2 <= sy <= self.height - self.player_height / 2
        ):
            raise ConfigError(f"player_start {(sx, sy)!r} lies outside the playfield")

        self._validate_kinds()
        self._validate_bindings()

    def _validate_kinds(self) -> None:
        missing = set(EnemyKind) - set(self.kinds)
        if missing:
            names = sorted(k.value for k in missing)
            raise ConfigError(f"missing kind profiles: {names}")
        total = 0.0
        for kind, profile in self.kinds.items():
            _require_positive(f"kinds[{kind.value}].base_speed", profile.base_speed)
            if profile.points < 0:
                raise ConfigError(f"kinds[{kind.value}].points must be non-negative")
            if not math.isfinite(profile.weight) or profile.weight < 0:
                raise ConfigError(f"kinds[{kind.value}].weight must be non-negative")
            total += profile.weight
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ConfigError(f"kind weights must sum to 1.0, got {total}")

    def _validate_bindings(self) -> None:
        missing = set(Action) - set(self.bindings)
        if missing:
            names = sorted(a.value for a in missing)
            raise ConfigError(f"missing input bindings: {names}")

    @property
    def start_position(self) -> tuple[float, float]:
        if self.player_start is not None:
            return self.player_start
        return self.width / 2, self.height - 50.0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ShooterConfig:
        """Build a config from plain data, e.g. a parsed JSON settings file.

        ``kinds`` maps kind names to profile fields and ``bindings`` maps
        action names to lists of input identifiers.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"unknown config keys: {sorted(unknown)}")

        kwargs = dict(data)
        try:
            if "player_start" in kwargs and kwargs["player_start"] is not None:
                x, y = kwargs["player_start"]
                kwargs["player_start"] = (float(x), float(y))
            if "kinds" in kwargs:
                kinds = _default_kinds()
                for name, fields in kwargs["kinds"].items():
                    kind = EnemyKind(name)
                    kinds[kind] = dataclasses.replace(kinds[kind], **fields)
                kwargs["kinds"] = kinds
            if "bindings" in kwargs:
                bindings = _default_bindings()
                for name, ids in kwargs["bindings"].items():
                    bindings[Action(name)] = tuple(ids)
                kwargs["bindings"] = bindings
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"malformed config: {exc}") from exc
        return cls(**kwargs)


def _require_positive(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be a positive number, got {value!r}")
