"""Tests for the difficulty curve and spawn policy."""
from __future__ import annotations

import math
import random

from tick_shooter.components import EnemyKind
from tick_shooter.config import ShooterConfig
from tick_shooter.game import ShooterGame
from tick_shooter.spawner import (
    choose_kind,
    difficulty_at,
    spawn_interval_ms,
    speed_multiplier,
)


class TestDifficultyCurve:
    def test_base(self) -> None:
        assert difficulty_at(0) == 1.0

    def test_doubles_at_thirty_seconds(self) -> None:
        assert difficulty_at(30_000) == 2.0

    def test_triples_at_sixty_seconds(self) -> None:
        assert difficulty_at(60_000) == 3.0

    def test_unbounded(self) -> None:
        assert difficulty_at(3_000_000) == 101.0

    def test_spawn_interval(self) -> None:
        assert spawn_interval_ms(1.0) == 1000.0
        assert spawn_interval_ms(2.0) == 500.0
        assert spawn_interval_ms(4.0) == 250.0

    def test_speed_grows_at_half_rate(self) -> None:
        assert speed_multiplier(1.0) == 1.0
        assert speed_multiplier(2.0) == 1.5
        assert speed_multiplier(3.0) == 2.0


class TestChooseKind:
    def test_thresholds(self) -> None:
        kinds = ShooterConfig().kinds
        assert choose_kind(0.0, kinds) is EnemyKind.FAST
        assert choose_kind(0.199, kinds) is EnemyKind.FAST
        assert choose_kind(0.2, kinds) is EnemyKind.ZIGZAG
        assert choose_kind(0.499, kinds) is EnemyKind.ZIGZAG
        assert choose_kind(0.5, kinds) is EnemyKind.REGULAR
        assert choose_kind(0.999, kinds) is EnemyKind.REGULAR

    def test_top_of_range_falls_to_last_kind(self) -> None:
        assert choose_kind(1.0, ShooterConfig().kinds) is EnemyKind.REGULAR

    def test_distribution(self) -> None:
        rng = random.Random(7)
        kinds = ShooterConfig().kinds
        counts = {k: 0 for k in EnemyKind}
        n = 20_000
        for _ in range(n):
            counts[choose_kind(rng.random(), kinds)] += 1
        assert math.isclose(counts[EnemyKind.FAST] / n, 0.2, abs_tol=0.02)
        assert math.isclose(counts[EnemyKind.ZIGZAG] / n, 0.3, abs_tol=0.02)
        assert math.isclose(counts[EnemyKind.REGULAR] / n, 0.5, abs_tol=0.02)


class TestSpawnSystem:
    def test_no_spawn_before_interval(self) -> None:
        game = ShooterGame(now_ms=0.0, seed=1)
        game.tick(0)
        game.tick(960)  # interval is ~969ms at this point
        assert len(game.arena.enemies) == 0

    def test_spawn_after_interval(self) -> None:
        game = ShooterGame(now_ms=0.0, seed=1)
        game.tick(1001)
        enemies = list(game.arena.enemies)
        assert len(enemies) == 1
        assert game.arena.last_spawn_ms == 1001

    def test_spawn_position_fully_off_screen(self) -> None:
        game = ShooterGame(now_ms=0.0, seed=3)
        cfg = game.config
        for t in range(1, 40):
            game.tick(t * 1001)
        for enemy in game.arena.enemies:
            assert 0.0 <= enemy.x <= cfg.width - cfg.enemy_width
        # The newest enemy spawned above the field this tick and moved once.
        newest = game.arena.enemies.newest_first()[0]
        assert math.isclose(newest.y, -cfg.enemy_height + newest.speed)

    def test_zigzag_records_anchor(self) -> None:
        game = ShooterGame(now_ms=0.0, seed=5)
        enemy = game.arena.add_enemy(EnemyKind.ZIGZAG, 123.0)
        assert enemy.anchor_x == 123.0
        other = game.arena.add_enemy(EnemyKind.REGULAR, 50.0)
        assert other.anchor_x is None

    def test_speed_scaled_by_difficulty(self) -> None:
        game = ShooterGame(now_ms=0.0, seed=5)
        game.session.set_difficulty(3.0)
        fast = game.arena.add_enemy(EnemyKind.FAST, 0.0)
        regular = game.arena.add_enemy(EnemyKind.REGULAR, 0.0)
        assert fast.speed == 14.0
        assert regular.speed == 6.0

    def test_same_seed_same_spawns(self) -> None:
        def run(seed: int) -> list[tuple[float, EnemyKind]]:
            game = ShooterGame(ShooterConfig(height=100_000), now_ms=0.0, seed=seed)
            for t in range(1, 30):
                game.tick(t * 1001)
            return [(e.x, e.kind) for e in game.arena.enemies]

        assert run(11) == run(11)
        assert run(11) != run(12)

    def test_spawn_rate_increases_with_difficulty(self) -> None:
        """Around 60s, difficulty 3 gives a ~333ms interval."""
        game = ShooterGame(ShooterConfig(height=100_000), now_ms=0.0, seed=9)
        game.tick(60_000)
        before = len(game.arena.enemies)
        for t in range(60_001, 60_901):
            game.tick(t)
        assert len(game.arena.enemies) - before == 2
