"""Tests for ShooterConfig defaults and fail-fast validation."""

import pytest

from tick_shooter.components import EnemyKind
from tick_shooter.config import KindProfile, ShooterConfig
from tick_shooter.input import Action
from tick_shooter.types import ConfigError


def test_defaults():
    cfg = ShooterConfig()
    assert (cfg.width, cfg.height) == (800.0, 600.0)
    assert cfg.start_position == (400.0, 550.0)
    assert cfg.fire_cooldown_ms == 200.0
    assert cfg.kinds[EnemyKind.FAST] == KindProfile(base_speed=7.0, points=20, weight=0.2)
    assert cfg.kinds[EnemyKind.REGULAR].points == 10
    assert cfg.bindings[Action.FIRE] == (Action.FIRE,)


def test_start_position_follows_field_size():
    cfg = ShooterConfig(width=200, height=100)
    assert cfg.start_position == (100.0, 50.0)


def test_explicit_start_position():
    cfg = ShooterConfig(player_start=(30.0, 40.0))
    assert cfg.start_position == (30.0, 40.0)


@pytest.mark.parametrize(
    "field,value",
    [
        ("width", 0),
        ("height", -600),
        ("player_speed", 0),
        ("projectile_speed", -1),
        ("enemy_width", float("nan")),
        ("fire_cooldown_ms", 0),
        ("spawn_interval_ms", float("inf")),
        ("difficulty_ramp_s", 0),
    ],
)
def test_non_positive_values_rejected(field, value):
    with pytest.raises(ConfigError):
        ShooterConfig(**{field: value})


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        ShooterConfig(width=-1)


def test_player_must_fit():
    with pytest.raises(ConfigError):
        ShooterConfig(width=30, height=600)


def test_start_outside_field_rejected():
    with pytest.raises(ConfigError):
        ShooterConfig(player_start=(5.0, 300.0))


def test_weights_must_sum_to_one():
    kinds = {
        EnemyKind.FAST: KindProfile(7.0, 20, 0.5),
        EnemyKind.ZIGZAG: KindProfile(3.0, 10, 0.5),
        EnemyKind.REGULAR: KindProfile(3.0, 10, 0.5),
    }
    with pytest.raises(ConfigError):
        ShooterConfig(kinds=kinds)


def test_missing_kind_rejected():
    kinds = {EnemyKind.REGULAR: KindProfile(3.0, 10, 1.0)}
    with pytest.raises(ConfigError):
        ShooterConfig(kinds=kinds)


def test_missing_binding_rejected():
    bindings = {Action.FIRE: ("Space",)}
    with pytest.raises(ConfigError):
        ShooterConfig(bindings=bindings)


def test_negative_speed_ramp_rejected():
    with pytest.raises(ConfigError):
        ShooterConfig(speed_ramp=-0.5)


class TestFromMapping:
    def test_plain_values(self):
        cfg = ShooterConfig.from_mapping({"width": 320, "height": 240, "player_start": [160, 200]})
        assert cfg.width == 320
        assert cfg.player_start == (160.0, 200.0)

    def test_partial_kind_override(self):
        cfg = ShooterConfig.from_mapping({"kinds": {"fast": {"points": 50}}})
        assert cfg.kinds[EnemyKind.FAST].points == 50
        assert cfg.kinds[EnemyKind.FAST].base_speed == 7.0

    def test_bindings(self):
        cfg = ShooterConfig.from_mapping({"bindings": {"move_up": ["KeyW", "ArrowUp"]}})
        assert cfg.bindings[Action.MOVE_UP] == ("KeyW", "ArrowUp")
        assert cfg.bindings[Action.FIRE] == (Action.FIRE,)

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="unknown"):
            ShooterConfig.from_mapping({"lives": 3})

    def test_unknown_kind(self):
        with pytest.raises(ConfigError):
            ShooterConfig.from_mapping({"kinds": {"boss": {"points": 100}}})

    def test_unknown_kind_field(self):
        with pytest.raises(ConfigError):
            ShooterConfig.from_mapping({"kinds": {"fast": {"armor": 2}}})

    def test_invalid_value_still_validated(self):
        with pytest.raises(ConfigError):
            ShooterConfig.from_mapping({"height": 0})
