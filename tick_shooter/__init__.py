"""tick-shooter - Per-frame simulation core for a 2D arcade shooter."""

from tick_shooter.arena import Arena
from tick_shooter.clock import Clock
from tick_shooter.components import Enemy, EnemyKind, Player, Projectile, Rect
from tick_shooter.config import KindProfile, ShooterConfig
from tick_shooter.engine import Engine
from tick_shooter.game import ShooterGame
from tick_shooter.input import Action, InputState
from tick_shooter.persistence import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore
from tick_shooter.session import Phase, Session
from tick_shooter.signals import Signal, SignalBus
from tick_shooter.snapshot import EnemyView, FrameSnapshot, PlayerView, ProjectileView
from tick_shooter.store import EntityStore
from tick_shooter.types import (
    ConfigError,
    EngineStoppedError,
    EntityId,
    PersistenceError,
    SessionError,
    ShooterError,
    SignalError,
    TickContext,
)

__all__ = [
    "ShooterGame",
    "ShooterConfig",
    "KindProfile",
    "Arena",
    "Engine",
    "Clock",
    "TickContext",
    "EntityId",
    "EntityStore",
    "InputState",
    "Action",
    "Player",
    "Projectile",
    "Enemy",
    "EnemyKind",
    "Rect",
    "Session",
    "Phase",
    "Signal",
    "SignalBus",
    "HighScoreStore",
    "MemoryHighScoreStore",
    "JsonHighScoreStore",
    "FrameSnapshot",
    "PlayerView",
    "ProjectileView",
    "EnemyView",
    "ShooterError",
    "ConfigError",
    "PersistenceError",
    "SessionError",
    "SignalError",
    "EngineStoppedError",
]
