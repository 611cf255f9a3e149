"""Shared type aliases, tick context and error taxonomy."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    now_ms: float
    dt_ms: float
    elapsed_ms: float
    request_stop: Callable[[], None]
    random: _random.Random


class ShooterError(Exception):
    """Base class for errors raised by tick_shooter."""


class ConfigError(ShooterError, ValueError):
    """Raised at construction when a configuration value is invalid."""


class PersistenceError(ShooterError):
    """Raised by a high-score store that cannot read or write its backing data."""


class SessionError(ShooterError):
    """Raised on an illegal session state transition."""


class SignalError(ShooterError, ValueError):
    """Raised for an undeclared signal name or a payload that does not match it."""


class EngineStoppedError(ShooterError, RuntimeError):
    """Raised when ticking an engine that has been stopped."""


if TYPE_CHECKING:
    from tick_shooter.arena import Arena

System = Callable[["Arena", TickContext], None]
