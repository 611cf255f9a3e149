"""Game notifications for the host.

Every notification the core can emit is declared below with the payload
fields it carries. Systems queue notifications while a tick runs; the
signal system delivers them once the tick's state changes are complete,
so handlers always observe a consistent arena.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from tick_shooter.types import SignalError

logger = logging.getLogger(__name__)

_Handler = Callable[[str, dict[str, Any]], None]

SHOT_FIRED = "shot_fired"
ENEMY_SPAWNED = "enemy_spawned"
ENEMY_DESTROYED = "enemy_destroyed"
GAME_OVER = "game_over"
RESTARTED = "restarted"
PERSISTENCE_FAILED = "persistence_failed"


@dataclass(frozen=True, slots=True)
class Signal:
    """A notification name and the exact payload keys it is published with."""

    name: str
    fields: tuple[str, ...]
    description: str


CATALOGUE: dict[str, Signal] = {
    s.name: s
    for s in (
        Signal(SHOT_FIRED, ("projectile_id",), "A projectile was fired from the player's nose."),
        Signal(ENEMY_SPAWNED, ("enemy_id", "kind"), "An enemy entered above the field."),
        Signal(
            ENEMY_DESTROYED,
            ("enemy_id", "projectile_id", "kind", "points"),
            "A projectile destroyed an enemy and its points were awarded.",
        ),
        Signal(
            GAME_OVER,
            ("score", "high_score", "new_high_score"),
            "An enemy reached the player; the run is over.",
        ),
        Signal(RESTARTED, (), "A new run began after game over."),
        Signal(
            PERSISTENCE_FAILED,
            ("operation", "error"),
            "Loading or saving the high score failed; operation is 'load' or 'save'.",
        ),
    )
}


@dataclass(frozen=True, slots=True)
class Notice:
    signal: Signal
    data: dict[str, Any]


class SignalBus:
    """Queues declared notifications and delivers them on :meth:`flush`.

    Names outside the catalogue and payloads that do not match the
    declared fields raise SignalError at the call site, so a typo fails
    loudly instead of reaching no handler.
    """

    def __init__(self, catalogue: Mapping[str, Signal] | None = None) -> None:
        self._catalogue = dict(catalogue if catalogue is not None else CATALOGUE)
        self._handlers: dict[str, list[_Handler]] = {name: [] for name in self._catalogue}
        self._queue: list[Notice] = []

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._catalogue)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def _lookup(self, signal_name: str) -> Signal:
        try:
            return self._catalogue[signal_name]
        except KeyError:
            known = ", ".join(sorted(self._catalogue))
            raise SignalError(f"Unknown signal {signal_name!r} (known: {known})") from None

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._lookup(signal_name)
        self._handlers[signal_name].append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> bool:
        """Detach ``handler``. Returns False when it was not subscribed."""
        self._lookup(signal_name)
        handlers = self._handlers[signal_name]
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def publish(self, signal_name: str, **data: Any) -> None:
        signal = self._lookup(signal_name)
        missing = [f for f in signal.fields if f not in data]
        extra = sorted(set(data) - set(signal.fields))
        if missing or extra:
            raise SignalError(
                f"Signal {signal_name!r} expects fields {signal.fields}; "
                f"missing {missing}, unexpected {extra}"
            )
        self._queue.append(Notice(signal, data))

    def flush(self) -> int:
        """Deliver everything queued so far. Returns the number of notices.

        Notices published by handlers during delivery wait for the next flush.
        """
        batch, self._queue = self._queue, []
        for notice in batch:
            name = notice.signal.name
            for handler in list(self._handlers[name]):
                handler(name, notice.data)
        return len(batch)

    def clear(self) -> int:
        """Drop queued notices without delivering them. Returns how many were dropped."""
        dropped = len(self._queue)
        self._queue.clear()
        if dropped:
            logger.debug("Dropped %d undelivered notifications", dropped)
        return dropped
