"""Game session state machine: Playing / GameOver, score and high score."""
from __future__ import annotations

import logging
from enum import Enum

from tick_shooter import signals
from tick_shooter.persistence import HighScoreStore
from tick_shooter.signals import SignalBus
from tick_shooter.types import PersistenceError, SessionError

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


_TRANSITIONS: dict[Phase, tuple[Phase, ...]] = {
    Phase.PLAYING: (Phase.GAME_OVER,),
    Phase.GAME_OVER: (Phase.PLAYING,),
}

BASE_DIFFICULTY = 1.0

# Host stores may surface raw I/O or decoding errors instead of PersistenceError.
_STORE_ERRORS = (PersistenceError, OSError, ValueError, TypeError)


class Session:
    """Score, high score, run timing and the terminal flag for one game.

    The high score is loaded from ``store`` once, here, and written back at
    most once per game over, only when the run beat it. A store that fails
    never stops the game: loads fall back to 0 and failed saves are logged
    and signalled while the in-memory high score is kept.
    """

    def __init__(self, store: HighScoreStore, bus: SignalBus, now_ms: float) -> None:
        self._store = store
        self._bus = bus
        self.phase = Phase.PLAYING
        self.score = 0
        self.run_start_ms = now_ms
        self.difficulty = BASE_DIFFICULTY
        self.new_high_score = False
        self.high_score = self._load()

    @property
    def playing(self) -> bool:
        return self.phase is Phase.PLAYING

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def elapsed_ms(self, now_ms: float) -> float:
        return max(0.0, now_ms - self.run_start_ms)

    def transition(self, target: Phase) -> None:
        if target not in _TRANSITIONS[self.phase]:
            raise SessionError(f"Illegal transition {self.phase.value} -> {target.value}")
        self.phase = target

    def set_difficulty(self, value: float) -> None:
        # Non-decreasing within a run even if the host clock steps backwards.
        if value > self.difficulty:
            self.difficulty = value

    def award(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"points must be non-negative, got {points}")
        if not self.playing:
            raise SessionError("Cannot award points after game over")
        self.score += points

    def end(self) -> bool:
        """Enter GameOver. Returns True when the run set a new high score.

        Ending an already ended session does nothing.
        """
        if self.game_over:
            return False
        self.transition(Phase.GAME_OVER)
        new_high = self.score > self.high_score
        self.new_high_score = new_high
        if new_high:
            self.high_score = self.score
            self._save()
        logger.info(
            "Game over: score=%d high_score=%d%s",
            self.score,
            self.high_score,
            " (new)" if new_high else "",
        )
        self._bus.publish(
            signals.GAME_OVER,
            score=self.score,
            high_score=self.high_score,
            new_high_score=new_high,
        )
        return new_high

    def restart(self, now_ms: float) -> None:
        self.transition(Phase.PLAYING)
        self.score = 0
        self.run_start_ms = now_ms
        self.difficulty = BASE_DIFFICULTY
        self.new_high_score = False
        logger.info("Session restarted at %.0f ms", now_ms)

    def _load(self) -> int:
        try:
            value = int(self._store.load_high_score())
        except _STORE_ERRORS as exc:
            logger.warning("High score unavailable, starting from 0: %s", exc)
            self._bus.publish(signals.PERSISTENCE_FAILED, operation="load", error=str(exc))
            return 0
        return max(0, value)

    def _save(self) -> None:
        try:
            self._store.save_high_score(self.high_score)
        except _STORE_ERRORS as exc:
            logger.warning("Could not save high score %d: %s", self.high_score, exc)
            self._bus.publish(signals.PERSISTENCE_FAILED, operation="save", error=str(exc))
