"""High-score persistence collaborators."""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

from tick_shooter.types import PersistenceError

logger = logging.getLogger(__name__)


@runtime_checkable
class HighScoreStore(Protocol):
    """Boundary the session uses to keep the high score across runs.

    ``load_high_score`` returns 0 when nothing has been stored yet.
    Implementations should raise PersistenceError when the backing data
    cannot be read or written. The session also treats OSError and
    ValueError from a store as a failed load or save.
    """

    def load_high_score(self) -> int: ...

    def save_high_score(self, value: int) -> None: ...


class MemoryHighScoreStore:
    """Keeps the high score in process memory. Counts saves for inspection."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self.saves = 0

    def load_high_score(self) -> int:
        return self._value

    def save_high_score(self, value: int) -> None:
        self._value = value
        self.saves += 1


class JsonHighScoreStore:
    """Stores ``{"high_score": n}`` in a JSON file.

    Writes go to a sibling temporary file which then replaces the target,
    so a crash mid-write never leaves a truncated document behind.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_high_score(self) -> int:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0
        except OSError as exc:
            raise PersistenceError(f"Cannot read {self._path}: {exc}") from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"Malformed high-score file {self._path}: {exc}") from exc

        value = data.get("high_score", 0) if isinstance(data, dict) else None
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise PersistenceError(
                f"Malformed high-score file {self._path}: expected a non-negative integer"
            )
        return value

    def save_high_score(self, value: int) -> None:
        payload = json.dumps({"high_score": int(value)})
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(
                dir=self._path.parent, prefix=self._path.name, suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp, self._path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._path}: {exc}") from exc
        logger.debug("Saved high score %d to %s", value, self._path)
