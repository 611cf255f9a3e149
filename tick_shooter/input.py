"""Held-input tracking with pure set semantics."""
from __future__ import annotations

from enum import Enum
from typing import Hashable


class Action(str, Enum):
    """Logical input identifiers understood by the default bindings."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    FIRE = "fire"
    RESTART = "restart"


class InputState:
    """Set of currently held input identifiers.

    No ordering, counting or timing: an identifier is either held or not.
    """

    def __init__(self) -> None:
        self._held: set[Hashable] = set()

    def press(self, input_id: Hashable) -> None:
        self._held.add(input_id)

    def release(self, input_id: Hashable) -> None:
        self._held.discard(input_id)

    def is_held(self, input_id: Hashable) -> bool:
        return input_id in self._held

    def any_held(self, *input_ids: Hashable) -> bool:
        return any(i in self._held for i in input_ids)

    def clear(self) -> None:
        self._held.clear()

    @property
    def held(self) -> frozenset[Hashable]:
        return frozenset(self._held)

    def __len__(self) -> int:
        return len(self._held)
