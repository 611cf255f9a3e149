"""EntityStore - ordered storage with monotonically increasing identities."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, Protocol, TypeVar

from tick_shooter.types import EntityId


class _Identified(Protocol):
    id: EntityId


T = TypeVar("T", bound=_Identified)


class EntityStore(Generic[T]):
    """Live entities of one type, iterated in insertion order.

    Identities come from a counter that only moves forward, so an id is
    never handed out twice while the store lives. Removal is two-phase:
    callers decide which ids die first, then the store is rebuilt, so no
    iterator is ever invalidated mid-pass.
    """

    def __init__(self) -> None:
        self._entities: dict[EntityId, T] = {}
        self._next_id: int = 0

    @property
    def next_id(self) -> EntityId:
        return self._next_id

    def spawn(self, factory: Callable[[EntityId], T]) -> T:
        eid = self._next_id
        self._next_id += 1
        entity = factory(eid)
        if entity.id != eid:
            raise ValueError(f"factory returned entity {entity.id}, expected id {eid}")
        self._entities[eid] = entity
        return entity

    def get(self, entity_id: EntityId) -> T:
        try:
            return self._entities[entity_id]
        except KeyError:
            raise KeyError(f"Entity {entity_id} is not alive") from None

    def discard(self, entity_ids: Iterable[EntityId]) -> list[T]:
        """Remove the given ids; unknown ids are ignored. Returns what was removed."""
        doomed = set(entity_ids)
        if not doomed:
            return []
        removed = [e for eid, e in self._entities.items() if eid in doomed]
        self._entities = {
            eid: e for eid, e in self._entities.items() if eid not in doomed
        }
        return removed

    def retain(self, keep: Callable[[T], bool]) -> list[T]:
        """Keep only entities for which ``keep`` is true. Returns the pruned ones."""
        doomed = [eid for eid, e in self._entities.items() if not keep(e)]
        return self.discard(doomed)

    def clear(self, reset_ids: bool = True) -> None:
        self._entities.clear()
        if reset_ids:
            self._next_id = 0

    def newest_first(self) -> list[T]:
        return list(reversed(self._entities.values()))

    def ids(self) -> list[EntityId]:
        return list(self._entities)

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._entities

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._entities.values()))

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities
