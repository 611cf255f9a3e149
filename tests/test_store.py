"""Tests for EntityStore identity and two-phase removal."""

from dataclasses import dataclass

import pytest

from tick_shooter.store import EntityStore


@dataclass
class Item:
    id: int
    value: int = 0


def _fill(store: EntityStore[Item], n: int) -> list[Item]:
    return [store.spawn(lambda eid: Item(eid, eid * 10)) for _ in range(n)]


def test_ids_are_monotonic():
    store: EntityStore[Item] = EntityStore()
    items = _fill(store, 3)
    assert [i.id for i in items] == [0, 1, 2]
    assert store.next_id == 3


def test_ids_not_reused_after_discard():
    store: EntityStore[Item] = EntityStore()
    _fill(store, 2)
    store.discard([1])
    item = store.spawn(lambda eid: Item(eid))
    assert item.id == 2
    assert store.ids() == [0, 2]


def test_iteration_is_insertion_order():
    store: EntityStore[Item] = EntityStore()
    _fill(store, 4)
    assert [i.id for i in store] == [0, 1, 2, 3]
    assert [i.id for i in store.newest_first()] == [3, 2, 1, 0]


def test_retain_returns_pruned():
    store: EntityStore[Item] = EntityStore()
    _fill(store, 5)
    pruned = store.retain(lambda i: i.value >= 20)
    assert [i.id for i in pruned] == [0, 1]
    assert store.ids() == [2, 3, 4]


def test_retain_during_iteration_is_safe():
    store: EntityStore[Item] = EntityStore()
    _fill(store, 3)
    seen = []
    for item in store:
        seen.append(item.id)
        store.retain(lambda i: i.id != 2)
    assert seen == [0, 1, 2]
    assert len(store) == 2


def test_discard_ignores_unknown_ids():
    store: EntityStore[Item] = EntityStore()
    _fill(store, 2)
    removed = store.discard([7, 0])
    assert [i.id for i in removed] == [0]
    assert 0 not in store
    assert 1 in store


def test_get_dead_entity_raises():
    store: EntityStore[Item] = EntityStore()
    _fill(store, 1)
    store.discard([0])
    with pytest.raises(KeyError):
        store.get(0)


def test_factory_must_use_given_id():
    store: EntityStore[Item] = EntityStore()
    with pytest.raises(ValueError):
        store.spawn(lambda eid: Item(eid + 1))


def test_clear_resets_counter_by_default():
    store: EntityStore[Item] = EntityStore()
    _fill(store, 3)
    store.clear()
    assert len(store) == 0
    assert store.next_id == 0


def test_clear_can_keep_counter():
    store: EntityStore[Item] = EntityStore()
    _fill(store, 3)
    store.clear(reset_ids=False)
    assert store.spawn(lambda eid: Item(eid)).id == 3
