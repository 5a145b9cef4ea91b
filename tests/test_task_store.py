# tests/test_task_store.py

from __future__ import annotations

import pytest

from taskline.core.errors import CapacityExceeded, IndexOutOfRange
from taskline.tasks.task_models import new_deadline, new_todo
from taskline.tasks.task_store import TaskStore


def test_add_get_and_size() -> None:
    store = TaskStore()
    assert store.is_empty()
    assert store.size() == 0

    assert store.add(new_todo("a")) == 1
    assert store.add(new_deadline("b", "Friday")) == 2

    assert not store.is_empty()
    assert len(store) == 2
    assert store.get(0).description == "a"
    assert store.get(1).render() == "[D][ ] b (by: Friday)"


@pytest.mark.parametrize("index0", [-1, 1, 5])
def test_get_and_mark_reject_out_of_range(index0: int) -> None:
    store = TaskStore()
    store.add(new_todo("only"))

    with pytest.raises(IndexOutOfRange):
        store.get(index0)
    with pytest.raises(IndexOutOfRange):
        store.mark_done(index0)
    assert not store.get(0).is_done()


def test_mark_done_only_touches_one_task() -> None:
    store = TaskStore()
    for name in ("a", "b", "c"):
        store.add(new_todo(name))

    marked = store.mark_done(1)

    assert marked is store.get(1)
    assert [t.is_done() for t in store.all()] == [False, True, False]


def test_capacity_is_enforced_without_mutation() -> None:
    store = TaskStore(max_tasks=2)
    store.add(new_todo("a"))
    store.add(new_todo("b"))

    with pytest.raises(CapacityExceeded) as exc:
        store.add(new_todo("c"))

    assert exc.value.capacity == 2
    assert store.size() == 2
    assert [t.description for t in store.all()] == ["a", "b"]


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        TaskStore(max_tasks=0)


def test_all_is_restartable_and_read_only() -> None:
    store = TaskStore()
    store.add(new_todo("a"))
    view = store.all()

    assert [t.description for t in view] == ["a"]
    assert [t.description for t in view] == ["a"]

    store.add(new_todo("b"))
    assert [t.description for t in view] == ["a", "b"]
    assert view[-1].description == "b"
    assert not hasattr(view, "append")
