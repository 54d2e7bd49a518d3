# tests/test_list_reconciler.py
from __future__ import annotations

import random

import pytest

from todoapp.models.entities import TodoItem
from todoapp.models.types import Priority
from todoapp.services.list_reconciler import (
    Change, Insert, Move, Remove, apply_edits, diff,
)


def item(i: int, title: str | None = None, prio: Priority = Priority.LOW) -> TodoItem:
    return TodoItem(i, title or f"t{i}", f"d{i}", prio)


def check(old, new):
    edits = diff(old, new)
    assert apply_edits(old, edits) == list(new)
    return edits


# --- scenarios --------------------------------------------------------------

def test_identical_snapshots_produce_no_edits():
    s = [item(1), item(2), item(3)]
    assert diff(s, list(s)) == []


def test_empty_to_full_and_back():
    s = [item(1), item(2)]
    assert check([], s) == [Insert(0, s[0]), Insert(1, s[1])]
    assert check(s, []) == [Remove(1, s[1]), Remove(0, s[0])]


def test_append_is_single_insert():
    old = [item(1), item(2)]
    new = old + [item(3)]
    assert check(old, new) == [Insert(2, item(3))]


def test_delete_middle_is_single_remove():
    old = [item(1), item(2), item(3)]
    assert check(old, [item(1), item(3)]) == [Remove(1, item(2))]


def test_content_change_keeps_position():
    old = [item(1), item(2)]
    new = [item(1), item(2, "renamed", Priority.HIGH)]
    assert check(old, new) == [Change(1, new[1])]


def test_priority_only_change_is_detected():
    old = [item(1)]
    new = [item(1, prio=Priority.MEDIUM)]
    assert check(old, new) == [Change(0, new[0])]


def test_move_last_to_front_is_one_move():
    old = [item(1), item(2), item(3), item(4)]
    new = [item(4), item(1), item(2), item(3)]
    edits = check(old, new)
    assert edits == [Move(3, 0, item(4))]


def test_move_first_to_end_is_one_move():
    old = [item(1), item(2), item(3), item(4)]
    new = [item(2), item(3), item(4), item(1)]
    edits = check(old, new)
    assert len(edits) == 1 and isinstance(edits[0], Move)


def test_sort_descending_reorders_without_changes():
    old = [item(1, prio=Priority.LOW), item(2, prio=Priority.HIGH), item(3, prio=Priority.MEDIUM)]
    new = [old[1], old[2], old[0]]
    edits = check(old, new)
    assert all(isinstance(e, Move) for e in edits)


def test_undo_reinsert_at_original_position():
    full = [item(1), item(2), item(3)]
    after_delete = [item(2), item(3)]
    check(full, after_delete)
    assert check(after_delete, full) == [Insert(0, item(1))]


def test_mixed_edit():
    old = [item(1), item(2), item(3), item(4), item(5)]
    new = [item(5), item(3, "changed"), item(6), item(1)]
    edits = check(old, new)
    kinds = {type(e) for e in edits}
    assert {Remove, Insert, Change} <= kinds


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        diff([item(1), item(1)], [])
    with pytest.raises(ValueError):
        diff([], [item(2), item(2)])


def test_apply_edits_does_not_touch_input():
    old = [item(1), item(2)]
    snapshot = list(old)
    apply_edits(old, diff(old, [item(2)]))
    assert old == snapshot


# --- property: script always reproduces the new snapshot -----------------------

def _mutate(rng: random.Random, old, next_id):
    new = [it for it in old if rng.random() > 0.3]
    if rng.random() < 0.5:
        rng.shuffle(new)
    out = []
    for it in new:
        if rng.random() < 0.25:
            it = TodoItem(it.id, it.title + "*", it.description, rng.choice(list(Priority)))
        out.append(it)
    for _ in range(rng.randint(0, 4)):
        out.insert(rng.randint(0, len(out)), item(next_id))
        next_id += 1
    return out, next_id


@pytest.mark.parametrize("seed", range(200))
def test_random_snapshots_round_trip(seed):
    rng = random.Random(seed)
    size = rng.randint(0, 12)
    old = [item(i, prio=rng.choice(list(Priority))) for i in range(1, size + 1)]
    next_id = size + 1
    for _ in range(5):
        new, next_id = _mutate(rng, old, next_id)
        check(old, new)
        old = new


@pytest.mark.parametrize("seed", range(50))
def test_pure_permutation_moves_only(seed):
    rng = random.Random(seed)
    old = [item(i) for i in range(1, rng.randint(2, 15))]
    new = list(old)
    rng.shuffle(new)
    edits = check(old, new)
    assert all(isinstance(e, Move) for e in edits)
    assert len(edits) < len(old)
