# Rev 0.1.0
"""Snapshot diffing for incremental list updates.

diff(old, new) returns an edit script that turns `old` into `new` when
replayed in order with apply_edits(). Items are identified by id; an item
whose id survives but whose title/description/priority differ gets a
Change at its final position.

Script layout:
  1. Remove  - items whose id is gone, bottom-up so indices stay valid
  2. Move    - survivors outside the longest matching run of ids, each
               placed directly after its predecessor in the new order
  3. Insert  - new ids at their final index, top-down
  4. Change  - content updates at final indices
"""
from __future__ import annotations

from dataclasses import dataclass
from difflib import SequenceMatcher
from typing import List, Sequence, Union

from todoapp.models.entities import TodoItem


@dataclass(frozen=True)
class Remove:
    index: int
    item: TodoItem


@dataclass(frozen=True)
class Move:
    from_index: int
    to_index: int   # index after the item has been taken out
    item: TodoItem


@dataclass(frozen=True)
class Insert:
    index: int
    item: TodoItem


@dataclass(frozen=True)
class Change:
    index: int
    item: TodoItem


Edit = Union[Remove, Move, Insert, Change]


def _checked_ids(items: Sequence[TodoItem], which: str) -> List[int]:
    ids = [it.id for it in items]
    if len(set(ids)) != len(ids):
        raise ValueError(f"{which} snapshot contains duplicate ids")
    return ids


def _index_of(items: Sequence[TodoItem], item_id: int) -> int:
    for i, it in enumerate(items):
        if it.id == item_id:
            return i
    raise ValueError(f"id {item_id} not in list")


def diff(old: Sequence[TodoItem], new: Sequence[TodoItem]) -> List[Edit]:
    old_ids = set(_checked_ids(old, "old"))
    new_ids = set(_checked_ids(new, "new"))

    edits: List[Edit] = []
    work = list(old)

    for i in range(len(old) - 1, -1, -1):
        if old[i].id not in new_ids:
            edits.append(Remove(i, old[i]))
            del work[i]

    # survivors in their new relative order
    target = [it.id for it in new if it.id in old_ids]
    current = [it.id for it in work]
    matcher = SequenceMatcher(None, current, target, autojunk=False)
    stable = set()
    for block in matcher.get_matching_blocks():
        stable.update(current[block.a:block.a + block.size])

    for k, item_id in enumerate(target):
        if item_id in stable:
            continue
        src = _index_of(work, item_id)
        moved = work.pop(src)
        dst = 0 if k == 0 else _index_of(work, target[k - 1]) + 1
        work.insert(dst, moved)
        if dst != src:
            edits.append(Move(src, dst, moved))

    for i, item in enumerate(new):
        if item.id not in old_ids:
            edits.append(Insert(i, item))
            work.insert(i, item)

    for i, item in enumerate(new):
        if not work[i].same_content(item):
            edits.append(Change(i, item))
            work[i] = item

    return edits


def apply_edits(old: Sequence[TodoItem], edits: Sequence[Edit]) -> List[TodoItem]:
    out = list(old)
    for e in edits:
        if isinstance(e, Remove):
            del out[e.index]
        elif isinstance(e, Move):
            out.insert(e.to_index, out.pop(e.from_index))
        elif isinstance(e, Insert):
            out.insert(e.index, e.item)
        elif isinstance(e, Change):
            out[e.index] = e.item
        else:
            raise TypeError(f"unknown edit {e!r}")
    return out
