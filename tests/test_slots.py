"""Tests for slot collection, override extraction, and matching."""

import pytest

from scenegraft.compose.slots import (
    Override,
    collect_slots,
    extract_overrides,
    match_slots,
    remove_leftovers,
)
from scenegraft.core.node import NodeKind, SceneNode
from scenegraft.errors import ConsistencyError, OverCommitError, UnresolvedIdError


def make_slots(*ids):
    return [SceneNode.slot(f"s{i}", id=slot_id) for i, slot_id in enumerate(ids, start=1)]


def make_overrides(*targets):
    return [Override(SceneNode.part(f"o{i}"), target) for i, target in enumerate(targets)]


def matched(result):
    return [(slot.name, override.node.name) for slot, override in result.pairs]


def test_collect_slots_direct_children_only():
    root = SceneNode("root")
    first = root.add_child(SceneNode.slot("first"))
    root.add_child(SceneNode.part("part"))
    inner = root.add_child(SceneNode("inner"))
    inner.add_child(SceneNode.slot("hidden"))
    last = root.add_child(SceneNode.slot("last"))

    assert collect_slots(root) == [first, last]


def test_collect_slots_uses_kind_not_name():
    root = SceneNode("root")
    root.add_child(SceneNode.part("slot"))
    marker = root.add_child(SceneNode("anything", kind=NodeKind.SLOT))

    assert collect_slots(root) == [marker]


def test_collect_slots_leaves_tree_alone():
    root = SceneNode("root")
    slot = root.add_child(SceneNode.slot("s"))

    collect_slots(root)

    assert slot.parent is root
    assert root.children == [slot]


def test_extract_overrides_empties_composite():
    composite = SceneNode("composite")
    a = composite.add_child(SceneNode.part("a", slot_target=2))
    b = composite.add_child(SceneNode.part("b"))

    overrides = extract_overrides(composite)

    assert [o.node for o in overrides] == [a, b]
    assert [o.target for o in overrides] == [2, None]
    assert composite.children == []
    assert a.parent is None and b.parent is None


@pytest.mark.parametrize(
    "override_count,slot_count",
    [(1, 0), (3, 2), (5, 4)],
)
def test_more_overrides_than_slots(override_count, slot_count):
    overrides = make_overrides(*([None] * override_count))
    slots = make_slots(*range(1, slot_count + 1))

    with pytest.raises(OverCommitError) as excinfo:
        match_slots(overrides, slots)

    assert excinfo.value.override_count == override_count
    assert excinfo.value.slot_count == slot_count


def test_over_commit_checked_before_consistency():
    overrides = make_overrides(1, None, 2)

    with pytest.raises(OverCommitError):
        match_slots(overrides, make_slots(1, 2))


def test_no_overrides_leaves_every_slot():
    slots = make_slots(1, 2)

    result = match_slots([], slots)

    assert result.pairs == []
    assert result.leftovers == slots


def test_no_overrides_no_slots():
    result = match_slots([], [])
    assert result.pairs == [] and result.leftovers == []


def test_explicit_matches_by_id_in_override_order():
    slots = make_slots(1, 2, 3)
    overrides = make_overrides(3, 1)

    result = match_slots(overrides, slots)

    assert matched(result) == [("s3", "o0"), ("s1", "o1")]
    assert [slot.name for slot in result.leftovers] == ["s2"]


def test_explicit_duplicate_slot_ids_each_used_once():
    slots = make_slots(7, 7)
    overrides = make_overrides(7, 7)

    result = match_slots(overrides, slots)

    assert matched(result) == [("s1", "o0"), ("s2", "o1")]
    assert result.leftovers == []


def test_explicit_slot_cannot_be_claimed_twice():
    slots = make_slots(1, 2)
    overrides = make_overrides(1, 1)

    with pytest.raises(UnresolvedIdError) as excinfo:
        match_slots(overrides, slots)
    assert excinfo.value.slot_id == 1
    assert excinfo.value.override_name == "o1"


def test_explicit_unknown_id():
    with pytest.raises(UnresolvedIdError) as excinfo:
        match_slots(make_overrides(5), make_slots(1, 2))
    assert excinfo.value.slot_id == 5


def test_positional_pairs_by_index():
    slots = make_slots(None, None, None)
    overrides = make_overrides(None, None)

    result = match_slots(overrides, slots)

    assert matched(result) == [("s1", "o0"), ("s2", "o1")]
    assert [slot.name for slot in result.leftovers] == ["s3"]


def test_positional_ignores_slot_ids():
    slots = make_slots(9, 8)
    result = match_slots(make_overrides(None, None), slots)
    assert matched(result) == [("s1", "o0"), ("s2", "o1")]


@pytest.mark.parametrize(
    "targets",
    [(1, None), (None, 1), (1, 2, None), (None, None, 3)],
)
def test_mixed_targets_rejected(targets):
    slots = make_slots(1, 2, 3)

    with pytest.raises(ConsistencyError):
        match_slots(make_overrides(*targets), slots)


def test_matching_does_not_touch_tree():
    root = SceneNode("root")
    slots = [root.add_child(slot) for slot in make_slots(1, 2)]

    match_slots(make_overrides(2), slots)

    assert root.children == slots


def test_remove_leftovers_detaches_slots():
    root = SceneNode("root")
    keep = root.add_child(SceneNode.part("keep"))
    slots = [root.add_child(slot) for slot in make_slots(1, 2)]

    remove_leftovers(slots)

    assert root.children == [keep]
    assert all(slot.parent is None for slot in slots)
