"""Tests for mounting subtrees on a stage."""

import logging

import pytest

from scenegraft.compose import CompositeNode
from scenegraft.core.node import NodeKind, SceneNode
from scenegraft.core.stage import Stage
from scenegraft.layout import SceneComposer


def names(node):
    return [child.name for child in node.children]


def test_mount_resolves_composite(loader):
    stage = Stage()
    composite = CompositeNode("c", loader=loader, template="three_slots")
    composite.add_child(SceneNode.part("X"))

    mounted = stage.mount(composite)

    assert mounted.name == "three_slots"
    assert stage.root.children == [mounted]
    assert names(mounted) == ["X"]
    assert composite.resolved


def test_mount_at_index(loader):
    stage = Stage()
    stage.mount(SceneNode.part("a"))
    stage.mount(SceneNode.part("c"))

    stage.mount(CompositeNode("b", loader=loader, template="leaf"), index=1)

    assert names(stage.root) == ["a", "leaf", "c"]


def test_mount_requires_mounted_parent(loader):
    stage = Stage()
    with pytest.raises(ValueError, match="not mounted"):
        stage.mount(SceneNode("x"), parent=SceneNode("elsewhere"))


def test_mount_walks_nested_composites(loader):
    loader.register("outer", """
name: outer
children:
  - {name: slot, slot: true}
  - {name: inner, composite: framed}
""")
    stage = Stage()
    wrapper = SceneNode("wrapper")
    composite = wrapper.add_child(CompositeNode("c", loader=loader, template="outer"))
    # an override that is itself a composite
    composite.add_child(CompositeNode("nested", loader=loader, template="leaf"))

    stage.mount(wrapper)

    outer = wrapper.child_at(0)
    assert names(outer) == ["leaf", "framed"]
    assert not any(node.kind is NodeKind.COMPOSITE for node in stage.iter_nodes())


def test_composite_without_template_stays_unresolved(loader, caplog):
    stage = Stage()
    composite = CompositeNode("pending", loader=loader)
    composite.add_child(CompositeNode("inner", loader=loader, template="leaf"))

    with caplog.at_level(logging.WARNING):
        mounted = stage.mount(composite)

    assert mounted is composite
    assert not composite.resolved
    # its children are pending overrides, not part of the scene yet
    assert not composite.children[0].resolved
    assert "without a template" in caplog.text


def test_late_template_resolves_and_mounts_subtree(loader):
    loader.register("holder", """
name: holder
children:
  - {name: slot, slot: true}
  - {name: inner, composite: leaf}
""")
    stage = Stage()
    composite = CompositeNode("pending", loader=loader)
    stage.mount(composite)

    composite.template = "holder"

    holder = stage.root.child_at(0)
    assert holder.name == "holder"
    assert names(holder) == ["leaf"]


def test_stage_root_must_be_detached():
    parent = SceneNode("parent")
    child = parent.add_child(SceneNode("child"))
    with pytest.raises(ValueError):
        Stage(child)


def test_composer_mounts_scene(loader):
    composer = SceneComposer(loader)

    stage = composer.compose_string("""
name: scene
children:
  - name: c
    composite: three_slots
    id: 8
    children:
      - {name: a, part: x, slot_target: 2}
""")

    scene = stage.root.child_at(0)
    resolved = scene.child_at(0)
    assert resolved.name == "three_slots"
    assert resolved.id == 8
    assert names(resolved) == ["a"]
    assert resolved.child_at(0).id == 2


def test_composer_without_resolving(loader):
    composer = SceneComposer(loader)

    stage = composer.compose_data(
        {"name": "scene", "children": [{"name": "c", "composite": "framed"}]},
        resolve=False,
    )

    assert isinstance(stage.root.child_at(0).child_at(0), CompositeNode)


def test_mount_skips_nodes_that_do_not_handle_mounting(loader):
    stage = Stage()
    group = SceneNode("group")
    group.add_child(SceneNode.part("leaf"))
    # a node retagged after construction is walked like any other node
    group.kind = NodeKind.COMPOSITE

    mounted = stage.mount(group)

    assert mounted is group
    assert names(group) == ["leaf"]
