"""Shared fixtures for scenegraft tests."""

import pytest

from scenegraft.compose import CompositeNode
from scenegraft.core.node import SceneNode
from scenegraft.layout import TemplateLoader

THREE_SLOTS = """
name: three_slots
size: [3, 1, 1]
children:
  - {name: s1, slot: 1}
  - {name: s2, slot: 2}
  - {name: s3, slot: 3}
"""

FRAMED = """
name: framed
children:
  - {name: top_bar, part: bar}
  - {name: content, slot: true, translation: [0, 1, 0]}
  - {name: bottom_bar, part: bar}
"""

LEAF = """
name: leaf
part: label
"""

NESTED_SLOT = """
name: nested
children:
  - name: inner
    children:
      - {name: hidden, slot: 1}
"""


@pytest.fixture
def loader():
    """A loader with a few in-memory templates and no search paths."""
    loader = TemplateLoader(search_paths=[])
    loader.register("three_slots", THREE_SLOTS)
    loader.register("framed", FRAMED)
    loader.register("leaf", LEAF)
    loader.register("nested", NESTED_SLOT)
    return loader


@pytest.fixture
def host():
    """A parent group with a node on either side of where a composite goes."""
    parent = SceneNode("host")
    parent.add_child(SceneNode.part("before"))
    parent.add_child(SceneNode.part("after"))
    return parent


@pytest.fixture
def make_composite(loader, host):
    """Build a composite between the host's two parts."""

    def _make(template, *children, **kwargs):
        composite = CompositeNode("composite", loader=loader, template=template, **kwargs)
        for child in children:
            composite.add_child(child)
        host.insert_child(1, composite)
        return composite

    return _make
