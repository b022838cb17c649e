"""SceneNode class for hierarchical scene composition."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

import numpy as np
from numpy.typing import NDArray

from .transform import Transform


class NodeKind(Enum):
    """Discriminant for the roles a node can play in the scene hierarchy."""

    GROUP = "group"  # container
    PART = "part"  # leaf
    SLOT = "slot"  # placeholder inside a template, leaf
    COMPOSITE = "composite"  # container whose children are overrides


CONTAINER_KINDS = frozenset({NodeKind.GROUP, NodeKind.COMPOSITE})


@dataclass(eq=False)
class SceneNode:
    """A node in the scene hierarchy.

    Each node has an optional id, an optional transform (its layout
    metadata), and can have children if its kind is a container kind. A
    node is owned by at most one parent; the parent reference is a plain
    back-reference kept up to date by the child-manipulation methods.

    Nodes compare by identity, so a tree can hold several nodes with the
    same name.

    Example:
        # A card template with a header slot and a fixed body part
        card = SceneNode("card")
        card.add_child(SceneNode.slot("header", id=1))
        card.add_child(SceneNode("body", kind=NodeKind.PART, label="cube"))
    """

    name: str
    transform: Transform | None = None
    id: int | None = None
    kind: NodeKind = NodeKind.GROUP
    label: str | None = None
    slot_target: int | None = None
    children: list[SceneNode] = field(default_factory=list)
    parent: SceneNode | None = field(default=None, repr=False)
    size: NDArray[np.float64] | None = field(default=None, repr=False)

    # True on node classes that handle the mounted event
    handles_mount = False

    def __post_init__(self) -> None:
        if self.kind is NodeKind.COMPOSITE and not self.handles_mount:
            raise ValueError(
                f"Node '{self.name}': the composite kind is reserved for CompositeNode"
            )

    @classmethod
    def slot(cls, name: str, id: int | None = None, **kwargs) -> SceneNode:
        """Create a slot marker node."""
        return cls(name, id=id, kind=NodeKind.SLOT, **kwargs)

    @classmethod
    def part(cls, name: str, label: str | None = None, **kwargs) -> SceneNode:
        """Create a leaf node."""
        return cls(name, kind=NodeKind.PART, label=label, **kwargs)

    @property
    def is_container(self) -> bool:
        return self.kind in CONTAINER_KINDS

    @property
    def is_slot(self) -> bool:
        return self.kind is NodeKind.SLOT

    @property
    def child_count(self) -> int:
        return len(self.children)

    def child_at(self, index: int) -> SceneNode:
        return self.children[index]

    def index_of(self, node: SceneNode) -> int:
        """Get the position of a direct child.

        Returns:
            The child's index, or -1 if ``node`` is not a child of this node
        """
        for index, child in enumerate(self.children):
            if child is node:
                return index
        return -1

    def add_child(self, node: SceneNode) -> SceneNode:
        """Add a child node at the end of the children list.

        Args:
            node: The node to add as a child

        Returns:
            The added node (for chaining)
        """
        return self.insert_child(len(self.children), node)

    def insert_child(self, index: int, node: SceneNode) -> SceneNode:
        """Insert a child node at the given position.

        Args:
            index: Position among the children; the node ends up at exactly
                this index
            node: The node to insert, which must not have a parent

        Returns:
            The inserted node (for chaining)
        """
        if not self.is_container:
            raise TypeError(
                f"Cannot add '{node.name}': node '{self.name}' ({self.kind.value}) "
                "does not accept children"
            )
        if node.parent is not None:
            raise ValueError(
                f"Node '{node.name}' already has a parent '{node.parent.name}'"
            )
        if node is self or self in node.iter_nodes():
            raise ValueError(f"Cannot add '{node.name}' beneath itself")
        if not 0 <= index <= len(self.children):
            raise IndexError(
                f"Insert index {index} out of range for '{self.name}' "
                f"with {len(self.children)} children"
            )
        node.parent = self
        self.children.insert(index, node)
        return node

    def remove_child(self, node: SceneNode) -> bool:
        """Remove a child node.

        Args:
            node: The node to remove

        Returns:
            True if the node was found and removed
        """
        index = self.index_of(node)
        if index < 0:
            return False
        del self.children[index]
        node.parent = None
        return True

    def remove_all_children(self) -> list[SceneNode]:
        """Detach every child, preserving order.

        Returns:
            The detached children
        """
        detached = self.children
        self.children = []
        for child in detached:
            child.parent = None
        return detached

    def detach(self) -> SceneNode:
        """Remove this node from its parent, if it has one."""
        if self.parent is not None:
            self.parent.remove_child(self)
        return self

    def iter_nodes(self, include_self: bool = True) -> Iterator[SceneNode]:
        """Iterate over this node and all descendants (depth-first).

        Args:
            include_self: Whether to include this node in the iteration

        Yields:
            SceneNode instances
        """
        if include_self:
            yield self
        for child in self.children:
            yield from child.iter_nodes(include_self=True)

    def find(self, name: str) -> SceneNode | None:
        """Find a descendant node by name.

        Args:
            name: The name to search for

        Returns:
            The first matching node, or None
        """
        for node in self.iter_nodes():
            if node.name == name:
                return node
        return None

    @property
    def depth(self) -> int:
        """Get the depth of this node in the hierarchy (root = 0)."""
        if self.parent is None:
            return 0
        return self.parent.depth + 1

    @property
    def root(self) -> SceneNode:
        """Get the root node of this hierarchy."""
        if self.parent is None:
            return self
        return self.parent.root

    def copy(self, deep: bool = True) -> SceneNode:
        """Create a detached copy of this node.

        Args:
            deep: If True, recursively copy children

        Returns:
            New SceneNode with copied data
        """
        new_node = SceneNode(
            name=self.name,
            transform=self.transform.copy() if self.transform is not None else None,
            id=self.id,
            kind=self.kind,
            label=self.label,
            slot_target=self.slot_target,
            size=self.size.copy() if self.size is not None else None,
        )
        if deep:
            for child in self.children:
                new_node.add_child(child.copy(deep=True))
        return new_node

    def __repr__(self) -> str:
        id_str = f", id={self.id}" if self.id is not None else ""
        kind_str = f", {self.kind.value}" if self.kind is not NodeKind.GROUP else ""
        children_str = f", children={len(self.children)}" if self.children else ""
        return f"{type(self).__name__}({self.name!r}{kind_str}{id_str}{children_str})"
