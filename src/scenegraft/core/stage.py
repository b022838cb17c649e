"""Stage: the root of a live scene, delivering mount events."""

from __future__ import annotations

import logging

from .node import NodeKind, SceneNode

logger = logging.getLogger(__name__)


class Stage:
    """The live scene a subtree can be mounted on.

    Mounting a subtree tells every composite node in it that it is now part
    of the scene, which is when composites resolve their templates. The walk
    is pre-order: a resolved composite is followed by a walk of the tree it
    resolved into, so composites inside templates and inside overrides are
    resolved as well.
    """

    def __init__(self, root: SceneNode | None = None) -> None:
        if root is None:
            root = SceneNode("stage")
        if root.parent is not None:
            raise ValueError(f"Stage root '{root.name}' must not have a parent")
        self.root = root

    def mount(
        self,
        node: SceneNode,
        parent: SceneNode | None = None,
        index: int | None = None,
    ) -> SceneNode:
        """Insert ``node`` into the scene and deliver the mount event.

        Args:
            node: Subtree to mount; must not have a parent
            parent: Where to insert it; defaults to the stage root and must
                itself be mounted
            index: Position among the parent's children; appended if None

        Returns:
            The node now occupying the mounted position (a composite is
            replaced by its template)
        """
        if parent is None:
            parent = self.root
        if not self.is_mounted(parent):
            raise ValueError(f"Parent '{parent.name}' is not mounted on this stage")

        if index is None:
            index = parent.child_count
        parent.insert_child(index, node)
        self.dispatch_mounted(node)
        return parent.child_at(index)

    def dispatch_mounted(self, node: SceneNode) -> None:
        """Deliver the mount event to every composite in ``node``'s subtree."""
        if node.kind is NodeKind.COMPOSITE and node.handles_mount:
            resolved = node.on_mounted(self)
            if resolved is not None:
                self.dispatch_mounted(resolved)
            return
        for child in list(node.children):
            self.dispatch_mounted(child)

    def is_mounted(self, node: SceneNode) -> bool:
        return node.root is self.root

    def iter_nodes(self):
        return self.root.iter_nodes()

    def __repr__(self) -> str:
        return f"Stage({self.root!r})"
