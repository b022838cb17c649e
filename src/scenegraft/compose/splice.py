"""In-place replacement of one node by another."""

import logging

from ..core.node import SceneNode
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


def replace_node(old: SceneNode, new: SceneNode) -> SceneNode:
    """Put ``new`` exactly where ``old`` was in its parent.

    ``old`` is removed. ``new`` takes over ``old``'s transform if it carries
    none of its own, and ``old``'s id if it has no id. Every other sibling
    keeps its position.

    Args:
        old: The node being replaced; must have a parent
        new: The replacement; must not have a parent

    Returns:
        The replacement node
    """
    parent = old.parent
    if parent is None:
        raise ConfigurationError(f"Cannot replace '{old.name}': it has no parent")
    if new.parent is not None:
        raise ValueError(f"Replacement '{new.name}' already has a parent '{new.parent.name}'")
    if parent.root is new:
        raise ValueError(f"Cannot replace '{old.name}' with its own ancestor '{new.name}'")

    index = parent.index_of(old)
    parent.remove_child(old)

    if new.transform is None and old.transform is not None:
        new.transform = old.transform.copy()
    if new.id is None:
        new.id = old.id

    parent.insert_child(index, new)
    logger.debug("Replaced %r with %r at index %d of %r", old, new, index, parent)
    return new
