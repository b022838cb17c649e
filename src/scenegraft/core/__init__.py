"""Scene tree: nodes, transforms, and the stage they are mounted on."""

from .transform import Transform
from .node import NodeKind, SceneNode
from .stage import Stage

__all__ = ["Transform", "NodeKind", "SceneNode", "Stage"]
