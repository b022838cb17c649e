"""scenegraft - composite scene nodes that graft their children into templates."""

from .compose import CompositeNode, replace_node
from .core import NodeKind, SceneNode, Stage, Transform
from .errors import (
    CompositionError,
    ConfigurationError,
    ConsistencyError,
    OverCommitError,
    TemplateNotFoundError,
    TemplateSyntaxError,
    TypeMismatchError,
    UnresolvedIdError,
)
from .layout import SceneComposer, TemplateLoader

__all__ = [
    "CompositeNode",
    "CompositionError",
    "ConfigurationError",
    "ConsistencyError",
    "NodeKind",
    "OverCommitError",
    "SceneComposer",
    "SceneNode",
    "Stage",
    "TemplateLoader",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
    "Transform",
    "TypeMismatchError",
    "UnresolvedIdError",
    "replace_node",
]
