"""Layout system for data-driven templates and scenes."""

from .anchors import parse_anchor, resolve_anchor
from .composer import SceneComposer
from .loader import TemplateLoader

__all__ = ["parse_anchor", "resolve_anchor", "SceneComposer", "TemplateLoader"]
