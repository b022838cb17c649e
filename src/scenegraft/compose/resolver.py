"""Resolution of composite nodes into their templates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..core.node import SceneNode
from ..errors import ConfigurationError, TypeMismatchError
from .slots import collect_slots, extract_overrides, match_slots, remove_leftovers
from .splice import replace_node

if TYPE_CHECKING:
    from .composite import CompositeNode

logger = logging.getLogger(__name__)


@runtime_checkable
class TemplateSource(Protocol):
    """Protocol for anything that can produce template trees.

    ``load`` must return a tree with no parent. The root may be a leaf.
    """

    def load(self, template_id: str, intended_parent: SceneNode | None = None) -> SceneNode:
        ...


def resolve_in_place(composite: CompositeNode, source: TemplateSource) -> SceneNode:
    """Replace ``composite`` in its parent with its resolved template.

    Returns:
        The template root, now occupying the composite's former position
    """
    _check_template(composite)
    parent = composite.parent
    if parent is None:
        raise ConfigurationError(
            f"Composite '{composite.name}' must have a parent to resolve in place"
        )

    root = _build(composite, source, parent)
    replace_node(composite, root)
    logger.info("Resolved composite %r into template %r", composite.name, composite.template)
    return root


def inflate_detached(
    composite: CompositeNode, parent: SceneNode | None, source: TemplateSource
) -> SceneNode:
    """Resolve ``composite``'s template against ``parent`` without attaching it.

    ``parent`` is only handed to the template source; it is not modified,
    and neither is the composite's own position. The caller places the
    returned tree.
    """
    if parent is None:
        raise ConfigurationError(
            f"Composite '{composite.name}' needs a parent to inflate against"
        )
    _check_template(composite)

    root = _build(composite, source, parent)
    logger.info("Inflated composite %r from template %r", composite.name, composite.template)
    return root


def graft_overrides(composite: SceneNode, root: SceneNode) -> SceneNode:
    """Move ``composite``'s children into the slots of the template ``root``.

    The composite is emptied first, so if matching fails its children are
    already gone.
    """
    overrides = extract_overrides(composite)

    if not root.is_container:
        if overrides:
            raise TypeMismatchError(
                f"Template root '{root.name}' ({root.kind.value}) does not accept "
                f"children, but composite '{composite.name}' has {len(overrides)}"
            )
        return root

    result = match_slots(overrides, collect_slots(root))
    for slot, override in result.pairs:
        replace_node(slot, override.node)
    remove_leftovers(result.leftovers)
    return root


def _check_template(composite: CompositeNode) -> None:
    if not composite.template:
        raise ConfigurationError(f"Composite '{composite.name}' has no template set")


def _build(composite: CompositeNode, source: TemplateSource, parent: SceneNode) -> SceneNode:
    root = source.load(composite.template, parent)
    if root.parent is not None:
        raise ConfigurationError(
            f"Template '{composite.template}' was loaded already attached to "
            f"'{root.parent.name}'"
        )
    return graft_overrides(composite, root)
