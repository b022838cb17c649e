"""CompositeNode: a placeholder that replaces itself with a template."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from ..core.node import NodeKind, SceneNode
from ..errors import ConfigurationError
from .resolver import TemplateSource, inflate_detached, resolve_in_place

if TYPE_CHECKING:
    from ..core.stage import Stage

logger = logging.getLogger(__name__)


class CompositeState(Enum):
    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"


class CompositeNode(SceneNode):
    """A node that stands in for a template until it is resolved.

    The composite's children are overrides: when it is resolved each one
    replaces a slot of the template, either the slot whose id equals the
    child's ``slot_target`` or, when no child declares one, the slot at the
    same position. The resolved template then takes the composite's place
    in its parent, inheriting its id and transform where it has none.

    Until resolution the composite contributes nothing to the scene. It is
    resolved when it is mounted on a ``Stage``, or immediately when its
    template is changed while it already has a parent.

    Example:
        loader = TemplateLoader()
        loader.register("card", card_yaml)

        card = CompositeNode("my_card", loader=loader, template="card")
        card.add_child(SceneNode.part("title", slot_target=1))
        stage.mount(card)  # card is now replaced by the template tree
    """

    handles_mount = True

    def __init__(
        self,
        name: str,
        loader: TemplateSource,
        template: str | None = None,
        **kwargs,
    ) -> None:
        kwargs.setdefault("kind", NodeKind.COMPOSITE)
        super().__init__(name, **kwargs)
        self.loader = loader
        self.state = CompositeState.UNRESOLVED
        self._template = template
        self._stage: Stage | None = None

    @property
    def template(self) -> str | None:
        """Identifier of the template this composite inflates."""
        return self._template

    @template.setter
    def template(self, template_id: str | None) -> None:
        self._template = template_id
        if template_id and self.parent is not None:
            root = self.resolve()
            if self._stage is not None and self._stage.is_mounted(root):
                self._stage.dispatch_mounted(root)

    @property
    def resolved(self) -> bool:
        return self.state is CompositeState.RESOLVED

    def resolve(self) -> SceneNode:
        """Replace this composite in its parent with the resolved template.

        Returns:
            The template root now in the composite's place
        """
        self._check_unresolved()
        root = resolve_in_place(self, self.loader)
        self.state = CompositeState.RESOLVED
        return root

    def inflate(self, parent: SceneNode | None) -> SceneNode:
        """Resolve the template for ``parent`` without adding it anywhere.

        Useful when a tree has to be handed to code that does the placing
        itself. The composite's children are moved into the returned tree.
        """
        self._check_unresolved()
        return inflate_detached(self, parent, self.loader)

    def on_mounted(self, stage: Stage) -> SceneNode | None:
        """Handle being mounted on ``stage``.

        Returns:
            The resolved template root, or None if no template is set
        """
        self._stage = stage
        if not self._template:
            logger.warning("Composite %r mounted without a template; left unresolved", self.name)
            return None
        return self.resolve()

    def _check_unresolved(self) -> None:
        if self.resolved:
            raise ConfigurationError(f"Composite '{self.name}' has already been resolved")

    def copy(self, deep: bool = True) -> CompositeNode:
        new_node = CompositeNode(
            self.name,
            loader=self.loader,
            template=self._template,
            transform=self.transform.copy() if self.transform is not None else None,
            id=self.id,
            slot_target=self.slot_target,
            size=self.size.copy() if self.size is not None else None,
        )
        if deep:
            for child in self.children:
                new_node.add_child(child.copy(deep=True))
        return new_node

    def __repr__(self) -> str:
        id_str = f", id={self.id}" if self.id is not None else ""
        children_str = f", children={len(self.children)}" if self.children else ""
        return (
            f"CompositeNode({self.name!r}, template={self._template!r}"
            f"{id_str}{children_str}, {self.state.value})"
        )
