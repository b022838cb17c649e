"""YAML loader for template and scene trees."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import numpy as np
import yaml

from ..compose.composite import CompositeNode
from ..core.node import NodeKind, SceneNode
from ..core.transform import Transform
from ..errors import TemplateNotFoundError, TemplateSyntaxError
from .anchors import resolve_anchor

logger = logging.getLogger(__name__)

NODE_KINDS = {
    "group": NodeKind.GROUP,
    "part": NodeKind.PART,
    "slot": NodeKind.SLOT,
    "composite": NodeKind.COMPOSITE,
}

LAYOUT_KEYS = ("anchor", "offset", "translation", "rotation", "scale")


class TemplateLoader:
    """Loads node trees from YAML definitions.

    Every node in a document has the same shape; the root of a template is
    just the first node:

    ```yaml
    name: card
    size: [2, 1, 0.1]
    children:
      - name: header
        slot: 1                # slot marker with id 1 (or `slot: true`)
        anchor: top_center
      - name: body
        part: cube             # leaf node, the value is a free-form label
        offset: [0, 0.5, 0]
      - name: badge
        composite: badge       # nested composite, resolved when mounted
        children:
          - name: icon
            part: sphere
            slot_target: 2     # fill the badge template's slot with id 2
    ```

    Nodes without ``slot``, ``part`` or ``composite`` are groups. Layout
    keys (``anchor``, ``offset``, ``translation``, ``rotation`` in degrees,
    ``scale``) give a node a transform; nodes without any keep none and so
    inherit the transform of whatever they replace. Anchors are resolved
    against the parent's ``size``; for a template root, against the size of
    the parent it is loaded for.
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        """Initialize loader with search paths.

        Args:
            search_paths: Directories to search for template YAML files.
                Defaults to ['assets/templates/'] relative to project root.
        """
        if search_paths is None:
            project_root = Path(__file__).parent.parent.parent.parent
            self.search_paths = [project_root / "assets" / "templates"]
        else:
            self.search_paths = [Path(p) for p in search_paths]

        self._documents: dict[str, Mapping[str, Any]] = {}

    def register(self, template_id: str, source: str | Mapping[str, Any]) -> None:
        """Make a template available under ``template_id``.

        Args:
            template_id: Identifier composites refer to
            source: YAML text or an already parsed document
        """
        if isinstance(source, str):
            source = self._parse(source, template_id)
        self._documents[template_id] = source

    def load(self, template_id: str, intended_parent: SceneNode | None = None) -> SceneNode:
        """Build a fresh, detached tree for a template.

        Registered templates take precedence, then ``{template_id}.yaml`` is
        searched for in the search paths.

        Args:
            template_id: The template to load
            intended_parent: Node the tree is meant to be placed under; only
                used to resolve the root's anchor

        Returns:
            Root of the new tree
        """
        if not template_id:
            raise TemplateNotFoundError(str(template_id))

        document = self._documents.get(template_id)
        if document is None:
            document = self._find(template_id)
            self._documents[template_id] = document

        container_size = intended_parent.size if intended_parent is not None else None
        return self._build_node(document, container_size, template_id)

    def load_string(self, yaml_string: str) -> SceneNode:
        """Build a tree from a YAML string."""
        return self.build(self._parse(yaml_string, "<string>"))

    def load_file(self, path: str | Path) -> SceneNode:
        """Build a tree from a YAML file."""
        path = Path(path)
        return self.build(self._parse(_read_text(path), str(path)))

    def build(self, data: Mapping[str, Any], container_size: np.ndarray | None = None) -> SceneNode:
        """Build a tree from a parsed document."""
        return self._build_node(data, container_size, "<document>")

    def _find(self, template_id: str) -> Mapping[str, Any]:
        for search_path in self.search_paths:
            path = search_path / f"{template_id}.yaml"
            if path.exists():
                logger.debug("Loading template %r from %s", template_id, path)
                return self._parse(_read_text(path), str(path))
        raise TemplateNotFoundError(template_id, self.search_paths)

    def _parse(self, text: str, source: str) -> Mapping[str, Any]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise TemplateSyntaxError(f"Invalid YAML in {source}: {exc}") from exc
        if not isinstance(data, Mapping):
            raise TemplateSyntaxError(f"{source} must define a single root node")
        return data

    def _build_node(
        self,
        data: Mapping[str, Any],
        container_size: np.ndarray | None,
        source: str,
    ) -> SceneNode:
        if not isinstance(data, Mapping):
            raise TemplateSyntaxError(f"{source}: node definition must be a mapping, got {data!r}")

        declared = [key for key in NODE_KINDS if key in data]
        if len(declared) > 1:
            raise TemplateSyntaxError(
                f"{source}: node declares more than one kind ({', '.join(declared)})"
            )
        kind_key = declared[0] if declared else "group"
        name = str(data.get("name", kind_key))
        where = f"{source}: '{name}'"

        options = dict(
            id=_parse_id(data.get("id"), where, "id"),
            slot_target=_parse_id(data.get("slot_target"), where, "slot_target"),
            transform=self._parse_transform(data, container_size, where),
            size=_parse_vector(data.get("size"), where, "size"),
        )

        if kind_key == "composite":
            template_id = data["composite"]
            if template_id is not None and not isinstance(template_id, str):
                raise TemplateSyntaxError(f"{where}: composite template must be a name")
            node = CompositeNode(name, loader=self, template=template_id, **options)
        elif kind_key == "slot":
            slot_value = data["slot"]
            if options["id"] is None and not isinstance(slot_value, bool):
                options["id"] = _parse_id(slot_value, where, "slot")
            node = SceneNode.slot(name, **options)
        elif kind_key == "part":
            label = data["part"]
            node = SceneNode.part(name, label=None if label is True else str(label), **options)
        else:
            node = SceneNode(name, kind=NodeKind.GROUP, **options)

        children = data.get("children") or []
        if not isinstance(children, list):
            raise TemplateSyntaxError(f"{where}: children must be a list")
        if children and not node.is_container:
            raise TemplateSyntaxError(f"{where}: a {node.kind.value} node cannot have children")

        child_size = node.size if node.size is not None else container_size
        for child_def in children:
            node.add_child(self._build_node(child_def, child_size, source))

        return node

    def _parse_transform(
        self,
        data: Mapping[str, Any],
        container_size: np.ndarray | None,
        where: str,
    ) -> Transform | None:
        if not any(key in data for key in LAYOUT_KEYS):
            return None

        translation = _parse_vector(data.get("translation"), where, "translation")
        if translation is None:
            translation = np.zeros(3, dtype=np.float64)

        anchor = data.get("anchor")
        if anchor is not None:
            if container_size is None:
                raise TemplateSyntaxError(
                    f"{where}: anchor '{anchor}' needs a parent with a size"
                )
            try:
                translation = translation + resolve_anchor(str(anchor), container_size)
            except ValueError as exc:
                raise TemplateSyntaxError(f"{where}: {exc}") from exc

        # Offsets are in absolute units, not fractions of the parent
        offset = _parse_vector(data.get("offset"), where, "offset")
        if offset is not None:
            translation = translation + offset

        return Transform.from_degrees(
            translation=translation,
            rotation=_parse_vector(data.get("rotation"), where, "rotation"),
            scale=_parse_vector(data.get("scale"), where, "scale"),
        )


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TemplateSyntaxError(f"{path} is not valid UTF-8 text: {exc}") from exc


def _parse_id(value: Any, where: str, key: str) -> int | None:
    """Read an id attribute; 0 and missing both mean unset."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TemplateSyntaxError(f"{where}: {key} must be an integer, got {value!r}")
    return value or None


def _parse_vector(value: Any, where: str, key: str) -> np.ndarray | None:
    if value is None:
        return None
    try:
        vector = np.array(value, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise TemplateSyntaxError(f"{where}: {key} must be [x, y, z]") from exc
    if vector.shape != (3,):
        raise TemplateSyntaxError(f"{where}: {key} must be [x, y, z], got {value!r}")
    return vector
