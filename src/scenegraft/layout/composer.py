"""Scene composer for building live scenes from YAML definitions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from ..core.stage import Stage
from .loader import TemplateLoader

logger = logging.getLogger(__name__)


class SceneComposer:
    """Builds a scene from a YAML file and mounts it on a new stage.

    A scene document uses the same node format as a template (see
    ``TemplateLoader``). Composite nodes in it are resolved as soon as the
    scene is mounted, using the composer's loader for their templates.

    Example - a page made of two cards:
        name: page
        size: [4, 2, 0.1]
        children:
          - name: left
            composite: card
            anchor: bottom_left
            children:
              - {name: title, part: text}
              - {name: picture, part: image}
          - name: right
            composite: card
            anchor: bottom_right
            children:
              - {name: caption, part: text, slot_target: 2}
    """

    def __init__(self, loader: TemplateLoader | None = None) -> None:
        """Initialize the composer.

        Args:
            loader: Loader used both for the scene and for its templates.
                Defaults to a loader over the project's template directory.
        """
        self.loader = loader if loader is not None else TemplateLoader()

    def compose(self, path: str | Path, resolve: bool = True) -> Stage:
        """Load a scene from a YAML file.

        Args:
            path: Path to the scene YAML file
            resolve: Mount the scene so its composites resolve. If False the
                scene is placed under the stage root as-is.

        Returns:
            Stage holding the scene
        """
        path = Path(path)
        logger.debug("Composing scene from %s", path)
        return self._mount(self.loader.load_file(path), resolve)

    def compose_string(self, yaml_string: str, resolve: bool = True) -> Stage:
        """Load a scene from a YAML string."""
        return self._mount(self.loader.load_string(yaml_string), resolve)

    def compose_data(self, data: Mapping[str, Any], resolve: bool = True) -> Stage:
        """Load a scene from an already parsed document."""
        return self._mount(self.loader.build(data), resolve)

    def _mount(self, scene, resolve: bool) -> Stage:
        stage = Stage()
        if resolve:
            stage.mount(scene)
        else:
            stage.root.add_child(scene)
        return stage
