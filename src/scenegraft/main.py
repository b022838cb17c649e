"""Main entry point for scenegraft."""

import argparse
import logging
import sys
from pathlib import Path

from .core.node import NodeKind, SceneNode
from .errors import CompositionError
from .layout import SceneComposer, TemplateLoader
from .scenes import create_card_scene, create_gallery_scene

logger = logging.getLogger(__name__)

# Scene registry - maps scene names to factory functions
SCENES = {
    "card": create_card_scene,
    "gallery": create_gallery_scene,
}


def format_tree(root: SceneNode) -> list[str]:
    """Render a tree as indented lines, one node per line."""
    lines = []
    base_depth = root.depth
    for node in root.iter_nodes():
        indent = "  " * (node.depth - base_depth)
        details = [node.kind.value]
        if node.label:
            details.append(node.label)
        if node.id is not None:
            details.append(f"id={node.id}")
        if node.slot_target is not None:
            details.append(f"slot_target={node.slot_target}")
        if node.kind is NodeKind.COMPOSITE:
            details.append(f"template={node.template}")
        if node.transform is not None and not node.transform.is_identity():
            details.append(repr(node.transform))
        lines.append(f"{indent}- {node.name} ({', '.join(details)})")
    return lines


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="scenegraft - resolve composite nodes in a scene and print the result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "scene_file",
        nargs="?",
        metavar="SCENE",
        help="Scene YAML file to load (default: use --scene)",
    )
    parser.add_argument(
        "-s", "--scene",
        choices=list(SCENES.keys()),
        default="gallery",
        help="Bundled scene to display when no SCENE file is given (default: gallery)",
    )
    parser.add_argument(
        "-t", "--templates",
        metavar="DIR",
        action="append",
        type=Path,
        help="Directory to search for templates (repeatable; default: bundled templates)",
    )
    parser.add_argument(
        "--no-resolve",
        action="store_true",
        help="Print the scene without resolving its composites",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each splice and match",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the scenegraft command line."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.scene_file is not None:
            composer = SceneComposer(TemplateLoader(search_paths=args.templates))
            stage = composer.compose(args.scene_file, resolve=not args.no_resolve)
        else:
            stage = SCENES[args.scene]()
    except (CompositionError, OSError) as exc:
        logger.debug("Scene failed to load", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    scenes = stage.root.children
    print(f"Scene contains {sum(len(list(s.iter_nodes())) for s in scenes)} nodes:")
    for scene in scenes:
        for line in format_tree(scene):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
