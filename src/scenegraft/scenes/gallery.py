"""Scenes built from the bundled card templates."""

from pathlib import Path

from ..core.stage import Stage
from ..layout import SceneComposer


def _get_assets_dir() -> Path:
    return Path(__file__).parent.parent.parent.parent / "assets"


def _compose(scene_name: str) -> Stage:
    composer = SceneComposer()
    return composer.compose(_get_assets_dir() / "scenes" / f"{scene_name}.yaml")


def create_card_scene() -> Stage:
    """Create a stage holding a single card with a title in its header.

    Returns:
        A Stage with the card template resolved.
    """
    return _compose("card")


def create_gallery_scene() -> Stage:
    """Create a stage with two cards, a divider, and a nested badge.

    The left card fills its slots by position, the right card by slot id,
    and the right card's footer holds a badge that is itself a composite.

    Returns:
        A Stage with every composite resolved.
    """
    return _compose("gallery")
