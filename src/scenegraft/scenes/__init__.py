"""Pre-built scenes for scenegraft."""

from .gallery import create_card_scene, create_gallery_scene

__all__ = ["create_card_scene", "create_gallery_scene"]
