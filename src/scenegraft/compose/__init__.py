"""Composite nodes and the slot splicing they resolve through."""

from .composite import CompositeNode, CompositeState
from .resolver import TemplateSource, graft_overrides, inflate_detached, resolve_in_place
from .slots import Override, SlotMatch, collect_slots, extract_overrides, match_slots, remove_leftovers
from .splice import replace_node

__all__ = [
    "CompositeNode",
    "CompositeState",
    "Override",
    "SlotMatch",
    "TemplateSource",
    "collect_slots",
    "extract_overrides",
    "graft_overrides",
    "inflate_detached",
    "match_slots",
    "remove_leftovers",
    "replace_node",
    "resolve_in_place",
]
